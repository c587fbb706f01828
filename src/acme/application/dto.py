"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing the Product entity to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductSpec:
    """Input: the fields a caller wants a product built from."""

    product_id: int
    product_name: str | None = None
    description: str | None = None
    cost: str | None = None
    category: str | None = None
    sequence_number: int | None = None
    vendor_company: str | None = None


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as displayed to the user."""

    product_id: int
    product_name: str | None
    description: str | None
    category: str
    sequence_number: int
    product_code: str
    minimum_price: str  # formatted, e.g. "$0.96"
    cost: str
    vendor_company: str | None
    greeting: str
    validation_message: str | None
