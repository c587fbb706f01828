"""Vendor sub-entity, owned by a Product."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Vendor:
    """Company a product is bought from.

    Has no lifecycle of its own: every Product creates its own Vendor.
    """

    vendor_id: int = 0
    company_name: str | None = None
    email: str | None = None
