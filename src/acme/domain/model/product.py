"""Product entity.

A Product holds its descriptive fields and an owned Vendor, validates
its name on every assignment, and derives its code and prices from the
current field values on each read.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from decimal import Decimal
from typing import Any

from acme.domain.model.value_objects import (
    NameAccepted,
    NameCheck,
    NameRejected,
    to_decimal,
)
from acme.domain.model.vendor import Vendor

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
MIN_NAME_LENGTH = 3
MAX_NAME_LENGTH = 20
DEFAULT_CATEGORY = "Tools"
DEFAULT_SEQUENCE_NUMBER = 1
DEFAULT_MINIMUM_PRICE = Decimal("0.96")
# Keyed on the product name, not the category.
BULK_PRODUCT_NAME = "Bulk Tools"
BULK_MINIMUM_PRICE = Decimal("9.99")

NAME_TOO_SHORT = f"Product Name must be at least {MIN_NAME_LENGTH} characters"
NAME_TOO_LONG = f"Product Name cannot be more than {MAX_NAME_LENGTH} characters"


def validate_product_name(value: str) -> NameCheck:
    """Trim *value* and check its length.

    Pure function: returns ``NameAccepted`` with the trimmed name or
    ``NameRejected`` with the message to show the user.
    """
    trimmed = value.strip()
    if len(trimmed) < MIN_NAME_LENGTH:
        return NameRejected(NAME_TOO_SHORT)
    if len(trimmed) > MAX_NAME_LENGTH:
        return NameRejected(NAME_TOO_LONG)
    return NameAccepted(trimmed)


class Product:
    """A sellable product.

    Invalid names never raise.  The stored name becomes ``None`` and
    ``validation_message`` explains why; callers poll it after
    assignment (or inspect the result of ``set_product_name``).
    """

    INCHES_PER_METER = 39.37

    _FIELDS = (
        "product_id",
        "product_name",
        "description",
        "cost",
        "category",
        "sequence_number",
        "product_vendor",
    )

    def __init__(
        self,
        product_id: int = 0,
        product_name: str | None = None,
        description: str | None = None,
    ) -> None:
        self.validation_message: str | None = None
        self._product_name: str | None = None
        self._cost = Decimal("0")
        self._product_vendor = Vendor()

        self.product_id = product_id
        self.product_name = product_name
        self.description = description
        self.category = DEFAULT_CATEGORY
        self.sequence_number = DEFAULT_SEQUENCE_NUMBER

    # --- Factory (object initializer) -----------------------------------------

    @classmethod
    def from_fields(cls, **fields: Any) -> Product:
        """Build a Product from any subset of its assignable fields.

        Equivalent to ``Product()`` followed by one assignment per field,
        so the name goes through the same validation.
        """
        unknown = set(fields) - set(cls._FIELDS)
        if unknown:
            raise TypeError(
                f"Unknown Product field(s): {', '.join(sorted(unknown))}"
            )
        product = cls()
        for name in cls._FIELDS:
            if name in fields:
                setattr(product, name, fields[name])
        return product

    # --- Validated fields -----------------------------------------------------

    @property
    def product_name(self) -> str | None:
        return self._product_name

    @product_name.setter
    def product_name(self, value: str | None) -> None:
        self.set_product_name(value)

    def set_product_name(self, value: str | None) -> NameCheck | None:
        """Assign the product name, trimming and validating it.

        Returns the check result, which is also mirrored into
        ``product_name`` / ``validation_message``.  Assigning ``None``
        clears both and returns ``None``.
        """
        if value is None:
            self._product_name = None
            self.validation_message = None
            return None

        result = validate_product_name(value)
        if isinstance(result, NameRejected):
            logger.debug("Rejected product name %r: %s", value, result.message)
            self._product_name = None
            self.validation_message = result.message
        else:
            if result.value != value:
                logger.debug("Trimmed product name %r to %r", value, result.value)
            self._product_name = result.value
            self.validation_message = None
        return result

    @property
    def cost(self) -> Decimal:
        return self._cost

    @cost.setter
    def cost(self, value: str | float | int | Decimal) -> None:
        self._cost = to_decimal(value)

    @property
    def product_vendor(self) -> Vendor:
        return self._product_vendor

    @product_vendor.setter
    def product_vendor(self, value: Vendor) -> None:
        """Store a private copy of *value*; the Product owns its vendor."""
        if not isinstance(value, Vendor):
            raise TypeError(
                f"product_vendor must be a Vendor, got {type(value).__name__}"
            )
        self._product_vendor = replace(value)

    # --- Computed properties --------------------------------------------------

    @property
    def product_code(self) -> str:
        return f"{_text(self.category)}-{_text(self.sequence_number)}"

    @property
    def minimum_price(self) -> Decimal:
        """Floor price for this product.

        Bulk pricing is keyed on the name, so a "Bulk Tools" product in
        any category gets the bulk floor and every other product gets
        the default one.
        """
        if self.product_name == BULK_PRODUCT_NAME:
            return BULK_MINIMUM_PRICE
        return DEFAULT_MINIMUM_PRICE

    def calculate_suggested_price(
        self, margin_percent: str | float | int | Decimal
    ) -> Decimal:
        """Cost plus *margin_percent* percent (``10`` means 10%).

        No bounds checking: a negative margin lowers the price.
        """
        margin = to_decimal(margin_percent)
        return self.cost + (self.cost * margin / 100)

    def say_hello(self) -> str:
        return (
            f"Hello {_text(self.product_name)} ({_text(self.product_id)}): "
            f"{_text(self.description)} Available on: "
        )

    # --- Equality / display ---------------------------------------------------

    def _values(self) -> tuple:
        return tuple(getattr(self, name) for name in self._FIELDS) + (
            self.validation_message,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self._values() == other._values()

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return (
            f"Product(product_id={self.product_id!r}, "
            f"product_name={self.product_name!r}, "
            f"product_code={self.product_code!r})"
        )


# ---------------------------------------------------------------------------
# Null-propagating lookups
# ---------------------------------------------------------------------------


def lookup(root: Any, *attributes: str) -> Any:
    """Follow ``root.a.b...`` and return ``None`` as soon as a link is None."""
    current = root
    for attribute in attributes:
        if current is None:
            return None
        current = getattr(current, attribute)
    return current


def company_name_of(product: Product | None) -> str | None:
    """Vendor company name of *product*, or None when there is no product."""
    return lookup(product, "product_vendor", "company_name")


def _text(value: object) -> str:
    return "" if value is None else str(value)
