"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from acme.domain.exceptions import ValidationError
from acme.domain.model.product import validate_product_name
from acme.domain.model.value_objects import NameAccepted, NameRejected, to_decimal


# ── to_decimal ───────────────────────────────────────────────────────────────


class TestToDecimal:

    def test_decimal_passes_through(self):
        assert to_decimal(Decimal("1.25")) == Decimal("1.25")

    def test_from_string(self):
        assert to_decimal("25.99") == Decimal("25.99")

    def test_from_int(self):
        assert to_decimal(10) == Decimal("10")

    def test_float_uses_its_short_repr(self):
        assert to_decimal(0.1) == Decimal("0.1")

    def test_garbage_rejected(self):
        with pytest.raises(ValidationError, match="Invalid decimal amount"):
            to_decimal("abc")

    def test_infinity_rejected(self):
        with pytest.raises(ValidationError, match="Invalid decimal amount"):
            to_decimal("Infinity")

    def test_bool_rejected(self):
        with pytest.raises(ValidationError):
            to_decimal(True)


# ── Name checks ──────────────────────────────────────────────────────────────


class TestValidateProductName:

    def test_boundaries(self):
        assert validate_product_name("ab") == NameRejected(
            "Product Name must be at least 3 characters"
        )
        assert validate_product_name("abc") == NameAccepted("abc")
        assert validate_product_name("a" * 20) == NameAccepted("a" * 20)
        assert validate_product_name("a" * 21) == NameRejected(
            "Product Name cannot be more than 20 characters"
        )

    def test_whitespace_only_is_too_short(self):
        assert validate_product_name("     ") == NameRejected(
            "Product Name must be at least 3 characters"
        )

    def test_result_objects_are_immutable(self):
        result = NameAccepted("Saw")
        with pytest.raises(AttributeError):
            result.value = "Hammer"
