"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Union

from acme.domain.exceptions import ValidationError


@dataclass(frozen=True)
class NameAccepted:
    """Outcome of a name check: the trimmed value that was stored."""

    value: str

    @property
    def accepted(self) -> bool:
        return True


@dataclass(frozen=True)
class NameRejected:
    """Outcome of a name check: why the assignment was refused."""

    message: str

    @property
    def accepted(self) -> bool:
        return False


NameCheck = Union[NameAccepted, NameRejected]


def to_decimal(value: str | float | int | Decimal) -> Decimal:
    """Coerce a monetary or percentage value to Decimal.

    Floats go through ``str`` so ``0.1`` becomes ``Decimal("0.1")``
    rather than its binary expansion.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValidationError(f"Invalid decimal amount: {value!r}")
    try:
        result = Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid decimal amount: {value!r}") from exc
    if not result.is_finite():
        raise ValidationError(f"Invalid decimal amount: {value!r}")
    return result
