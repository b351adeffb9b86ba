from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from ..core.exceptions import ValidationError

ZERO = Decimal("0")


def to_decimal(value: Any, field_name: str = "amount") -> Decimal:
    """Coerce request/DB values into Decimal (None and '' become 0)."""
    if value is None or value == "":
        return ZERO
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            # str() keeps floats like 0.1 from dragging binary noise along
            result = Decimal(str(value))
        except (InvalidOperation, ValueError):
            raise ValidationError(f"{field_name} must be a number") from None
    # NaN and Infinity parse fine but break comparisons and quantize later.
    if not result.is_finite():
        raise ValidationError(f"{field_name} must be a finite number")
    return result


def round_half_up(value: Decimal, places: int = 0) -> Decimal:
    """Round like the payroll spreadsheets do: .5 always goes up."""
    exponent = Decimal(1).scaleb(-places)
    return Decimal(value).quantize(exponent, rounding=ROUND_HALF_UP)


def round_hours(value: Decimal) -> Decimal:
    return round_half_up(value, 2)
