from __future__ import annotations

from datetime import date, datetime, time
from decimal import Decimal
from typing import Optional, Union

from ..core.constants import AVG_DAYS_PER_MONTH
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_optional_date(value, field_name: str) -> Optional[date]:
    if value in (None, ""):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        # Accept full ISO timestamps from JS clients ("2024-01-01T00:00:00.000Z").
        return parse_iso_date(str(value)[:10])
    except ValueError:
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date") from None


def to_minutes(value: Union[str, time]) -> int:
    """Minutes since midnight for 'HH:MM' strings or time objects."""
    if isinstance(value, time):
        return value.hour * 60 + value.minute

    parts = str(value).strip().split(":")
    if len(parts) < 2:
        raise ValidationError(f"Invalid time {value!r}, expected HH:MM")
    try:
        hours, minutes = int(parts[0]), int(parts[1])
    except ValueError:
        raise ValidationError(f"Invalid time {value!r}, expected HH:MM") from None
    if not (0 <= hours <= 23 and 0 <= minutes <= 59):
        raise ValidationError(f"Invalid time {value!r}, expected HH:MM")
    return hours * 60 + minutes


def parse_optional_time(value, field_name: str) -> Optional[time]:
    if value in (None, ""):
        return None
    if isinstance(value, time):
        return value
    try:
        minutes = to_minutes(value)
    except ValidationError:
        raise ValidationError(f"{field_name} must be a HH:MM time") from None
    return time(hour=minutes // 60, minute=minutes % 60)


def service_months(joining_date: Optional[date], as_of: date) -> int:
    """Completed service months, using an average month of 30.44 days."""
    if not joining_date:
        return 0
    days = abs((as_of - joining_date).days)
    return int(Decimal(days) / Decimal(AVG_DAYS_PER_MONTH))


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()
