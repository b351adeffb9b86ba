from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from decimal import Decimal
from typing import Optional, Union

from ..common.datetime_utils import to_minutes
from ..common.money import ZERO, round_hours
from ..core.constants import MINUTES_PER_DAY
from ..core.exceptions import ValidationError

TimeLike = Union[str, time]


@dataclass(frozen=True)
class ShiftHours:
    shift_hours: Decimal
    break_hours: Decimal = ZERO


def span_minutes(start: TimeLike, end: TimeLike) -> int:
    """Minutes from start to end; an end earlier than start crosses midnight."""
    start_minutes = to_minutes(start)
    end_minutes = to_minutes(end)
    if end_minutes < start_minutes:
        end_minutes += MINUTES_PER_DAY
    return end_minutes - start_minutes


def hours_between(start: TimeLike, end: TimeLike) -> Decimal:
    return round_hours(Decimal(span_minutes(start, end)) / 60)


def compute_shift_hours(
    start_time: TimeLike,
    end_time: TimeLike,
    break_start: Optional[TimeLike] = None,
    break_end: Optional[TimeLike] = None,
) -> ShiftHours:
    """Net shift length in hours with an optional unpaid break window."""
    if not start_time or not end_time:
        raise ValidationError("Start time and end time are required")

    total = hours_between(start_time, end_time)

    if not break_start and not break_end:
        return ShiftHours(shift_hours=total)
    if not break_start or not break_end:
        raise ValidationError("Break start time and end time are required when break time is enabled")

    break_hours = hours_between(break_start, break_end)
    if break_hours > total:
        raise ValidationError("Break hours cannot exceed total shift hours")

    return ShiftHours(shift_hours=round_hours(total - break_hours), break_hours=break_hours)
