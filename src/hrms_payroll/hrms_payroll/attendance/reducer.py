from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from datetime import time
from decimal import Decimal
from typing import Iterable, Mapping, Optional

from ..common.datetime_utils import to_minutes
from ..common.money import ZERO, round_hours
from ..core.constants import HALF_DAY_MINUTES, MINUTES_PER_DAY, PAYROLL_DAYS_PER_MONTH
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..shifts.hours import span_minutes
from .model import AttendanceSummary, DailyAttendance

PAYABLE_WEIGHTS: Mapping[AttendanceStatus, Decimal] = {
    AttendanceStatus.PRESENT: Decimal("1"),
    AttendanceStatus.LEAVE: Decimal("1"),
    AttendanceStatus.HOLIDAY: Decimal("1"),
    AttendanceStatus.WEEKEND: Decimal("1"),
    AttendanceStatus.HALF_DAY: Decimal("0.5"),
    AttendanceStatus.ABSENT: Decimal("0"),
}


@dataclass(frozen=True)
class DayHours:
    work_hours: Decimal = ZERO
    overtime_hours: Decimal = ZERO
    late_minutes: int = 0
    early_leave_minutes: int = 0


def clock_offset(expected: time, actual: time) -> int:
    """Signed minutes from expected to actual on a 24h clock (-720..720)."""
    diff = (to_minutes(actual) - to_minutes(expected)) % MINUTES_PER_DAY
    if diff > HALF_DAY_MINUTES:
        diff -= MINUTES_PER_DAY
    return diff


class AttendanceHoursReducer:
    """Reduce a pay period's daily records into work/overtime/lateness totals."""

    def __init__(self, payable_weights: Optional[Mapping[AttendanceStatus, Decimal]] = None):
        self._weights = payable_weights or PAYABLE_WEIGHTS

    def day_hours(self, record: DailyAttendance) -> DayHours:
        if record.actual_in is None or record.actual_out is None:
            return DayHours()

        work_minutes = span_minutes(record.actual_in, record.actual_out)

        overtime_minutes = 0
        if record.scheduled_in is not None and record.scheduled_out is not None:
            scheduled_minutes = span_minutes(record.scheduled_in, record.scheduled_out)
            overtime_minutes = max(work_minutes - scheduled_minutes, 0)

        late = 0
        if record.scheduled_in is not None:
            late = max(clock_offset(record.scheduled_in, record.actual_in), 0)

        early = 0
        if record.scheduled_out is not None:
            early = max(clock_offset(record.actual_out, record.scheduled_out), 0)

        return DayHours(
            work_hours=round_hours(Decimal(work_minutes) / 60),
            overtime_hours=round_hours(Decimal(overtime_minutes) / 60),
            late_minutes=late,
            early_leave_minutes=early,
        )

    def reduce(self, records: Iterable[DailyAttendance], *, period_days: Optional[int] = None) -> AttendanceSummary:
        """Totals for one pay period.

        Days without a record are paid; only ABSENT and HALF_DAY records take
        days off the period. ``period_days`` is the calendar length of the pay
        period and defaults to a 30-day month.
        """
        if period_days is None:
            period_days = PAYROLL_DAYS_PER_MONTH
        if period_days <= 0:
            raise ValidationError("period_days must be positive")

        work = overtime = ZERO
        late = early = 0
        unpaid = ZERO
        counts: Counter[str] = Counter()

        for record in records:
            day = self.day_hours(record)
            work += day.work_hours
            overtime += day.overtime_hours
            late += day.late_minutes
            early += day.early_leave_minutes

            counts[record.status.value] += 1
            unpaid += Decimal("1") - self._weights.get(record.status, ZERO)

        return AttendanceSummary(
            work_hours=round_hours(work),
            overtime_hours=round_hours(overtime),
            late_minutes=late,
            early_leave_minutes=early,
            period_days=period_days,
            payable_days=max(Decimal(period_days) - unpaid, ZERO),
            day_counts=dict(counts),
        )
