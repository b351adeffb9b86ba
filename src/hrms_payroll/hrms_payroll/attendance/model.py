from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, time
from decimal import Decimal
from typing import Optional

from ..common.money import ZERO
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class DailyAttendance:
    """Domain entity: one employee-day of attendance within a pay period."""

    work_date: date
    status: AttendanceStatus
    scheduled_in: Optional[time] = None
    scheduled_out: Optional[time] = None
    actual_in: Optional[time] = None
    actual_out: Optional[time] = None
    employee_id: Optional[int] = None


@dataclass(frozen=True)
class AttendanceSummary:
    """Period totals that feed proration and overtime into the calculator."""

    work_hours: Decimal = ZERO
    overtime_hours: Decimal = ZERO
    late_minutes: int = 0
    early_leave_minutes: int = 0
    period_days: int = 0
    payable_days: Decimal = ZERO
    day_counts: dict[str, int] = field(default_factory=dict)

    @property
    def proration_factor(self) -> Decimal:
        # A summary built without a period length pays in full.
        if self.period_days <= 0:
            return Decimal("1")
        return self.payable_days / self.period_days
