from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import DailyAttendance


class AttendanceRepository(Protocol):
    def list_for_period(self, *, employee_id: int, start_date: date, end_date: date) -> Sequence[DailyAttendance]:
        raise NotImplementedError
