from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..common.datetime_utils import parse_optional_date, parse_optional_time
from ..common.validators import require_enum
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .model import DailyAttendance


def parse_attendance(raw: Mapping[str, Any]) -> DailyAttendance:
    work_date = parse_optional_date(raw.get("workDate") or raw.get("attendanceDate"), "workDate")
    if work_date is None:
        raise ValidationError("workDate is required")
    return DailyAttendance(
        work_date=work_date,
        status=require_enum(raw.get("status") or AttendanceStatus.PRESENT.value, AttendanceStatus, "status"),
        scheduled_in=parse_optional_time(raw.get("scheduledInTime"), "scheduledInTime"),
        scheduled_out=parse_optional_time(raw.get("scheduledOutTime"), "scheduledOutTime"),
        actual_in=parse_optional_time(raw.get("actualInTime"), "actualInTime"),
        actual_out=parse_optional_time(raw.get("actualOutTime"), "actualOutTime"),
        employee_id=raw.get("employeeId"),
    )


def parse_attendance_records(raw_items: Sequence[Mapping[str, Any]]) -> list[DailyAttendance]:
    if not isinstance(raw_items, (list, tuple)):
        raise ValidationError("attendanceRecords must be an array")
    return [parse_attendance(r) for r in raw_items]
