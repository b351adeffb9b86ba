from __future__ import annotations

from datetime import date
from typing import Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_time
from .model import DailyAttendance
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_period(self, *, employee_id: int, start_date: date, end_date: date) -> Sequence[DailyAttendance]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, attendance_date, status,
                       scheduled_in_time, scheduled_out_time, actual_in_time, actual_out_time
                FROM employee_attendance
                WHERE employee_id=%s AND attendance_date BETWEEN %s AND %s
                ORDER BY attendance_date
                """,
                (employee_id, start_date, end_date),
            )
            return [
                DailyAttendance(
                    employee_id=int(r["employee_id"]),
                    work_date=r["attendance_date"],
                    status=AttendanceStatus(r["status"]),
                    scheduled_in=normalize_mysql_time(r.get("scheduled_in_time")),
                    scheduled_out=normalize_mysql_time(r.get("scheduled_out_time")),
                    actual_in=normalize_mysql_time(r.get("actual_in_time")),
                    actual_out=normalize_mysql_time(r.get("actual_out_time")),
                )
                for r in fetchall(cur)
            ]
