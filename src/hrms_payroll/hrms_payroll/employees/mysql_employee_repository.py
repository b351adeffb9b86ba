from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..core.enums import AirTicketSegment, EmployeeType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_decimal, db_cursor, fetchall, in_clause
from .model import EmployeeProfile
from .repository import EmployeeRepository

_SELECT = """
    SELECT employee_id, employee_code, country_code, employee_type, date_of_joining,
           air_ticket_eligible, ticket_segment, estimated_ticket_cost
    FROM employees
"""


def _row_to_profile(r: Dict[str, Any]) -> EmployeeProfile:
    return EmployeeProfile(
        employee_id=int(r["employee_id"]),
        employee_code=r.get("employee_code"),
        country_code=str(r["country_code"]).upper(),
        employee_type=EmployeeType(r.get("employee_type") or EmployeeType.EXPATRIATE.value),
        joining_date=r.get("date_of_joining"),
        air_ticket_eligible=int(r.get("air_ticket_eligible") or 0),
        air_ticket_segment=AirTicketSegment(r.get("ticket_segment") or AirTicketSegment.ECONOMY.value),
        estimated_ticket_cost=as_decimal(r.get("estimated_ticket_cost")),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_active_profiles(
        self,
        *,
        country_code: str,
        employee_ids: Optional[Sequence[int]] = None,
    ) -> Sequence[EmployeeProfile]:
        sql = _SELECT + " WHERE status='ACTIVE' AND country_code=%s"
        params: list = [country_code.upper()]
        if employee_ids:
            sql += f" AND employee_id IN ({in_clause(employee_ids)})"
            params.extend(int(i) for i in employee_ids)
        sql += " ORDER BY employee_code"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            return [_row_to_profile(r) for r in fetchall(cur)]
