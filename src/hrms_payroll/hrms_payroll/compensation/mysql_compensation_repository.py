from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from ..core.enums import ComponentStatus, ComponentType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_decimal, db_cursor, fetchall
from .model import CompensationLineItem
from .repository import CompensationRepository


class MySQLCompensationRepository(CompensationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee(self, employee_id: int) -> Sequence[CompensationLineItem]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT pc.component_code, pc.component_name, pc.component_type, pc.basis_component_code,
                       ec.amount, ec.percentage, ec.is_percentage, ec.effective_date, ec.end_date, ec.status
                FROM employee_compensation ec
                JOIN pay_components pc ON pc.pay_component_id = ec.pay_component_id
                WHERE ec.employee_id=%s
                ORDER BY pc.component_type, pc.component_code, ec.effective_date
                """,
                (employee_id,),
            )
            return [
                CompensationLineItem(
                    component_code=r["component_code"],
                    component_name=r.get("component_name"),
                    component_type=ComponentType(r["component_type"]),
                    is_percentage=bool(r.get("is_percentage")),
                    amount=as_decimal(r.get("amount")) or Decimal("0"),
                    percentage=as_decimal(r.get("percentage")) or Decimal("0"),
                    basis_component_code=r.get("basis_component_code"),
                    effective_date=r.get("effective_date"),
                    end_date=r.get("end_date"),
                    status=ComponentStatus(r.get("status") or ComponentStatus.ACTIVE.value),
                )
                for r in fetchall(cur)
            ]
