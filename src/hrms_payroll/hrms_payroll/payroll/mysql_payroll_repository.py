from __future__ import annotations

import json
from decimal import Decimal
from typing import Optional

from ..core.enums import PayrollPeriodStatus, PayrollRunStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor
from .calculator.result import CalculationResult
from .model import PayrollPeriod, PayrollRunReport
from .repository import PayrollRepository


class MySQLPayrollRepository(PayrollRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_period(self, period_id: int) -> Optional[PayrollPeriod]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT period_id, period_name, start_date, end_date, status FROM payroll_periods WHERE period_id=%s",
                (period_id,),
            )
            r = cur.fetchone()
            if not r:
                return None
            return PayrollPeriod(
                period_id=int(r["period_id"]),
                period_name=r["period_name"],
                start_date=r["start_date"],
                end_date=r["end_date"],
                status=PayrollPeriodStatus(r["status"]),
            )

    def create_run(self, *, period_id: int, country_code: str, total_employees: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO payroll_runs(period_id, country_code, status, total_employees)
                VALUES(%s,%s,%s,%s)
                """,
                (period_id, country_code, PayrollRunStatus.IN_PROGRESS.value, int(total_employees)),
            )
            return int(cur.lastrowid)

    def save_detail(
        self,
        *,
        run_id: int,
        period_id: int,
        employee_id: int,
        result: CalculationResult,
        overtime_hours: Decimal = Decimal("0"),
    ) -> int:
        e, d, c = result.earnings, result.deductions, result.employer_costs
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO payroll_details(
                    period_id, employee_id, run_id, basic_salary, gross_salary, net_salary,
                    allowance_amount, total_deductions, employer_contributions, gratuity_accrual,
                    air_ticket_accrual, monthly_ctc, overtime_hours, overtime_amount, status
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,'CALCULATED')
                ON DUPLICATE KEY UPDATE
                    run_id=VALUES(run_id), basic_salary=VALUES(basic_salary), gross_salary=VALUES(gross_salary),
                    net_salary=VALUES(net_salary), allowance_amount=VALUES(allowance_amount),
                    total_deductions=VALUES(total_deductions), employer_contributions=VALUES(employer_contributions),
                    gratuity_accrual=VALUES(gratuity_accrual), air_ticket_accrual=VALUES(air_ticket_accrual),
                    monthly_ctc=VALUES(monthly_ctc), overtime_hours=VALUES(overtime_hours),
                    overtime_amount=VALUES(overtime_amount), status='CALCULATED'
                """,
                (
                    period_id,
                    employee_id,
                    run_id,
                    e.basic,
                    e.gross,
                    d.net,
                    e.allowances,
                    d.employee,
                    c.statutory,
                    c.gratuity,
                    c.air_ticket,
                    result.totals.monthly_ctc,
                    overtime_hours,
                    e.overtime,
                ),
            )
            return int(cur.lastrowid or 0)

    def complete_run(self, *, run_id: int, report: PayrollRunReport) -> bool:
        totals = report.totals
        error_message = json.dumps(report.errors) if report.errors else None
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE payroll_runs
                SET status=%s, total_employees_processed=%s, total_employees_failed=%s,
                    error_message=%s, completed_at=NOW()
                WHERE run_id=%s
                """,
                (report.status.value, report.processed_count, report.failed_count, error_message, run_id),
            )
            updated = cur.rowcount > 0
            if report.period_id is not None:
                cur.execute(
                    """
                    UPDATE payroll_periods
                    SET status=%s, total_employees=%s, total_gross_pay=%s, total_net_pay=%s, total_deductions=%s
                    WHERE period_id=%s
                    """,
                    (
                        PayrollPeriodStatus.PROCESSED.value,
                        report.processed_count,
                        totals["gross"],
                        totals["net"],
                        totals["employeeDeductions"],
                        report.period_id,
                    ),
                )
            return updated

    def fail_run(self, *, run_id: int, error: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE payroll_runs SET status=%s, error_message=%s, completed_at=NOW() WHERE run_id=%s",
                (PayrollRunStatus.FAILED.value, error, run_id),
            )
            return cur.rowcount > 0
