from __future__ import annotations

from decimal import Decimal
from typing import Optional, Protocol

from .calculator.result import CalculationResult
from .model import PayrollPeriod, PayrollRunReport


class PayrollRepository(Protocol):
    def get_period(self, period_id: int) -> Optional[PayrollPeriod]:
        raise NotImplementedError

    def create_run(self, *, period_id: int, country_code: str, total_employees: int) -> int:
        raise NotImplementedError

    def save_detail(
        self,
        *,
        run_id: int,
        period_id: int,
        employee_id: int,
        result: CalculationResult,
        overtime_hours: Decimal = Decimal("0"),
    ) -> int:
        """Upsert the employee's row for the period; re-running a DRAFT period overwrites it."""

        raise NotImplementedError

    def complete_run(self, *, run_id: int, report: PayrollRunReport) -> bool:
        """Store run counts/status and roll the totals up onto the period."""

        raise NotImplementedError

    def fail_run(self, *, run_id: int, error: str) -> bool:
        """Close a run that could not be persisted; the period stays DRAFT."""

        raise NotImplementedError
