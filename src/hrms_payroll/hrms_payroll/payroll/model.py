from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..attendance.model import DailyAttendance
from ..common.money import ZERO
from ..compensation.model import CompensationLineItem
from ..core.enums import PayrollPeriodStatus, PayrollRunStatus
from ..employees.model import EmployeeProfile
from .calculator.result import CalculationResult


@dataclass(frozen=True)
class PayrollPeriod:
    period_id: int
    period_name: str
    start_date: date
    end_date: date
    status: PayrollPeriodStatus

    @property
    def days(self) -> int:
        return (self.end_date - self.start_date).days + 1


@dataclass(frozen=True)
class BatchJob:
    """Everything one employee's calculation needs, already loaded."""

    profile: EmployeeProfile
    line_items: Sequence[CompensationLineItem]
    attendance: Optional[Sequence[DailyAttendance]] = None
    period_days: Optional[int] = None


@dataclass(frozen=True)
class EmployeeOutcome:
    employee_id: Optional[int]
    employee_code: Optional[str]
    result: Optional[CalculationResult] = None
    error: Optional[str] = None
    overtime_hours: Decimal = ZERO

    @property
    def ok(self) -> bool:
        return self.result is not None


@dataclass(frozen=True)
class PayrollRunReport:
    """Per-employee results and failures of one batch, plus aggregate totals."""

    outcomes: tuple[EmployeeOutcome, ...]
    country_code: Optional[str] = None
    period_id: Optional[int] = None
    run_id: Optional[int] = None

    @property
    def succeeded(self) -> list[EmployeeOutcome]:
        return [o for o in self.outcomes if o.ok]

    @property
    def processed_count(self) -> int:
        return len(self.succeeded)

    @property
    def failed_count(self) -> int:
        return len(self.outcomes) - self.processed_count

    @property
    def errors(self) -> list[dict]:
        return [
            {"employeeId": o.employee_id, "employeeCode": o.employee_code, "error": o.error}
            for o in self.outcomes
            if not o.ok
        ]

    @property
    def status(self) -> PayrollRunStatus:
        return PayrollRunStatus.COMPLETED if self.failed_count == 0 else PayrollRunStatus.COMPLETED_WITH_ERRORS

    def total(self, pick) -> Decimal:
        return sum((pick(o.result) for o in self.succeeded), ZERO)

    @property
    def totals(self) -> dict[str, Decimal]:
        return {
            "gross": self.total(lambda r: r.earnings.gross),
            "net": self.total(lambda r: r.deductions.net),
            "employeeDeductions": self.total(lambda r: r.deductions.employee),
            "employerContributions": self.total(lambda r: r.employer_costs.statutory),
            "gratuity": self.total(lambda r: r.employer_costs.gratuity),
            "airTicket": self.total(lambda r: r.employer_costs.air_ticket),
            "monthlyCTC": self.total(lambda r: r.totals.monthly_ctc),
        }
