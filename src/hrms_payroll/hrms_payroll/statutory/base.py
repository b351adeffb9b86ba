from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..common.money import ZERO, round_half_up
from ..employees.model import EmployeeProfile


@dataclass(frozen=True)
class StatutoryContribution:
    """One statutory line, e.g. EPF, with both sides of the contribution."""

    name: str
    employee: Decimal = ZERO
    employer: Decimal = ZERO
    base: Decimal = ZERO


@dataclass(frozen=True)
class StatutoryResult:
    contributions: tuple[StatutoryContribution, ...] = ()
    gratuity: Decimal = ZERO
    air_ticket: Decimal = ZERO
    service_months: int = 0

    @property
    def employee_total(self) -> Decimal:
        return sum((c.employee for c in self.contributions), ZERO)

    @property
    def employer_contributions(self) -> Decimal:
        return sum((c.employer for c in self.contributions), ZERO)

    @property
    def employer_total(self) -> Decimal:
        """Everything the employer pays on top of gross, accruals included."""
        return self.employer_contributions + self.gratuity + self.air_ticket

    def as_breakdown(self) -> dict[str, dict[str, Decimal]]:
        return {c.name: {"employee": c.employee, "employer": c.employer} for c in self.contributions}


EMPTY_RESULT = StatutoryResult()


class StatutoryRuleEvaluator(ABC):
    """Strategy Pattern: one evaluator per country's labour-law rules."""

    country_code: str = ""
    country_name: str = ""
    currency_code: str = ""

    amount_places: int = 0
    overtime_multiplier: Decimal = Decimal("1")

    @abstractmethod
    def evaluate(
        self,
        basic: Decimal,
        da: Decimal,
        gross: Decimal,
        *,
        profile: Optional[EmployeeProfile] = None,
        as_of: Optional[date] = None,
    ) -> StatutoryResult:
        raise NotImplementedError

    def capabilities(self) -> dict[str, bool]:
        return {
            "socialSecurity": False,
            "gratuity": True,
            "airTicket": False,
            "overtime": True,
        }

    def _round(self, value: Decimal) -> Decimal:
        return round_half_up(value, self.amount_places)
