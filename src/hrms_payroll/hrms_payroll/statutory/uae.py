from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional

from ..common.datetime_utils import service_months
from ..common.money import ZERO
from ..core.constants import MONTHS_PER_YEAR
from ..core.enums import TerminationType
from ..employees.model import EmployeeProfile
from .base import StatutoryResult, StatutoryRuleEvaluator
from .rules import UAERuleSet


class UAERuleEvaluator(StatutoryRuleEvaluator):
    """No employee-side statutory deductions; employer accrues gratuity and air tickets."""

    country_code = "UAE"
    country_name = "United Arab Emirates"
    currency_code = "AED"

    def __init__(self, rules: Optional[UAERuleSet] = None):
        self.rules = rules or UAERuleSet()
        self.amount_places = self.rules.amount_places
        self.overtime_multiplier = self.rules.overtime_multiplier

    def evaluate(
        self,
        basic: Decimal,
        da: Decimal,
        gross: Decimal,
        *,
        profile: Optional[EmployeeProfile] = None,
        as_of: Optional[date] = None,
    ) -> StatutoryResult:
        months = service_months(profile.joining_date, as_of) if profile and as_of else 0
        return StatutoryResult(
            contributions=(),
            gratuity=self.monthly_gratuity_accrual(basic, months),
            air_ticket=self.monthly_air_ticket_accrual(profile),
            service_months=months,
        )

    def gratuity_days_per_year(self, months: int) -> Decimal:
        r = self.rules
        return r.gratuity_days_first_years if months <= r.gratuity_threshold_months else r.gratuity_days_after

    def monthly_gratuity_accrual(self, basic: Decimal, months: int) -> Decimal:
        days = self.gratuity_days_per_year(months)
        return self._round(basic * days / (self.rules.gratuity_daily_divisor * MONTHS_PER_YEAR))

    def monthly_air_ticket_accrual(self, profile: Optional[EmployeeProfile]) -> Decimal:
        if not profile or profile.air_ticket_eligible <= 0:
            return ZERO

        cost = profile.estimated_ticket_cost
        if not cost:
            costs = self.rules.air_ticket_costs
            cost = costs.get(profile.air_ticket_segment)
            if cost is None:
                cost = costs.get(next(iter(costs)), ZERO)

        return self._round(cost * profile.air_ticket_eligible / self.rules.air_ticket_cycle_months)

    def end_of_service_gratuity(
        self,
        basic: Decimal,
        total_service_months: int,
        termination_type: TerminationType = TerminationType.RESIGNATION,
    ) -> Decimal:
        """Lump sum due when the employee leaves.

        21 days' basic for each of the first five years, 30 days' for every year
        after that. Resignation before one year forfeits it, resignation before
        five years pays a third, termination for cause pays nothing.
        """
        r = self.rules
        if termination_type == TerminationType.TERMINATION_FOR_CAUSE:
            return ZERO

        years = Decimal(total_service_months) / MONTHS_PER_YEAR
        threshold_years = Decimal(r.gratuity_threshold_months) / MONTHS_PER_YEAR
        if termination_type == TerminationType.RESIGNATION and years < 1:
            return ZERO

        daily_wage = basic / r.gratuity_daily_divisor
        total = min(years, threshold_years) * r.gratuity_days_first_years * daily_wage
        if years > threshold_years:
            total += (years - threshold_years) * r.gratuity_days_after * daily_wage

        if termination_type == TerminationType.RESIGNATION and years < threshold_years:
            total = total / 3

        return self._round(total)

    def capabilities(self) -> dict[str, bool]:
        return {"socialSecurity": False, "gratuity": True, "airTicket": True, "overtime": True}
