from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional

from ..common.money import ZERO
from ..employees.model import EmployeeProfile
from .base import StatutoryContribution, StatutoryResult, StatutoryRuleEvaluator
from .rules import IndiaRuleSet


class IndiaRuleEvaluator(StatutoryRuleEvaluator):
    """EPF/EPS/EDLI on the capped PF wage, ESI under the gross ceiling, gratuity on basic.

    Only ``basic``, ``da`` and ``gross`` matter here; the profile is accepted
    to satisfy the evaluator interface and ignored.
    """

    country_code = "IND"
    country_name = "India"
    currency_code = "INR"

    def __init__(self, rules: Optional[IndiaRuleSet] = None):
        self.rules = rules or IndiaRuleSet()
        self.amount_places = self.rules.amount_places
        self.overtime_multiplier = self.rules.overtime_multiplier

    def pf_base(self, basic: Decimal, da: Decimal) -> Decimal:
        return min(basic + da, self.rules.pf_wage_cap)

    def is_esi_eligible(self, gross: Decimal) -> bool:
        return gross <= self.rules.esi_gross_ceiling

    def evaluate(
        self,
        basic: Decimal,
        da: Decimal,
        gross: Decimal,
        *,
        profile: Optional[EmployeeProfile] = None,
        as_of: Optional[date] = None,
    ) -> StatutoryResult:
        r = self.rules
        pf_base = self.pf_base(basic, da)

        epf_employee = self._round(pf_base * r.epf_employee_rate)
        eps_employer = self._round(min(pf_base * r.eps_employer_rate, r.eps_cap))
        # Employer's 12% is split: EPS takes its (capped) share, EPF keeps the rest.
        epf_employer = self._round(max(pf_base * r.epf_employer_rate - eps_employer, ZERO))

        if self.is_esi_eligible(gross):
            esi_employee = self._round(gross * r.esi_employee_rate)
            esi_employer = self._round(gross * r.esi_employer_rate)
        else:
            esi_employee = esi_employer = ZERO

        edli = self._round(min(pf_base * r.edli_rate, r.edli_cap))
        epf_admin = self._round(min(pf_base * r.epf_admin_rate, r.epf_admin_cap))
        gratuity = self._round(basic * r.gratuity_rate)

        return StatutoryResult(
            contributions=(
                StatutoryContribution("EPF", employee=epf_employee, employer=epf_employer, base=pf_base),
                StatutoryContribution("EPS", employer=eps_employer, base=pf_base),
                StatutoryContribution("ESI", employee=esi_employee, employer=esi_employer, base=gross),
                StatutoryContribution("EDLI", employer=edli, base=pf_base),
                StatutoryContribution("EPF_ADMIN", employer=epf_admin, base=pf_base),
            ),
            gratuity=gratuity,
        )

    def capabilities(self) -> dict[str, bool]:
        return {"socialSecurity": True, "gratuity": True, "airTicket": False, "overtime": True}
