from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from ...attendance.model import AttendanceSummary
from ...common.datetime_utils import service_months
from ...common.money import ZERO, round_half_up
from ...compensation.model import CompensationLineItem, ResolvedComponent
from ...core.constants import BASIC_CODE, DA_CODE, GROSS_BASIS, MONTHS_PER_YEAR, STANDARD_DAILY_HOURS, WORKING_DAYS_PER_MONTH
from ...core.enums import ComponentType
from ...employees.model import EmployeeProfile
from ...statutory.base import EMPTY_RESULT, StatutoryRuleEvaluator
from ...statutory.registry import StatutoryRegistry, build_default_registry
from .result import (
    MISSING_BASIS_COMPONENT,
    CalculationResult,
    DataQualityWarning,
    Deductions,
    EmployerCosts,
    Earnings,
    Totals,
)

log = logging.getLogger(__name__)

MONEY_PLACES = 2


class CompensationCalculator:
    """Line items + country rules (+ optional attendance) -> CTC and net pay.

    Pure and stateless apart from the registry it reads, so one instance can
    serve concurrent calculations.

    Several ACTIVE rows with the same component code are summed, not
    deduplicated; keeping one active row per code is the caller's job.
    """

    def __init__(self, registry: Optional[StatutoryRegistry] = None):
        self._registry = registry or build_default_registry()

    @property
    def registry(self) -> StatutoryRegistry:
        return self._registry

    def calculate(
        self,
        profile: EmployeeProfile,
        line_items: Iterable[CompensationLineItem],
        as_of: date,
        *,
        attendance: Optional[AttendanceSummary] = None,
    ) -> CalculationResult:
        evaluator = self._registry.get(profile.country_code)

        active = [item for item in line_items if item.is_active_on(as_of)]
        fixed_items = [item for item in active if not item.is_percentage]
        percentage_items = [item for item in active if item.is_percentage]

        factor = attendance.proration_factor if attendance else Decimal("1")

        components: list[ResolvedComponent] = []
        fixed_by_code: dict[str, Decimal] = defaultdict(lambda: ZERO)
        # Overtime is paid on the contractual basic, before attendance proration.
        contract_basic = ZERO
        for item in fixed_items:
            amount = item.amount
            if item.component_code == BASIC_CODE and item.is_earning:
                contract_basic += amount
            if item.is_earning and factor != 1:
                amount = round_half_up(amount * factor, MONEY_PLACES)
            fixed_by_code[item.component_code] += amount
            components.append(ResolvedComponent(item.component_code, item.component_type, amount))

        fixed_gross = sum((c.amount for c in components if c.component_type != ComponentType.DEDUCTION), ZERO)

        warnings: list[DataQualityWarning] = []
        for item in percentage_items:
            basis = self._basis_amount(item.basis_component_code, fixed_by_code, fixed_gross)
            if basis is None:
                message = (
                    f"{item.component_code}: basis component {item.basis_component_code} "
                    "is not active, resolved to 0"
                )
                log.warning("[payroll.calculate] %s", message)
                warnings.append(DataQualityWarning(MISSING_BASIS_COMPONENT, item.component_code, message))
                basis = ZERO
            amount = round_half_up(basis * item.percentage / 100, MONEY_PLACES)
            components.append(
                ResolvedComponent(
                    item.component_code,
                    item.component_type,
                    amount,
                    is_percentage=True,
                    basis_component_code=item.basis_component_code,
                )
            )

        earning_totals: dict[str, Decimal] = defaultdict(lambda: ZERO)
        fixed_deductions = ZERO
        for c in components:
            if c.component_type == ComponentType.DEDUCTION:
                fixed_deductions += c.amount
            else:
                earning_totals[c.component_code] += c.amount

        gross = sum(earning_totals.values(), ZERO)
        basic = earning_totals.get(BASIC_CODE, ZERO)
        da = earning_totals.get(DA_CODE, ZERO)

        if gross == 0:
            statutory = EMPTY_RESULT
        else:
            statutory = evaluator.evaluate(basic, da, gross, profile=profile, as_of=as_of)

        overtime = self._overtime_pay(evaluator, contract_basic, attendance)
        total_gross = gross + overtime

        employee_deductions = fixed_deductions + statutory.employee_total
        employer_total = statutory.employer_total
        monthly_ctc = total_gross + employer_total

        log.debug(
            "[payroll.calculate] country=%s gross=%s employee_deductions=%s ctc=%s",
            evaluator.country_code,
            total_gross,
            employee_deductions,
            monthly_ctc,
        )

        return CalculationResult(
            country_code=evaluator.country_code,
            as_of=as_of,
            earnings=Earnings(
                gross=total_gross,
                basic=basic,
                allowances=gross - basic,
                overtime=overtime,
                components=tuple(components),
            ),
            deductions=Deductions(
                statutory=statutory.as_breakdown(),
                fixed=fixed_deductions,
                employee=employee_deductions,
                net=total_gross - employee_deductions,
            ),
            employer_costs=EmployerCosts(
                statutory=statutory.employer_contributions,
                gratuity=statutory.gratuity,
                air_ticket=statutory.air_ticket,
                total=employer_total,
            ),
            totals=Totals(monthly_ctc=monthly_ctc, annual_ctc=monthly_ctc * MONTHS_PER_YEAR),
            service_months=service_months(profile.joining_date, as_of),
            warnings=tuple(warnings),
        )

    def _basis_amount(
        self,
        basis_code: Optional[str],
        fixed_by_code: dict[str, Decimal],
        fixed_gross: Decimal,
    ) -> Optional[Decimal]:
        if not basis_code:
            return None
        if basis_code == GROSS_BASIS:
            return fixed_gross
        if basis_code not in fixed_by_code:
            return None
        return fixed_by_code[basis_code]

    def _overtime_pay(
        self,
        evaluator: StatutoryRuleEvaluator,
        basic: Decimal,
        attendance: Optional[AttendanceSummary],
    ) -> Decimal:
        if not attendance or attendance.overtime_hours <= 0 or basic <= 0:
            return ZERO
        hourly = basic / (STANDARD_DAILY_HOURS * WORKING_DAYS_PER_MONTH)
        return round_half_up(hourly * evaluator.overtime_multiplier * attendance.overtime_hours, MONEY_PLACES)
