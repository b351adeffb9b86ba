from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from ...common.money import ZERO
from ...compensation.model import ResolvedComponent

MISSING_BASIS_COMPONENT = "MISSING_BASIS_COMPONENT"


@dataclass(frozen=True)
class DataQualityWarning:
    """Something the calculation tolerated but the caller should flag."""

    code: str
    component_code: str
    message: str


@dataclass(frozen=True)
class Earnings:
    gross: Decimal = ZERO
    basic: Decimal = ZERO
    allowances: Decimal = ZERO
    overtime: Decimal = ZERO
    components: tuple[ResolvedComponent, ...] = ()


@dataclass(frozen=True)
class Deductions:
    statutory: dict[str, dict[str, Decimal]] = field(default_factory=dict)
    fixed: Decimal = ZERO
    employee: Decimal = ZERO
    net: Decimal = ZERO


@dataclass(frozen=True)
class EmployerCosts:
    statutory: Decimal = ZERO
    gratuity: Decimal = ZERO
    air_ticket: Decimal = ZERO
    total: Decimal = ZERO


@dataclass(frozen=True)
class Totals:
    monthly_ctc: Decimal = ZERO
    annual_ctc: Decimal = ZERO


@dataclass(frozen=True)
class CalculationResult:
    """Derived breakdown for one employee; computed on demand, never stored here."""

    country_code: str
    as_of: date
    earnings: Earnings
    deductions: Deductions
    employer_costs: EmployerCosts
    totals: Totals
    service_months: int = 0
    warnings: tuple[DataQualityWarning, ...] = ()
