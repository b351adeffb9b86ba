"""Per-country statutory constants.

Rule sets are immutable values; evaluators read them but never change them, so
one instance can be shared by every calculation in a batch run.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Mapping

from ..core.enums import AirTicketSegment


@dataclass(frozen=True)
class IndiaRuleSet:
    pf_wage_cap: Decimal = Decimal("15000")
    epf_employee_rate: Decimal = Decimal("0.12")
    epf_employer_rate: Decimal = Decimal("0.12")
    eps_employer_rate: Decimal = Decimal("0.0833")
    eps_cap: Decimal = Decimal("1250")
    esi_gross_ceiling: Decimal = Decimal("21000")
    esi_employee_rate: Decimal = Decimal("0.0075")
    esi_employer_rate: Decimal = Decimal("0.0325")
    gratuity_rate: Decimal = Decimal("0.0481")
    edli_rate: Decimal = Decimal("0.005")
    edli_cap: Decimal = Decimal("75")
    epf_admin_rate: Decimal = Decimal("0.005")
    epf_admin_cap: Decimal = Decimal("75")
    overtime_multiplier: Decimal = Decimal("2.0")
    amount_places: int = 0


def _default_ticket_costs() -> Mapping[AirTicketSegment, Decimal]:
    return {
        AirTicketSegment.ECONOMY: Decimal("3000"),
        AirTicketSegment.BUSINESS: Decimal("9000"),
        AirTicketSegment.FIRST: Decimal("15000"),
    }


@dataclass(frozen=True)
class UAERuleSet:
    """UAE Labour Law end-of-service and air ticket parameters.

    The gratuity accrual defaults to 21 days' basic per year of service up to
    ``gratuity_threshold_months`` and 30 days' basic per year after that; all
    three numbers can be overridden from settings.
    """

    gratuity_days_first_years: Decimal = Decimal("21")
    gratuity_days_after: Decimal = Decimal("30")
    gratuity_threshold_months: int = 60
    gratuity_daily_divisor: Decimal = Decimal("30")
    air_ticket_costs: Mapping[AirTicketSegment, Decimal] = field(default_factory=_default_ticket_costs)
    air_ticket_cycle_months: int = 24
    overtime_multiplier: Decimal = Decimal("1.25")
    amount_places: int = 0
