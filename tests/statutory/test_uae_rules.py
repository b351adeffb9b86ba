from datetime import date
from decimal import Decimal

import pytest

from hrms_payroll.core.enums import AirTicketSegment, TerminationType
from hrms_payroll.employees.model import EmployeeProfile
from hrms_payroll.statutory.rules import UAERuleSet
from hrms_payroll.statutory.uae import UAERuleEvaluator


def test_no_employee_side_contributions(uae_profile):
    result = UAERuleEvaluator().evaluate(
        Decimal("10000"), Decimal("0"), Decimal("15000"), profile=uae_profile, as_of=date(2024, 1, 1)
    )

    assert result.as_breakdown() == {}
    assert result.employee_total == 0
    assert result.gratuity == Decimal("583")
    assert result.service_months == 11


def test_gratuity_days_switch_after_sixty_months():
    evaluator = UAERuleEvaluator()

    assert evaluator.gratuity_days_per_year(60) == Decimal("21")
    assert evaluator.gratuity_days_per_year(61) == Decimal("30")
    assert evaluator.monthly_gratuity_accrual(Decimal("10000"), 60) == Decimal("583")
    assert evaluator.monthly_gratuity_accrual(Decimal("10000"), 61) == Decimal("833")


def test_gratuity_parameters_come_from_rule_set():
    evaluator = UAERuleEvaluator(UAERuleSet(gratuity_days_first_years=Decimal("30"), gratuity_threshold_months=12))

    assert evaluator.monthly_gratuity_accrual(Decimal("3600"), 6) == Decimal("300")
    assert evaluator.gratuity_days_per_year(13) == Decimal("30")


@pytest.mark.parametrize(
    "segment, eligible, cost, expected",
    [
        (AirTicketSegment.ECONOMY, 2, None, Decimal("250")),
        (AirTicketSegment.BUSINESS, 1, None, Decimal("375")),
        (AirTicketSegment.FIRST, 0, None, Decimal("0")),
        (AirTicketSegment.ECONOMY, 1, Decimal("4800"), Decimal("200")),
    ],
)
def test_air_ticket_accrual(segment, eligible, cost, expected):
    profile = EmployeeProfile(
        country_code="UAE",
        air_ticket_eligible=eligible,
        air_ticket_segment=segment,
        estimated_ticket_cost=cost,
    )

    assert UAERuleEvaluator().monthly_air_ticket_accrual(profile) == expected


@pytest.mark.parametrize(
    "months, termination_type, expected",
    [
        (36, TerminationType.TERMINATION, Decimal("18900")),
        (36, TerminationType.RESIGNATION, Decimal("6300")),
        (11, TerminationType.RESIGNATION, Decimal("0")),
        (84, TerminationType.TERMINATION, Decimal("49500")),
        (84, TerminationType.RESIGNATION, Decimal("49500")),
        (120, TerminationType.TERMINATION_FOR_CAUSE, Decimal("0")),
    ],
)
def test_end_of_service_gratuity(months, termination_type, expected):
    # basic 9000 -> 300 per day
    assert UAERuleEvaluator().end_of_service_gratuity(Decimal("9000"), months, termination_type) == expected
