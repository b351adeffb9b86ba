from datetime import date
from decimal import Decimal

import pytest

from hrms_payroll.core.enums import AirTicketSegment, ComponentType, EmployeeType
from hrms_payroll.core.exceptions import InvalidDateRange, ValidationError
from hrms_payroll.compensation.payload import parse_line_item, parse_line_items, parse_profile


def test_parse_fixed_line_item():
    item = parse_line_item(
        {"componentCode": "basic", "componentType": "earning", "amount": "10000", "effectiveDate": "2024-01-01T00:00:00Z"}
    )

    assert item.component_code == "BASIC"
    assert item.component_type == ComponentType.EARNING
    assert item.amount == Decimal("10000")
    assert item.effective_date == date(2024, 1, 1)
    assert item.basis_component_code is None


def test_percentage_without_basis_defaults_to_basic():
    item = parse_line_item({"componentCode": "HRA", "componentType": "ALLOWANCE", "isPercentage": True, "percentage": 40})

    assert item.is_percentage
    assert item.percentage == Decimal("40")
    assert item.basis_component_code == "BASIC"


@pytest.mark.parametrize(
    "raw",
    [
        {"componentCode": "HRA", "componentType": "ALLOWANCE", "isPercentage": True, "percentage": 140},
        {"componentCode": "BASIC", "componentType": "EARNING", "amount": -1},
        {"componentCode": "BASIC", "componentType": "BONUS", "amount": 1},
        {"componentCode": "", "componentType": "EARNING", "amount": 1},
        {"componentCode": "BASIC", "componentType": "EARNING", "amount": "ten"},
        {"componentCode": "BASIC", "componentType": "EARNING", "amount": "NaN"},
        {"componentCode": "BASIC", "componentType": "EARNING", "amount": "Infinity"},
        {"componentCode": "HRA", "componentType": "ALLOWANCE", "isPercentage": True, "percentage": "nan"},
    ],
)
def test_invalid_line_items(raw):
    with pytest.raises(ValidationError):
        parse_line_item(raw)


def test_end_before_effective_is_invalid_range():
    with pytest.raises(InvalidDateRange):
        parse_line_item(
            {
                "componentCode": "BASIC",
                "componentType": "EARNING",
                "amount": 1,
                "effectiveDate": "2024-05-01",
                "endDate": "2024-04-30",
            }
        )


def test_line_items_must_be_a_list():
    with pytest.raises(ValidationError, match="Compensation data array is required"):
        parse_line_items(None)


def test_parse_profile():
    profile = parse_profile(
        {
            "countryCode": "uae",
            "employeeType": "expatriate",
            "joiningDate": "2021-03-15",
            "airTicketEligible": 2,
            "ticketSegment": "business",
            "employeeId": 7,
        }
    )

    assert profile.country_code == "UAE"
    assert profile.employee_type == EmployeeType.EXPATRIATE
    assert profile.air_ticket_segment == AirTicketSegment.BUSINESS
    assert profile.air_ticket_eligible == 2
    assert profile.estimated_ticket_cost is None


@pytest.mark.parametrize(
    "raw",
    [
        None,
        {},
        {"countryCode": "UAE", "airTicketEligible": 5},
        {"countryCode": "UAE", "airTicketEligible": 2.7},
        {"countryCode": "UAE", "airTicketEligible": True},
    ],
)
def test_invalid_profiles(raw):
    with pytest.raises(ValidationError):
        parse_profile(raw)
