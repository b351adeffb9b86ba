"""Example: calculate CTC with the core only (no Flask, no database).

Controllers and repositories are thin; the calculation itself takes plain
domain objects and can be called from scripts like this one.
"""

from datetime import date
from decimal import Decimal

from hrms_payroll.compensation.model import CompensationLineItem
from hrms_payroll.core.enums import AirTicketSegment, ComponentType
from hrms_payroll.currency.formatting import currency_for
from hrms_payroll.employees.model import EmployeeProfile
from hrms_payroll.payroll.calculator.compensation_calculator import CompensationCalculator
from hrms_payroll.payroll.presenter import result_to_json


def main():
    profile = EmployeeProfile(
        country_code="UAE",
        joining_date=date(2019, 4, 1),
        air_ticket_eligible=1,
        air_ticket_segment=AirTicketSegment.ECONOMY,
    )
    items = [
        CompensationLineItem("BASIC", ComponentType.EARNING, amount=Decimal("12000")),
        CompensationLineItem(
            "HOUSING", ComponentType.ALLOWANCE, is_percentage=True, percentage=Decimal("25"), basis_component_code="BASIC"
        ),
    ]

    result = CompensationCalculator().calculate(profile, items, date.today())
    print(result_to_json(result, currency_for(result.country_code))["formatted"])


if __name__ == "__main__":
    main()
