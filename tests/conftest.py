from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from hrms_payroll.compensation.model import CompensationLineItem
from hrms_payroll.core.enums import ComponentType, EmployeeType
from hrms_payroll.employees.model import EmployeeProfile


def fixed(code, amount, component_type=ComponentType.EARNING, **kwargs):
    return CompensationLineItem(component_code=code, component_type=component_type, amount=Decimal(str(amount)), **kwargs)


def percent(code, percentage, basis="BASIC", component_type=ComponentType.ALLOWANCE, **kwargs):
    return CompensationLineItem(
        component_code=code,
        component_type=component_type,
        is_percentage=True,
        percentage=Decimal(str(percentage)),
        basis_component_code=basis,
        **kwargs,
    )


@pytest.fixture
def as_of():
    return date(2024, 6, 30)


@pytest.fixture
def india_profile():
    return EmployeeProfile(
        country_code="IND",
        employee_type=EmployeeType.LOCAL,
        joining_date=date(2020, 1, 1),
        employee_id=1,
        employee_code="IN001",
    )


@pytest.fixture
def uae_profile():
    return EmployeeProfile(
        country_code="UAE",
        employee_type=EmployeeType.EXPATRIATE,
        joining_date=date(2023, 1, 1),
        employee_id=2,
        employee_code="AE001",
    )
