"""Request payload -> domain objects.

Clients send the camelCase shape the HR screens use; DB rows go through the
repositories instead.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Any, Mapping, Sequence

from ..common.datetime_utils import parse_optional_date
from ..common.money import to_decimal
from ..common.validators import require_enum, require_int_range, require_non_empty
from ..core.constants import BASIC_CODE
from ..core.enums import AirTicketSegment, ComponentStatus, ComponentType, EmployeeType
from ..core.exceptions import InvalidDateRange, ValidationError
from ..employees.model import EmployeeProfile
from .model import CompensationLineItem


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "y"}
    return bool(value)


def parse_line_item(raw: Mapping[str, Any]) -> CompensationLineItem:
    code = require_non_empty(raw.get("componentCode"), "componentCode").upper()
    component_type = require_enum(raw.get("componentType"), ComponentType, "componentType")
    is_percentage = _as_bool(raw.get("isPercentage"))

    amount = to_decimal(raw.get("amount"), "amount")
    percentage = to_decimal(raw.get("percentage"), "percentage")
    basis = raw.get("basisComponentCode")

    if is_percentage:
        if percentage < 0 or percentage > 100:
            raise ValidationError(f"{code}: percentage must be between 0 and 100")
        # Legacy screens never sent a basis; they always meant "% of Basic".
        basis = str(basis).strip().upper() if basis else BASIC_CODE
        amount = Decimal("0")
    else:
        if amount < 0:
            raise ValidationError(f"{code}: amount cannot be negative")
        basis = None
        percentage = Decimal("0")

    effective_date = parse_optional_date(raw.get("effectiveDate"), "effectiveDate")
    end_date = parse_optional_date(raw.get("endDate"), "endDate")
    if effective_date and end_date and end_date < effective_date:
        raise InvalidDateRange(f"{code}: endDate {end_date} is before effectiveDate {effective_date}")

    status_raw = raw.get("status") or ComponentStatus.ACTIVE.value
    status = require_enum(status_raw, ComponentStatus, "status")

    return CompensationLineItem(
        component_code=code,
        component_type=component_type,
        is_percentage=is_percentage,
        amount=amount,
        percentage=percentage,
        basis_component_code=basis,
        effective_date=effective_date,
        end_date=end_date,
        status=status,
        component_name=raw.get("componentName"),
    )


def parse_line_items(raw_items: Sequence[Mapping[str, Any]]) -> list[CompensationLineItem]:
    if not isinstance(raw_items, (list, tuple)):
        raise ValidationError("Compensation data array is required")
    return [parse_line_item(r) for r in raw_items]


def parse_profile(raw: Mapping[str, Any]) -> EmployeeProfile:
    if not isinstance(raw, Mapping):
        raise ValidationError("Employee data with country code is required")

    country_code = require_non_empty(raw.get("countryCode"), "countryCode").upper()
    employee_type = require_enum(raw.get("employeeType") or EmployeeType.EXPATRIATE.value, EmployeeType, "employeeType")
    segment_raw = raw.get("airTicketSegment") or raw.get("ticketSegment") or AirTicketSegment.ECONOMY.value
    ticket_cost = raw.get("estimatedTicketCost")

    return EmployeeProfile(
        country_code=country_code,
        employee_type=employee_type,
        joining_date=parse_optional_date(raw.get("joiningDate"), "joiningDate"),
        air_ticket_eligible=require_int_range(raw.get("airTicketEligible"), "airTicketEligible", 0, 4),
        air_ticket_segment=require_enum(segment_raw, AirTicketSegment, "airTicketSegment"),
        estimated_ticket_cost=to_decimal(ticket_cost, "estimatedTicketCost") if ticket_cost not in (None, "") else None,
        employee_id=raw.get("employeeId"),
        employee_code=raw.get("employeeCode"),
    )
