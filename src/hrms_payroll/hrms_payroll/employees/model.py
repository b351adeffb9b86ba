from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..core.enums import AirTicketSegment, EmployeeType


@dataclass(frozen=True)
class EmployeeProfile:
    """Calculation input: the parts of an employee that payroll rules look at."""

    country_code: str
    employee_type: EmployeeType = EmployeeType.EXPATRIATE
    joining_date: Optional[date] = None
    air_ticket_eligible: int = 0
    air_ticket_segment: AirTicketSegment = AirTicketSegment.ECONOMY
    estimated_ticket_cost: Optional[Decimal] = None
    employee_id: Optional[int] = None
    employee_code: Optional[str] = None
