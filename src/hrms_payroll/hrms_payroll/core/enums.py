from __future__ import annotations

from enum import Enum


class ComponentType(str, Enum):
    """Kind of compensation line item."""

    EARNING = "EARNING"
    ALLOWANCE = "ALLOWANCE"
    DEDUCTION = "DEDUCTION"


class ComponentStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class EmployeeType(str, Enum):
    LOCAL = "LOCAL"
    EXPATRIATE = "EXPATRIATE"


class AirTicketSegment(str, Enum):
    ECONOMY = "ECONOMY"
    BUSINESS = "BUSINESS"
    FIRST = "FIRST"


class AttendanceStatus(str, Enum):
    """Daily attendance status as stored for payroll periods."""

    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    HALF_DAY = "HALF_DAY"
    LEAVE = "LEAVE"
    HOLIDAY = "HOLIDAY"
    WEEKEND = "WEEKEND"


class TerminationType(str, Enum):
    RESIGNATION = "RESIGNATION"
    TERMINATION = "TERMINATION"
    TERMINATION_FOR_CAUSE = "TERMINATION_FOR_CAUSE"


class PayrollPeriodStatus(str, Enum):
    DRAFT = "DRAFT"
    PROCESSED = "PROCESSED"
    APPROVED = "APPROVED"
    PAID = "PAID"


class PayrollRunStatus(str, Enum):
    """Outcome of a batch payroll run."""

    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    COMPLETED_WITH_ERRORS = "COMPLETED_WITH_ERRORS"
    FAILED = "FAILED"
