from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Mapping, Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.reducer import AttendanceHoursReducer
from .compensation.mysql_compensation_repository import MySQLCompensationRepository
from .core.constants import DEFAULT_PAYROLL_MAX_WORKERS
from .core.enums import AirTicketSegment
from .currency.formatting import DEFAULT_CURRENCIES, CurrencyConfig
from .database.connection import DatabaseConnection, connection_from_settings
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .payroll.calculator.compensation_calculator import CompensationCalculator
from .payroll.mysql_payroll_repository import MySQLPayrollRepository
from .payroll.service import PayrollRunService
from .statutory.registry import StatutoryRegistry, build_default_registry
from .statutory.rules import UAERuleSet


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: MySQLEmployeeRepository
    compensation_repo: MySQLCompensationRepository
    attendance_repo: MySQLAttendanceRepository
    payroll_repo: MySQLPayrollRepository

    registry: StatutoryRegistry
    calculator: CompensationCalculator
    attendance_reducer: AttendanceHoursReducer
    payroll_run_service: PayrollRunService
    currencies: Mapping[str, CurrencyConfig]


def _uae_rules(settings: Any) -> UAERuleSet:
    defaults = UAERuleSet()
    costs = getattr(settings, "UAE_AIR_TICKET_COSTS", None)
    return UAERuleSet(
        gratuity_days_first_years=Decimal(str(getattr(settings, "UAE_GRATUITY_DAYS_FIRST_YEARS", defaults.gratuity_days_first_years))),
        gratuity_days_after=Decimal(str(getattr(settings, "UAE_GRATUITY_DAYS_AFTER", defaults.gratuity_days_after))),
        gratuity_threshold_months=int(getattr(settings, "UAE_GRATUITY_THRESHOLD_MONTHS", defaults.gratuity_threshold_months)),
        air_ticket_costs=(
            {AirTicketSegment(k.upper()): Decimal(str(v)) for k, v in costs.items()} if costs else defaults.air_ticket_costs
        ),
    )


def _currencies(settings: Any) -> Mapping[str, CurrencyConfig]:
    raw = getattr(settings, "CURRENCY_CONFIG", None)
    if not raw:
        return DEFAULT_CURRENCIES
    merged = dict(DEFAULT_CURRENCIES)
    for country, cfg in raw.items():
        merged[country.upper()] = CurrencyConfig(
            code=cfg["code"],
            symbol=cfg.get("symbol", cfg["code"]),
            decimals=int(cfg.get("decimals", 2)),
            grouping=cfg.get("grouping", "western"),
        )
    return merged


def build_container(*, db_config: dict, settings: Optional[Any] = None) -> Container:
    conn = connection_from_settings(db_config)

    employees_repo = MySQLEmployeeRepository(conn)
    compensation_repo = MySQLCompensationRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)
    payroll_repo = MySQLPayrollRepository(conn)

    registry = build_default_registry(uae_rules=_uae_rules(settings))
    calculator = CompensationCalculator(registry)
    attendance_reducer = AttendanceHoursReducer()
    payroll_run_service = PayrollRunService(
        calculator,
        employees=employees_repo,
        compensation=compensation_repo,
        attendance=attendance_repo,
        payroll=payroll_repo,
        reducer=attendance_reducer,
        max_workers=int(getattr(settings, "PAYROLL_MAX_WORKERS", DEFAULT_PAYROLL_MAX_WORKERS)),
    )

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        compensation_repo=compensation_repo,
        attendance_repo=attendance_repo,
        payroll_repo=payroll_repo,
        registry=registry,
        calculator=calculator,
        attendance_reducer=attendance_reducer,
        payroll_run_service=payroll_run_service,
        currencies=_currencies(settings),
    )
