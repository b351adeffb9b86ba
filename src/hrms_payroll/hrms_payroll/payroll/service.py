from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import date
from typing import Callable, Optional, Sequence, TypeVar

from ..attendance.reducer import AttendanceHoursReducer
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import today_local
from ..common.money import ZERO
from ..compensation.repository import CompensationRepository
from ..core.constants import DEFAULT_PAYROLL_MAX_WORKERS
from ..core.enums import PayrollPeriodStatus
from ..core.exceptions import DomainError, PayrollRunError
from ..employees.model import EmployeeProfile
from ..employees.repository import EmployeeRepository
from .calculator.compensation_calculator import CompensationCalculator
from .model import BatchJob, EmployeeOutcome, PayrollPeriod, PayrollRunReport
from .repository import PayrollRepository

log = logging.getLogger(__name__)

T = TypeVar("T")


class PayrollRunService:
    """Runs the calculator for many employees at once.

    Each employee is calculated independently on a worker thread; a failure
    is recorded against that employee and never stops the others.
    """

    def __init__(
        self,
        calculator: CompensationCalculator,
        *,
        employees: Optional[EmployeeRepository] = None,
        compensation: Optional[CompensationRepository] = None,
        attendance: Optional[AttendanceRepository] = None,
        payroll: Optional[PayrollRepository] = None,
        reducer: Optional[AttendanceHoursReducer] = None,
        max_workers: int = DEFAULT_PAYROLL_MAX_WORKERS,
    ):
        self._calculator = calculator
        self._employees = employees
        self._compensation = compensation
        self._attendance = attendance
        self._payroll = payroll
        self._reducer = reducer or AttendanceHoursReducer()
        self._max_workers = max(1, int(max_workers))

    def calculate_batch(self, jobs: Sequence[BatchJob], *, as_of: Optional[date] = None) -> PayrollRunReport:
        """Calculate pre-loaded jobs; outcomes come back in input order."""
        as_of = as_of or today_local()
        outcomes = self._fan_out(jobs, lambda job: job.profile, lambda job: self._calculate(job, as_of))
        return PayrollRunReport(outcomes=tuple(outcomes))

    def run_period(
        self,
        *,
        period_id: int,
        country_code: str,
        employee_ids: Optional[Sequence[int]] = None,
    ) -> PayrollRunReport:
        if self._payroll is None or self._employees is None or self._compensation is None:
            raise PayrollRunError("Payroll run needs employee, compensation and payroll storage")

        country_code = (country_code or "").strip().upper()
        # Unsupported country fails the whole run before anything is written.
        self._calculator.registry.get(country_code)

        period = self._payroll.get_period(int(period_id))
        if period is None:
            raise PayrollRunError(f"Payroll period {period_id} not found")
        if period.status != PayrollPeriodStatus.DRAFT:
            raise PayrollRunError(
                f"Payroll period {period_id} is {period.status.value}; only DRAFT periods can be processed"
            )

        profiles = self._employees.list_active_profiles(country_code=country_code, employee_ids=employee_ids)
        if not profiles:
            raise PayrollRunError(f"No active employees found for {country_code}")

        run_id = self._payroll.create_run(period_id=period.period_id, country_code=country_code, total_employees=len(profiles))
        log.info(
            "Payroll run %s started: period=%s country=%s employees=%d",
            run_id,
            period.period_name,
            country_code,
            len(profiles),
        )

        outcomes = self._fan_out(
            profiles,
            lambda profile: profile,
            lambda profile: self._calculate(self._load_job(profile, period), period.end_date),
        )
        report = PayrollRunReport(
            outcomes=tuple(outcomes),
            country_code=country_code,
            period_id=period.period_id,
            run_id=run_id,
        )

        try:
            for outcome, profile in zip(report.outcomes, profiles):
                if outcome.ok:
                    self._payroll.save_detail(
                        run_id=run_id,
                        period_id=period.period_id,
                        employee_id=int(profile.employee_id),
                        result=outcome.result,
                        overtime_hours=outcome.overtime_hours,
                    )

            self._payroll.complete_run(run_id=run_id, report=report)
        except Exception as exc:
            log.exception("Payroll run %s could not be saved", run_id)
            self._payroll.fail_run(run_id=run_id, error=str(exc) or type(exc).__name__)
            raise

        if report.failed_count:
            log.warning(
                "Payroll run %s finished with %d failure(s) out of %d",
                run_id,
                report.failed_count,
                len(report.outcomes),
            )
        else:
            log.info("Payroll run %s completed: %d employee(s)", run_id, report.processed_count)
        return report

    def _load_job(self, profile: EmployeeProfile, period: PayrollPeriod) -> BatchJob:
        line_items = self._compensation.list_for_employee(int(profile.employee_id))
        records = None
        if self._attendance is not None:
            records = self._attendance.list_for_period(
                employee_id=int(profile.employee_id),
                start_date=period.start_date,
                end_date=period.end_date,
            )
        return BatchJob(profile=profile, line_items=line_items, attendance=records, period_days=period.days)

    def _calculate(self, job: BatchJob, as_of: date) -> EmployeeOutcome:
        summary = None
        if job.attendance:
            summary = self._reducer.reduce(job.attendance, period_days=job.period_days)
        result = self._calculator.calculate(job.profile, job.line_items, as_of, attendance=summary)
        return EmployeeOutcome(
            employee_id=job.profile.employee_id,
            employee_code=job.profile.employee_code,
            result=result,
            overtime_hours=summary.overtime_hours if summary else ZERO,
        )

    def _fan_out(
        self,
        items: Sequence[T],
        profile_of: Callable[[T], EmployeeProfile],
        work: Callable[[T], EmployeeOutcome],
    ) -> list[EmployeeOutcome]:
        def guarded(item: T) -> EmployeeOutcome:
            profile = profile_of(item)
            try:
                return work(item)
            except DomainError as exc:
                log.warning("Payroll failed for employee %s: %s", profile.employee_code or profile.employee_id, exc)
                return EmployeeOutcome(profile.employee_id, profile.employee_code, error=str(exc))
            except Exception as exc:
                log.exception("Unexpected payroll error for employee %s", profile.employee_code or profile.employee_id)
                return EmployeeOutcome(profile.employee_id, profile.employee_code, error=str(exc) or type(exc).__name__)

        if not items:
            return []
        with ThreadPoolExecutor(max_workers=min(self._max_workers, len(items))) as pool:
            return list(pool.map(guarded, items))
