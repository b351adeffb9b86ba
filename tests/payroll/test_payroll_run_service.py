from __future__ import annotations

from datetime import date, time
from decimal import Decimal

import pytest

from conftest import fixed
from fakes import FakeAttendanceRepo, FakeCompensationRepo, FakeEmployeesRepo, FakePayrollRepo, draft_period
from hrms_payroll.attendance.model import DailyAttendance
from hrms_payroll.core.enums import AttendanceStatus, ComponentType, PayrollPeriodStatus, PayrollRunStatus
from hrms_payroll.core.exceptions import PayrollRunError, UnsupportedCountry
from hrms_payroll.employees.model import EmployeeProfile
from hrms_payroll.payroll.calculator.compensation_calculator import CompensationCalculator
from hrms_payroll.payroll.model import BatchJob
from hrms_payroll.payroll.service import PayrollRunService

STANDARD_ITEMS = [fixed("BASIC", 10000), fixed("DA", 2000), fixed("SPECIAL", 3000, ComponentType.ALLOWANCE)]


def _profile(employee_id, country="IND"):
    return EmployeeProfile(
        country_code=country,
        joining_date=date(2022, 1, 1),
        employee_id=employee_id,
        employee_code=f"{country[:2]}{employee_id:03d}",
    )


def _service(profiles=(), items=None, periods=(draft_period(),), attendance=None, max_workers=4):
    payroll = FakePayrollRepo(periods)
    service = PayrollRunService(
        CompensationCalculator(),
        employees=FakeEmployeesRepo(profiles),
        compensation=FakeCompensationRepo(items or {}),
        attendance=attendance or FakeAttendanceRepo(),
        payroll=payroll,
        max_workers=max_workers,
    )
    return service, payroll


def test_batch_failure_does_not_abort_siblings():
    service, _ = _service(max_workers=3)
    jobs = [
        BatchJob(_profile(1), STANDARD_ITEMS),
        BatchJob(_profile(3, "USA"), STANDARD_ITEMS),
        BatchJob(_profile(2, "UAE"), STANDARD_ITEMS),
    ]

    report = service.calculate_batch(jobs, as_of=date(2024, 6, 30))

    assert [o.employee_id for o in report.outcomes] == [1, 3, 2]
    assert report.processed_count == 2
    assert report.failed_count == 1
    assert report.status == PayrollRunStatus.COMPLETED_WITH_ERRORS
    assert report.errors == [{"employeeId": 3, "employeeCode": "US003", "error": "Unsupported country code: USA"}]
    assert report.totals["gross"] == Decimal("30000")


def test_batch_without_failures_is_completed():
    service, _ = _service(max_workers=1)
    jobs = [BatchJob(_profile(i), STANDARD_ITEMS) for i in range(1, 6)]

    report = service.calculate_batch(jobs, as_of=date(2024, 6, 30))

    assert report.status == PayrollRunStatus.COMPLETED
    assert report.processed_count == 5
    assert report.totals["employeeDeductions"] == Decimal("1553") * 5


def test_empty_batch():
    service, _ = _service()

    report = service.calculate_batch([], as_of=date(2024, 6, 30))

    assert report.outcomes == ()
    assert report.status == PayrollRunStatus.COMPLETED


def test_run_period_persists_each_employee_and_the_run():
    attendance = FakeAttendanceRepo(
        {
            2: [
                DailyAttendance(date(2024, 6, 3), AttendanceStatus.PRESENT, time(9), time(17), time(9), time(19)),
                DailyAttendance(date(2024, 6, 4), AttendanceStatus.ABSENT),
            ]
        }
    )
    service, payroll = _service(
        profiles=[_profile(1), _profile(2), _profile(9, "UAE")],
        items={1: STANDARD_ITEMS, 2: [fixed("BASIC", 10400)]},
        attendance=attendance,
    )

    report = service.run_period(period_id=1, country_code="ind")

    assert report.run_id == 1
    assert report.country_code == "IND"
    assert report.status == PayrollRunStatus.COMPLETED
    assert payroll.runs[1] == {"period_id": 1, "country_code": "IND", "total": 2}
    assert set(payroll.details) == {(1, 1), (1, 2)}
    assert payroll.completed[1] is report
    assert (1, date(2024, 6, 1), date(2024, 6, 30)) in attendance.calls

    # employee 2: 29 of 30 days payable, 2h overtime at 50/h x2.0
    run_id, result, overtime_hours = payroll.details[(1, 2)]
    assert overtime_hours == Decimal("2.00")
    assert result.earnings.basic == Decimal("10053.33")
    assert result.earnings.overtime == Decimal("200")


def test_run_period_records_load_errors_per_employee():
    service, payroll = _service(profiles=[_profile(1), _profile(2)], items={1: STANDARD_ITEMS})

    report = service.run_period(period_id=1, country_code="IND")

    assert report.processed_count == 1
    assert report.failed_count == 1
    assert "connection lost" in report.errors[0]["error"]
    assert set(payroll.details) == {(1, 1)}
    assert payroll.completed[1].status == PayrollRunStatus.COMPLETED_WITH_ERRORS


def test_run_period_narrows_to_requested_employees():
    service, payroll = _service(profiles=[_profile(1), _profile(2)], items={1: STANDARD_ITEMS, 2: STANDARD_ITEMS})

    report = service.run_period(period_id=1, country_code="IND", employee_ids=[2])

    assert [o.employee_id for o in report.outcomes] == [2]


@pytest.mark.parametrize(
    "periods, message",
    [
        ((), "not found"),
        ((draft_period(status=PayrollPeriodStatus.PROCESSED),), "only DRAFT"),
    ],
)
def test_run_period_requires_a_draft_period(periods, message):
    service, payroll = _service(profiles=[_profile(1)], items={1: STANDARD_ITEMS}, periods=periods)

    with pytest.raises(PayrollRunError, match=message):
        service.run_period(period_id=1, country_code="IND")
    assert payroll.runs == {}


def test_run_period_rejects_unsupported_country_up_front():
    service, payroll = _service(profiles=[_profile(1, "KSA")])

    with pytest.raises(UnsupportedCountry):
        service.run_period(period_id=1, country_code="KSA")
    assert payroll.runs == {}


def test_run_period_without_employees():
    service, _ = _service(profiles=[])

    with pytest.raises(PayrollRunError, match="No active employees"):
        service.run_period(period_id=1, country_code="UAE")


def test_single_absence_prorates_over_the_whole_period():
    attendance = FakeAttendanceRepo({1: [DailyAttendance(date(2024, 6, 10), AttendanceStatus.ABSENT)]})
    service, payroll = _service(profiles=[_profile(1)], items={1: [fixed("BASIC", 30000)]}, attendance=attendance)

    report = service.run_period(period_id=1, country_code="IND")

    assert report.outcomes[0].result.earnings.gross == Decimal("29000")
    assert report.totals["gross"] == Decimal("29000")


class BrokenDetailsRepo(FakePayrollRepo):
    def save_detail(self, **kwargs):
        raise RuntimeError("db went away")


def test_run_is_marked_failed_when_saving_details_breaks():
    payroll = BrokenDetailsRepo([draft_period()])
    service = PayrollRunService(
        CompensationCalculator(),
        employees=FakeEmployeesRepo([_profile(1)]),
        compensation=FakeCompensationRepo({1: STANDARD_ITEMS}),
        payroll=payroll,
    )

    with pytest.raises(RuntimeError, match="db went away"):
        service.run_period(period_id=1, country_code="IND")

    assert payroll.failed == {1: "db went away"}
    assert payroll.completed == {}
