from __future__ import annotations

from datetime import date

import pytest

from conftest import fixed
from fakes import FakeAttendanceRepo, FakeCompensationRepo, FakeEmployeesRepo, FakePayrollRepo, draft_period
from hrms_payroll.attendance.reducer import AttendanceHoursReducer
from hrms_payroll.container import Container
from hrms_payroll.currency.formatting import DEFAULT_CURRENCIES
from hrms_payroll.employees.model import EmployeeProfile
from hrms_payroll.main import create_app
from hrms_payroll.payroll.calculator.compensation_calculator import CompensationCalculator
from hrms_payroll.payroll.service import PayrollRunService
from hrms_payroll.statutory.registry import build_default_registry

INDIA_BODY = {
    "employeeData": {"countryCode": "IND", "employeeType": "LOCAL", "joiningDate": "2020-01-01"},
    "compensationComponents": [
        {"componentCode": "BASIC", "componentType": "EARNING", "amount": 10000},
        {"componentCode": "DA", "componentType": "EARNING", "amount": 2000},
        {"componentCode": "SPECIAL", "componentType": "ALLOWANCE", "amount": 3000},
    ],
    "asOfDate": "2024-06-30",
}


@pytest.fixture
def payroll_repo():
    return FakePayrollRepo([draft_period()])


@pytest.fixture
def client(monkeypatch, payroll_repo):
    monkeypatch.setenv("APP_ENV", "testing")

    registry = build_default_registry()
    calculator = CompensationCalculator(registry)
    reducer = AttendanceHoursReducer()
    employees = FakeEmployeesRepo(
        [EmployeeProfile(country_code="UAE", joining_date=date(2021, 1, 1), employee_id=5, employee_code="AE005")]
    )
    compensation = FakeCompensationRepo({5: [fixed("BASIC", 9000)]})
    attendance = FakeAttendanceRepo()

    container = Container(
        conn=None,
        employees_repo=employees,
        compensation_repo=compensation,
        attendance_repo=attendance,
        payroll_repo=payroll_repo,
        registry=registry,
        calculator=calculator,
        attendance_reducer=reducer,
        payroll_run_service=PayrollRunService(
            calculator,
            employees=employees,
            compensation=compensation,
            attendance=attendance,
            payroll=payroll_repo,
            reducer=reducer,
            max_workers=1,
        ),
        currencies=DEFAULT_CURRENCIES,
    )
    app = create_app(container)
    return app.test_client()


def test_ctc_endpoint_returns_breakdown(client):
    resp = client.post("/api/payroll/ctc", json=INDIA_BODY)
    body = resp.get_json()

    assert resp.status_code == 200
    assert body["success"] is True
    data = body["data"]
    assert data["currency"] == {"code": "INR", "symbol": "₹", "decimals": 2}
    assert data["earnings"]["gross"] == 15000
    assert data["deductions"]["employee"] == 1553
    assert data["deductions"]["statutory"]["ESI"] == {"employee": 113, "employer": 488}
    assert data["employerCosts"]["gratuity"] == 481
    assert data["totals"]["monthlyCTC"] == 17529
    assert data["formatted"]["gross"] == "₹15,000.00"
    assert data["service"] == {"months": 53, "years": 4}


def test_ctc_accepts_legacy_compensation_data_key(client):
    body = dict(INDIA_BODY)
    body["compensationData"] = body.pop("compensationComponents")

    resp = client.post("/api/payroll/ctc", json=body)

    assert resp.status_code == 200
    assert resp.get_json()["data"]["earnings"]["gross"] == 15000


def test_ctc_with_attendance_records(client):
    body = dict(INDIA_BODY)
    body["attendanceRecords"] = [
        {"workDate": "2024-06-03", "status": "PRESENT"},
        {"workDate": "2024-06-04", "status": "ABSENT"},
    ]

    resp = client.post("/api/payroll/ctc", json=body)

    assert resp.status_code == 200
    assert resp.get_json()["data"]["earnings"]["basic"] == 9666.67


def test_ctc_attendance_with_explicit_period_length(client):
    body = dict(INDIA_BODY)
    body["periodDays"] = 2
    body["attendanceRecords"] = [
        {"workDate": "2024-06-03", "status": "PRESENT"},
        {"workDate": "2024-06-04", "status": "ABSENT"},
    ]

    resp = client.post("/api/payroll/ctc", json=body)

    assert resp.get_json()["data"]["earnings"]["basic"] == 5000


@pytest.mark.parametrize(
    "body, message",
    [
        ({**INDIA_BODY, "employeeData": {"countryCode": "USA"}}, "Unsupported country code: USA"),
        ({"employeeData": {"countryCode": "IND"}}, "Compensation data array is required"),
        ({"compensationComponents": []}, "Employee data with country code is required"),
        (
            {**INDIA_BODY, "compensationComponents": [{"componentCode": "BASIC", "componentType": "EARNING", "amount": "NaN"}]},
            "amount must be a finite number",
        ),
    ],
)
def test_ctc_validation_errors_are_400(client, body, message):
    resp = client.post("/api/payroll/ctc", json=body)

    assert resp.status_code == 400
    assert resp.get_json() == {"success": False, "message": message}


def test_non_json_body_is_400(client):
    resp = client.post("/api/payroll/ctc", data="not json", content_type="text/plain")

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_countries_endpoint(client):
    resp = client.get("/api/payroll/countries")
    data = resp.get_json()["data"]

    assert {c["code"] for c in data} == {"IND", "UAE"}
    uae = next(c for c in data if c["code"] == "UAE")
    assert uae["currency"]["code"] == "AED"
    assert uae["capabilities"]["airTicket"] is True


def test_run_endpoint_processes_period(client, payroll_repo):
    resp = client.post("/api/payroll/runs", json={"periodId": 1, "countryCode": "UAE"})
    body = resp.get_json()

    assert resp.status_code == 200
    assert body["data"]["status"] == "COMPLETED"
    assert body["data"]["processedCount"] == 1
    assert body["data"]["results"][0]["employeeCode"] == "AE005"
    assert (1, 5) in payroll_repo.details


def test_run_endpoint_rejects_unknown_period(client):
    resp = client.post("/api/payroll/runs", json={"periodId": 42, "countryCode": "UAE"})

    assert resp.status_code == 400
    assert "not found" in resp.get_json()["message"]


def test_run_endpoint_requires_period_id(client):
    resp = client.post("/api/payroll/runs", json={"countryCode": "UAE"})

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "periodId is required"


def test_shift_hours_endpoint(client):
    resp = client.post("/api/shifts/hours", json={"startTime": "22:00", "endTime": "06:00"})

    assert resp.get_json()["data"] == {"shiftHours": 8.0, "breakHours": 0.0}


def test_shift_hours_break_too_long(client):
    resp = client.post(
        "/api/shifts/hours",
        json={"startTime": "09:00", "endTime": "10:00", "breakStartTime": "10:00", "breakEndTime": "12:00"},
    )

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Break hours cannot exceed total shift hours"


@pytest.mark.parametrize(
    "termination_type, expected",
    [("RESIGNATION", 6300), ("TERMINATION", 18900), ("TERMINATION_FOR_CAUSE", 0)],
)
def test_end_of_service_endpoint(client, termination_type, expected):
    resp = client.post(
        "/api/payroll/end-of-service",
        json={
            "countryCode": "uae",
            "basicSalary": 9000,
            "joiningDate": "2021-01-01",
            "lastWorkingDate": "2024-01-15",
            "terminationType": termination_type,
        },
    )
    data = resp.get_json()["data"]

    assert resp.status_code == 200
    assert data["serviceMonths"] == 36
    assert data["gratuity"] == expected
    assert data["formatted"]["gratuity"].startswith("AED")


@pytest.mark.parametrize(
    "body, message",
    [
        ({"countryCode": "IND", "basicSalary": 9000, "joiningDate": "2021-01-01"}, "not available for IND"),
        ({"countryCode": "UAE", "basicSalary": 9000}, "joiningDate is required"),
        ({"countryCode": "UAE", "basicSalary": 0, "joiningDate": "2021-01-01"}, "basicSalary"),
        (
            {"countryCode": "UAE", "basicSalary": 9000, "joiningDate": "2024-01-01", "lastWorkingDate": "2023-01-01"},
            "before joiningDate",
        ),
    ],
)
def test_end_of_service_validation(client, body, message):
    resp = client.post("/api/payroll/end-of-service", json=body)

    assert resp.status_code == 400
    assert message in resp.get_json()["message"]
