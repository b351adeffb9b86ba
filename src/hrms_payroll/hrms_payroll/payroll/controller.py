from __future__ import annotations

from flask import Flask

from ..attendance.payload import parse_attendance_records
from ..common.api import json_body, json_errors, ok
from ..common.datetime_utils import parse_optional_date, service_months, today_local
from ..common.money import to_decimal
from ..common.validators import require_enum, require_int_range, require_non_empty
from ..compensation.payload import parse_line_items, parse_profile
from ..container import Container
from ..core.enums import TerminationType
from ..core.exceptions import ValidationError
from ..currency.formatting import currency_for
from ..statutory.uae import UAERuleEvaluator
from .presenter import report_to_json, result_to_json, settlement_to_json


def _int_list(value, field_name: str):
    if value in (None, ""):
        return None
    if not isinstance(value, (list, tuple)):
        raise ValidationError(f"{field_name} must be an array")
    try:
        return [int(v) for v in value]
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must contain integers") from None


def register(app: Flask, container: Container) -> None:
    @app.route("/api/payroll/ctc", methods=["POST"], endpoint="payroll_calculate_ctc")
    @json_errors
    def calculate_ctc():
        body = json_body()
        profile = parse_profile(body.get("employeeData"))
        raw_items = body.get("compensationComponents")
        if raw_items is None:
            raw_items = body.get("compensationData")
        line_items = parse_line_items(raw_items)
        as_of = parse_optional_date(body.get("asOfDate"), "asOfDate") or today_local()

        summary = None
        if body.get("attendanceRecords") is not None:
            records = parse_attendance_records(body["attendanceRecords"])
            period_days = None
            if body.get("periodDays") not in (None, ""):
                period_days = require_int_range(body["periodDays"], "periodDays", 1, 31)
            summary = container.attendance_reducer.reduce(records, period_days=period_days)

        result = container.calculator.calculate(profile, line_items, as_of, attendance=summary)
        currency = currency_for(result.country_code, container.currencies)
        return ok(result_to_json(result, currency), "CTC calculated successfully")

    @app.route("/api/payroll/runs", methods=["POST"], endpoint="payroll_run_period")
    @json_errors
    def run_period():
        body = json_body()
        try:
            period_id = int(body.get("periodId"))
        except (TypeError, ValueError):
            raise ValidationError("periodId is required") from None
        country_code = require_non_empty(body.get("countryCode"), "countryCode")

        report = container.payroll_run_service.run_period(
            period_id=period_id,
            country_code=country_code,
            employee_ids=_int_list(body.get("employeeIds"), "employeeIds"),
        )
        message = f"Processed {report.processed_count} employee(s), {report.failed_count} failed"
        return ok(report_to_json(report, container.currencies), message)

    @app.route("/api/payroll/countries", methods=["GET"], endpoint="payroll_countries")
    @json_errors
    def countries():
        data = []
        for entry in container.registry.supported_countries():
            currency = currency_for(entry["code"], container.currencies)
            data.append({**entry, "currency": {"code": currency.code, "symbol": currency.symbol, "decimals": currency.decimals}})
        return ok(data)

    @app.route("/api/payroll/end-of-service", methods=["POST"], endpoint="payroll_end_of_service")
    @json_errors
    def end_of_service():
        body = json_body()
        country_code = require_non_empty(body.get("countryCode"), "countryCode").upper()
        evaluator = container.registry.get(country_code)
        if not isinstance(evaluator, UAERuleEvaluator):
            raise ValidationError(f"End-of-service settlement is not available for {country_code}")

        basic = to_decimal(body.get("basicSalary"), "basicSalary")
        if basic <= 0:
            raise ValidationError("basicSalary must be greater than 0")
        joining_date = parse_optional_date(body.get("joiningDate"), "joiningDate")
        if joining_date is None:
            raise ValidationError("joiningDate is required")
        last_day = parse_optional_date(body.get("lastWorkingDate"), "lastWorkingDate") or today_local()
        if last_day < joining_date:
            raise ValidationError("lastWorkingDate cannot be before joiningDate")
        termination_type = TerminationType.RESIGNATION
        if body.get("terminationType") not in (None, ""):
            termination_type = require_enum(body["terminationType"], TerminationType, "terminationType")

        months = service_months(joining_date, last_day)
        gratuity = evaluator.end_of_service_gratuity(basic, months, termination_type)
        data = settlement_to_json(
            country_code=evaluator.country_code,
            service_months=months,
            termination_type=termination_type.value,
            gratuity=gratuity,
            currency=currency_for(evaluator.country_code, container.currencies),
        )
        return ok(data, "End-of-service gratuity calculated")
