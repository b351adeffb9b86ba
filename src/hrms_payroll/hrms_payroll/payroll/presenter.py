from __future__ import annotations

from decimal import Decimal
from typing import Any, Mapping, Optional

from ..currency.formatting import CurrencyConfig, currency_for, format_amount
from .calculator.result import CalculationResult
from .model import PayrollRunReport


def _num(value: Decimal) -> float:
    return float(value)


def result_to_json(result: CalculationResult, currency: CurrencyConfig) -> dict[str, Any]:
    """CalculationResult -> JSON body in the shape the HR screens expect."""
    e, d, c, t = result.earnings, result.deductions, result.employer_costs, result.totals

    return {
        "countryCode": result.country_code,
        "asOfDate": result.as_of.isoformat(),
        "currency": {"code": currency.code, "symbol": currency.symbol, "decimals": currency.decimals},
        "earnings": {
            "gross": _num(e.gross),
            "basic": _num(e.basic),
            "allowances": _num(e.allowances),
            "overtime": _num(e.overtime),
            "components": [
                {
                    "componentCode": rc.component_code,
                    "componentType": rc.component_type.value,
                    "amount": _num(rc.amount),
                    "isPercentage": rc.is_percentage,
                    "basisComponentCode": rc.basis_component_code,
                }
                for rc in e.components
            ],
        },
        "deductions": {
            "statutory": {
                name: {"employee": _num(v["employee"]), "employer": _num(v["employer"])}
                for name, v in d.statutory.items()
            },
            "fixed": _num(d.fixed),
            "employee": _num(d.employee),
            "net": _num(d.net),
        },
        "employerCosts": {
            "statutory": _num(c.statutory),
            "gratuity": _num(c.gratuity),
            "airTicket": _num(c.air_ticket),
            "total": _num(c.total),
        },
        "totals": {
            "monthlyCTC": _num(t.monthly_ctc),
            "annualCTC": _num(t.annual_ctc),
        },
        "service": {
            "months": result.service_months,
            "years": result.service_months // 12,
        },
        "warnings": [{"code": w.code, "componentCode": w.component_code, "message": w.message} for w in result.warnings],
        "formatted": {
            "gross": format_amount(e.gross, currency),
            "net": format_amount(d.net, currency),
            "monthlyCTC": format_amount(t.monthly_ctc, currency),
            "annualCTC": format_amount(t.annual_ctc, currency),
        },
    }


def report_to_json(report: PayrollRunReport, currencies: Optional[Mapping[str, CurrencyConfig]] = None) -> dict[str, Any]:
    results = []
    for outcome in report.succeeded:
        currency = currency_for(outcome.result.country_code, currencies)
        body = result_to_json(outcome.result, currency)
        body["employeeId"] = outcome.employee_id
        body["employeeCode"] = outcome.employee_code
        results.append(body)

    return {
        "runId": report.run_id,
        "periodId": report.period_id,
        "countryCode": report.country_code,
        "status": report.status.value,
        "processedCount": report.processed_count,
        "failedCount": report.failed_count,
        "errors": report.errors,
        "totals": {name: _num(value) for name, value in report.totals.items()},
        "results": results,
    }


def settlement_to_json(
    *,
    country_code: str,
    service_months: int,
    termination_type: str,
    gratuity: Decimal,
    currency: CurrencyConfig,
) -> dict[str, Any]:
    return {
        "countryCode": country_code,
        "serviceMonths": service_months,
        "terminationType": termination_type,
        "gratuity": _num(gratuity),
        "formatted": {"gratuity": format_amount(gratuity, currency)},
    }
