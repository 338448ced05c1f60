from __future__ import annotations

import io
from dataclasses import fields
from decimal import Decimal
from typing import Any

import pandas as pd

from ..common.money import round2
from .model import Anomaly, EarningsBreakdown, HoursBreakdown, PayrollEmployeeResult, PayrollSummary

EXPORT_COLUMNS = ["Employee", "Email", "Hours", "Gross Pay", "Tax", "Super"]


def _money(value: Decimal) -> float:
    return float(round2(value))


def _buckets(value: EarningsBreakdown | HoursBreakdown) -> dict[str, float]:
    return {f.name: _money(getattr(value, f.name)) for f in fields(value)}


def _anomaly_to_dict(a: Anomaly) -> dict[str, Any]:
    return {
        "type": a.type.value,
        "description": a.description,
        "severity": a.severity.value,
        "employee_id": a.employee_id,
        "employee_name": a.employee_name,
        "shift_ids": list(a.shift_ids),
    }


def _employee_to_dict(r: PayrollEmployeeResult) -> dict[str, Any]:
    return {
        "employee_id": r.employee_id,
        "name": r.name,
        "email": r.email,
        "hours_worked": _money(r.hours_worked),
        "gross_pay": _money(r.gross_pay),
        "tax": _money(r.tax),
        "super": _money(r.superannuation),
        "breakdown": _buckets(r.breakdown),
        "hours_breakdown": _buckets(r.hours_breakdown),
        "anomalies": [_anomaly_to_dict(a) for a in r.anomalies],
    }


def summary_to_dict(summary: PayrollSummary) -> dict[str, Any]:
    """JSON-safe structured document for API responses."""
    t = summary.totals
    return {
        "organization_id": summary.organization_id,
        "summary": {
            "total_employees": t.employee_count,
            "total_gross_pay": _money(t.gross_pay),
            "total_hours": _money(t.hours),
            "total_tax": _money(t.tax),
            "total_super": _money(t.superannuation),
            "period_start": summary.period_start.isoformat(),
            "period_end": summary.period_end.isoformat(),
        },
        "breakdown": _buckets(summary.breakdown),
        "employees": [_employee_to_dict(r) for r in summary.employees],
        "anomalies": [_anomaly_to_dict(a) for a in summary.anomalies],
    }


def summary_to_dataframe(summary: PayrollSummary) -> pd.DataFrame:
    """One row per employee, in summary order."""
    rows = [
        {
            "Employee": r.name,
            "Email": r.email,
            "Hours": _money(r.hours_worked),
            "Gross Pay": _money(r.gross_pay),
            "Tax": _money(r.tax),
            "Super": _money(r.superannuation),
        }
        for r in summary.employees
    ]
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def summary_to_csv(summary: PayrollSummary) -> bytes:
    out = io.StringIO()
    summary_to_dataframe(summary).to_csv(out, index=False)
    return out.getvalue().encode("utf-8-sig")


def summary_to_xlsx(summary: PayrollSummary) -> bytes:
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        summary_to_dataframe(summary).to_excel(writer, index=False, sheet_name="Payroll")
    return output.getvalue()
