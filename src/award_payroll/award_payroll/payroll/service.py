from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date
from functools import reduce
from typing import Any, Optional, Sequence

from ..core.exceptions import DataSourceError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..shifts.model import Shift
from ..shifts.repository import ShiftRepository
from .earnings import PayrollConfig, compute_employee_earnings
from .model import EarningsBreakdown, PayrollSummary, PayrollTotals

logger = logging.getLogger(__name__)


def _email_key(email: Optional[str]) -> str:
    return (email or "").strip().lower()


class PayrollService:
    """Builds the organization payroll summary for a date range.

    Stateless apart from its collaborators: every call loads fresh records and
    returns a new summary, so identical inputs give identical output.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        shifts: ShiftRepository,
        *,
        config: Optional[PayrollConfig] = None,
    ):
        self._employees = employees
        self._shifts = shifts
        self._config = config or PayrollConfig()

    def summarize(self, organization_id: Any, start_date: date, end_date: date) -> PayrollSummary:
        logger.info("Building payroll summary org=%s period=%s..%s", organization_id, start_date, end_date)

        employees = self._load_employees(organization_id)
        shifts = self._load_shifts(organization_id, start_date, end_date)

        shifts_by_email: dict[str, list[Shift]] = defaultdict(list)
        for shift in shifts:
            shifts_by_email[_email_key(shift.employee_email)].append(shift)

        results = [
            compute_employee_earnings(emp, shifts_by_email.get(_email_key(emp.email), []), config=self._config)
            for emp in employees
        ]

        totals = reduce(PayrollTotals.add, results, PayrollTotals())
        breakdown = reduce(lambda acc, r: acc + r.breakdown, results, EarningsBreakdown.zero())
        anomalies = tuple(a for r in results for a in r.anomalies)

        if anomalies:
            logger.debug("Payroll summary org=%s flagged %d anomalies", organization_id, len(anomalies))
        logger.info(
            "Payroll summary org=%s employees=%d shifts=%d gross=%s",
            organization_id,
            totals.employee_count,
            len(shifts),
            totals.rounded().gross_pay,
        )

        return PayrollSummary(
            organization_id=organization_id,
            period_start=start_date,
            period_end=end_date,
            totals=totals.rounded(),
            breakdown=breakdown.rounded(),
            employees=tuple(results),
            anomalies=anomalies,
        )

    def _load_employees(self, organization_id: Any) -> Sequence[Employee]:
        try:
            return list(self._employees.list_active_for_organization(organization_id))
        except Exception as e:
            logger.exception("Failed to load employees for org=%s", organization_id)
            raise DataSourceError("Could not load employees") from e

    def _load_shifts(self, organization_id: Any, start_date: date, end_date: date) -> Sequence[Shift]:
        try:
            return list(
                self._shifts.list_worked(organization_id=organization_id, start_date=start_date, end_date=end_date)
            )
        except Exception as e:
            logger.exception("Failed to load shifts for org=%s", organization_id)
            raise DataSourceError("Could not load worked shifts") from e
