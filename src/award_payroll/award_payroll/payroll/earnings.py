from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from functools import reduce
from typing import Optional, Sequence

from ..common.money import round2
from ..core.constants import DEFAULT_STANDARD_DAY_HOURS
from ..core.enums import PayCategory
from ..employees.model import Employee
from ..shifts.model import Shift
from .anomalies import check_shift, check_shift_patterns
from .classifier.base import ClassifierConfig
from .classifier.classifier import classify
from .model import EarningsBreakdown, HoursBreakdown, PayrollEmployeeResult
from .rates import RateTable
from .tax import super_guarantee, withholding


@dataclass(frozen=True)
class PayrollConfig:
    standard_day_hours: Decimal = DEFAULT_STANDARD_DAY_HOURS
    claims_tax_free_threshold: bool = True

    @property
    def classifier(self) -> ClassifierConfig:
        return ClassifierConfig(standard_day_hours=self.standard_day_hours)


@dataclass(frozen=True)
class _Accumulator:
    hours: HoursBreakdown
    earnings: EarningsBreakdown

    def combine(self, other: "_Accumulator") -> "_Accumulator":
        return _Accumulator(hours=self.hours + other.hours, earnings=self.earnings + other.earnings)


def shift_earnings(hours: HoursBreakdown, rates: RateTable) -> EarningsBreakdown:
    """Bucket hours x (base rate x category multiplier)."""
    return EarningsBreakdown.from_categories({c: hours.hours_for(c) * rates.hourly_rate(c) for c in PayCategory})


def compute_employee_earnings(
    employee: Employee,
    shifts: Sequence[Shift],
    *,
    config: Optional[PayrollConfig] = None,
) -> PayrollEmployeeResult:
    """Earnings, tax, super and anomalies for one employee's shifts.

    Headline figures are rounded once here; the per-category breakdowns stay
    unrounded until the summary or export boundary.
    """
    config = config or PayrollConfig()
    rates = RateTable.for_employee(employee.employment, employee.base_hourly_rate)
    classifier_config = config.classifier

    per_shift = []
    for shift in shifts:
        hours = classify(shift, classifier_config)
        per_shift.append(_Accumulator(hours=hours, earnings=shift_earnings(hours, rates)))

    empty = _Accumulator(hours=HoursBreakdown.zero(), earnings=EarningsBreakdown.zero())
    totals = reduce(_Accumulator.combine, per_shift, empty)

    gross = totals.earnings.total()
    anomalies = [a for shift in shifts for a in check_shift(shift)]
    anomalies.extend(check_shift_patterns(shifts))

    return PayrollEmployeeResult(
        employee_id=employee.employee_id,
        name=employee.name,
        email=employee.email,
        hours_worked=round2(totals.hours.total_hours),
        gross_pay=round2(gross),
        tax=round2(withholding(gross, config.claims_tax_free_threshold)),
        superannuation=super_guarantee(gross),
        breakdown=totals.earnings,
        hours_breakdown=totals.hours,
        anomalies=tuple(a.for_employee(employee.employee_id, employee.name) for a in anomalies),
    )
