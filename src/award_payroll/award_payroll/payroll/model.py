from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from datetime import date
from decimal import Decimal
from typing import Any, Optional

from ..common.money import ZERO, round2
from ..core.enums import AnomalyType, PayCategory, Severity


@dataclass(frozen=True)
class HoursBreakdown:
    """Hours of one shift (or a fold of many) split into award categories.

    Buckets are mutually exclusive: their sum equals `total_hours`.
    """

    base_hours: Decimal = ZERO
    afternoon_shift_hours: Decimal = ZERO
    night_shift_hours: Decimal = ZERO
    saturday_hours: Decimal = ZERO
    sunday_hours: Decimal = ZERO
    public_holiday_hours: Decimal = ZERO
    overtime_first_2h: Decimal = ZERO
    overtime_after_2h: Decimal = ZERO
    total_hours: Decimal = ZERO

    @classmethod
    def zero(cls) -> "HoursBreakdown":
        return cls()

    def __add__(self, other: "HoursBreakdown") -> "HoursBreakdown":
        if not isinstance(other, HoursBreakdown):
            return NotImplemented
        return HoursBreakdown(**{f.name: getattr(self, f.name) + getattr(other, f.name) for f in fields(self)})

    def hours_for(self, category: PayCategory) -> Decimal:
        return getattr(self, HOURS_FIELD_BY_CATEGORY[category])

    def bucket_sum(self) -> Decimal:
        return sum((self.hours_for(c) for c in PayCategory), ZERO)

    def rounded(self) -> "HoursBreakdown":
        return HoursBreakdown(**{f.name: round2(getattr(self, f.name)) for f in fields(self)})


HOURS_FIELD_BY_CATEGORY = {
    PayCategory.BASE: "base_hours",
    PayCategory.AFTERNOON: "afternoon_shift_hours",
    PayCategory.NIGHT: "night_shift_hours",
    PayCategory.SATURDAY: "saturday_hours",
    PayCategory.SUNDAY: "sunday_hours",
    PayCategory.PUBLIC_HOLIDAY: "public_holiday_hours",
    PayCategory.OVERTIME_FIRST_2H: "overtime_first_2h",
    PayCategory.OVERTIME_AFTER_2H: "overtime_after_2h",
}


@dataclass(frozen=True)
class EarningsBreakdown:
    """Dollar amounts per pay category. Derived, never persisted."""

    base: Decimal = ZERO
    afternoon: Decimal = ZERO
    night: Decimal = ZERO
    saturday: Decimal = ZERO
    sunday: Decimal = ZERO
    public_holiday: Decimal = ZERO
    overtime_first_2h: Decimal = ZERO
    overtime_after_2h: Decimal = ZERO

    @classmethod
    def zero(cls) -> "EarningsBreakdown":
        return cls()

    @classmethod
    def from_categories(cls, amounts: dict[PayCategory, Decimal]) -> "EarningsBreakdown":
        return cls(**{c.value: amounts.get(c, ZERO) for c in PayCategory})

    def __add__(self, other: "EarningsBreakdown") -> "EarningsBreakdown":
        if not isinstance(other, EarningsBreakdown):
            return NotImplemented
        return EarningsBreakdown(**{f.name: getattr(self, f.name) + getattr(other, f.name) for f in fields(self)})

    def amount_for(self, category: PayCategory) -> Decimal:
        return getattr(self, category.value)

    def total(self) -> Decimal:
        return sum((self.amount_for(c) for c in PayCategory), ZERO)

    def rounded(self) -> "EarningsBreakdown":
        return EarningsBreakdown(**{f.name: round2(getattr(self, f.name)) for f in fields(self)})


@dataclass(frozen=True)
class Anomaly:
    """Advisory policy-violation flag. Never raised, never blocks pay."""

    type: AnomalyType
    description: str
    severity: Severity
    employee_id: Any = None
    employee_name: Optional[str] = None
    shift_ids: tuple = ()

    def for_employee(self, employee_id: Any, employee_name: Optional[str]) -> "Anomaly":
        return replace(self, employee_id=employee_id, employee_name=employee_name)


@dataclass(frozen=True)
class PayrollEmployeeResult:
    """One employee's figures for the period.

    `hours_worked`, `gross_pay`, `tax` and `superannuation` are rounded to 2 dp.
    `breakdown` and `hours_breakdown` keep full precision so their sums stay
    within 0.01 of the headline figures; `export.summary_to_dict` and the
    tabular exports round them to 2 dp on the way out.
    """

    employee_id: Any
    name: str
    email: str
    hours_worked: Decimal
    gross_pay: Decimal
    tax: Decimal
    superannuation: Decimal
    breakdown: EarningsBreakdown
    hours_breakdown: HoursBreakdown
    anomalies: tuple[Anomaly, ...] = ()


@dataclass(frozen=True)
class PayrollTotals:
    employee_count: int = 0
    gross_pay: Decimal = ZERO
    hours: Decimal = ZERO
    tax: Decimal = ZERO
    superannuation: Decimal = ZERO

    def add(self, result: PayrollEmployeeResult) -> "PayrollTotals":
        return PayrollTotals(
            employee_count=self.employee_count + 1,
            gross_pay=self.gross_pay + result.gross_pay,
            hours=self.hours + result.hours_worked,
            tax=self.tax + result.tax,
            superannuation=self.superannuation + result.superannuation,
        )

    def rounded(self) -> "PayrollTotals":
        return PayrollTotals(
            employee_count=self.employee_count,
            gross_pay=round2(self.gross_pay),
            hours=round2(self.hours),
            tax=round2(self.tax),
            superannuation=round2(self.superannuation),
        )


@dataclass(frozen=True)
class PayrollSummary:
    """Organization-level rollup for one pay period."""

    organization_id: Any
    period_start: date
    period_end: date
    totals: PayrollTotals
    breakdown: EarningsBreakdown
    employees: tuple[PayrollEmployeeResult, ...] = field(default_factory=tuple)
    anomalies: tuple[Anomaly, ...] = field(default_factory=tuple)
