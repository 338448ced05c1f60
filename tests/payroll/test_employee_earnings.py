from datetime import date
from decimal import Decimal

import pytest

from src.award_payroll.award_payroll.core.enums import AnomalyType, EmploymentType, PayCategory
from src.award_payroll.award_payroll.payroll.earnings import PayrollConfig, compute_employee_earnings
from src.award_payroll.award_payroll.payroll.rates import RateTable

MONDAY = date(2025, 3, 3)
SATURDAY = date(2025, 3, 8)
SUNDAY = date(2025, 3, 9)


@pytest.mark.parametrize(
    "day,start,end,ph,permanent,casual",
    [
        (MONDAY, "09:00", "17:00", False, "240.00", "300.00"),
        (MONDAY, "14:00", "22:00", False, "270.00", "330.00"),
        (MONDAY, "22:00", "06:00", False, "276.00", "336.00"),
        (SATURDAY, "09:00", "17:00", False, "360.00", "420.00"),
        (SUNDAY, "09:00", "17:00", False, "480.00", "540.00"),
        (MONDAY, "09:00", "17:00", True, "600.00", "660.00"),
    ],
)
def test_single_shift_gross_at_thirty_dollars(make_shift, make_employee, day, start, end, ph, permanent, casual):
    shift = make_shift(day, start, end, is_public_holiday=ph)

    perm = compute_employee_earnings(make_employee("Permanent"), [shift])
    cas = compute_employee_earnings(make_employee("Casual"), [shift])

    assert perm.gross_pay == Decimal(permanent)
    assert cas.gross_pay == Decimal(casual)
    assert perm.hours_worked == Decimal("8.00")


def test_casual_loading_does_not_stack_on_overtime(make_shift, make_employee):
    shift = make_shift(MONDAY, "07:00", "19:00")

    perm = compute_employee_earnings(make_employee("Permanent"), [shift])
    cas = compute_employee_earnings(make_employee("casual"), [shift])

    # 8 x 30 + 2 x 45 + 2 x 60
    assert perm.gross_pay == Decimal("450.00")
    # 8 x 37.50 + 2 x 45 + 2 x 60
    assert cas.gross_pay == Decimal("510.00")
    assert cas.breakdown.overtime_first_2h == perm.breakdown.overtime_first_2h == Decimal("90")
    assert cas.breakdown.overtime_after_2h == perm.breakdown.overtime_after_2h == Decimal("120")


def test_tax_and_super_for_overtime_shift(make_shift, make_employee):
    result = compute_employee_earnings(make_employee(), [make_shift(MONDAY, "07:00", "19:00")])

    # (450 x 52 - 18200) x 0.19 / 52 = 19
    assert result.tax == Decimal("19.00")
    # 11.5% of gross, overtime included
    assert result.superannuation == Decimal("51.75")


def test_public_holiday_tax_rounds_half_up(make_shift, make_employee):
    result = compute_employee_earnings(make_employee(), [make_shift(MONDAY, "09:00", "17:00", is_public_holiday=True)])

    # (600 x 52 - 18200) x 0.19 / 52 = 47.5
    assert result.tax == Decimal("48.00")


def test_no_threshold_config_uses_flat_rate(make_shift, make_employee):
    config = PayrollConfig(claims_tax_free_threshold=False)
    result = compute_employee_earnings(make_employee(), [make_shift(MONDAY, "09:00", "17:00")], config=config)

    assert result.tax == Decimal("78.00")


@pytest.mark.parametrize("pay_rate", [None, "", "abc", "-5", True])
def test_missing_or_bad_pay_rate_earns_zero(make_shift, make_employee, pay_rate):
    result = compute_employee_earnings(make_employee(pay_rate=pay_rate), [make_shift(MONDAY, "09:00", "17:00")])

    assert result.gross_pay == 0
    assert result.tax == 0
    assert result.superannuation == 0
    assert result.hours_worked == Decimal("8.00")


def test_employee_without_shifts_is_all_zero(make_employee):
    result = compute_employee_earnings(make_employee(), [])

    assert result.gross_pay == 0
    assert result.hours_worked == 0
    assert result.breakdown.total() == 0
    assert result.anomalies == ()


def test_gross_matches_breakdown_sum(make_shift, make_employee):
    shifts = [
        make_shift(MONDAY, "07:13", "21:47", break_minutes=17, shift_id=1),
        make_shift(date(2025, 3, 5), "21:10", "09:05", break_minutes=35, shift_id=2),
        make_shift(SATURDAY, "06:00", "20:10", break_minutes=45, shift_id=3),
        make_shift(SUNDAY, "11:11", "23:59", shift_id=4),
    ]
    result = compute_employee_earnings(make_employee("Casual", "31.37"), shifts)

    assert abs(result.gross_pay - result.breakdown.total()) <= Decimal("0.01")
    assert abs(result.hours_worked - result.hours_breakdown.bucket_sum()) <= Decimal("0.01")


def test_anomalies_carry_employee_identity(make_shift, make_employee):
    shift = make_shift(MONDAY, "06:00", "19:00")
    result = compute_employee_earnings(make_employee(employee_id=42), [shift])

    types = {a.type for a in result.anomalies}
    assert types == {AnomalyType.EXCESSIVE_HOURS, AnomalyType.INSUFFICIENT_BREAK}
    assert all(a.employee_id == 42 and a.employee_name == "Alex Nguyen" for a in result.anomalies)


def test_rate_table_multipliers():
    permanent = RateTable.for_employee(EmploymentType.PERMANENT, Decimal("30"))
    casual = RateTable.for_employee(EmploymentType.CASUAL, Decimal("30"))

    assert permanent.hourly_rate(PayCategory.NIGHT) == Decimal("34.50")
    assert casual.hourly_rate(PayCategory.BASE) == Decimal("37.50")
    assert casual.multiplier(PayCategory.OVERTIME_AFTER_2H) == permanent.multiplier(PayCategory.OVERTIME_AFTER_2H)


def test_unknown_employment_type_is_permanent():
    assert EmploymentType.parse(None) is EmploymentType.PERMANENT
    assert EmploymentType.parse("Part-time") is EmploymentType.PERMANENT
    assert EmploymentType.parse(" CASUAL ") is EmploymentType.CASUAL
