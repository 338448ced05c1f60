from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from src.award_payroll.award_payroll.employees.model import Employee
from src.award_payroll.award_payroll.shifts.model import Shift


@pytest.fixture
def make_shift():
    """Build a Shift from a date and HH:MM clock times; an end before the start rolls to the next day."""

    def _make(day, start, end, *, break_minutes=0, is_public_holiday=False, shift_id=1, email="alex@example.com", employee_id=None):
        sh, sm = (int(p) for p in start.split(":"))
        eh, em = (int(p) for p in end.split(":"))
        start_dt = datetime(day.year, day.month, day.day, sh, sm)
        end_dt = datetime(day.year, day.month, day.day, eh, em)
        if end_dt < start_dt:
            end_dt += timedelta(days=1)
        return Shift(
            shift_id=shift_id,
            employee_email=email,
            start_time=start_dt,
            end_time=end_dt,
            break_minutes=break_minutes,
            is_public_holiday=is_public_holiday,
            employee_id=employee_id,
        )

    return _make


@pytest.fixture
def make_employee():
    def _make(employment_type="Permanent", pay_rate="30", *, employee_id=1, email="alex@example.com", first_name="Alex"):
        return Employee(
            employee_id=employee_id,
            first_name=first_name,
            last_name="Nguyen",
            email=email,
            pay_rate=pay_rate,
            employment_type=employment_type,
        )

    return _make
