from __future__ import annotations

from decimal import Decimal

from ...core.constants import AFTERNOON_SHIFT_AFTER_HOUR, NIGHT_SHIFT_BEFORE_HOUR, OVERTIME_FIRST_TIER_HOURS
from ...core.enums import PayCategory
from ...shifts.model import Shift
from ..model import HoursBreakdown
from .base import ClassifierConfig, DayRule


def shift_loading(shift: Shift) -> PayCategory:
    """Loading for the whole ordinary block of a Monday-Friday shift.

    Night: starts before 06:00, finishes on a later day, or finishes before 06:00.
    Afternoon: otherwise, finishes strictly after 20:00.
    """
    start, end = shift.start_time, shift.end_time

    crosses_midnight = end.date() != start.date()
    if start.hour < NIGHT_SHIFT_BEFORE_HOUR or crosses_midnight or end.hour < NIGHT_SHIFT_BEFORE_HOUR:
        return PayCategory.NIGHT

    if end.hour * 60 + end.minute > AFTERNOON_SHIFT_AFTER_HOUR * 60:
        return PayCategory.AFTERNOON
    return PayCategory.BASE


class WeekdayRule(DayRule):
    def split(self, *, shift: Shift, total_hours: Decimal, config: ClassifierConfig) -> HoursBreakdown:
        ordinary = min(total_hours, config.standard_day_hours)
        overtime = total_hours - ordinary
        first_tier = min(OVERTIME_FIRST_TIER_HOURS, overtime)
        after_tier = overtime - first_tier

        loading = shift_loading(shift)
        return HoursBreakdown(
            base_hours=ordinary if loading is PayCategory.BASE else Decimal("0"),
            afternoon_shift_hours=ordinary if loading is PayCategory.AFTERNOON else Decimal("0"),
            night_shift_hours=ordinary if loading is PayCategory.NIGHT else Decimal("0"),
            overtime_first_2h=first_tier,
            overtime_after_2h=after_tier,
            total_hours=total_hours,
        )
