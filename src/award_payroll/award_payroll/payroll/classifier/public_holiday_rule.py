from __future__ import annotations

from decimal import Decimal

from ...shifts.model import Shift
from ..model import HoursBreakdown
from .base import ClassifierConfig, DayRule


class PublicHolidayRule(DayRule):
    """All hours at the public holiday rate; no separate overtime split."""

    def split(self, *, shift: Shift, total_hours: Decimal, config: ClassifierConfig) -> HoursBreakdown:
        return HoursBreakdown(public_holiday_hours=total_hours, total_hours=total_hours)
