from __future__ import annotations

from decimal import Decimal

from ...shifts.model import Shift
from ..model import HoursBreakdown
from .base import ClassifierConfig, DayRule


class SundayRule(DayRule):
    """Sunday ordinary and Sunday overtime share one bucket."""

    def split(self, *, shift: Shift, total_hours: Decimal, config: ClassifierConfig) -> HoursBreakdown:
        return HoursBreakdown(sunday_hours=total_hours, total_hours=total_hours)
