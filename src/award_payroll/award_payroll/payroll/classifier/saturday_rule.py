from __future__ import annotations

from decimal import Decimal

from ...shifts.model import Shift
from ..model import HoursBreakdown
from .base import ClassifierConfig, DayRule


class SaturdayRule(DayRule):
    """All Saturday hours in one bucket.

    The award pays Saturday overtime at a higher tier after some threshold;
    that split is not modelled here.
    """

    def split(self, *, shift: Shift, total_hours: Decimal, config: ClassifierConfig) -> HoursBreakdown:
        return HoursBreakdown(saturday_hours=total_hours, total_hours=total_hours)
