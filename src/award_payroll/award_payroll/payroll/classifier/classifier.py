from __future__ import annotations

from typing import Optional

from ...common.money import round2
from ...core.enums import DayCategory
from ...shifts.model import Shift
from ..model import HoursBreakdown
from .base import ClassifierConfig
from .factory import DayRuleFactory

_SATURDAY = 5
_SUNDAY = 6

_default_factory = DayRuleFactory()


def day_category_for(shift: Shift) -> DayCategory:
    """Public holiday flag wins; otherwise the weekday the shift starts on."""
    if shift.is_public_holiday:
        return DayCategory.PUBLIC_HOLIDAY
    weekday = shift.start_time.weekday()
    if weekday == _SUNDAY:
        return DayCategory.SUNDAY
    if weekday == _SATURDAY:
        return DayCategory.SATURDAY
    return DayCategory.WEEKDAY


def classify(
    shift: Shift,
    config: Optional[ClassifierConfig] = None,
    *,
    factory: Optional[DayRuleFactory] = None,
) -> HoursBreakdown:
    """Split one shift's worked hours (break excluded) into award buckets.

    Missing timestamps or a non-positive duration give an all-zero breakdown
    so that one bad record cannot poison a batch.
    """
    if not shift.has_times:
        return HoursBreakdown.zero()

    total_hours = round2(shift.worked_hours())
    if total_hours <= 0:
        return HoursBreakdown.zero()

    rule = (factory or _default_factory).for_category(day_category_for(shift))
    return rule.split(shift=shift, total_hours=total_hours, config=config or ClassifierConfig())
