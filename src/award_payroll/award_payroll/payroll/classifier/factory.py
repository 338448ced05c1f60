from __future__ import annotations

from dataclasses import dataclass, field

from ...core.enums import DayCategory
from .base import DayRule
from .public_holiday_rule import PublicHolidayRule
from .saturday_rule import SaturdayRule
from .sunday_rule import SundayRule
from .weekday_rule import WeekdayRule


@dataclass
class DayRuleFactory:
    """Factory Pattern: one rule per day category."""

    rules: dict = field(
        default_factory=lambda: {
            DayCategory.PUBLIC_HOLIDAY: PublicHolidayRule(),
            DayCategory.SUNDAY: SundayRule(),
            DayCategory.SATURDAY: SaturdayRule(),
            DayCategory.WEEKDAY: WeekdayRule(),
        }
    )

    def for_category(self, category: DayCategory) -> DayRule:
        return self.rules[category]
