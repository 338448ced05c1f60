from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal

from ...core.constants import DEFAULT_STANDARD_DAY_HOURS
from ...shifts.model import Shift
from ..model import HoursBreakdown


@dataclass(frozen=True)
class ClassifierConfig:
    standard_day_hours: Decimal = DEFAULT_STANDARD_DAY_HOURS


class DayRule(ABC):
    """Strategy Pattern: how one day category distributes a shift's hours."""

    @abstractmethod
    def split(self, *, shift: Shift, total_hours: Decimal, config: ClassifierConfig) -> HoursBreakdown:
        raise NotImplementedError
