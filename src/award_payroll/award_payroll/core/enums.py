from __future__ import annotations

from enum import Enum
from typing import Optional


class EmploymentType(str, Enum):
    """Employment basis; selects the multiplier table."""

    PERMANENT = "Permanent"
    CASUAL = "Casual"

    @classmethod
    def parse(cls, value: Optional[str]) -> "EmploymentType":
        if value is not None and str(value).strip().lower() == "casual":
            return cls.CASUAL
        return cls.PERMANENT


class DayCategory(str, Enum):
    """Which award day rule a shift falls under, decided once per shift."""

    PUBLIC_HOLIDAY = "public_holiday"
    SUNDAY = "sunday"
    SATURDAY = "saturday"
    WEEKDAY = "weekday"


class PayCategory(str, Enum):
    BASE = "base"
    AFTERNOON = "afternoon"
    NIGHT = "night"
    SATURDAY = "saturday"
    SUNDAY = "sunday"
    PUBLIC_HOLIDAY = "public_holiday"
    OVERTIME_FIRST_2H = "overtime_first_2h"
    OVERTIME_AFTER_2H = "overtime_after_2h"


class AnomalyType(str, Enum):
    EXCESSIVE_HOURS = "excessive_hours"
    INSUFFICIENT_BREAK = "insufficient_break"
    SHORT_BREAK = "short_break"
    OVERLAPPING_SHIFTS = "overlapping_shifts"


class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
