from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

from ..core.enums import EmploymentType, PayCategory

_PERMANENT = MappingProxyType(
    {
        PayCategory.BASE: Decimal("1.00"),
        PayCategory.AFTERNOON: Decimal("1.125"),
        PayCategory.NIGHT: Decimal("1.15"),
        PayCategory.SATURDAY: Decimal("1.50"),
        PayCategory.SUNDAY: Decimal("2.00"),
        PayCategory.PUBLIC_HOLIDAY: Decimal("2.50"),
        PayCategory.OVERTIME_FIRST_2H: Decimal("1.50"),
        PayCategory.OVERTIME_AFTER_2H: Decimal("2.00"),
    }
)

# Casual loading (25%) on every ordinary-hour category; overtime is not loaded.
_CASUAL = MappingProxyType(
    {
        PayCategory.BASE: Decimal("1.25"),
        PayCategory.AFTERNOON: Decimal("1.375"),
        PayCategory.NIGHT: Decimal("1.40"),
        PayCategory.SATURDAY: Decimal("1.75"),
        PayCategory.SUNDAY: Decimal("2.25"),
        PayCategory.PUBLIC_HOLIDAY: Decimal("2.75"),
        PayCategory.OVERTIME_FIRST_2H: Decimal("1.50"),
        PayCategory.OVERTIME_AFTER_2H: Decimal("2.00"),
    }
)


@dataclass(frozen=True)
class RateTable:
    """Hourly rate per pay category for one employee."""

    employment_type: EmploymentType
    base_hourly_rate: Decimal
    multipliers: Mapping[PayCategory, Decimal]

    @classmethod
    def for_employee(cls, employment_type: EmploymentType, base_hourly_rate: Decimal) -> "RateTable":
        multipliers = _CASUAL if employment_type is EmploymentType.CASUAL else _PERMANENT
        return cls(employment_type=employment_type, base_hourly_rate=base_hourly_rate, multipliers=multipliers)

    def multiplier(self, category: PayCategory) -> Decimal:
        return self.multipliers[category]

    def hourly_rate(self, category: PayCategory) -> Decimal:
        return self.base_hourly_rate * self.multipliers[category]
