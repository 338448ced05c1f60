from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional


@dataclass(frozen=True)
class Shift:
    """Domain entity: a worked shift supplied by the timekeeping provider.

    Read-only for the payroll engine. `start_time`/`end_time` may be missing
    on malformed records; calculations then treat the shift as zero hours.
    """

    shift_id: Any
    employee_email: str
    start_time: Optional[datetime]
    end_time: Optional[datetime]
    break_minutes: int = 0
    is_public_holiday: bool = False
    employee_id: Any = None

    @property
    def has_times(self) -> bool:
        return self.start_time is not None and self.end_time is not None

    def elapsed_hours(self) -> Decimal:
        """Start to end in hours, break not deducted."""
        if not self.has_times:
            return Decimal("0")
        seconds = int((self.end_time - self.start_time).total_seconds())
        return Decimal(seconds) / Decimal(3600)

    def worked_hours(self) -> Decimal:
        """Start to end in hours less the recorded break."""
        if not self.has_times:
            return Decimal("0")
        seconds = int((self.end_time - self.start_time).total_seconds())
        minutes = Decimal(seconds) / Decimal(60) - Decimal(int(self.break_minutes or 0))
        return minutes / Decimal(60)
