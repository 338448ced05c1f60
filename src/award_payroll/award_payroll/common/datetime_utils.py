from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Optional

from ..core.exceptions import ValidationError


def parse_iso_date(value: Optional[str], field_name: str = "date") -> date:
    """Parse YYYY-MM-DD string into date."""
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"{field_name} must be an ISO date (YYYY-MM-DD)") from None


def combine_shift_times(work_date: date, start: time, end: time) -> tuple[datetime, datetime]:
    """Build start/end timestamps for a shift stored as date + clock times.

    An end time before the start time belongs to the next day. Equal times
    stay on the same day, giving a zero-length (malformed) shift.
    """
    start_dt = datetime.combine(work_date, start)
    end_dt = datetime.combine(work_date, end)
    if end_dt < start_dt:
        end_dt += timedelta(days=1)
    return start_dt, end_dt
