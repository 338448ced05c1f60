from __future__ import annotations

from datetime import date
from typing import Any, Protocol, Sequence

from .model import Shift


class ShiftRepository(Protocol):
    def list_worked(self, *, organization_id: Any, start_date: date, end_date: date) -> Sequence[Shift]:
        """Active worked shifts whose shift date is within [start_date, end_date]."""
        raise NotImplementedError
