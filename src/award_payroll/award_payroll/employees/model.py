from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional

from ..common.money import to_rate
from ..core.enums import EmploymentType


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee as supplied by the employee provider.

    `pay_rate` is kept as stored; it is always the permanent base rate
    (casual loading is derived from `employment_type`, never stored).
    """

    employee_id: Any
    first_name: str
    last_name: str
    email: str
    pay_rate: Any = None
    employment_type: Optional[str] = None
    is_active: bool = True

    @property
    def name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip()

    @property
    def base_hourly_rate(self) -> Decimal:
        return to_rate(self.pay_rate)

    @property
    def employment(self) -> EmploymentType:
        return EmploymentType.parse(self.employment_type)
