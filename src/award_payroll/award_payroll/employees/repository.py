from __future__ import annotations

from typing import Any, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Employee provider used by the payroll service.

    Note (DIP): the service depends on this interface, not on a concrete database.
    """

    def list_active_for_organization(self, organization_id: Any) -> Sequence[Employee]:
        raise NotImplementedError
