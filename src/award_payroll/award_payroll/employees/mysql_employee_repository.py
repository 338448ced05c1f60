from __future__ import annotations

from typing import Any, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Employee
from .repository import EmployeeRepository


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_active_for_organization(self, organization_id: Any) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, first_name, last_name, email, pay_rate, employment_type, is_active
                FROM employees
                WHERE organization_id=%s AND is_active=1
                ORDER BY last_name, first_name, employee_id
                """,
                (organization_id,),
            )
            rows = fetchall(cur)
            return [self._to_employee(r) for r in rows]

    @staticmethod
    def _to_employee(row: dict) -> Employee:
        return Employee(
            employee_id=row["employee_id"],
            first_name=row.get("first_name") or "",
            last_name=row.get("last_name") or "",
            email=row.get("email") or "",
            pay_rate=row.get("pay_rate"),
            employment_type=row.get("employment_type"),
            is_active=bool(row.get("is_active", True)),
        )
