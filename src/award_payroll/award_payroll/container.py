from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .database.connection import DatabaseConnection, DBConfig
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .payroll.earnings import PayrollConfig
from .payroll.service import PayrollService
from .shifts.mysql_shift_repository import MySQLShiftRepository
from .shifts.repository import ShiftRepository


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    shifts_repo: ShiftRepository
    payroll_service: PayrollService
    conn: Optional[DatabaseConnection] = None


def build_container(*, db_config: dict, payroll_config: Optional[PayrollConfig] = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    employees_repo = MySQLEmployeeRepository(conn)
    shifts_repo = MySQLShiftRepository(conn)
    payroll_service = PayrollService(employees_repo, shifts_repo, config=payroll_config)

    return Container(
        employees_repo=employees_repo,
        shifts_repo=shifts_repo,
        payroll_service=payroll_service,
        conn=conn,
    )
