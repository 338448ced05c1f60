from decimal import Decimal

from src.award_payroll.award_payroll.core.enums import EmploymentType
from src.award_payroll.award_payroll.employees.model import Employee
from src.award_payroll.award_payroll.employees.mysql_employee_repository import MySQLEmployeeRepository


class FakeCursor:
    def __init__(self, rows):
        self._rows = rows
        self.params = None

    def execute(self, sql, params=None):
        self.params = params

    def fetchall(self):
        return self._rows

    def close(self):
        pass


class FakeConnection:
    def __init__(self, rows):
        self.cur = FakeCursor(rows)

    def cursor(self, dictionary=True):
        return self.cur

    def commit(self):
        pass

    def rollback(self):
        pass

    def close(self):
        pass


class FakeConnFactory:
    def __init__(self, rows):
        self.conn = FakeConnection(rows)

    def connect(self, *, with_database=True):
        return self.conn


def test_rows_map_to_employees():
    factory = FakeConnFactory(
        [
            {
                "employee_id": 3,
                "first_name": "Jo",
                "last_name": None,
                "email": "jo@example.com",
                "pay_rate": Decimal("31.20"),
                "employment_type": "Casual",
                "is_active": 1,
            }
        ]
    )

    employees = MySQLEmployeeRepository(factory).list_active_for_organization(12)

    assert factory.conn.cur.params == (12,)
    assert employees[0].name == "Jo"
    assert employees[0].employment is EmploymentType.CASUAL
    assert employees[0].base_hourly_rate == Decimal("31.20")


def test_employee_rate_coercion():
    assert Employee(1, "A", "B", "a@b.c", pay_rate="27.5").base_hourly_rate == Decimal("27.5")
    assert Employee(1, "A", "B", "a@b.c", pay_rate=None).base_hourly_rate == 0
    assert Employee(1, "A", "B", "a@b.c", pay_rate="n/a").base_hourly_rate == 0
    assert Employee(1, "A", "B", "a@b.c", pay_rate=float("nan")).base_hourly_rate == 0
