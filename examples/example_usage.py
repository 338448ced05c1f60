"""Example: run the payroll engine on in-memory records (no Flask, no MySQL).

Controllers are a thin layer; all pay rules live in the payroll package.
"""

from datetime import date, datetime

from src.award_payroll.award_payroll.employees.model import Employee
from src.award_payroll.award_payroll.payroll.export import summary_to_csv
from src.award_payroll.award_payroll.payroll.service import PayrollService
from src.award_payroll.award_payroll.shifts.model import Shift


class ListEmployees:
    def __init__(self, employees):
        self._employees = employees

    def list_active_for_organization(self, organization_id):
        return self._employees


class ListShifts:
    def __init__(self, shifts):
        self._shifts = shifts

    def list_worked(self, *, organization_id, start_date, end_date):
        return [s for s in self._shifts if start_date <= s.start_time.date() <= end_date]


def main():
    employees = [
        Employee(1, "Alex", "Nguyen", "alex@example.com", pay_rate="30", employment_type="Permanent"),
        Employee(2, "Sam", "Tran", "sam@example.com", pay_rate="30", employment_type="Casual"),
    ]
    shifts = [
        Shift(1, "alex@example.com", datetime(2025, 3, 3, 9), datetime(2025, 3, 3, 17)),
        Shift(2, "alex@example.com", datetime(2025, 3, 4, 22), datetime(2025, 3, 5, 6)),
        Shift(3, "sam@example.com", datetime(2025, 3, 8, 9), datetime(2025, 3, 8, 17), break_minutes=30),
        Shift(4, "sam@example.com", datetime(2025, 3, 9, 7), datetime(2025, 3, 9, 20), break_minutes=0),
    ]

    service = PayrollService(ListEmployees(employees), ListShifts(shifts))
    summary = service.summarize("demo-org", date(2025, 3, 3), date(2025, 3, 9))

    print(summary_to_csv(summary).decode("utf-8-sig"))
    for anomaly in summary.anomalies:
        print(f"[{anomaly.severity.value}] {anomaly.employee_name}: {anomaly.description}")


if __name__ == "__main__":
    main()
