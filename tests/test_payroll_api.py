from datetime import date

import pytest

from src.award_payroll.award_payroll.container import Container
from src.award_payroll.award_payroll.main import create_app
from src.award_payroll.award_payroll.payroll.service import PayrollService

MONDAY = date(2025, 3, 3)
QUERY = "organization_id=org-1&start_date=2025-03-03&end_date=2025-03-09"


class FakeEmployeeRepo:
    def __init__(self, employees):
        self._employees = employees

    def list_active_for_organization(self, organization_id):
        return self._employees


class FakeShiftRepo:
    def __init__(self, shifts):
        self._shifts = shifts

    def list_worked(self, *, organization_id, start_date, end_date):
        return self._shifts


class DownShiftRepo:
    def list_worked(self, *, organization_id, start_date, end_date):
        raise OSError("Lost connection to MySQL server")


def _container(employees_repo, shifts_repo):
    return Container(
        employees_repo=employees_repo,
        shifts_repo=shifts_repo,
        payroll_service=PayrollService(employees_repo, shifts_repo),
    )


@pytest.fixture
def client(monkeypatch, make_employee, make_shift):
    monkeypatch.setenv("APP_ENV", "testing")
    employees = FakeEmployeeRepo([make_employee()])
    shifts = FakeShiftRepo([make_shift(MONDAY, "09:00", "17:00")])
    app = create_app(container=_container(employees, shifts))
    return app.test_client()


def test_summary_endpoint(client):
    resp = client.get(f"/api/payroll/summary?{QUERY}")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    assert body["data"]["summary"]["total_gross_pay"] == 240.0
    assert body["data"]["employees"][0]["email"] == "alex@example.com"


@pytest.mark.parametrize(
    "query",
    [
        "start_date=2025-03-03&end_date=2025-03-09",
        "organization_id=org-1&end_date=2025-03-09",
        "organization_id=org-1&start_date=03/03/2025&end_date=2025-03-09",
        "organization_id=org-1&start_date=2025-03-10&end_date=2025-03-09",
    ],
)
def test_summary_rejects_bad_input(client, query):
    resp = client.get(f"/api/payroll/summary?{query}")

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_provider_failure_is_bad_gateway(monkeypatch, make_employee):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container=_container(FakeEmployeeRepo([make_employee()]), DownShiftRepo()))

    resp = app.test_client().get(f"/api/payroll/summary?{QUERY}")

    assert resp.status_code == 502
    assert resp.get_json()["message"] == "Failed to load payroll data"


def test_csv_export_is_attachment(client):
    resp = client.get(f"/api/payroll/export/csv?{QUERY}")

    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert "attachment; filename=payroll-2025-03-03-2025-03-09.csv" in resp.headers["Content-Disposition"]
    assert "Gross Pay" in resp.data.decode("utf-8-sig")


def test_xlsx_export(client):
    resp = client.get(f"/api/payroll/export/XLSX?{QUERY}")

    assert resp.status_code == 200
    assert resp.mimetype.endswith("spreadsheetml.sheet")
    assert resp.data[:2] == b"PK"


def test_json_export(client):
    resp = client.get(f"/api/payroll/export/json?{QUERY}")

    assert resp.status_code == 200
    assert resp.get_json()["data"]["summary"]["total_employees"] == 1


def test_unknown_export_format(client):
    resp = client.get(f"/api/payroll/export/pdf?{QUERY}")

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Invalid format"


class ExplodingPayrollService:
    def summarize(self, organization_id, start_date, end_date):
        raise RuntimeError("unexpected")


def test_unexpected_error_is_json_500(monkeypatch, make_employee):
    monkeypatch.setenv("APP_ENV", "testing")
    container = Container(
        employees_repo=FakeEmployeeRepo([make_employee()]),
        shifts_repo=FakeShiftRepo([]),
        payroll_service=ExplodingPayrollService(),
    )
    app = create_app(container=container)

    resp = app.test_client().get(f"/api/payroll/summary?{QUERY}")

    assert resp.status_code == 500
    assert resp.get_json() == {"success": False, "message": "Internal server error"}


def test_unknown_route_keeps_404(client):
    resp = client.get("/api/payroll/nope")

    assert resp.status_code == 404
