from __future__ import annotations

from datetime import date
from typing import Any, Sequence

from ..common.datetime_utils import combine_shift_times
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_time
from .model import Shift
from .repository import ShiftRepository


class MySQLShiftRepository(ShiftRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_worked(self, *, organization_id: Any, start_date: date, end_date: date) -> Sequence[Shift]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT shift_id, employee_email, shift_date, start_time, end_time,
                       break_minutes, is_public_holiday
                FROM worked_shifts
                WHERE organization_id=%s
                  AND shift_date BETWEEN %s AND %s
                  AND is_active=1
                ORDER BY shift_date, start_time, shift_id
                """,
                (organization_id, start_date, end_date),
            )
            rows = fetchall(cur)
            return [row_to_shift(r) for r in rows]


def row_to_shift(row: dict) -> Shift:
    start = normalize_mysql_time(row.get("start_time"))
    end = normalize_mysql_time(row.get("end_time"))
    shift_date = row.get("shift_date")

    start_dt = end_dt = None
    if shift_date is not None and start is not None and end is not None:
        start_dt, end_dt = combine_shift_times(shift_date, start, end)

    return Shift(
        shift_id=row["shift_id"],
        employee_email=row.get("employee_email") or "",
        start_time=start_dt,
        end_time=end_dt,
        break_minutes=int(row.get("break_minutes") or 0),
        is_public_holiday=bool(row.get("is_public_holiday") or 0),
    )
