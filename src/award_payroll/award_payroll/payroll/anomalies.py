from __future__ import annotations

from collections import defaultdict
from decimal import Decimal
from typing import Iterable, List, Sequence

from ..core.constants import BREAK_REQUIRED_AFTER_HOURS, MAX_SHIFT_HOURS, MIN_REST_BETWEEN_SHIFTS_HOURS
from ..core.enums import AnomalyType, Severity
from ..shifts.model import Shift
from .model import Anomaly


def _worker_key(shift: Shift):
    if shift.employee_id is not None:
        return ("id", shift.employee_id)
    return ("email", (shift.employee_email or "").strip().lower())


def check_shift(shift: Shift) -> List[Anomaly]:
    """Flags for a single shift. Duration here is start to end, break included."""
    anomalies: List[Anomaly] = []
    if not shift.has_times:
        return anomalies

    duration = shift.elapsed_hours()

    if duration > MAX_SHIFT_HOURS:
        anomalies.append(
            Anomaly(
                type=AnomalyType.EXCESSIVE_HOURS,
                description=f"Shift duration {duration:.2f}h exceeds {MAX_SHIFT_HOURS}h limit",
                severity=Severity.HIGH,
                employee_id=shift.employee_id,
                shift_ids=(shift.shift_id,),
            )
        )

    if duration > BREAK_REQUIRED_AFTER_HOURS and int(shift.break_minutes or 0) <= 0:
        anomalies.append(
            Anomaly(
                type=AnomalyType.INSUFFICIENT_BREAK,
                description=f"Shift > {BREAK_REQUIRED_AFTER_HOURS}h requires a break",
                severity=Severity.MEDIUM,
                employee_id=shift.employee_id,
                shift_ids=(shift.shift_id,),
            )
        )

    return anomalies


def check_shift_patterns(shifts: Iterable[Shift]) -> List[Anomaly]:
    """Flags across consecutive shifts of the same worker.

    A rest gap strictly between 0 and 10 hours is a short break. A negative gap
    means the shifts overlap and is reported separately; a zero gap is not flagged.
    """
    by_worker: dict = defaultdict(list)
    for shift in shifts:
        if shift.has_times:
            by_worker[_worker_key(shift)].append(shift)

    anomalies: List[Anomaly] = []
    for worker_shifts in by_worker.values():
        ordered: Sequence[Shift] = sorted(worker_shifts, key=lambda s: s.start_time)
        for current, following in zip(ordered, ordered[1:]):
            gap = Decimal(int((following.start_time - current.end_time).total_seconds())) / Decimal(3600)
            ids = (current.shift_id, following.shift_id)

            if 0 < gap < MIN_REST_BETWEEN_SHIFTS_HOURS:
                anomalies.append(
                    Anomaly(
                        type=AnomalyType.SHORT_BREAK,
                        description=(
                            f"Only {gap:.2f}h break between shifts on {current.end_time.date().isoformat()}"
                        ),
                        severity=Severity.MEDIUM,
                        employee_id=current.employee_id,
                        shift_ids=ids,
                    )
                )
            elif gap < 0:
                anomalies.append(
                    Anomaly(
                        type=AnomalyType.OVERLAPPING_SHIFTS,
                        description=(
                            f"Shifts overlap by {-gap:.2f}h on {following.start_time.date().isoformat()}"
                        ),
                        severity=Severity.HIGH,
                        employee_id=current.employee_id,
                        shift_ids=ids,
                    )
                )

    return anomalies
