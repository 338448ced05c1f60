from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

CENT = Decimal("0.01")
DOLLAR = Decimal("1")
ZERO = Decimal("0")


def round2(value: Decimal) -> Decimal:
    """Round to 2 decimal places, half away from zero."""
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def round_whole(value: Decimal) -> Decimal:
    return Decimal(value).quantize(DOLLAR, rounding=ROUND_HALF_UP)


def to_rate(value: Any) -> Decimal:
    """Coerce a stored pay rate to Decimal; missing or non-numeric means 0."""
    if value is None or isinstance(value, bool):
        return ZERO
    try:
        rate = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return ZERO
    if not rate.is_finite() or rate < 0:
        return ZERO
    return rate
