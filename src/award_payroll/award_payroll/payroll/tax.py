"""PAYG withholding and superannuation guarantee.

Both are pure functions of a single amount. Rates and brackets live in
`core.constants`.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional, Sequence, Tuple

from ..common.money import ZERO, round2, round_whole
from ..core.constants import (
    NO_THRESHOLD_FLAT_RATE,
    SUPER_GUARANTEE_RATE,
    TAX_BRACKETS,
    WEEKS_PER_YEAR,
)

Bracket = Tuple[Optional[Decimal], Decimal]


def annual_tax(annual_income: Decimal, brackets: Sequence[Bracket] = TAX_BRACKETS) -> Decimal:
    """Progressive tax: each bracket's rate applies to the income inside it."""
    tax = ZERO
    lower = ZERO
    for upper, rate in brackets:
        if annual_income <= lower:
            break
        top = annual_income if upper is None else min(annual_income, upper)
        tax += (top - lower) * rate
        if upper is None:
            break
        lower = upper
    return tax


def withholding(weekly_gross_pay: Decimal, claims_threshold: bool = True) -> Decimal:
    """Weekly PAYG withholding, rounded to whole dollars.

    Without the tax-free threshold a flat rate is applied to the annualised
    amount. This is an approximation, not the full no-threshold schedule.
    """
    if weekly_gross_pay is None or weekly_gross_pay <= 0:
        return ZERO

    annualised = Decimal(weekly_gross_pay) * WEEKS_PER_YEAR
    if claims_threshold:
        tax = annual_tax(annualised)
    else:
        tax = annualised * NO_THRESHOLD_FLAT_RATE
    return round_whole(tax / WEEKS_PER_YEAR)


def super_guarantee(ordinary_earnings: Decimal, rate: Decimal = SUPER_GUARANTEE_RATE) -> Decimal:
    if ordinary_earnings is None or ordinary_earnings <= 0:
        return ZERO
    return round2(Decimal(ordinary_earnings) * rate)
