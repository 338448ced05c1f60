"""Constants and defaults.

Note: Keep award figures here to avoid magic numbers spread across code.
"""

from decimal import Decimal

# Ordinary hours per weekday before overtime applies
DEFAULT_STANDARD_DAY_HOURS = Decimal("8")
# Overtime paid at the first tier before the second tier starts
OVERTIME_FIRST_TIER_HOURS = Decimal("2")

# Shift loading boundaries (hour of day)
NIGHT_SHIFT_BEFORE_HOUR = 6
AFTERNOON_SHIFT_AFTER_HOUR = 20

# PAYG withholding: (upper limit of bracket, marginal rate)
WEEKS_PER_YEAR = 52
TAX_BRACKETS = (
    (Decimal("18200"), Decimal("0")),
    (Decimal("45000"), Decimal("0.19")),
    (Decimal("120000"), Decimal("0.325")),
    (Decimal("180000"), Decimal("0.37")),
    (None, Decimal("0.45")),
)
NO_THRESHOLD_FLAT_RATE = Decimal("0.325")

SUPER_GUARANTEE_RATE = Decimal("0.115")

# Anomaly thresholds (hours)
MAX_SHIFT_HOURS = Decimal("12")
BREAK_REQUIRED_AFTER_HOURS = Decimal("5")
MIN_REST_BETWEEN_SHIFTS_HOURS = Decimal("10")
