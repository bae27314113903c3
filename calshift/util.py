"""Utility constants and helpers for calshift.

Time unit constants represent durations in milliseconds.
These are used throughout the API for consistent time representation.
"""

# Time unit constants (all values in milliseconds)
MILLISECOND = 1
SECOND = 1_000
MINUTE = 60_000
HOUR = 3_600_000
DAY = 86_400_000
WEEK = 604_800_000  # 7 x 24h

# Largest integer a double holds without precision loss
MAX_SAFE_INTEGER = 2**53 - 1

UNIT_SCALES = {
    "milliseconds": MILLISECOND,
    "seconds": SECOND,
    "minutes": MINUTE,
    "hours": HOUR,
    "days": DAY,
    "weeks": WEEK,
}
