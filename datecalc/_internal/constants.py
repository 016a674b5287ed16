"""Fixed numbers shared across datecalc.

Anything a deployment may want to change lives in ``datecalc.config``;
these values are part of the calendar or of the calculator's contract.
This module is not part of the public API.
"""

from __future__ import annotations

DAYS_PER_WEEK: int = 7

# Same limits as datetime.MINYEAR / datetime.MAXYEAR
MIN_YEAR: int = 1
MAX_YEAR: int = 9999

# Common-year month lengths, indexed by month number (index 0 unused)
DAYS_IN_MONTH: tuple[int, ...] = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Mean unit lengths over the 400-year cycle; they only seed the
# difference search
MEAN_DAYS_PER_YEAR: float = 146097 / 400
MEAN_DAYS_PER_MONTH: float = 146097 / 4800

# Offset pickers run 0..MAX_OFFSET
MAX_OFFSET: int = 999

GREGORIAN_CALENDAR: str = "GregorianCalendar"


__all__ = [
    "DAYS_PER_WEEK",
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_IN_MONTH",
    "MEAN_DAYS_PER_YEAR",
    "MEAN_DAYS_PER_MONTH",
    "MAX_OFFSET",
    "GREGORIAN_CALENDAR",
]
