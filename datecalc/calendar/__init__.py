"""Calendar adapters for datecalc.

Functions:
    make_calendar: Build the adapter for a calendar identifier.
"""

from __future__ import annotations

from datecalc.calendar.adapter import (
    CalendarAdapter,
    GregorianCalendarAdapter,
    as_utc,
    make_calendar,
    utc_day_ordinal,
)

__all__: list[str] = [
    "CalendarAdapter",
    "GregorianCalendarAdapter",
    "as_utc",
    "make_calendar",
    "utc_day_ordinal",
]
