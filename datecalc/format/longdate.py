"""Long-date formatting.

Renders a canonical date as ``"Saturday, June 15, 2024"``. Names come from
fixed tables rather than the C locale so output does not depend on the
process locale; digits go through the localization settings.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Protocol

from datecalc._internal.constants import GREGORIAN_CALENDAR
from datecalc.calendar.adapter import as_utc
from datecalc.errors import CalendarError
from datecalc.services import LocalizationSettings

_WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

_MONTH_NAMES = (
    "",
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


class LongDateFormatter(Protocol):
    def format(self, date: datetime) -> str: ...


LongDateFormatterFactory = Callable[[str, LocalizationSettings], LongDateFormatter]


class EnglishLongDateFormatter:
    """Gregorian long date in English, read in UTC.

    Examples:
        >>> from datetime import timezone
        >>> EnglishLongDateFormatter().format(datetime(2024, 6, 15, tzinfo=timezone.utc))
        'Saturday, June 15, 2024'
    """

    def __init__(self, localize_digits: Callable[[str], str] | None = None) -> None:
        self._localize_digits = localize_digits

    def format(self, date: datetime) -> str:
        utc = as_utc(date)
        day = str(utc.day)
        year = str(utc.year)
        if self._localize_digits is not None:
            day = self._localize_digits(day)
            year = self._localize_digits(year)
        return (
            f"{_WEEKDAY_NAMES[utc.weekday()]}, "
            f"{_MONTH_NAMES[utc.month]} {day}, {year}"
        )


def make_long_date_formatter(
    calendar_identifier: str, localization: LocalizationSettings | None = None
) -> LongDateFormatter:
    """Build the long-date formatter bound to a calendar identifier.

    Raises:
        CalendarError: If the calendar has no long-date formatter.
    """
    if calendar_identifier != GREGORIAN_CALENDAR:
        raise CalendarError(f"no long-date format for calendar {calendar_identifier!r}")
    localize = localization.localize_digits if localization is not None else None
    return EnglishLongDateFormatter(localize)


__all__ = [
    "LongDateFormatter",
    "LongDateFormatterFactory",
    "EnglishLongDateFormatter",
    "make_long_date_formatter",
]
