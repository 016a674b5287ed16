"""Day-number arithmetic on the proleptic Gregorian calendar.

Dates are converted to ordinals (1 = 0001-01-01, the numbering used by
``datetime.date.toordinal``) so that day and week steps are integer
additions. Month and year steps go through ``add_months_clipped``, which
pins the day to the end of a shorter target month.

This module is not part of the public API.
"""

from __future__ import annotations

from bisect import bisect_right

from datecalc._internal.constants import DAYS_IN_MONTH, MAX_YEAR, MIN_YEAR
from datecalc.errors import ValidationError

_DAYS_PER_400Y = 146097
_DAYS_PER_100Y = 36524
_DAYS_PER_4Y = 1461


def _month_starts(leap: bool) -> tuple[int, ...]:
    # Day-of-year (0-based) on which each month begins, January first
    starts = [0]
    for month in range(1, 12):
        length = 29 if (leap and month == 2) else DAYS_IN_MONTH[month]
        starts.append(starts[-1] + length)
    return tuple(starts)


_COMMON_STARTS = _month_starts(False)
_LEAP_STARTS = _month_starts(True)


def is_leap_year(year: int) -> bool:
    """Return True if ``year`` has a February 29.

    Examples:
        >>> is_leap_year(2024), is_leap_year(1900), is_leap_year(2000)
        (True, False, True)
    """
    if year % 4:
        return False
    if year % 100:
        return True
    return year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    """Return the length of ``month`` in ``year``.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month must be 1-12, got {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Return the ordinal of a civil date.

    Years below 1 give ordinals below 1, which is how callers detect
    underflow.

    Examples:
        >>> ymd_to_ordinal(1, 1, 1)
        1
        >>> ymd_to_ordinal(2024, 3, 1) - ymd_to_ordinal(2024, 2, 28)
        2
    """
    prior = year - 1
    leap_days = prior // 4 - prior // 100 + prior // 400
    starts = _LEAP_STARTS if is_leap_year(year) else _COMMON_STARTS
    return prior * 365 + leap_days + starts[month - 1] + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Return the civil date ``(year, month, day)`` of an ordinal.

    Raises:
        ValueError: If ordinal is below 1.
    """
    if ordinal < 1:
        raise ValueError(f"ordinal must be >= 1, got {ordinal}")

    cycles_400, rest = divmod(ordinal - 1, _DAYS_PER_400Y)
    cycles_100, rest = divmod(rest, _DAYS_PER_100Y)
    cycles_4, rest = divmod(rest, _DAYS_PER_4Y)
    years, day_of_year = divmod(rest, 365)

    year = cycles_400 * 400 + cycles_100 * 100 + cycles_4 * 4 + years + 1
    if years == 4 or cycles_100 == 4:
        # Last day of a leap year overflows the 365-day division
        return (year - 1, 12, 31)

    starts = _LEAP_STARTS if is_leap_year(year) else _COMMON_STARTS
    month = bisect_right(starts, day_of_year)
    return (year, month, day_of_year - starts[month - 1] + 1)


def ordinal_to_day_of_week(ordinal: int) -> int:
    """Return the weekday of an ordinal, Monday=0 .. Sunday=6."""
    # Ordinal 1 is a Monday
    return (ordinal - 1) % 7


def add_months_clipped(
    year: int, month: int, day: int, months: int
) -> tuple[int, int, int]:
    """Shift a date by whole months, clipping the day to the target month.

    The returned year may fall outside the representable range; callers
    check it with ``in_range``.

    Examples:
        >>> add_months_clipped(2023, 1, 31, 1)
        (2023, 2, 28)
        >>> add_months_clipped(2024, 3, 31, -1)
        (2024, 2, 29)
    """
    target_year, zero_month = divmod(year * 12 + month - 1 + months, 12)
    target_month = zero_month + 1
    if not in_range(target_year):
        return (target_year, target_month, day)
    return (target_year, target_month, min(day, days_in_month(target_year, target_month)))


def in_range(year: int) -> bool:
    """Return True if the year lies in the representable range."""
    return MIN_YEAR <= year <= MAX_YEAR


MIN_ORDINAL: int = ymd_to_ordinal(MIN_YEAR, 1, 1)
MAX_ORDINAL: int = ymd_to_ordinal(MAX_YEAR, 12, 31)


def validate_date(year: int, month: int, day: int) -> None:
    """Check that the components name a date in 0001-01-01..9999-12-31.

    Raises:
        ValidationError: Naming the first offending component.
    """
    if not in_range(year):
        raise ValidationError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )
    if not 1 <= month <= 12:
        raise ValidationError(f"month must be between 1 and 12, got {month}")
    last = days_in_month(year, month)
    if not 1 <= day <= last:
        raise ValidationError(
            f"day must be between 1 and {last} for {year}-{month:02d}, got {day}"
        )


__all__ = [
    "is_leap_year",
    "days_in_month",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "ordinal_to_day_of_week",
    "add_months_clipped",
    "in_range",
    "MIN_ORDINAL",
    "MAX_ORDINAL",
    "validate_date",
]
