"""DateUnit and DateField enumerations.

DateUnit is a flag enum: a set of units forms the output-format mask of a
date difference. DateField names the components the calendar adapter can
extract from a date.
"""

from __future__ import annotations

from enum import Enum, Flag

from datecalc._internal.constants import (
    DAYS_PER_WEEK,
    MEAN_DAYS_PER_MONTH,
    MEAN_DAYS_PER_YEAR,
)


class DateUnit(Flag):
    """Calendar units for date differences and offsets.

    Members combine with ``|`` to form an output-format mask.

    Examples:
        >>> DateUnit.YEAR in DateUnit.ALL
        True

        >>> mask = DateUnit.MONTH | DateUnit.DAY
        >>> list(mask.units())
        [<DateUnit.MONTH: 2>, <DateUnit.DAY: 8>]
    """

    YEAR = 1
    MONTH = 2
    WEEK = 4
    DAY = 8
    ALL = YEAR | MONTH | WEEK | DAY

    def units(self) -> tuple[DateUnit, ...]:
        """Return the single units in this mask, largest first."""
        return tuple(u for u in _DESCENDING if u in self)

    def mean_days(self) -> float:
        """Return the average length of one unit in days.

        Only defined for single units. Month and year lengths vary; the
        400-year Gregorian mean is used.

        Raises:
            ValueError: If this is not a single unit.
        """
        try:
            return _MEAN_DAYS[self]
        except KeyError:
            raise ValueError(f"{self!r} is not a single unit") from None


_DESCENDING: tuple[DateUnit, ...] = (
    DateUnit.YEAR,
    DateUnit.MONTH,
    DateUnit.WEEK,
    DateUnit.DAY,
)

_MEAN_DAYS: dict[DateUnit, float] = {
    DateUnit.YEAR: MEAN_DAYS_PER_YEAR,
    DateUnit.MONTH: MEAN_DAYS_PER_MONTH,
    DateUnit.WEEK: float(DAYS_PER_WEEK),
    DateUnit.DAY: 1.0,
}


class DateField(Enum):
    """Date components readable through the calendar adapter."""

    YEAR = "year"
    MONTH = "month"
    WEEK = "week"
    DAY = "day"
    DAY_OF_WEEK = "day_of_week"


__all__ = ["DateUnit", "DateField"]
