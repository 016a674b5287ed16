"""DateDifference class representing a decomposed distance between dates.

This module provides the DateDifference class, the result of breaking the
interval between two calendar days into years, months, weeks, and days.
"""

from __future__ import annotations

from datecalc._internal.constants import DAYS_PER_WEEK
from datecalc.units.dateunit import DateUnit


class DateDifference:
    """A calendar distance with year, month, week, and day components.

    A DateDifference produced by the engine is non-negative and only has
    nonzero fields for the units in the requested output mask. Applying
    the fields to the earlier date in year, month, week, day order (with
    month clipping) reproduces the later date.

    Components are stored as given, without normalization:
    DateDifference(days=10) stays 10 days rather than 1 week and 3 days.

    Attributes:
        years: Number of years.
        months: Number of months.
        weeks: Number of weeks.
        days: Number of days.

    Examples:
        >>> d = DateDifference(years=2, months=1, days=3)
        >>> d.years, d.months, d.weeks, d.days
        (2, 1, 0, 3)

        >>> DateDifference(days=9).collapses_to_days
        True
        >>> DateDifference(weeks=1, days=2).collapses_to_days
        False
    """

    __slots__ = ("_years", "_months", "_weeks", "_days")

    def __init__(
        self,
        years: int = 0,
        months: int = 0,
        weeks: int = 0,
        days: int = 0,
    ) -> None:
        self._years = years
        self._months = months
        self._weeks = weeks
        self._days = days

    @classmethod
    def zero(cls) -> DateDifference:
        """Create a difference with every component set to zero."""
        return cls()

    @property
    def years(self) -> int:
        """Return the years component."""
        return self._years

    @property
    def months(self) -> int:
        """Return the months component."""
        return self._months

    @property
    def weeks(self) -> int:
        """Return the weeks component."""
        return self._weeks

    @property
    def days(self) -> int:
        """Return the days component."""
        return self._days

    @property
    def total_days(self) -> int:
        """Return weeks * 7 + days.

        Years and months are not included since they vary by context.

        Examples:
            >>> DateDifference(weeks=2, days=3).total_days
            17
        """
        return self._weeks * DAYS_PER_WEEK + self._days

    @property
    def is_zero(self) -> bool:
        """Return True if every component is zero."""
        return (
            self._years == 0
            and self._months == 0
            and self._weeks == 0
            and self._days == 0
        )

    @property
    def collapses_to_days(self) -> bool:
        """Return True if only the days component can be nonzero.

        When this holds, the decomposed form says nothing beyond the plain
        day count and the display shows the day count alone.
        """
        return self._years == 0 and self._months == 0 and self._weeks == 0

    def get(self, unit: DateUnit) -> int:
        """Return the component for a single unit.

        Args:
            unit: One of YEAR, MONTH, WEEK, DAY.

        Raises:
            ValueError: If unit is not a single unit.

        Examples:
            >>> DateDifference(months=4).get(DateUnit.MONTH)
            4
        """
        if unit is DateUnit.YEAR:
            return self._years
        if unit is DateUnit.MONTH:
            return self._months
        if unit is DateUnit.WEEK:
            return self._weeks
        if unit is DateUnit.DAY:
            return self._days
        raise ValueError(f"{unit!r} is not a single unit")

    def with_unit(self, unit: DateUnit, value: int) -> DateDifference:
        """Return a copy with the component for ``unit`` replaced.

        Examples:
            >>> DateDifference(years=1).with_unit(DateUnit.DAY, 5)
            DateDifference(years=1, months=0, weeks=0, days=5)
        """
        fields = {
            DateUnit.YEAR: "years",
            DateUnit.MONTH: "months",
            DateUnit.WEEK: "weeks",
            DateUnit.DAY: "days",
        }
        if unit not in fields:
            raise ValueError(f"{unit!r} is not a single unit")
        values = {
            "years": self._years,
            "months": self._months,
            "weeks": self._weeks,
            "days": self._days,
        }
        values[fields[unit]] = value
        return DateDifference(**values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateDifference):
            return NotImplemented
        return (
            self._years == other._years
            and self._months == other._months
            and self._weeks == other._weeks
            and self._days == other._days
        )

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __hash__(self) -> int:
        return hash((self._years, self._months, self._weeks, self._days))

    def __repr__(self) -> str:
        return (
            f"DateDifference(years={self._years}, months={self._months}, "
            f"weeks={self._weeks}, days={self._days})"
        )

    def __bool__(self) -> bool:
        """Return True if this is a non-zero difference."""
        return not self.is_zero


__all__ = ["DateDifference"]
