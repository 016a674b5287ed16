"""Date calculation engine: differences and offsets in calendar days.

The engine is pure computation over a calendar adapter. It never clamps a
result into range: out-of-range offsets come back as ``(None, False)``.

Decomposition rule:
    Units are filled largest first (year, month, week, day). Each unit
    takes the largest count k with ``lo + k units <= hi``, measured from
    the date reached after the larger units, and with month clipping
    applied. Applying the resulting fields to the earlier date in the same
    order reproduces the later date exactly.

Examples:
    2020-01-01 -> 2023-03-17  =  3 years, 2 months, 2 weeks, 2 days
    2023-01-31 -> 2023-03-01  =  1 month, 1 day   (Jan 31 + 1 month = Feb 28)
    2020-02-29 -> 2021-02-28  =  1 year           (Feb 29 + 1 year = Feb 28)
"""

from __future__ import annotations

import logging
from datetime import datetime, tzinfo

from datecalc.calendar.adapter import CalendarAdapter, Clock, make_calendar
from datecalc.core.difference import DateDifference
from datecalc.core.offset import OffsetSpec
from datecalc.services import TelemetrySink
from datecalc.units.dateunit import DateUnit

logger = logging.getLogger(__name__)


class DateCalculationEngine:
    """Difference decomposition and offset application.

    Args:
        calendar: The calendar adapter all arithmetic goes through.

    Examples:
        >>> from datecalc.calendar import GregorianCalendarAdapter
        >>> cal = GregorianCalendarAdapter()
        >>> engine = DateCalculationEngine(cal)
        >>> engine.get_date_difference(
        ...     cal.date(2023, 3, 10), cal.date(2023, 3, 17), DateUnit.ALL
        ... )
        DateDifference(years=0, months=0, weeks=1, days=0)
    """

    def __init__(self, calendar: CalendarAdapter) -> None:
        self._calendar = calendar

    @classmethod
    def for_calendar(
        cls,
        identifier: str,
        telemetry: TelemetrySink | None = None,
        clock: Clock | None = None,
        local_tz: tzinfo | None = None,
    ) -> DateCalculationEngine:
        """Build an engine over the adapter for a calendar identifier."""
        return cls(make_calendar(identifier, telemetry, clock, local_tz))

    @property
    def calendar(self) -> CalendarAdapter:
        return self._calendar

    def get_date_difference(
        self, from_date: datetime, to_date: datetime, mask: DateUnit
    ) -> DateDifference:
        """Decompose the distance between two dates into units of ``mask``.

        The order of the arguments does not matter; the result is always
        non-negative. Fields for units outside ``mask`` are zero.

        Args:
            from_date: One endpoint (any time of day).
            to_date: The other endpoint.
            mask: Units the result may use.

        Returns:
            The decomposition. With ``mask == DateUnit.DAY`` its days field
            is the absolute number of civil days between the endpoints.
        """
        calendar = self._calendar
        lo = calendar.clip_to_day(from_date)
        hi = calendar.clip_to_day(to_date)
        if lo > hi:
            lo, hi = hi, lo

        if mask == DateUnit.DAY:
            return DateDifference(days=calendar.diff_days(lo, hi))

        result = DateDifference.zero()
        for unit in mask.units():
            remaining = calendar.diff_days(lo, hi)
            if remaining == 0:
                break
            count, pivot = self._fit_units(lo, hi, unit, remaining)
            if count > 0:
                lo = pivot
                result = result.with_unit(unit, count)

        if DateUnit.DAY in mask and lo != hi:
            logger.error(
                "Decomposition %r stopped at %s short of %s",
                result,
                lo.date(),
                hi.date(),
            )
        return result

    def _fit_units(
        self, lo: datetime, hi: datetime, unit: DateUnit, remaining: int
    ) -> tuple[int, datetime]:
        """Find the largest k with ``lo + k units <= hi``.

        Probes from ``lo`` each time (never chained), since month clipping
        makes k single-month steps differ from one k-month step.

        Returns:
            ``(k, lo + k units)``.
        """
        calendar = self._calendar
        count = int(remaining // unit.mean_days())
        pivot = lo

        # Mean unit lengths can overshoot by one; step back until it fits
        while count > 0:
            probe, overflowed = calendar.add_units(lo, unit, count)
            if not overflowed and probe is not None and probe <= hi:
                pivot = probe
                break
            count -= 1

        while True:
            probe, overflowed = calendar.add_units(lo, unit, count + 1)
            if overflowed or probe is None or probe > hi:
                break
            count += 1
            pivot = probe

        logger.debug("Fitted %d x %s from %s", count, unit.name, lo.date())
        return count, pivot

    def apply_difference(
        self, start: datetime, diff: DateDifference
    ) -> tuple[datetime | None, bool]:
        """Add a DateDifference to a date, year -> month -> week -> day.

        This is the inverse of ``get_date_difference`` for the earlier
        endpoint.

        Returns:
            ``(result, ok)``; ok is False if any step left the range.
        """
        return self._apply(
            start,
            (
                (DateUnit.YEAR, diff.years),
                (DateUnit.MONTH, diff.months),
                (DateUnit.WEEK, diff.weeks),
                (DateUnit.DAY, diff.days),
            ),
        )

    def add_duration(
        self, start: datetime, offset: OffsetSpec
    ) -> tuple[datetime | None, bool]:
        """Add an offset to a date, year -> month -> day.

        A start whose UTC day lies outside the calendar range gives
        ``(None, False)``.

        Examples:
            >>> from datecalc.calendar import GregorianCalendarAdapter
            >>> cal = GregorianCalendarAdapter()
            >>> engine = DateCalculationEngine(cal)
            >>> result, ok = engine.add_duration(cal.date(2023, 1, 31), OffsetSpec(months=1))
            >>> result.date(), ok
            (datetime.date(2023, 2, 28), True)

        Returns:
            ``(result, ok)``. When ok is False the result is None.
        """
        return self._apply(
            start,
            (
                (DateUnit.YEAR, offset.years),
                (DateUnit.MONTH, offset.months),
                (DateUnit.DAY, offset.days),
            ),
        )

    def subtract_duration(
        self, start: datetime, offset: OffsetSpec
    ) -> tuple[datetime | None, bool]:
        """Subtract an offset from a date, day -> month -> year.

        The steps mirror ``add_duration`` (reverse order, negated counts),
        so subtracting an offset undoes adding it unless a month step
        clipped the day.

        Examples:
            >>> from datecalc.calendar import GregorianCalendarAdapter
            >>> cal = GregorianCalendarAdapter()
            >>> engine = DateCalculationEngine(cal)
            >>> result, ok = engine.subtract_duration(
            ...     cal.date(2023, 3, 5), OffsetSpec(months=1, days=5)
            ... )
            >>> result.date()
            datetime.date(2023, 1, 28)
        """
        negated = -offset
        return self._apply(
            start,
            (
                (DateUnit.DAY, negated.days),
                (DateUnit.MONTH, negated.months),
                (DateUnit.YEAR, negated.years),
            ),
        )

    def _apply(
        self, start: datetime, steps: tuple[tuple[DateUnit, int], ...]
    ) -> tuple[datetime | None, bool]:
        calendar = self._calendar
        if not calendar.contains(start):
            logger.debug("Start %s is outside the calendar range", start.isoformat())
            return (None, False)
        result = calendar.clip_to_day(start)
        for unit, count in steps:
            if count == 0:
                continue
            step, overflowed = calendar.add_units(result, unit, count)
            if overflowed or step is None:
                logger.debug(
                    "Out of range adding %d x %s to %s", count, unit.name, result.date()
                )
                return (None, False)
            result = step
        return (result, True)


__all__ = ["DateCalculationEngine"]
