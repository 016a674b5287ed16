"""Calendar adapter: day-granular arithmetic over UTC-anchored timestamps.

Timestamps are timezone-aware ``datetime.datetime`` values. A canonical
date is the timestamp at 00:00:00 UTC of a civil day; every date the
adapter returns is canonical. Naive datetimes are read as UTC.

Month and year arithmetic clip to the last valid day of the target month:

    2023-01-31 + 1 month -> 2023-02-28
    2024-02-29 + 1 year  -> 2025-02-28

Results outside 0001-01-01 .. 9999-12-31 are reported as overflow rather
than raised. Inputs whose UTC day is outside that range are pinned to the
nearest edge by ``clip_to_day`` and flagged by ``contains``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Callable

from datecalc._internal.calendar import (
    MAX_ORDINAL,
    MIN_ORDINAL,
    add_months_clipped,
    in_range,
    ordinal_to_day_of_week,
    ordinal_to_ymd,
    validate_date,
    ymd_to_ordinal,
)
from datecalc._internal.constants import (
    DAYS_PER_WEEK,
    GREGORIAN_CALENDAR,
    MAX_YEAR,
    MIN_YEAR,
)
from datecalc.errors import CalendarError, OutOfRangeError
from datecalc.services import TelemetrySink
from datecalc.units.dateunit import DateField, DateUnit

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def utc_day_ordinal(ts: datetime) -> int:
    """Return the ordinal of the UTC civil day containing ``ts``.

    Worked out from the wall-clock fields and ``utcoffset()``, so the result
    exists even when the UTC instant is outside what ``datetime`` can hold
    (it is then below 1 or above the ordinal of 9999-12-31). Naive values
    are read as UTC.

    Examples:
        >>> utc_day_ordinal(datetime(1, 1, 1, 0, 30, tzinfo=timezone(timedelta(hours=1))))
        0
    """
    offset = ts.utcoffset() or timedelta(0)
    wall = timedelta(
        hours=ts.hour, minutes=ts.minute, seconds=ts.second, microseconds=ts.microsecond
    )
    return ymd_to_ordinal(ts.year, ts.month, ts.day) + (wall - offset).days


def as_utc(ts: datetime) -> datetime:
    """Return ``ts`` expressed in UTC; naive values are taken as UTC.

    Raises:
        OutOfRangeError: If the UTC instant falls outside
            0001-01-01 .. 9999-12-31.
    """
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    if not MIN_ORDINAL <= utc_day_ordinal(ts) <= MAX_ORDINAL:
        raise OutOfRangeError(f"{ts.isoformat()} is outside the representable range in UTC")
    return ts.astimezone(timezone.utc)


class CalendarAdapter(ABC):
    """Day-level calendar operations for one calendar system."""

    @property
    @abstractmethod
    def calendar_identifier(self) -> str:
        """The calendar system this adapter implements."""

    @property
    @abstractmethod
    def min_date(self) -> datetime:
        """Earliest representable canonical date."""

    @property
    @abstractmethod
    def max_date(self) -> datetime:
        """Latest representable canonical date."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current instant."""

    @abstractmethod
    def clip_to_day(self, ts: datetime, report: bool = False) -> datetime:
        """Return the canonical date of the civil day containing ``ts``.

        With ``report`` set, a clip that lands on another weekday than the
        user sees locally is sent to telemetry.
        """

    @abstractmethod
    def contains(self, ts: datetime) -> bool:
        """Return True if the UTC civil day of ``ts`` is representable."""

    @abstractmethod
    def add_units(
        self, date: datetime, unit: DateUnit, n: int
    ) -> tuple[datetime | None, bool]:
        """Advance ``date`` by ``n`` units.

        Returns:
            ``(result, overflowed)``. When overflowed is True the result is
            None and must not be used.
        """

    @abstractmethod
    def diff_days(self, a: datetime, b: datetime) -> int:
        """Return the signed number of civil days ``b - a``."""

    @abstractmethod
    def field(self, date: datetime, f: DateField) -> int:
        """Extract a component of ``date``."""

    @abstractmethod
    def date(self, year: int, month: int, day: int) -> datetime:
        """Build a canonical date from components."""

    def today(self) -> datetime:
        """Return the canonical date of ``now()``, reporting a weekday mismatch."""
        return self.clip_to_day(self.now(), report=True)


class GregorianCalendarAdapter(CalendarAdapter):
    """Calendar adapter for the proleptic Gregorian calendar.

    Args:
        telemetry: Receives clip anomaly events. Optional.
        clock: Returns the current instant; defaults to the system clock.
        local_tz: The user's time zone, used only to detect clip
            anomalies. None means the system local zone.

    Examples:
        >>> cal = GregorianCalendarAdapter()
        >>> jan31 = cal.date(2023, 1, 31)
        >>> cal.add_units(jan31, DateUnit.MONTH, 1)[0].date()
        datetime.date(2023, 2, 28)
        >>> cal.add_units(cal.max_date, DateUnit.DAY, 1)
        (None, True)
    """

    def __init__(
        self,
        telemetry: TelemetrySink | None = None,
        clock: Clock | None = None,
        local_tz: tzinfo | None = None,
    ) -> None:
        self._telemetry = telemetry
        self._clock = clock if clock is not None else _utc_now
        self._local_tz = local_tz

    @property
    def calendar_identifier(self) -> str:
        return GREGORIAN_CALENDAR

    @property
    def min_date(self) -> datetime:
        return datetime(MIN_YEAR, 1, 1, tzinfo=timezone.utc)

    @property
    def max_date(self) -> datetime:
        return datetime(MAX_YEAR, 12, 31, tzinfo=timezone.utc)

    def now(self) -> datetime:
        return as_utc(self._clock())

    def clip_to_day(self, ts: datetime, report: bool = False) -> datetime:
        """Set the time of day to 00:00:00.000 UTC.

        Differences are computed in UTC, so clipping there keeps daylight
        saving offsets from moving a date across midnight. A timestamp whose
        UTC day lies outside the range is pinned to ``min_date`` or
        ``max_date``; use ``contains`` to tell that case apart.

        Args:
            ts: Any timestamp; naive values are read as UTC.
            report: When True and clipping moves the timestamp onto another
                weekday than the user sees locally, the event is reported
                to telemetry. The result is not changed.

        Examples:
            >>> cal = GregorianCalendarAdapter()
            >>> cal.clip_to_day(datetime(2024, 6, 15, 23, 59, tzinfo=timezone.utc))
            datetime.datetime(2024, 6, 15, 0, 0, tzinfo=datetime.timezone.utc)
        """
        if ts.tzinfo is None:
            ts = ts.replace(tzinfo=timezone.utc)
        ordinal = utc_day_ordinal(ts)
        if ordinal < MIN_ORDINAL:
            logger.debug("%s is before the calendar range in UTC", ts.isoformat())
            return self.min_date
        if ordinal > MAX_ORDINAL:
            logger.debug("%s is after the calendar range in UTC", ts.isoformat())
            return self.max_date

        # Built from components: nothing carries over from the input value
        year, month, day = ordinal_to_ymd(ordinal)
        clipped = datetime(year, month, day, tzinfo=timezone.utc)
        if report and clipped != ts:
            self._check_day_of_week(ts, clipped)
        return clipped

    def contains(self, ts: datetime) -> bool:
        return MIN_ORDINAL <= utc_day_ordinal(ts) <= MAX_ORDINAL

    def _check_day_of_week(self, original: datetime, clipped: datetime) -> None:
        try:
            local = original.astimezone(self._local_tz)
        except (OverflowError, ValueError):
            # Local conversion at the edges of the datetime range
            return
        if local.weekday() != clipped.weekday():
            logger.debug(
                "Clip of %s moved the local weekday from %d to %d",
                original.isoformat(),
                local.weekday(),
                clipped.weekday(),
            )
            if self._telemetry is not None:
                self._telemetry.date_clipped_time_difference_found(
                    self.calendar_identifier, clipped
                )

    def add_units(
        self, date: datetime, unit: DateUnit, n: int
    ) -> tuple[datetime | None, bool]:
        utc = as_utc(date)
        year, month, day = utc.year, utc.month, utc.day

        if unit is DateUnit.DAY or unit is DateUnit.WEEK:
            step = DAYS_PER_WEEK if unit is DateUnit.WEEK else 1
            ordinal = ymd_to_ordinal(year, month, day) + n * step
            if ordinal < MIN_ORDINAL or ordinal > MAX_ORDINAL:
                return (None, True)
            year, month, day = ordinal_to_ymd(ordinal)
        elif unit is DateUnit.MONTH or unit is DateUnit.YEAR:
            months = n * 12 if unit is DateUnit.YEAR else n
            year, month, day = add_months_clipped(year, month, day, months)
            if not in_range(year):
                return (None, True)
        else:
            raise ValueError(f"{unit!r} is not a single unit")

        return (datetime(year, month, day, tzinfo=timezone.utc), False)

    def diff_days(self, a: datetime, b: datetime) -> int:
        return utc_day_ordinal(b) - utc_day_ordinal(a)

    def field(self, date: datetime, f: DateField) -> int:
        utc = as_utc(date)
        if f is DateField.YEAR:
            return utc.year
        if f is DateField.MONTH:
            return utc.month
        if f is DateField.DAY:
            return utc.day
        if f is DateField.WEEK:
            return utc.isocalendar()[1]
        if f is DateField.DAY_OF_WEEK:
            return ordinal_to_day_of_week(ymd_to_ordinal(utc.year, utc.month, utc.day))
        raise ValueError(f"unsupported field: {f!r}")

    def date(self, year: int, month: int, day: int) -> datetime:
        """Build a canonical date.

        Raises:
            ValidationError: If the components do not form a valid date
                in 0001-01-01 .. 9999-12-31.
        """
        validate_date(year, month, day)
        return datetime(year, month, day, tzinfo=timezone.utc)


_CALENDARS: dict[str, type[CalendarAdapter]] = {
    GREGORIAN_CALENDAR: GregorianCalendarAdapter,
}


def make_calendar(
    identifier: str,
    telemetry: TelemetrySink | None = None,
    clock: Clock | None = None,
    local_tz: tzinfo | None = None,
) -> CalendarAdapter:
    """Build the adapter for a calendar identifier.

    Raises:
        CalendarError: If no adapter exists for the identifier.
    """
    try:
        cls = _CALENDARS[identifier]
    except KeyError:
        raise CalendarError(
            f"unsupported calendar {identifier!r}; "
            f"available: {', '.join(sorted(_CALENDARS))}"
        ) from None
    return cls(telemetry=telemetry, clock=clock, local_tz=local_tz)


__all__ = [
    "CalendarAdapter",
    "GregorianCalendarAdapter",
    "make_calendar",
    "as_utc",
    "utc_day_ordinal",
]
