"""Tests for DateCalculationEngine.

Differences are checked against the properties the decomposition must
hold (round trip, mask, day count) as well as worked examples. Offsets
are checked for month clipping, overflow and the add/subtract inverse.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta, timezone
from itertools import product

import pytest

from datecalc.arithmetic.engine import DateCalculationEngine
from datecalc.calendar.adapter import GregorianCalendarAdapter
from datecalc.core.difference import DateDifference
from datecalc.core.offset import OffsetSpec
from datecalc.units.dateunit import DateUnit

UTC = timezone.utc


def utc(year: int, month: int, day: int, *hms: int) -> datetime:
    return datetime(year, month, day, *hms, tzinfo=UTC)


# Month ends, leap days, year ends and range edges
INTERESTING_DATES = [
    utc(1, 1, 1),
    utc(1, 2, 28),
    utc(1999, 12, 31),
    utc(2000, 2, 29),
    utc(2020, 1, 1),
    utc(2020, 2, 29),
    utc(2021, 2, 28),
    utc(2023, 1, 31),
    utc(2023, 3, 1),
    utc(2023, 3, 17),
    utc(2023, 5, 31),
    utc(2024, 6, 15),
    utc(2100, 2, 28),
    utc(9999, 12, 1),
    utc(9999, 12, 31),
]

PAIRS = [(a, b) for a, b in product(INTERESTING_DATES, repeat=2) if a <= b]

MASKS = [
    DateUnit.ALL,
    DateUnit.DAY,
    DateUnit.WEEK | DateUnit.DAY,
    DateUnit.MONTH | DateUnit.DAY,
    DateUnit.YEAR | DateUnit.DAY,
    DateUnit.YEAR | DateUnit.MONTH | DateUnit.DAY,
]


# =============================================================================
# Construction
# =============================================================================


class TestConstruction:
    """Tests for building engines."""

    def test_for_calendar(self) -> None:
        """Test the engine can build its own adapter."""
        engine = DateCalculationEngine.for_calendar("GregorianCalendar")
        assert isinstance(engine.calendar, GregorianCalendarAdapter)

    def test_calendar_property(self, engine: DateCalculationEngine, calendar) -> None:
        """Test the adapter passed in is the one used."""
        assert engine.calendar is calendar


# =============================================================================
# Difference properties
# =============================================================================


class TestDifferenceProperties:
    """Properties every decomposition must satisfy."""

    @pytest.mark.parametrize("lo,hi", PAIRS)
    def test_round_trip(self, engine: DateCalculationEngine, lo, hi) -> None:
        """Test applying the decomposition to the earlier date gives the later."""
        diff = engine.get_date_difference(lo, hi, DateUnit.ALL)
        result, ok = engine.apply_difference(lo, diff)
        assert ok
        assert result == hi

    @pytest.mark.parametrize("mask", MASKS)
    def test_round_trip_per_mask(self, engine: DateCalculationEngine, mask) -> None:
        """Test every mask containing DAY round-trips."""
        for lo, hi in PAIRS:
            diff = engine.get_date_difference(lo, hi, mask)
            result, ok = engine.apply_difference(lo, diff)
            assert ok and result == hi, (lo, hi, mask, diff)

    @pytest.mark.parametrize("lo,hi", PAIRS)
    def test_non_negative(self, engine: DateCalculationEngine, lo, hi) -> None:
        """Test every field is non-negative."""
        diff = engine.get_date_difference(lo, hi, DateUnit.ALL)
        assert min(diff.years, diff.months, diff.weeks, diff.days) >= 0

    @pytest.mark.parametrize("mask", MASKS)
    def test_mask_honored(self, engine: DateCalculationEngine, mask) -> None:
        """Test units outside the mask stay zero."""
        for lo, hi in PAIRS:
            diff = engine.get_date_difference(lo, hi, mask)
            for unit in DateUnit.ALL.units():
                if unit not in mask:
                    assert diff.get(unit) == 0, (lo, hi, mask, diff)

    @pytest.mark.parametrize("lo,hi", PAIRS)
    def test_days_consistency(self, engine: DateCalculationEngine, lo, hi) -> None:
        """Test the days-only decomposition equals the civil day count."""
        diff = engine.get_date_difference(lo, hi, DateUnit.DAY)
        assert diff == DateDifference(days=(hi.date() - lo.date()).days)

    @pytest.mark.parametrize("lo,hi", PAIRS)
    def test_argument_order(self, engine: DateCalculationEngine, lo, hi) -> None:
        """Test swapping the endpoints gives the same decomposition."""
        assert engine.get_date_difference(
            lo, hi, DateUnit.ALL
        ) == engine.get_date_difference(hi, lo, DateUnit.ALL)

    def test_no_error_logged(self, engine: DateCalculationEngine, caplog) -> None:
        """Test a complete decomposition never logs a shortfall."""
        with caplog.at_level(logging.ERROR, logger="datecalc.arithmetic.engine"):
            for lo, hi in PAIRS:
                engine.get_date_difference(lo, hi, DateUnit.ALL)
        assert not caplog.records

    def test_time_of_day_ignored(self, engine: DateCalculationEngine) -> None:
        """Test endpoints are clipped to their UTC day first."""
        diff = engine.get_date_difference(
            utc(2024, 6, 15, 23, 59), utc(2024, 6, 16, 0, 1), DateUnit.DAY
        )
        assert diff == DateDifference(days=1)

    def test_same_instant_day(self, engine: DateCalculationEngine) -> None:
        """Test two times on one day are zero apart."""
        diff = engine.get_date_difference(
            utc(2024, 6, 15, 1), utc(2024, 6, 15, 22), DateUnit.ALL
        )
        assert diff.is_zero


# =============================================================================
# Worked differences
# =============================================================================


class TestDifferenceExamples:
    """Worked examples of the largest-unit-first rule."""

    def test_leap_day_to_next_february(self, engine: DateCalculationEngine) -> None:
        """Test Feb 29 + 1 year clips to Feb 28, so the gap is one year."""
        diff = engine.get_date_difference(utc(2020, 2, 29), utc(2021, 2, 28), DateUnit.ALL)
        assert diff == DateDifference(years=1)

    def test_years_months_weeks(self, engine: DateCalculationEngine) -> None:
        """Test a gap that ends exactly on a week boundary has no days."""
        diff = engine.get_date_difference(utc(2020, 1, 1), utc(2023, 3, 15), DateUnit.ALL)
        assert diff == DateDifference(years=3, months=2, weeks=2)

    def test_all_four_units(self, engine: DateCalculationEngine) -> None:
        """Test a gap using every unit."""
        diff = engine.get_date_difference(utc(2020, 1, 1), utc(2023, 3, 17), DateUnit.ALL)
        assert diff == DateDifference(years=3, months=2, weeks=2, days=2)

    def test_single_week(self, engine: DateCalculationEngine) -> None:
        """Test seven days decompose to one week."""
        diff = engine.get_date_difference(utc(2023, 3, 10), utc(2023, 3, 17), DateUnit.ALL)
        assert diff == DateDifference(weeks=1)

    def test_month_end_clip(self, engine: DateCalculationEngine) -> None:
        """Test Jan 31 + 1 month is Feb 28, leaving one day to Mar 1."""
        diff = engine.get_date_difference(utc(2023, 1, 31), utc(2023, 3, 1), DateUnit.ALL)
        assert diff == DateDifference(months=1, days=1)

    def test_eight_weeks_prefers_months(self, engine: DateCalculationEngine) -> None:
        """Test 56 days across a month boundary takes a month first."""
        diff = engine.get_date_difference(utc(2023, 1, 15), utc(2023, 3, 12), DateUnit.ALL)
        assert diff == DateDifference(months=1, weeks=3, days=4)

    def test_eight_weeks_without_months(self, engine: DateCalculationEngine) -> None:
        """Test the same gap without months in the mask is eight weeks."""
        diff = engine.get_date_difference(
            utc(2023, 1, 15), utc(2023, 3, 12), DateUnit.WEEK | DateUnit.DAY
        )
        assert diff == DateDifference(weeks=8)

    def test_months_only_mask(self, engine: DateCalculationEngine) -> None:
        """Test a mask without DAY may leave a remainder."""
        diff = engine.get_date_difference(utc(2023, 1, 15), utc(2023, 3, 12), DateUnit.MONTH)
        assert diff == DateDifference(months=1)

    def test_full_range(self, engine: DateCalculationEngine, calendar) -> None:
        """Test the widest difference the calendar can represent."""
        diff = engine.get_date_difference(calendar.min_date, calendar.max_date, DateUnit.ALL)
        assert diff == DateDifference(years=9998, months=11, weeks=4, days=2)

        days = engine.get_date_difference(calendar.min_date, calendar.max_date, DateUnit.DAY)
        assert days.days == 3652058

    def test_input_outside_range_in_utc(self, engine: DateCalculationEngine, calendar) -> None:
        """Test inputs past either end in UTC are measured from that end."""
        before = datetime(1, 1, 1, 0, 30, tzinfo=timezone(timedelta(hours=1)))
        after = datetime(9999, 12, 31, 22, 0, tzinfo=timezone(timedelta(hours=-5)))
        assert engine.get_date_difference(before, calendar.min_date, DateUnit.DAY) == (
            DateDifference()
        )
        assert engine.get_date_difference(calendar.max_date, after, DateUnit.DAY) == (
            DateDifference()
        )

    def test_same_dates(self, engine: DateCalculationEngine) -> None:
        """Test identical dates give a zero difference."""
        diff = engine.get_date_difference(utc(2024, 6, 15), utc(2024, 6, 15), DateUnit.ALL)
        assert diff == DateDifference(days=0)


# =============================================================================
# Offsets
# =============================================================================


class TestAddDuration:
    """Tests for add_duration."""

    def test_month_clip(self, engine: DateCalculationEngine) -> None:
        """Test Jan 31 + 1 month clips to Feb 28."""
        result, ok = engine.add_duration(utc(2023, 1, 31), OffsetSpec(months=1))
        assert ok
        assert result == utc(2023, 2, 28)

    def test_order_year_month_day(self, engine: DateCalculationEngine) -> None:
        """Test years go first, then months, then days."""
        # 2023-01-31 +1y = 2024-01-31, +1m = 2024-02-29, +1d = 2024-03-01
        result, ok = engine.add_duration(utc(2023, 1, 31), OffsetSpec(1, 1, 1))
        assert ok
        assert result == utc(2024, 3, 1)

    def test_zero_offset_clips(self, engine: DateCalculationEngine) -> None:
        """Test a zero offset returns the clipped start."""
        result, ok = engine.add_duration(utc(2024, 6, 15, 18, 45), OffsetSpec())
        assert ok
        assert result == utc(2024, 6, 15)

    def test_maximum_offsets(self, engine: DateCalculationEngine) -> None:
        """Test the largest picker values stay in range."""
        result, ok = engine.add_duration(utc(2024, 6, 15), OffsetSpec(999, 999, 999))
        # +999y = 3023-06-15, +999m (83y 3m) = 3106-09-15
        expected = date(3106, 9, 15) + timedelta(days=999)
        assert ok
        assert result.date() == expected

    @pytest.mark.parametrize(
        "start,offset",
        [
            (utc(9999, 12, 31), OffsetSpec(days=1)),
            (utc(9999, 6, 1), OffsetSpec(years=1)),
            (utc(9999, 12, 1), OffsetSpec(months=1)),
            (utc(9500, 1, 1), OffsetSpec(years=999)),
        ],
    )
    def test_overflow(self, engine: DateCalculationEngine, start, offset) -> None:
        """Test results past 9999-12-31 are reported, not clamped."""
        assert engine.add_duration(start, offset) == (None, False)

    def test_start_after_range_in_utc(self, engine: DateCalculationEngine) -> None:
        """Test a start whose UTC day is 10000-01-01 is out of range."""
        start = datetime(9999, 12, 31, 22, 0, tzinfo=timezone(timedelta(hours=-5)))
        assert engine.add_duration(start, OffsetSpec()) == (None, False)
        assert engine.subtract_duration(start, OffsetSpec(days=1)) == (None, False)


class TestSubtractDuration:
    """Tests for subtract_duration."""

    def test_before_minimum(self, engine: DateCalculationEngine) -> None:
        """Test 0001-01-01 - 1 day is out of range."""
        assert engine.subtract_duration(utc(1, 1, 1), OffsetSpec(days=1)) == (None, False)

    @pytest.mark.parametrize(
        "offset", [OffsetSpec(months=1), OffsetSpec(years=1), OffsetSpec(years=999)]
    )
    def test_underflow(self, engine: DateCalculationEngine, offset) -> None:
        """Test results before 0001-01-01 are reported."""
        result, ok = engine.subtract_duration(utc(1, 1, 31), offset)
        assert not ok
        assert result is None

    def test_start_before_range_in_utc(self, engine: DateCalculationEngine) -> None:
        """Test a start whose UTC day is 0000-12-31 is out of range."""
        start = datetime(1, 1, 1, 0, 30, tzinfo=timezone(timedelta(hours=1)))
        assert engine.subtract_duration(start, OffsetSpec()) == (None, False)
        assert engine.add_duration(start, OffsetSpec(days=1)) == (None, False)

    def test_order_day_month_year(self, engine: DateCalculationEngine) -> None:
        """Test days go first, then months, then years."""
        # 2024-03-01 -1d = 2024-02-29, -1m = 2024-01-29, -1y = 2023-01-29
        result, ok = engine.subtract_duration(utc(2024, 3, 1), OffsetSpec(1, 1, 1))
        assert ok
        assert result == utc(2023, 1, 29)

    def test_month_clip(self, engine: DateCalculationEngine) -> None:
        """Test Mar 31 - 1 month clips to Feb 28."""
        result, ok = engine.subtract_duration(utc(2023, 3, 31), OffsetSpec(months=1))
        assert ok
        assert result == utc(2023, 2, 28)


class TestInverse:
    """Subtracting an offset undoes adding it where no month step clips."""

    STARTS = [
        utc(year, month, day)
        for year in (1, 2000, 2023, 2024)
        for month in (1, 2, 6, 12)
        for day in (1, 15, 28)
    ]
    OFFSETS = [
        OffsetSpec(0, 0, 1),
        OffsetSpec(0, 1, 0),
        OffsetSpec(1, 0, 0),
        OffsetSpec(1, 1, 1),
        OffsetSpec(0, 13, 45),
        OffsetSpec(5, 0, 400),
        OffsetSpec(999, 999, 999),
    ]

    @pytest.mark.parametrize("offset", OFFSETS)
    def test_inverse_on_safe_days(self, engine: DateCalculationEngine, offset) -> None:
        """Test start days up to the 28th always round-trip."""
        for start in self.STARTS:
            added, ok = engine.add_duration(start, offset)
            assert ok
            back, ok = engine.subtract_duration(added, offset)
            assert ok
            assert back == start, (start, offset, added)

    @pytest.mark.parametrize(
        "start,offset,expected",
        [
            (utc(2023, 1, 31), OffsetSpec(months=1), utc(2023, 1, 28)),
            (utc(2024, 1, 31), OffsetSpec(months=1), utc(2024, 1, 29)),
            (utc(2024, 2, 29), OffsetSpec(years=1), utc(2024, 2, 28)),
            (utc(2023, 3, 31), OffsetSpec(months=1), utc(2023, 3, 30)),
            (utc(2023, 8, 31), OffsetSpec(months=1), utc(2023, 8, 30)),
        ],
    )
    def test_month_clip_exceptions(
        self, engine: DateCalculationEngine, start, offset, expected
    ) -> None:
        """Test a clipped month step loses the original day."""
        added, ok = engine.add_duration(start, offset)
        assert ok
        back, ok = engine.subtract_duration(added, offset)
        assert ok
        assert back == expected


class TestApplyDifference:
    """Tests for apply_difference."""

    def test_applies_weeks(self, engine: DateCalculationEngine) -> None:
        """Test weeks are applied between months and days."""
        result, ok = engine.apply_difference(
            utc(2020, 1, 1), DateDifference(years=3, months=2, weeks=2, days=2)
        )
        assert ok
        assert result == utc(2023, 3, 17)

    def test_overflow(self, engine: DateCalculationEngine, calendar) -> None:
        """Test leaving the range reports failure."""
        assert engine.apply_difference(
            calendar.max_date, DateDifference(weeks=1)
        ) == (None, False)
