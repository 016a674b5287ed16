"""Turn date differences and dates into display strings.

Rules for a decomposed difference:
    - Units appear in year, month, week, day order.
    - Zero units are left out ("1 Year, 3 Days", never "0 Months").
    - A count of 1 uses the singular label, larger counts the plural one.
    - The list separator goes between units only.

An all-zero difference renders as the empty string; the controller
replaces it with the "same dates" sentence.
"""

from __future__ import annotations

from datetime import datetime

from datecalc.core.difference import DateDifference
from datecalc.format.longdate import (
    LongDateFormatter,
    LongDateFormatterFactory,
    make_long_date_formatter,
)
from datecalc.services import (
    DATE_DAY,
    DATE_DAYS,
    DATE_MONTH,
    DATE_MONTHS,
    DATE_WEEK,
    DATE_WEEKS,
    DATE_YEAR,
    DATE_YEARS,
    LocalizationSettings,
    StringCatalog,
)


class DateDifferenceFormatter:
    """Formatter for DateDifference values and canonical dates.

    Args:
        localization: Supplies the list separator, digit rendering, and
            the calendar identifier for long dates.
        catalog: Supplies singular and plural unit labels.
        date_formatter_factory: Builds the long-date formatter; defaults
            to ``make_long_date_formatter``.

    Examples:
        >>> from datecalc.services import DefaultLocalizationSettings, DictStringCatalog
        >>> fmt = DateDifferenceFormatter(DefaultLocalizationSettings(), DictStringCatalog())
        >>> fmt.format_difference(DateDifference(years=2, weeks=1, days=3))
        '2 Years, 1 Week, 3 Days'
        >>> fmt.format_days(DateDifference(days=1))
        '1 Day'
    """

    def __init__(
        self,
        localization: LocalizationSettings,
        catalog: StringCatalog,
        date_formatter_factory: LongDateFormatterFactory | None = None,
    ) -> None:
        self._localization = localization
        self._catalog = catalog
        # e.g. ", "
        self._separator = localization.list_separator + " "
        factory = date_formatter_factory or make_long_date_formatter
        self._date_formatter: LongDateFormatter = factory(
            localization.calendar_identifier, localization
        )

    @property
    def separator(self) -> str:
        return self._separator

    def format_number(self, value: int) -> str:
        """Render a non-negative integer in the user's digits."""
        return self._localization.localize_digits(str(value))

    def _format_unit(self, count: int, singular: str, plural: str) -> str:
        key = plural if count > 1 else singular
        return f"{self.format_number(count)} {self._catalog.get(key)}"

    def format_difference(self, diff: DateDifference) -> str:
        parts = []
        for count, singular, plural in (
            (diff.years, DATE_YEAR, DATE_YEARS),
            (diff.months, DATE_MONTH, DATE_MONTHS),
            (diff.weeks, DATE_WEEK, DATE_WEEKS),
            (diff.days, DATE_DAY, DATE_DAYS),
        ):
            if count > 0:
                parts.append(self._format_unit(count, singular, plural))
        return self._separator.join(parts)

    def format_days(self, diff: DateDifference) -> str:
        """Render the days field alone: "1 Day" or "N Days"."""
        return self._format_unit(diff.days, DATE_DAY, DATE_DAYS)

    def format_date(self, date: datetime) -> str:
        return self._date_formatter.format(date)


__all__ = ["DateDifferenceFormatter"]
