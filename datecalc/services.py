"""Collaborator interfaces consumed by the date calculator.

The calculator does not load string catalogs, touch a real clipboard, or
ship telemetry itself. It is handed objects that satisfy the protocols in
this module. Simple in-process implementations are provided for the CLI
and for tests:

    - DefaultLocalizationSettings: calendar id, list separator, digits
    - DictStringCatalog: English strings keyed by resource name
    - LoggingTelemetrySink / RecordingTelemetrySink: clip anomaly events
    - MemoryClipboard: remembers the last copied text
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Mapping, Protocol, runtime_checkable

from datecalc._internal.constants import GREGORIAN_CALENDAR
from datecalc.errors import MissingResourceError, ValidationError

logger = logging.getLogger(__name__)


# String catalog keys
DATE_SAME_DATES = "Date_SameDates"
DATE_OUT_OF_BOUND_MESSAGE = "Date_OutOfBoundMessage"
DATE_YEAR = "Date_Year"
DATE_YEARS = "Date_Years"
DATE_MONTH = "Date_Month"
DATE_MONTHS = "Date_Months"
DATE_WEEK = "Date_Week"
DATE_WEEKS = "Date_Weeks"
DATE_DAY = "Date_Day"
DATE_DAYS = "Date_Days"
DATE_DIFFERENCE_RESULT_AUTOMATION_NAME = "Date_DifferenceResultAutomationName"
DATE_RESULTING_DATE_AUTOMATION_NAME = "Date_ResultingDateAutomationName"

ENGLISH_STRINGS: dict[str, str] = {
    DATE_SAME_DATES: "Same dates",
    DATE_OUT_OF_BOUND_MESSAGE: "Date out of Bound",
    DATE_YEAR: "Year",
    DATE_YEARS: "Years",
    DATE_MONTH: "Month",
    DATE_MONTHS: "Months",
    DATE_WEEK: "Week",
    DATE_WEEKS: "Weeks",
    DATE_DAY: "Day",
    DATE_DAYS: "Days",
    DATE_DIFFERENCE_RESULT_AUTOMATION_NAME: "Difference: {0}",
    DATE_RESULTING_DATE_AUTOMATION_NAME: "Resulting date: {0}",
}

# Native digits per numbering system, indexed by ASCII digit value
NUMBERING_SYSTEMS: dict[str, str] = {
    "latn": "0123456789",
    "arab": "٠١٢٣٤٥٦٧٨٩",
    "arabext": "۰۱۲۳۴۵۶۷۸۹",
    "deva": "०१२३४५६७८९",
    "thai": "๐๑๒๓๔๕๖๗๘๙",
}


@runtime_checkable
class LocalizationSettings(Protocol):
    """User locale settings the calculator reads."""

    @property
    def calendar_identifier(self) -> str: ...

    @property
    def list_separator(self) -> str: ...

    def localize_digits(self, text: str) -> str:
        """Rewrite ASCII digits into the user's numbering system."""
        ...


@runtime_checkable
class StringCatalog(Protocol):
    """Lookup of localized strings by resource key."""

    def get(self, key: str) -> str:
        """Return the string for key, raising MissingResourceError if absent."""
        ...


@runtime_checkable
class TelemetrySink(Protocol):
    """Receives diagnostic events from the calendar adapter."""

    def date_clipped_time_difference_found(
        self, calendar: str, clipped: datetime
    ) -> None: ...


@runtime_checkable
class Clipboard(Protocol):
    def copy(self, text: str) -> None: ...


class DefaultLocalizationSettings:
    """Localization settings held in memory.

    Args:
        calendar_identifier: Calendar system id.
        list_separator: Separator placed between units, without the
            trailing space (the formatter appends one).
        digits: Ten characters used for 0-9; ASCII digits by default.

    Examples:
        >>> s = DefaultLocalizationSettings.for_numbering_system("arab")
        >>> s.localize_digits("12")
        '١٢'
    """

    def __init__(
        self,
        calendar_identifier: str = GREGORIAN_CALENDAR,
        list_separator: str = ",",
        digits: str = NUMBERING_SYSTEMS["latn"],
    ) -> None:
        if len(digits) != 10:
            raise ValidationError(f"digits must have 10 characters, got {len(digits)}")
        self._calendar_identifier = calendar_identifier
        self._list_separator = list_separator
        self._table = str.maketrans("0123456789", digits)

    @classmethod
    def for_numbering_system(
        cls,
        name: str,
        calendar_identifier: str = GREGORIAN_CALENDAR,
        list_separator: str = ",",
    ) -> DefaultLocalizationSettings:
        """Build settings for a named numbering system ("latn", "arab", ...).

        Raises:
            ValidationError: If the numbering system is unknown.
        """
        try:
            digits = NUMBERING_SYSTEMS[name]
        except KeyError:
            raise ValidationError(f"unknown numbering system: {name!r}") from None
        return cls(calendar_identifier, list_separator, digits)

    @property
    def calendar_identifier(self) -> str:
        return self._calendar_identifier

    @property
    def list_separator(self) -> str:
        return self._list_separator

    def localize_digits(self, text: str) -> str:
        return text.translate(self._table)


class DictStringCatalog:
    """A string catalog backed by a mapping.

    Missing keys raise MissingResourceError; there is no fallback text.

    Examples:
        >>> DictStringCatalog().get("Date_Days")
        'Days'
        >>> DictStringCatalog({"Date_Days": "jours"}).get("Date_Days")
        'jours'
    """

    def __init__(self, strings: Mapping[str, str] | None = None) -> None:
        self._strings: dict[str, str] = dict(ENGLISH_STRINGS)
        if strings is not None:
            self._strings.update(strings)

    def get(self, key: str) -> str:
        try:
            return self._strings[key]
        except KeyError:
            raise MissingResourceError(key) from None


class LoggingTelemetrySink:
    """Report clip anomalies to the ``datecalc.services`` logger."""

    def date_clipped_time_difference_found(
        self, calendar: str, clipped: datetime
    ) -> None:
        logger.warning(
            "Clipped date %s changed the day of week (calendar=%s)",
            clipped.isoformat(),
            calendar,
        )


@dataclass(frozen=True)
class ClipEvent:
    calendar: str
    clipped: datetime


@dataclass
class RecordingTelemetrySink:
    """Keep every reported event in ``events``."""

    events: list[ClipEvent] = field(default_factory=list)

    def date_clipped_time_difference_found(
        self, calendar: str, clipped: datetime
    ) -> None:
        self.events.append(ClipEvent(calendar, clipped))


class MemoryClipboard:
    """Clipboard that remembers copied text in ``history``."""

    def __init__(self) -> None:
        self.history: list[str] = []

    @property
    def text(self) -> str | None:
        """The most recently copied text, or None."""
        return self.history[-1] if self.history else None

    def copy(self, text: str) -> None:
        self.history.append(text)


__all__ = [
    "LocalizationSettings",
    "StringCatalog",
    "TelemetrySink",
    "Clipboard",
    "DefaultLocalizationSettings",
    "DictStringCatalog",
    "LoggingTelemetrySink",
    "RecordingTelemetrySink",
    "ClipEvent",
    "MemoryClipboard",
    "ENGLISH_STRINGS",
    "NUMBERING_SYSTEMS",
]
