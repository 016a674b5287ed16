"""datecalc: calendar date arithmetic for a date calculator.

datecalc answers two questions: how far apart two dates are (as years,
months, weeks and days, and as a plain day count), and which date lies a
given number of years, months and days before or after another.

Core Types:
    DateDifference: Decomposed distance (years, months, weeks, days)
    OffsetSpec: (years, months, days) shift
    Mode: DIFFERENCE, ADD, SUBTRACT
    DateUnit: Unit flags forming an output mask

Components:
    GregorianCalendarAdapter: Day arithmetic on UTC-anchored timestamps
    DateCalculationEngine: Differences and offsets
    DateDifferenceFormatter: Display strings
    DateCalculatorController: Observable calculator state machine

Exceptions:
    DateCalcError: Base exception
    ValidationError: Invalid input values
    OutOfRangeError: Timestamp outside the range in UTC
    CalendarError: Unknown calendar identifier
    MissingResourceError: String key missing from the catalog

Example:
    >>> from datecalc import GregorianCalendarAdapter, DateCalculationEngine, DateUnit
    >>> cal = GregorianCalendarAdapter()
    >>> engine = DateCalculationEngine(cal)
    >>> engine.get_date_difference(cal.date(2020, 1, 1), cal.date(2023, 3, 17), DateUnit.ALL)
    DateDifference(years=3, months=2, weeks=2, days=2)
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from datecalc.core.difference import DateDifference
from datecalc.core.mode import Mode
from datecalc.core.offset import OffsetSpec
from datecalc.units.dateunit import DateField, DateUnit

# Components
from datecalc.arithmetic.engine import DateCalculationEngine
from datecalc.calendar.adapter import (
    CalendarAdapter,
    GregorianCalendarAdapter,
    make_calendar,
)
from datecalc.config import DateCalcConfig
from datecalc.format.difference import DateDifferenceFormatter
from datecalc.presentation.controller import DateCalculatorController
from datecalc.services import (
    DefaultLocalizationSettings,
    DictStringCatalog,
    LoggingTelemetrySink,
    MemoryClipboard,
    RecordingTelemetrySink,
)

# Exceptions
from datecalc.errors import (
    CalendarError,
    DateCalcError,
    MissingResourceError,
    OutOfRangeError,
    ValidationError,
)

__all__: list[str] = [
    "__version__",
    # Core types
    "DateDifference",
    "Mode",
    "OffsetSpec",
    "DateField",
    "DateUnit",
    # Components
    "CalendarAdapter",
    "GregorianCalendarAdapter",
    "make_calendar",
    "DateCalculationEngine",
    "DateDifferenceFormatter",
    "DateCalculatorController",
    "DateCalcConfig",
    # Default collaborators
    "DefaultLocalizationSettings",
    "DictStringCatalog",
    "LoggingTelemetrySink",
    "RecordingTelemetrySink",
    "MemoryClipboard",
    # Exceptions
    "DateCalcError",
    "ValidationError",
    "OutOfRangeError",
    "CalendarError",
    "MissingResourceError",
]
