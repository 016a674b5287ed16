"""Presentation controller for the date calculator.

The controller holds the calculator inputs (mode, dates, offsets) and the
display strings derived from them. Every input change reruns the
calculation and refreshes the outputs:

    input setter -> on_inputs_changed() -> engine -> update_display_result()
                 -> output setters -> observers

Property names are stable and are what observers subscribe to. Only the
names in INPUT_PROPERTIES rerun the calculation; output changes never do,
which keeps output notifications from looping back into the inputs. The
two automation names are refreshed when their primary string changes.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone, tzinfo

from datecalc.arithmetic.engine import DateCalculationEngine
from datecalc.calendar.adapter import Clock, make_calendar
from datecalc.config import DateCalcConfig
from datecalc.core.difference import DateDifference
from datecalc.core.mode import Mode
from datecalc.core.offset import OffsetSpec
from datecalc.errors import ValidationError
from datecalc.format.difference import DateDifferenceFormatter
from datecalc.format.longdate import LongDateFormatterFactory
from datecalc.presentation.observable import ObservableObject
from datecalc.services import (
    DATE_DIFFERENCE_RESULT_AUTOMATION_NAME,
    DATE_OUT_OF_BOUND_MESSAGE,
    DATE_RESULTING_DATE_AUTOMATION_NAME,
    DATE_SAME_DATES,
    Clipboard,
    LocalizationSettings,
    LoggingTelemetrySink,
    StringCatalog,
    TelemetrySink,
)
from datecalc.units.dateunit import DateUnit

logger = logging.getLogger(__name__)

# Inputs
IS_DATE_DIFF_MODE = "IsDateDiffMode"
IS_ADD_MODE = "IsAddMode"
FROM_DATE = "FromDate"
TO_DATE = "ToDate"
START_DATE = "StartDate"
DAYS_OFFSET = "DaysOffset"
MONTHS_OFFSET = "MonthsOffset"
YEARS_OFFSET = "YearsOffset"

# Outputs
STR_DATE_DIFF_RESULT = "StrDateDiffResult"
STR_DATE_DIFF_RESULT_IN_DAYS = "StrDateDiffResultInDays"
IS_DIFF_IN_DAYS = "IsDiffInDays"
STR_DATE_RESULT = "StrDateResult"
IS_OUT_OF_BOUND = "IsOutOfBound"
STR_DATE_DIFF_RESULT_AUTOMATION_NAME = "StrDateDiffResultAutomationName"
STR_DATE_RESULT_AUTOMATION_NAME = "StrDateResultAutomationName"

INPUT_PROPERTIES: frozenset[str] = frozenset(
    {
        IS_DATE_DIFF_MODE,
        IS_ADD_MODE,
        FROM_DATE,
        TO_DATE,
        START_DATE,
        DAYS_OFFSET,
        MONTHS_OFFSET,
        YEARS_OFFSET,
    }
)

OUTPUT_PROPERTIES: frozenset[str] = frozenset(
    {
        STR_DATE_DIFF_RESULT,
        STR_DATE_DIFF_RESULT_IN_DAYS,
        IS_DIFF_IN_DAYS,
        STR_DATE_RESULT,
        IS_OUT_OF_BOUND,
        STR_DATE_DIFF_RESULT_AUTOMATION_NAME,
        STR_DATE_RESULT_AUTOMATION_NAME,
    }
)


def _to_timestamp(value: date | datetime) -> datetime:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    raise TypeError(f"expected date or datetime, got {type(value).__name__}")


class DateCalculatorController(ObservableObject):
    """State machine behind the date calculator screen.

    Args:
        localization: Calendar id, list separator and digit rendering.
        catalog: Localized strings.
        clipboard: Target of ``copy_current_result``. Optional.
        telemetry: Receives clip anomalies; defaults to logging them.
        date_formatter_factory: Builds the long-date formatter.
        clock: Returns the current instant; defaults to the system clock.
        local_tz: User time zone for clip anomaly detection; None means
            the system local zone.
        config: Offset bound and other settings.

    Examples:
        >>> from datecalc.services import DefaultLocalizationSettings, DictStringCatalog
        >>> vm = DateCalculatorController(DefaultLocalizationSettings(), DictStringCatalog())
        >>> vm.str_date_diff_result
        'Same dates'
        >>> vm.to_date = datetime(2100, 1, 1, tzinfo=timezone.utc)
        >>> vm.is_diff_in_days
        False
    """

    def __init__(
        self,
        localization: LocalizationSettings,
        catalog: StringCatalog,
        clipboard: Clipboard | None = None,
        telemetry: TelemetrySink | None = None,
        date_formatter_factory: LongDateFormatterFactory | None = None,
        clock: Clock | None = None,
        local_tz: tzinfo | None = None,
        config: DateCalcConfig | None = None,
    ) -> None:
        super().__init__()
        self._config = config if config is not None else DateCalcConfig()
        self._localization = localization
        self._catalog = catalog
        self._clipboard = clipboard

        if telemetry is None:
            telemetry = LoggingTelemetrySink()
        calendar = make_calendar(
            localization.calendar_identifier, telemetry, clock, local_tz
        )
        self._engine = DateCalculationEngine(calendar)
        self._formatter = DateDifferenceFormatter(
            localization, catalog, date_formatter_factory
        )

        self._all_units_format = DateUnit.ALL
        self._days_format = DateUnit.DAY

        # Clipping "now" reports a weekday mismatch through telemetry
        today = calendar.today()

        self._values.update(
            {
                IS_DATE_DIFF_MODE: True,
                IS_ADD_MODE: True,
                FROM_DATE: today,
                TO_DATE: today,
                START_DATE: today,
                DAYS_OFFSET: 0,
                MONTHS_OFFSET: 0,
                YEARS_OFFSET: 0,
                STR_DATE_DIFF_RESULT: "",
                STR_DATE_DIFF_RESULT_IN_DAYS: "",
                IS_DIFF_IN_DAYS: False,
                STR_DATE_RESULT: "",
                IS_OUT_OF_BOUND: False,
                STR_DATE_DIFF_RESULT_AUTOMATION_NAME: "",
                STR_DATE_RESULT_AUTOMATION_NAME: "",
            }
        )

        self._date_diff_result = DateDifference.zero()
        self._date_diff_result_in_days = DateDifference.zero()
        self._date_result = today

        self._offset_values: tuple[str, ...] = tuple(
            localization.localize_digits(str(i))
            for i in range(self._config.max_offset + 1)
        )

        self.on_inputs_changed()

    # ------------------------------------------------------------------
    # Collaborators and cached results

    @property
    def engine(self) -> DateCalculationEngine:
        return self._engine

    @property
    def formatter(self) -> DateDifferenceFormatter:
        return self._formatter

    @property
    def offset_values(self) -> tuple[str, ...]:
        """Localized labels "0" .. max_offset for the offset pickers."""
        return self._offset_values

    @property
    def date_diff_result(self) -> DateDifference:
        """Last decomposition in years, months, weeks and days."""
        return self._date_diff_result

    @property
    def date_diff_result_in_days(self) -> DateDifference:
        """Last difference in days only."""
        return self._date_diff_result_in_days

    @property
    def date_result(self) -> datetime:
        """Last in-range offset result."""
        return self._date_result

    # ------------------------------------------------------------------
    # Inputs

    @property
    def is_date_diff_mode(self) -> bool:
        return self._get(IS_DATE_DIFF_MODE)

    @is_date_diff_mode.setter
    def is_date_diff_mode(self, value: bool) -> None:
        self._set(IS_DATE_DIFF_MODE, bool(value))

    @property
    def is_add_mode(self) -> bool:
        return self._get(IS_ADD_MODE)

    @is_add_mode.setter
    def is_add_mode(self, value: bool) -> None:
        self._set(IS_ADD_MODE, bool(value))

    @property
    def mode(self) -> Mode:
        if self.is_date_diff_mode:
            return Mode.DIFFERENCE
        return Mode.ADD if self.is_add_mode else Mode.SUBTRACT

    @mode.setter
    def mode(self, value: Mode) -> None:
        if value.is_offset:
            self.is_add_mode = value is Mode.ADD
            self.is_date_diff_mode = False
        else:
            self.is_date_diff_mode = True

    @property
    def from_date(self) -> datetime:
        return self._get(FROM_DATE)

    @from_date.setter
    def from_date(self, value: date | datetime) -> None:
        self._set(FROM_DATE, _to_timestamp(value))

    @property
    def to_date(self) -> datetime:
        return self._get(TO_DATE)

    @to_date.setter
    def to_date(self, value: date | datetime) -> None:
        self._set(TO_DATE, _to_timestamp(value))

    @property
    def start_date(self) -> datetime:
        return self._get(START_DATE)

    @start_date.setter
    def start_date(self, value: date | datetime) -> None:
        self._set(START_DATE, _to_timestamp(value))

    @property
    def days_offset(self) -> int:
        return self._get(DAYS_OFFSET)

    @days_offset.setter
    def days_offset(self, value: int) -> None:
        self._set(DAYS_OFFSET, self._check_offset("days", value))

    @property
    def months_offset(self) -> int:
        return self._get(MONTHS_OFFSET)

    @months_offset.setter
    def months_offset(self, value: int) -> None:
        self._set(MONTHS_OFFSET, self._check_offset("months", value))

    @property
    def years_offset(self) -> int:
        return self._get(YEARS_OFFSET)

    @years_offset.setter
    def years_offset(self, value: int) -> None:
        self._set(YEARS_OFFSET, self._check_offset("years", value))

    @property
    def offset(self) -> OffsetSpec:
        return OffsetSpec(self.years_offset, self.months_offset, self.days_offset)

    @offset.setter
    def offset(self, value: OffsetSpec) -> None:
        value.validate(self._config.max_offset)
        self.years_offset = value.years
        self.months_offset = value.months
        self.days_offset = value.days

    def _check_offset(self, name: str, value: int) -> int:
        max_offset = self._config.max_offset
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(f"{name} offset must be an integer, got {value!r}")
        if value < 0 or value > max_offset:
            raise ValidationError(
                f"{name} offset must be between 0 and {max_offset}, got {value}"
            )
        return value

    # ------------------------------------------------------------------
    # Outputs

    @property
    def str_date_diff_result(self) -> str:
        return self._get(STR_DATE_DIFF_RESULT)

    @str_date_diff_result.setter
    def str_date_diff_result(self, value: str) -> None:
        self._set(STR_DATE_DIFF_RESULT, value)

    @property
    def str_date_diff_result_in_days(self) -> str:
        return self._get(STR_DATE_DIFF_RESULT_IN_DAYS)

    @str_date_diff_result_in_days.setter
    def str_date_diff_result_in_days(self, value: str) -> None:
        self._set(STR_DATE_DIFF_RESULT_IN_DAYS, value)

    @property
    def is_diff_in_days(self) -> bool:
        return self._get(IS_DIFF_IN_DAYS)

    @is_diff_in_days.setter
    def is_diff_in_days(self, value: bool) -> None:
        self._set(IS_DIFF_IN_DAYS, value)

    @property
    def str_date_result(self) -> str:
        return self._get(STR_DATE_RESULT)

    @str_date_result.setter
    def str_date_result(self, value: str) -> None:
        self._set(STR_DATE_RESULT, value)

    @property
    def is_out_of_bound(self) -> bool:
        return self._get(IS_OUT_OF_BOUND)

    @is_out_of_bound.setter
    def is_out_of_bound(self, value: bool) -> None:
        self._set(IS_OUT_OF_BOUND, value)

    @property
    def str_date_diff_result_automation_name(self) -> str:
        return self._get(STR_DATE_DIFF_RESULT_AUTOMATION_NAME)

    @str_date_diff_result_automation_name.setter
    def str_date_diff_result_automation_name(self, value: str) -> None:
        self._set(STR_DATE_DIFF_RESULT_AUTOMATION_NAME, value)

    @property
    def str_date_result_automation_name(self) -> str:
        return self._get(STR_DATE_RESULT_AUTOMATION_NAME)

    @str_date_result_automation_name.setter
    def str_date_result_automation_name(self, value: str) -> None:
        self._set(STR_DATE_RESULT_AUTOMATION_NAME, value)

    # ------------------------------------------------------------------
    # Recalculation

    def on_property_changed(self, name: str) -> None:
        if name == STR_DATE_DIFF_RESULT:
            self._update_str_date_diff_result_automation_name()
        elif name == STR_DATE_RESULT:
            self._update_str_date_result_automation_name()
        elif name in INPUT_PROPERTIES:
            self.on_inputs_changed()

    def on_inputs_changed(self) -> None:
        """Recompute the cached results from the inputs and redisplay."""
        engine = self._engine
        if self.is_date_diff_mode:
            calendar = engine.calendar
            clipped_from = calendar.clip_to_day(self.from_date)
            clipped_to = calendar.clip_to_day(self.to_date)

            self._date_diff_result = engine.get_date_difference(
                clipped_from, clipped_to, self._all_units_format
            )
            self._date_diff_result_in_days = engine.get_date_difference(
                clipped_from, clipped_to, self._days_format
            )
            logger.debug(
                "Difference %s -> %s: %r",
                clipped_from.date(),
                clipped_to.date(),
                self._date_diff_result,
            )
        else:
            offset = self.offset
            if self.is_add_mode:
                result, ok = engine.add_duration(self.start_date, offset)
            else:
                result, ok = engine.subtract_duration(self.start_date, offset)

            self.is_out_of_bound = not ok
            if ok and result is not None:
                self._date_result = result
            logger.debug("Offset %r from %s: ok=%s", offset, self.start_date.date(), ok)

        self.update_display_result()

    def update_display_result(self) -> None:
        """Derive the display strings from the cached results."""
        formatter = self._formatter
        if self.is_date_diff_mode:
            if self._date_diff_result_in_days.days == 0:
                self.is_diff_in_days = True
                self.str_date_diff_result_in_days = ""
                self.str_date_diff_result = self._catalog.get(DATE_SAME_DATES)
            elif self._date_diff_result.collapses_to_days:
                self.is_diff_in_days = True
                self.str_date_diff_result_in_days = ""
                self.str_date_diff_result = formatter.format_days(
                    self._date_diff_result_in_days
                )
            else:
                self.is_diff_in_days = False
                self.str_date_diff_result = formatter.format_difference(
                    self._date_diff_result
                )
                self.str_date_diff_result_in_days = formatter.format_days(
                    self._date_diff_result_in_days
                )
        else:
            if self.is_out_of_bound:
                self.str_date_result = self._catalog.get(DATE_OUT_OF_BOUND_MESSAGE)
            else:
                self.str_date_result = formatter.format_date(self._date_result)

    def _update_str_date_diff_result_automation_name(self) -> None:
        template = self._catalog.get(DATE_DIFFERENCE_RESULT_AUTOMATION_NAME)
        self.str_date_diff_result_automation_name = template.format(
            self.str_date_diff_result
        )

    def _update_str_date_result_automation_name(self) -> None:
        template = self._catalog.get(DATE_RESULTING_DATE_AUTOMATION_NAME)
        self.str_date_result_automation_name = template.format(self.str_date_result)

    # ------------------------------------------------------------------
    # Commands

    def current_result_text(self) -> str:
        """The result text for the current mode."""
        if self.is_date_diff_mode:
            return self.str_date_diff_result
        return self.str_date_result

    def copy_current_result(self) -> None:
        """Copy the result text for the current mode to the clipboard."""
        if self._clipboard is None:
            logger.debug("No clipboard; copy ignored")
            return
        self._clipboard.copy(self.current_result_text())


__all__ = [
    "DateCalculatorController",
    "INPUT_PROPERTIES",
    "OUTPUT_PROPERTIES",
]
