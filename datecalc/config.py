"""Runtime configuration for datecalc.

Values come from defaults, optionally overridden by environment variables:

    DATECALC_CALENDAR        calendar identifier (default "GregorianCalendar")
    DATECALC_LIST_SEPARATOR  separator between units (default ",")
    DATECALC_MAX_OFFSET      upper bound of each offset field (default 999)
    DATECALC_LOG_LEVEL       logging level name (default "WARNING")
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

from datecalc._internal.constants import GREGORIAN_CALENDAR, MAX_OFFSET
from datecalc.errors import ValidationError

ENV_PREFIX = "DATECALC_"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class DateCalcConfig:
    calendar_identifier: str = GREGORIAN_CALENDAR
    list_separator: str = ","
    max_offset: int = MAX_OFFSET
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.max_offset < 0:
            raise ValidationError(f"max_offset must be >= 0, got {self.max_offset}")
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ValidationError(
                f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {self.log_level!r}"
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> DateCalcConfig:
        """Build a config from ``DATECALC_*`` variables.

        Args:
            environ: Mapping to read instead of ``os.environ``.

        Raises:
            ValidationError: If a value cannot be used.

        Examples:
            >>> DateCalcConfig.from_env({"DATECALC_MAX_OFFSET": "50"}).max_offset
            50
        """
        env = os.environ if environ is None else environ
        kwargs: dict[str, object] = {}

        if f"{ENV_PREFIX}CALENDAR" in env:
            kwargs["calendar_identifier"] = env[f"{ENV_PREFIX}CALENDAR"]
        if f"{ENV_PREFIX}LIST_SEPARATOR" in env:
            kwargs["list_separator"] = env[f"{ENV_PREFIX}LIST_SEPARATOR"]
        if f"{ENV_PREFIX}MAX_OFFSET" in env:
            raw = env[f"{ENV_PREFIX}MAX_OFFSET"]
            try:
                kwargs["max_offset"] = int(raw)
            except ValueError:
                raise ValidationError(
                    f"{ENV_PREFIX}MAX_OFFSET must be an integer, got {raw!r}"
                ) from None
        if f"{ENV_PREFIX}LOG_LEVEL" in env:
            kwargs["log_level"] = env[f"{ENV_PREFIX}LOG_LEVEL"].upper()

        return cls(**kwargs)  # type: ignore[arg-type]

    @property
    def logging_level(self) -> int:
        """The log level as a ``logging`` constant."""
        return getattr(logging, self.log_level.upper())


__all__ = ["DateCalcConfig", "ENV_PREFIX"]
