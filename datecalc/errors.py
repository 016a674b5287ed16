"""datecalc exception hierarchy.

All datecalc-specific exceptions inherit from DateCalcError.

Out-of-range arithmetic is normally reported as a value (``ok=False`` from
the engine, ``IsOutOfBound`` on the controller). OutOfRangeError is raised
only by ``as_utc``, for an instant that cannot be expressed in UTC inside
the range.
"""

from __future__ import annotations


class DateCalcError(Exception):
    """Base exception for all datecalc errors."""

    pass


class ValidationError(DateCalcError):
    """Invalid input values.

    Raised when a date component or offset is out of range or invalid.

    Examples:
        - Month value outside 1-12
        - Day value outside valid range for month
        - Year outside 1-9999
    """

    pass


class OutOfRangeError(DateCalcError):
    """A timestamp lies outside the representable range once taken to UTC.

    Examples:
        - 0001-01-01T00:30+01:00, which is 0000-12-31 in UTC
        - 9999-12-31T22:00-05:00, which is 10000-01-01 in UTC
    """

    pass


class CalendarError(DateCalcError):
    """Unknown or unsupported calendar identifier."""

    pass


class MissingResourceError(DateCalcError, KeyError):
    """A requested string key is not in the catalog.

    This is a programming error: the catalog is expected to carry every key
    the controller asks for, and no fallback text is substituted.
    """

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"missing string resource: {self.key!r}"


__all__ = [
    "DateCalcError",
    "ValidationError",
    "OutOfRangeError",
    "CalendarError",
    "MissingResourceError",
]
