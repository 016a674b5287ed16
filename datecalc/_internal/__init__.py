"""Internal utilities for datecalc.

This module contains private implementation details:
    - Constants and magic numbers
    - Proleptic Gregorian ordinal math

Note: This module is not part of the public API.
"""

from __future__ import annotations

from datecalc._internal.calendar import (
    add_months_clipped,
    days_in_month,
    is_leap_year,
    validate_date,
)

__all__: list[str] = [
    "add_months_clipped",
    "days_in_month",
    "is_leap_year",
    "validate_date",
]
