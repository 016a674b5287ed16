"""Display formatting for datecalc.

Classes:
    DateDifferenceFormatter: differences and dates as display strings.
    EnglishLongDateFormatter: "Saturday, June 15, 2024".

Functions:
    make_long_date_formatter: long-date formatter for a calendar id.
"""

from __future__ import annotations

from datecalc.format.difference import DateDifferenceFormatter
from datecalc.format.longdate import (
    EnglishLongDateFormatter,
    LongDateFormatter,
    make_long_date_formatter,
)

__all__: list[str] = [
    "DateDifferenceFormatter",
    "EnglishLongDateFormatter",
    "LongDateFormatter",
    "make_long_date_formatter",
]
