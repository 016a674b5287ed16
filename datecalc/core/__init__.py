"""Core value types for datecalc.

This module contains:
    - DateDifference: decomposed distance between two dates
    - OffsetSpec: (years, months, days) shift for offset mode
    - Mode: difference / add / subtract
"""

from __future__ import annotations

from datecalc.core.difference import DateDifference
from datecalc.core.mode import Mode
from datecalc.core.offset import OffsetSpec

__all__: list[str] = [
    "DateDifference",
    "Mode",
    "OffsetSpec",
]
