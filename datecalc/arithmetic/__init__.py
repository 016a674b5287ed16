"""Date arithmetic for datecalc.

Classes:
    DateCalculationEngine: difference decomposition and offset application.
"""

from __future__ import annotations

from datecalc.arithmetic.engine import DateCalculationEngine

__all__: list[str] = ["DateCalculationEngine"]
