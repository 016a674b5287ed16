"""Presentation layer for datecalc.

Classes:
    ObservableObject: named properties with change observers.
    DateCalculatorController: the calculator state machine.
"""

from __future__ import annotations

from datecalc.presentation.controller import (
    INPUT_PROPERTIES,
    OUTPUT_PROPERTIES,
    DateCalculatorController,
)
from datecalc.presentation.observable import ObservableObject, Subscription

__all__: list[str] = [
    "DateCalculatorController",
    "INPUT_PROPERTIES",
    "OUTPUT_PROPERTIES",
    "ObservableObject",
    "Subscription",
]
