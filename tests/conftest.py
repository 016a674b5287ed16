"""Pytest configuration and fixtures for datecalc tests."""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Add the parent directory to sys.path so datecalc can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from datecalc.arithmetic.engine import DateCalculationEngine  # noqa: E402
from datecalc.calendar.adapter import GregorianCalendarAdapter  # noqa: E402
from datecalc.presentation.controller import DateCalculatorController  # noqa: E402
from datecalc.services import (  # noqa: E402
    DefaultLocalizationSettings,
    DictStringCatalog,
    MemoryClipboard,
    RecordingTelemetrySink,
)

# Saturday, mid-morning UTC
FIXED_NOW = datetime(2024, 6, 15, 10, 30, 15, 123456, tzinfo=timezone.utc)


@pytest.fixture
def telemetry() -> RecordingTelemetrySink:
    return RecordingTelemetrySink()


@pytest.fixture
def calendar(telemetry: RecordingTelemetrySink) -> GregorianCalendarAdapter:
    return GregorianCalendarAdapter(
        telemetry=telemetry, clock=lambda: FIXED_NOW, local_tz=timezone.utc
    )


@pytest.fixture
def engine(calendar: GregorianCalendarAdapter) -> DateCalculationEngine:
    return DateCalculationEngine(calendar)


@pytest.fixture
def clipboard() -> MemoryClipboard:
    return MemoryClipboard()


@pytest.fixture
def controller(
    telemetry: RecordingTelemetrySink, clipboard: MemoryClipboard
) -> DateCalculatorController:
    return DateCalculatorController(
        DefaultLocalizationSettings(),
        DictStringCatalog(),
        clipboard=clipboard,
        telemetry=telemetry,
        clock=lambda: FIXED_NOW,
        local_tz=timezone.utc,
    )
