"""Unit and field enumerations for datecalc."""

from __future__ import annotations

from datecalc.units.dateunit import DateField, DateUnit

__all__: list[str] = ["DateField", "DateUnit"]
