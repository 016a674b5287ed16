"""Mode enumeration for the date calculator."""

from __future__ import annotations

from enum import Enum


class Mode(Enum):
    """What the calculator computes.

    DIFFERENCE measures the distance between two dates. ADD and SUBTRACT
    are the two offset variants, shifting a start date by an offset.

    Examples:
        >>> Mode.ADD.is_offset
        True
        >>> Mode.DIFFERENCE.is_offset
        False
    """

    DIFFERENCE = "difference"
    ADD = "add"
    SUBTRACT = "subtract"

    @property
    def is_offset(self) -> bool:
        """Return True for ADD and SUBTRACT."""
        return self is not Mode.DIFFERENCE


__all__ = ["Mode"]
