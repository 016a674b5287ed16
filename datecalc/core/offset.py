"""OffsetSpec class: the (years, months, days) shift applied in offset mode."""

from __future__ import annotations

from datecalc._internal.constants import MAX_OFFSET
from datecalc.errors import ValidationError


class OffsetSpec:
    """A signed (years, months, days) offset.

    Weeks are not part of an offset. The engine accepts any integers and
    relies on its range checks; ``validate`` enforces the UI bound of
    0..max_offset per component.

    Examples:
        >>> OffsetSpec(years=1, days=10)
        OffsetSpec(years=1, months=0, days=10)
        >>> -OffsetSpec(months=2)
        OffsetSpec(years=0, months=-2, days=0)
    """

    __slots__ = ("_years", "_months", "_days")

    def __init__(self, years: int = 0, months: int = 0, days: int = 0) -> None:
        self._years = years
        self._months = months
        self._days = days

    @property
    def years(self) -> int:
        return self._years

    @property
    def months(self) -> int:
        return self._months

    @property
    def days(self) -> int:
        return self._days

    @property
    def is_zero(self) -> bool:
        return self._years == 0 and self._months == 0 and self._days == 0

    def validate(self, max_offset: int = MAX_OFFSET) -> OffsetSpec:
        """Check every component lies in 0..max_offset.

        Returns:
            self, so the call can be chained.

        Raises:
            ValidationError: If a component is out of bounds.
        """
        for name, value in (
            ("years", self._years),
            ("months", self._months),
            ("days", self._days),
        ):
            if value < 0 or value > max_offset:
                raise ValidationError(
                    f"{name} offset must be between 0 and {max_offset}, got {value}"
                )
        return self

    def __neg__(self) -> OffsetSpec:
        return OffsetSpec(-self._years, -self._months, -self._days)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OffsetSpec):
            return NotImplemented
        return (self._years, self._months, self._days) == (
            other._years,
            other._months,
            other._days,
        )

    def __hash__(self) -> int:
        return hash((self._years, self._months, self._days))

    def __repr__(self) -> str:
        return (
            f"OffsetSpec(years={self._years}, months={self._months}, "
            f"days={self._days})"
        )


__all__ = ["OffsetSpec"]
