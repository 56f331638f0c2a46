from __future__ import annotations

from decimal import Decimal
from typing import Protocol, TypeAlias, runtime_checkable

# Use where optimal type is `float`, but other types are also acceptable (and will be converted to `float`)
FloatLike: TypeAlias = float | int | Decimal | str


@runtime_checkable
class HasLow(Protocol):
    """Any record exposing the lowest price of its period (e.g. an OHLC bar)."""

    @property
    def low(self) -> FloatLike: ...


def low_of(record: HasLow) -> float:
    """Projects the $low field out of $record.

    Args:
        record: Object exposing a `low` attribute.

    Returns:
        The low value converted to `float`.
    """
    result = float(record.low)
    return result
