from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Any

from windowed_minimum.errors import InvalidParameterError
from windowed_minimum.indicators.base import BaseIndicator
from windowed_minimum.inputs import HasLow, low_of

DEFAULT_PERIOD = 14


@dataclass(frozen=True)
class MinimumState:
    """Snapshot of everything needed to resume a `Minimum` exactly where it stopped."""

    period: int
    buffer: tuple[float, ...]
    min_index: int
    cursor: int
    update_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for serialization."""
        return {
            "period": self.period,
            "buffer": list(self.buffer),
            "min_index": self.min_index,
            "cursor": self.cursor,
            "update_count": self.update_count,
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> MinimumState:
        """Create from dict produced by `to_dict`."""
        try:
            return cls(
                period=int(d["period"]),
                buffer=tuple(float(v) for v in d["buffer"]),
                min_index=int(d["min_index"]),
                cursor=int(d["cursor"]),
                update_count=int(d.get("update_count", 0)),
            )
        except (KeyError, TypeError, ValueError) as e:
            # Raise: snapshot dict is missing a key or holds a value of the wrong type
            raise InvalidParameterError(f"Cannot create `MinimumState` from dict because it is malformed: {e!r}") from e


class Minimum(BaseIndicator):
    """Returns the lowest value among the last $period samples.

    Samples live in a fixed-size circular buffer whose empty slots hold `+inf`.
    The index of the slot holding the current minimum is tracked between updates,
    so a full scan of the buffer happens only when that slot is overwritten by a
    sample that is not itself a new minimum. Updates are O(1) amortized and
    O(period) in the worst case (monotonically increasing input).

    A result is produced from the very first sample; until the window fills up,
    it covers all samples seen so far.

    NaN samples are accepted but never reported as the minimum while the window
    holds any other sample; a window of only NaN samples reports NaN.
    """

    # region Init

    def __init__(self, period: int = DEFAULT_PERIOD, max_history: int = 100):
        """Initializes the Minimum indicator with a specific period.

        Args:
            period: Number of most recent samples the minimum is taken over.
            max_history: Number of last calculated values stored.
        """
        # Raise: period must be an integer
        if isinstance(period, bool) or not isinstance(period, numbers.Integral):
            raise InvalidParameterError(f"Cannot create `Minimum` because $period must be int, got {type(period).__name__}")

        period = int(period)

        # Raise: period must be positive
        if period < 1:
            raise InvalidParameterError(f"Cannot create `Minimum` because $period ({period}) < 1")

        super().__init__(max_history)

        self._period = period
        self._buffer: list[float] = [math.inf] * period
        self._min_index = 0
        self._cursor = 0

    @classmethod
    def from_state(cls, state: MinimumState, max_history: int = 100) -> Minimum:
        """Rebuilds an indicator from a snapshot taken by `get_state`.

        Args:
            state: Snapshot to resume from.
            max_history: Number of last calculated values stored.

        Returns:
            Indicator that continues exactly where the snapshot was taken.
        """
        indicator = cls(state.period, max_history)

        # Raise: buffer must have one slot per period
        if len(state.buffer) != state.period:
            raise InvalidParameterError(f"Cannot restore `Minimum` because $buffer has {len(state.buffer)} slots, expected $period ({state.period})")

        # Raise: indices must point inside the buffer
        for field_name in ("min_index", "cursor"):
            index = getattr(state, field_name)
            if not 0 <= index < state.period:
                raise InvalidParameterError(f"Cannot restore `Minimum` because ${field_name} ({index}) is outside [0, {state.period})")

        indicator._buffer = list(state.buffer)
        indicator._min_index = state.min_index
        indicator._cursor = state.cursor
        indicator._update_count = state.update_count
        return indicator

    # endregion

    # region Protocol Indicator

    def reset(self) -> None:
        """Implements: Indicator.reset

        Refills every slot with `+inf` and rewinds the cursor and minimum index.
        """
        super().reset()
        for i in range(self._period):
            self._buffer[i] = math.inf
        self._min_index = 0
        self._cursor = 0

    # endregion

    # region Main

    def update_low(self, record: HasLow) -> float:
        """Updates the indicator with the $low field of $record (e.g. an OHLC bar)."""
        result = self.update(low_of(record))
        return result

    def get_state(self) -> MinimumState:
        """Returns a snapshot of the internal state, see `from_state`."""
        return MinimumState(
            period=self._period,
            buffer=tuple(self._buffer),
            min_index=self._min_index,
            cursor=self._cursor,
            update_count=self._update_count,
        )

    # endregion

    # region Properties

    @property
    def period(self) -> int:
        return self._period

    # endregion

    # region Utilities

    def _calculate(self, value: float) -> float:
        """Stores $value in the oldest slot and returns the minimum of the window."""
        buffer = self._buffer
        cursor = self._cursor
        incumbent = buffer[self._min_index]
        buffer[cursor] = value

        if value < incumbent or (math.isnan(incumbent) and not math.isnan(value)):
            # New minimum (a NaN incumbent loses to any other value)
            self._min_index = cursor
        elif self._min_index == cursor:
            # Current minimum just left the window
            self._min_index = self._find_min_index()

        self._cursor = cursor + 1 if cursor + 1 < self._period else 0

        result = buffer[self._min_index]
        return result

    def _find_min_index(self) -> int:
        """Returns the index of the smallest non-NaN slot, lowest index on ties.

        When the window holds only NaN samples and empty (`+inf`) slots, the first
        NaN slot is returned so that the result is NaN rather than the empty marker.
        """
        buffer = self._buffer
        result = None
        first_nan = None
        for i, val in enumerate(buffer):
            # Skip: NaN is only a fallback
            if math.isnan(val):
                if first_nan is None:
                    first_nan = i
                continue

            if result is None or val < buffer[result]:
                result = i

        # Only NaN samples in the window
        if first_nan is not None and (result is None or buffer[result] == math.inf):
            return first_nan

        return 0 if result is None else result

    def _build_name(self) -> str:
        result = f"MIN({self._period})"
        return result

    # endregion
