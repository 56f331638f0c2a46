from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections import deque
from typing import Any

from windowed_minimum.errors import InvalidParameterError
from windowed_minimum.indicators.protocol import Indicator
from windowed_minimum.inputs import FloatLike

logger = logging.getLogger(__name__)


class BaseIndicator(Indicator, ABC):
    """Glue shared by windowed indicators: input conversion, output history, labels.

    Subclasses provide `period`, `_calculate` (fed plain floats) and `_build_name`.
    """

    # region Init

    def __init__(self, max_history: int = 100):
        """
        Args:
            max_history: How many past outputs stay reachable through indexing.
        """
        # Raise: max_history must be positive
        if max_history < 1:
            raise InvalidParameterError(f"Cannot create `{self.__class__.__name__}` because $max_history ({max_history}) < 1")

        self._max_history = max_history
        self._values: deque[Any] = deque(maxlen=max_history)
        self._update_count = 0

    # endregion

    # region Protocol Indicator

    @property
    def name(self) -> str:
        return self._build_name()

    @property
    def value(self) -> Any | None:
        # Skip: nothing calculated since creation or reset
        if not self._values:
            return None

        return self._values[0]

    @property
    def is_warmed_up(self) -> bool:
        return self._update_count >= self.period

    def update(self, value: FloatLike) -> Any:
        """Implements: Indicator.update"""
        # Decimal, int and str samples become float here, once
        result = self._calculate(float(value))

        self._values.appendleft(result)
        self._update_count += 1
        logger.debug(f"Updated Indicator named '{self.name}' (count={self._update_count}, val={result})")
        return result

    def reset(self) -> None:
        """Implements: Indicator.reset

        Drops output history and the update counter; subclasses clear their window.
        """
        self._values.clear()
        self._update_count = 0
        logger.info(f"Reset Indicator named '{self.name}'")

    def __getitem__(self, key: int | str) -> Any | None:
        """Implements: Indicator.__getitem__"""
        if isinstance(key, int):
            # Skip: older than the kept history
            if not 0 <= key < len(self._values):
                return None

            return self._values[key]

        if isinstance(key, str):
            # Skip: private names
            if key.startswith("_"):
                return None

            result = getattr(self, key, None)
            return None if callable(result) else result

        raise TypeError(f"Cannot call `__getitem__` because $key must be int or str, got {type(key).__name__}")

    # endregion

    # region Properties

    @property
    @abstractmethod
    def period(self) -> int:
        """Number of samples in a full window."""

    @property
    def max_history(self) -> int:
        return self._max_history

    @property
    def update_count(self) -> int:
        return self._update_count

    # endregion

    # region Utilities

    @abstractmethod
    def _calculate(self, value: float) -> Any:
        """Feeds $value into the window and returns the new output."""

    @abstractmethod
    def _build_name(self) -> str:
        """Returns the short label, e.g. `MIN(14)`."""

    # endregion

    # region Magic

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}', val={self.value}, updates={self._update_count})"

    # endregion
