from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from windowed_minimum.inputs import FloatLike


@runtime_checkable
class Indicator(Protocol):
    """Lifecycle shared by every streaming indicator, so a manager can drive them uniformly.

    One sample in, one derived value out. Past outputs stay reachable by position,
    newest first.
    """

    @property
    def name(self) -> str:
        """Short label used in logs and UIs, e.g. `MIN(14)`."""
        ...

    @property
    def value(self) -> Any | None:
        """Latest output; None until the first sample arrives."""
        ...

    @property
    def is_warmed_up(self) -> bool:
        """True once a full window of samples has been seen."""
        ...

    def update(self, value: FloatLike) -> Any | None:
        """Consumes one sample and returns the output derived from it."""
        ...

    def reset(self) -> None:
        """Forgets every sample, as if freshly created."""
        ...

    def __getitem__(self, key: int | str) -> Any | None:
        """Past output by age (`int`, 0 = latest) or public attribute by name (`str`)."""
        ...
