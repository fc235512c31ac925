"""
Sliding-window extremum tracking in amortized O(1) per update.

``MonotonicDeque`` keeps ``(value, tick)`` pairs ordered so that the front is
always the extremum of the last ``period`` inputs:

- on push, every entry the new value dominates is popped from the back
  (``<=`` for a maximum, ``>=`` for a minimum), so among equal values the most
  recent one survives;
- entries whose tick has left the window are evicted from the front.

Each input is pushed and popped at most once and the deque never holds more
than ``period`` entries. ``Max``/``Min`` report the front value and
``MaxIndex``/``MinIndex`` report its age, i.e. how many inputs ago it arrived
(``0`` right after a new extremum, at most ``period - 1``).
"""

from __future__ import annotations

import collections

from streamind.errors import require_period
from streamind.indicators.base import Indicator
from streamind.models.types import PriceLike, price_of


class MonotonicDeque:
    """Window extremum with the age of the entry that holds it."""

    __slots__ = ("period", "maximum", "_entries", "_tick")

    def __init__(self, period: int, *, maximum: bool = True) -> None:
        self.period = require_period("period", period)
        self.maximum = maximum
        self._entries: collections.deque[tuple[float, int]] = collections.deque()
        self._tick: int = -1

    def push(self, value: float) -> None:
        self._tick += 1
        entries = self._entries
        if self.maximum:
            while entries and entries[-1][0] <= value:
                entries.pop()
        else:
            while entries and entries[-1][0] >= value:
                entries.pop()
        entries.append((value, self._tick))
        oldest = self._tick - self.period
        while entries[0][1] <= oldest:
            entries.popleft()

    @property
    def extremum(self) -> float | None:
        return self._entries[0][0] if self._entries else None

    @property
    def age(self) -> int | None:
        return self._tick - self._entries[0][1] if self._entries else None

    @property
    def seen(self) -> int:
        """Number of values pushed since construction or the last clear."""
        return self._tick + 1

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        self._entries.clear()
        self._tick = -1


class _WindowExtremum(Indicator[float, float]):
    __slots__ = ("period", "_deque")

    _maximum = True

    def __init__(self, period: int) -> None:
        self.period = require_period("period", period)
        self._deque = MonotonicDeque(period, maximum=self._maximum)

    @property
    def ready(self) -> bool:
        return self._deque.seen >= self.period

    def reset(self) -> None:
        self._deque.clear()


class Max(_WindowExtremum):
    """Maximum of the last ``period`` inputs."""

    __slots__ = ()

    def update(self, value: float | PriceLike) -> float:
        self._deque.push(price_of(value))
        return self._deque.extremum

    @property
    def value(self) -> float | None:
        return self._deque.extremum


class Min(Max):
    """Minimum of the last ``period`` inputs."""

    __slots__ = ()

    _maximum = False


class MaxIndex(_WindowExtremum):
    """Inputs elapsed since the maximum of the last ``period`` inputs."""

    __slots__ = ()

    def update(self, value: float | PriceLike) -> int:
        self._deque.push(price_of(value))
        return self._deque.age

    @property
    def value(self) -> int | None:
        return self._deque.age


class MinIndex(MaxIndex):
    """Inputs elapsed since the minimum of the last ``period`` inputs."""

    __slots__ = ()

    _maximum = False
