"""Trailing window over an indicator's own outputs."""

from __future__ import annotations

import collections
from typing import Generic

from streamind.errors import require_period
from streamind.indicators.base import Indicator, In, Out


class Window(Indicator[In, tuple], Generic[In, Out]):
    """Return the last ``size`` outputs of ``inner`` as a tuple, oldest first.

    The result always has exactly ``size`` items: until ``size`` outputs
    exist, the earliest one is repeated at the front. Absent inner outputs
    occupy a slot as ``None``.
    """

    __slots__ = ("inner", "size", "_outputs", "_current")

    def __init__(self, inner: Indicator[In, Out], size: int) -> None:
        self.size = require_period("size", size)
        self.inner = inner
        self._outputs: collections.deque[Out | None] = collections.deque(maxlen=size)
        self._current: tuple[Out | None, ...] | None = None

    def update(self, value: In) -> tuple[Out | None, ...]:
        outputs = self._outputs
        outputs.append(self.inner.update(value))
        padding = self.size - len(outputs)
        self._current = (outputs[0],) * padding + tuple(outputs)
        return self._current

    @property
    def ready(self) -> bool:
        return len(self._outputs) == self.size

    @property
    def value(self) -> tuple[Out | None, ...] | None:
        return self._current

    def reset(self) -> None:
        self.inner.reset()
        self._outputs.clear()
        self._current = None
