"""Output projection."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic

from streamind.errors import InvalidParameter
from streamind.indicators.base import Indicator, In, Out, R


class Map(Indicator[In, R], Generic[In, Out, R]):
    """Apply ``func`` to each present output of ``inner``.

    An absent inner output stays absent and ``func`` is not called, so the
    wrapped indicator's output convention carries through unchanged.
    """

    __slots__ = ("inner", "func", "_current")

    def __init__(self, inner: Indicator[In, Out], func: Callable[[Out], R]) -> None:
        if not callable(func):
            raise InvalidParameter("func", func, f"func must be callable, got {func!r}")
        self.inner = inner
        self.func = func
        self._current: R | None = None

    def update(self, value: In) -> R | None:
        output = self.inner.update(value)
        self._current = None if output is None else self.func(output)
        return self._current

    @property
    def ready(self) -> bool:
        return self.inner.ready

    @property
    def value(self) -> R | None:
        return self._current

    def reset(self) -> None:
        self.inner.reset()
        self._current = None
