"""Parallel combinators: two indicators driven side by side."""

from __future__ import annotations

from typing import Any, Generic

from streamind.indicators.base import Indicator, In, Out, R


class Together(Indicator[In, tuple], Generic[In, Out, R]):
    """Update ``lhs`` and ``rhs`` with the same input; output both results.

    The output pair is always present; either component may be ``None``.
    """

    __slots__ = ("lhs", "rhs", "_current")

    def __init__(self, lhs: Indicator[In, Out], rhs: Indicator[In, R]) -> None:
        self.lhs = lhs
        self.rhs = rhs
        self._current: tuple[Out | None, R | None] | None = None

    def update(self, value: In) -> tuple[Out | None, R | None]:
        self._current = (self.lhs.update(value), self.rhs.update(value))
        return self._current

    @property
    def ready(self) -> bool:
        return self.lhs.ready and self.rhs.ready

    @property
    def value(self) -> tuple[Out | None, R | None] | None:
        return self._current

    def reset(self) -> None:
        self.lhs.reset()
        self.rhs.reset()
        self._current = None


class Diff(Indicator[tuple, Any]):
    """``lhs.update(a) - rhs.update(b)`` for an input pair ``(a, b)``.

    Absent when either side is absent.
    """

    __slots__ = ("lhs", "rhs")

    def __init__(self, lhs: Indicator[Any, Any], rhs: Indicator[Any, Any]) -> None:
        self.lhs = lhs
        self.rhs = rhs

    def update(self, value: tuple[Any, Any]) -> Any | None:
        lhs_input, rhs_input = value
        lhs = self.lhs.update(lhs_input)
        rhs = self.rhs.update(rhs_input)
        if lhs is None or rhs is None:
            return None
        return lhs - rhs

    @property
    def ready(self) -> bool:
        return self.lhs.ready and self.rhs.ready

    @property
    def value(self) -> Any | None:
        lhs, rhs = self.lhs.value, self.rhs.value
        if lhs is None or rhs is None:
            return None
        return lhs - rhs

    def reset(self) -> None:
        self.lhs.reset()
        self.rhs.reset()
