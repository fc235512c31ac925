"""Serial chaining of two indicators."""

from __future__ import annotations

from typing import Generic

from streamind.indicators.base import Indicator, In, Out, R


class Composition(Indicator[In, R], Generic[In, Out, R]):
    """Feed ``upstream``'s outputs into ``downstream``.

    When ``upstream`` has no output for a step, the composition has none
    either and ``downstream`` is not updated, so its state only ever reflects
    upstream values that were actually produced.
    """

    __slots__ = ("upstream", "downstream", "_current")

    def __init__(self, upstream: Indicator[In, Out], downstream: Indicator[Out, R]) -> None:
        self.upstream = upstream
        self.downstream = downstream
        self._current: R | None = None

    def update(self, value: In) -> R | None:
        intermediate = self.upstream.update(value)
        if intermediate is None:
            self._current = None
        else:
            self._current = self.downstream.update(intermediate)
        return self._current

    @property
    def ready(self) -> bool:
        return self.upstream.ready and self.downstream.ready

    @property
    def value(self) -> R | None:
        return self._current

    def reset(self) -> None:
        self.upstream.reset()
        self.downstream.reset()
        self._current = None
