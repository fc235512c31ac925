"""
Abstract base class for streaming indicators.

Every indicator, primitive engine and combinator implements the same
contract so they compose freely:

- ``update(value)`` consumes one input, advances state exactly once and
  returns the output, or ``None`` when no output is available yet.
- ``value`` returns the latest output without advancing.
- ``ready`` reports whether a full period of history has been seen.
- ``reset()`` restores the freshly constructed state.

``None`` is the single "absent" value. Always-present indicators simply never
return it once they have been updated; optional ones (e.g. ``Rsi`` before its
first price change, anything wrapped in ``Mature``) do. Combinators treat it
uniformly, which is why no indicator may use ``None`` as a real output.

An instance is single-owner and not thread-safe: drive it from one logical
update sequence at a time.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import AsyncIterable, Callable, Iterable
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from streamind.adapters import IndicatorIterator, IndicatorStream
    from streamind.operators import Composition, Fill, Map, Mature, Together, Window

In = TypeVar("In")
Out = TypeVar("Out")
R = TypeVar("R")


class Indicator(ABC, Generic[In, Out]):
    """Single-input, single-output incremental computation."""

    __slots__ = ()

    @abstractmethod
    def update(self, value: In) -> Out | None:
        """Consume one input and return the new output (``None`` if absent)."""
        ...

    @property
    @abstractmethod
    def value(self) -> Out | None:
        """Latest output, or ``None`` before the first present output."""
        ...

    @abstractmethod
    def reset(self) -> None:
        """Drop all accumulated history."""
        ...

    @property
    def ready(self) -> bool:
        return self.value is not None

    # ── Combinators ──

    def map(self, func: Callable[[Out], R]) -> Map[In, Out, R]:
        """Apply ``func`` to every present output."""
        from streamind.operators import Map

        return Map(self, func)

    def mature(self, period: int) -> Mature[In, Out]:
        """Withhold the first ``period`` outputs while still updating."""
        from streamind.operators import Mature

        return Mature(self, period)

    def pullback(self, downstream: Indicator[Out, R]) -> Composition[In, Out, R]:
        """Feed this indicator's outputs into ``downstream``."""
        from streamind.operators import Composition

        return Composition(self, downstream)

    def pushforward(self, upstream: Indicator[Any, In]) -> Composition[Any, In, Out]:
        """Run this indicator over ``upstream``'s outputs."""
        from streamind.operators import Composition

        return Composition(upstream, self)

    def together(self, companion: Indicator[In, R]) -> Together[In, Out, R]:
        """Drive this indicator and ``companion`` with the same input."""
        from streamind.operators import Together

        return Together(self, companion)

    def window(self, size: int) -> Window[In, Out]:
        """Emit the last ``size`` outputs as a tuple, oldest first."""
        from streamind.operators import Window

        return Window(self, size)

    def fill(self, default: Out) -> Fill[In, Out]:
        """Substitute ``default`` whenever this indicator has no output."""
        from streamind.operators import Fill

        return Fill(self, default)

    # ── Adapters ──

    def iter_over(self, source: Iterable[In]) -> IndicatorIterator[In, Out]:
        """Lazily map ``source`` through this indicator."""
        from streamind.adapters import IndicatorIterator

        return IndicatorIterator(self, source)

    def stream_over(self, source: AsyncIterable[In]) -> IndicatorStream[In, Out]:
        """Lazily map an async ``source`` through this indicator."""
        from streamind.adapters import IndicatorStream

        return IndicatorStream(self, source)

    def __repr__(self) -> str:
        params = ", ".join(
            f"{name}={getattr(self, name)!r}"
            for name in ("period",)
            if hasattr(self, name)
        )
        return f"{type(self).__name__}({params})"
