"""Lazy synchronous adapter: drive an indicator from any iterable."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Generic

from streamind.indicators.base import Indicator, In, Out

logger = logging.getLogger(__name__)


class IndicatorIterator(Generic[In, Out]):
    """Yield ``indicator.update(x)`` for each ``x`` pulled from ``source``.

    Exactly one input is pulled per output and nothing is read ahead, so the
    indicator's state always reflects the inputs consumed so far.
    """

    __slots__ = ("indicator", "_source")

    def __init__(self, indicator: Indicator[In, Out], source: Iterable[In]) -> None:
        self.indicator = indicator
        self._source: Iterator[In] = iter(source)

    def __iter__(self) -> IndicatorIterator[In, Out]:
        return self

    def __next__(self) -> Out | None:
        try:
            value = next(self._source)
        except StopIteration:
            logger.debug("[Iter] Source exhausted for %r", self.indicator)
            raise
        return self.indicator.update(value)
