"""Lazy asynchronous adapter: drive an indicator from any async iterable."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterable, AsyncIterator
from typing import Generic

from streamind.indicators.base import Indicator, In, Out

logger = logging.getLogger(__name__)


class IndicatorStream(Generic[In, Out]):
    """Async iterator yielding ``indicator.update(x)`` per item of ``source``.

    The only suspension point is the pull from ``source``; the update that
    follows runs without yielding, so a cancelled consumer never observes a
    half-applied input. Cancellation propagates as-is and leaves the indicator
    in the state of the last completed update.
    """

    __slots__ = ("indicator", "_source")

    def __init__(self, indicator: Indicator[In, Out], source: AsyncIterable[In]) -> None:
        self.indicator = indicator
        self._source: AsyncIterator[In] = aiter(source)

    def __aiter__(self) -> IndicatorStream[In, Out]:
        return self

    async def __anext__(self) -> Out | None:
        try:
            value = await anext(self._source)
        except StopAsyncIteration:
            logger.debug("[Stream] Source exhausted for %r", self.indicator)
            raise
        except asyncio.CancelledError:
            logger.debug("[Stream] Cancelled while waiting on source for %r", self.indicator)
            raise
        return self.indicator.update(value)
