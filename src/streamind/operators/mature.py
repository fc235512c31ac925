"""Maturity gating."""

from __future__ import annotations

import logging

from streamind.errors import require_period
from streamind.indicators.base import Indicator, In, Out

logger = logging.getLogger(__name__)


class Mature(Indicator[In, Out]):
    """Hide the first ``period`` outputs of ``inner``.

    ``inner`` is still updated on every call so its state accumulates; from
    call ``period + 1`` on, its outputs pass through untouched (and may still
    be absent if ``inner`` itself is cold). ``period=0`` is a pass-through.
    """

    __slots__ = ("inner", "period", "_count")

    def __init__(self, inner: Indicator[In, Out], period: int) -> None:
        self.period = require_period("period", period, minimum=0)
        self.inner = inner
        self._count: int = 0

    def update(self, value: In) -> Out | None:
        output = self.inner.update(value)
        if self._count <= self.period:
            self._count += 1
            if self._count <= self.period:
                return None
            logger.debug("[Mature] %r open after %d withheld updates", self.inner, self.period)
        return output

    @property
    def ready(self) -> bool:
        return self._count > self.period and self.inner.ready

    @property
    def value(self) -> Out | None:
        return self.inner.value if self._count > self.period else None

    def reset(self) -> None:
        self.inner.reset()
        self._count = 0
