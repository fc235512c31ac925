"""
Streaming primitive engines — O(1) per update.

Each engine maintains internal state so that a new input requires only a
constant-time update, not a full O(N) recalculation over its window.

All engines here are always-present: they return a value from the first
update on. Before ``period`` samples have been seen the windowed engines
average over the samples they actually have, and the smoothing engines output
the cumulative mean of their inputs (which is what seeds the recurrence).
"""

from __future__ import annotations

import collections
import math

from streamind.config import settings
from streamind.errors import InvalidRange, require_factor, require_period
from streamind.indicators.base import Indicator
from streamind.models.types import (
    BollingerBandsOutput,
    PriceLike,
    PriceVolumeLike,
    StandardDeviationOutput,
    price_of,
    price_volume_of,
)


class Sma(Indicator[float, float]):
    """Simple Moving Average using circular buffer + running sum."""

    __slots__ = ("period", "_buffer", "_sum")

    def __init__(self, period: int) -> None:
        self.period = require_period("period", period)
        self._buffer: collections.deque[float] = collections.deque(maxlen=period)
        self._sum: float = 0.0

    def update(self, value: float | PriceLike) -> float:
        price = price_of(value)
        if len(self._buffer) == self.period:
            self._sum -= self._buffer[0]
        self._buffer.append(price)
        self._sum += price
        return self._sum / len(self._buffer)

    @property
    def ready(self) -> bool:
        return len(self._buffer) == self.period

    @property
    def value(self) -> float | None:
        if not self._buffer:
            return None
        return self._sum / len(self._buffer)

    def reset(self) -> None:
        self._buffer.clear()
        self._sum = 0.0


class ExponentialSmoothing(Indicator[float, float]):
    """First-order recurrence ``out = alpha * x + (1 - alpha) * out_prev``.

    For the first ``warmup`` inputs the output is the running mean, so the
    recurrence is seeded with the simple average of the first ``warmup``
    inputs. ``warmup=1`` seeds with the first input.
    """

    __slots__ = ("alpha", "warmup", "_current", "_count")

    def __init__(self, alpha: float, warmup: int = 1) -> None:
        self.alpha = require_factor("alpha", alpha)
        self.warmup = require_period("warmup", warmup)
        self._current: float | None = None
        self._count: int = 0

    def update(self, value: float | PriceLike) -> float:
        x = price_of(value)
        if self._count < self.warmup:
            self._count += 1
            if self._current is None:
                self._current = x
            else:
                self._current += (x - self._current) / self._count
        else:
            self._current += self.alpha * (x - self._current)
        return self._current

    @property
    def ready(self) -> bool:
        return self._count >= self.warmup

    @property
    def value(self) -> float | None:
        return self._current

    def reset(self) -> None:
        self._current = None
        self._count = 0


class Ema(ExponentialSmoothing):
    """Exponential Moving Average, ``alpha = 2 / (period + 1)``."""

    __slots__ = ("period",)

    def __init__(self, period: int) -> None:
        self.period = require_period("period", period)
        super().__init__(2.0 / (period + 1), warmup=period)


class Rma(ExponentialSmoothing):
    """Wilder's running moving average, ``alpha = 1 / period``."""

    __slots__ = ("period",)

    def __init__(self, period: int) -> None:
        self.period = require_period("period", period)
        super().__init__(1.0 / period, warmup=period)


class StandardDeviation(Indicator[float, StandardDeviationOutput]):
    """Population mean and standard deviation over a sliding window.

    Keeps a running sum and sum of squares; the variance
    ``sumsq / n - mean ** 2`` is clamped at zero to absorb cancellation.
    """

    __slots__ = ("period", "_buffer", "_sum", "_sum_sq")

    def __init__(self, period: int) -> None:
        self.period = require_period("period", period)
        self._buffer: collections.deque[float] = collections.deque(maxlen=period)
        self._sum: float = 0.0
        self._sum_sq: float = 0.0

    def update(self, value: float | PriceLike) -> StandardDeviationOutput:
        x = price_of(value)
        if len(self._buffer) == self.period:
            old = self._buffer[0]
            self._sum -= old
            self._sum_sq -= old * old
        self._buffer.append(x)
        self._sum += x
        self._sum_sq += x * x
        return self._output()

    def _output(self) -> StandardDeviationOutput:
        n = len(self._buffer)
        mean = self._sum / n
        variance = max(self._sum_sq / n - mean * mean, 0.0)
        return StandardDeviationOutput(mean=mean, sd=math.sqrt(variance))

    @property
    def ready(self) -> bool:
        return len(self._buffer) == self.period

    @property
    def value(self) -> StandardDeviationOutput | None:
        return self._output() if self._buffer else None

    def reset(self) -> None:
        self._buffer.clear()
        self._sum = 0.0
        self._sum_sq = 0.0


class BollingerBands(Indicator[float, BollingerBandsOutput]):
    """Windowed mean ± ``multiplier`` standard deviations."""

    __slots__ = ("period", "multiplier", "_sd")

    def __init__(self, period: int | None = None, multiplier: float | None = None) -> None:
        period = settings.bollinger_period if period is None else period
        multiplier = settings.bollinger_multiplier if multiplier is None else multiplier
        if not multiplier >= 0.0:
            raise InvalidRange("multiplier", multiplier, min=0.0)
        self._sd = StandardDeviation(period)
        self.period = period
        self.multiplier = float(multiplier)

    def update(self, value: float | PriceLike) -> BollingerBandsOutput:
        return self._bands(self._sd.update(value))

    def _bands(self, sd: StandardDeviationOutput) -> BollingerBandsOutput:
        band = sd.sd * self.multiplier
        return BollingerBandsOutput(
            average=sd.mean,
            upper_bound=sd.mean + band,
            lower_bound=sd.mean - band,
        )

    @property
    def ready(self) -> bool:
        return self._sd.ready

    @property
    def value(self) -> BollingerBandsOutput | None:
        sd = self._sd.value
        return None if sd is None else self._bands(sd)

    def reset(self) -> None:
        self._sd.reset()


class Vwma(Indicator[tuple[float, float], float]):
    """Volume-Weighted Moving Average over the last ``period`` (price, volume) pairs.

    A window with no nonzero volume falls back to the plain price average. The
    volume sums are reset to zero whenever the window holds no nonzero volume.
    """

    __slots__ = ("period", "_buffer", "_sum_pv", "_sum_v", "_sum_p", "_nonzero")

    def __init__(self, period: int) -> None:
        self.period = require_period("period", period)
        self._buffer: collections.deque[tuple[float, float]] = collections.deque(
            maxlen=period
        )
        self._sum_pv: float = 0.0
        self._sum_v: float = 0.0
        self._sum_p: float = 0.0
        self._nonzero: int = 0

    def update(self, value: tuple[float, float] | PriceVolumeLike) -> float:
        price, volume = price_volume_of(value)
        if len(self._buffer) == self.period:
            old_price, old_volume = self._buffer[0]
            self._sum_pv -= old_price * old_volume
            self._sum_v -= old_volume
            self._sum_p -= old_price
            if old_volume != 0.0:
                self._nonzero -= 1
        self._buffer.append((price, volume))
        self._sum_p += price
        if volume != 0.0:
            self._nonzero += 1
        if self._nonzero:
            self._sum_pv += price * volume
            self._sum_v += volume
        else:
            self._sum_pv = 0.0
            self._sum_v = 0.0
        return self._output()

    def _output(self) -> float:
        if not self._nonzero or self._sum_v == 0.0:
            return self._sum_p / len(self._buffer)
        return self._sum_pv / self._sum_v

    @property
    def ready(self) -> bool:
        return len(self._buffer) == self.period

    @property
    def value(self) -> float | None:
        return self._output() if self._buffer else None

    def reset(self) -> None:
        self._buffer.clear()
        self._sum_pv = 0.0
        self._sum_v = 0.0
        self._sum_p = 0.0
        self._nonzero = 0


class Vwap(Indicator[tuple[float, float], float]):
    """Volume-Weighted Average Price — session-based (``reset()`` at session open).

    Zero cumulative volume falls back to the plain average of prices seen.
    """

    __slots__ = ("_cum_pv", "_cum_v", "_cum_p", "_count")

    def __init__(self) -> None:
        self._cum_pv: float = 0.0
        self._cum_v: float = 0.0
        self._cum_p: float = 0.0
        self._count: int = 0

    def update(self, value: tuple[float, float] | PriceVolumeLike) -> float:
        price, volume = price_volume_of(value)
        self._cum_pv += price * volume
        self._cum_v += volume
        self._cum_p += price
        self._count += 1
        return self._output()

    def _output(self) -> float:
        if self._cum_v == 0.0:
            return self._cum_p / self._count
        return self._cum_pv / self._cum_v

    @property
    def value(self) -> float | None:
        return self._output() if self._count else None

    def reset(self) -> None:
        """Call at session open to restart the cumulative average."""
        self._cum_pv = 0.0
        self._cum_v = 0.0
        self._cum_p = 0.0
        self._count = 0
