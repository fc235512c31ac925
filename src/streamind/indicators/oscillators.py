"""
Oscillators derived from the primitive engines.

Each is a small amount of arithmetic over one or more engines from
``streaming`` and ``extremum``; periods default to the values in
``streamind.config.settings`` when omitted. Oscillator outputs are scaled to
[0, 100] (``AroonOscillator`` to [-100, 100]).
"""

from __future__ import annotations

from streamind.config import settings
from streamind.errors import InvalidRelation, require_period
from streamind.indicators.base import Indicator
from streamind.indicators.extremum import Max, MaxIndex, Min, MinIndex
from streamind.indicators.streaming import Ema, Rma, Sma
from streamind.models.types import (
    AroonOutput,
    MacdOutput,
    PriceLike,
    StochasticsOutput,
    price_of,
)
from streamind.operators.parallel import Diff


class Rsi(Indicator[float, float]):
    """Relative Strength Index using Wilder averaging of gains/losses.

    Optional output: the first input has no predecessor, so it yields ``None``.
    A zero average loss saturates at 100; a zero average gain with some loss
    gives 0.
    """

    __slots__ = ("period", "_gain", "_loss", "_prev")

    def __init__(self, period: int | None = None) -> None:
        period = settings.rsi_period if period is None else period
        self.period = require_period("period", period)
        self._gain = Rma(period)
        self._loss = Rma(period)
        self._prev: float | None = None

    def update(self, value: float | PriceLike) -> float | None:
        price = price_of(value)
        prev, self._prev = self._prev, price
        if prev is None:
            return None
        change = price - prev
        self._gain.update(max(change, 0.0))
        self._loss.update(max(-change, 0.0))
        return self.value

    @property
    def ready(self) -> bool:
        return self._gain.ready

    @property
    def value(self) -> float | None:
        avg_gain = self._gain.value
        avg_loss = self._loss.value
        if avg_gain is None or avg_loss is None:
            return None
        if avg_loss == 0.0:
            return 100.0
        return 100.0 - 100.0 / (1.0 + avg_gain / avg_loss)

    def reset(self) -> None:
        self._gain.reset()
        self._loss.reset()
        self._prev = None


class Macd(Indicator[float, MacdOutput]):
    """MACD decomposed into a fast/slow EMA difference and a signal EMA.

    Config: (12, 26, 9) by default.
    """

    __slots__ = ("short_period", "long_period", "signal_period", "_line", "_signal")

    def __init__(
        self,
        short_period: int | None = None,
        long_period: int | None = None,
        signal_period: int | None = None,
    ) -> None:
        short_period = settings.macd_short_period if short_period is None else short_period
        long_period = settings.macd_long_period if long_period is None else long_period
        signal_period = settings.macd_signal_period if signal_period is None else signal_period
        require_period("short_period", short_period)
        require_period("long_period", long_period)
        require_period("signal_period", signal_period)
        if not short_period < long_period:
            raise InvalidRelation(
                "<", ("short_period", short_period), ("long_period", long_period)
            )

        self.short_period = short_period
        self.long_period = long_period
        self.signal_period = signal_period
        self._line = Diff(Ema(short_period), Ema(long_period))
        self._signal = Ema(signal_period)

    def update(self, value: float | PriceLike) -> MacdOutput:
        price = price_of(value)
        line = self._line.update((price, price))
        signal = self._signal.update(line)
        return MacdOutput(macd=line, signal=signal, histogram=line - signal)

    @property
    def ready(self) -> bool:
        return self._line.ready and self._signal.ready

    @property
    def value(self) -> MacdOutput | None:
        line = self._line.value
        signal = self._signal.value
        if line is None or signal is None:
            return None
        return MacdOutput(macd=line, signal=signal, histogram=line - signal)

    def reset(self) -> None:
        self._line.reset()
        self._signal.reset()


class Stochastics(Indicator[float, StochasticsOutput]):
    """Position of the input inside its ``n_period`` high/low range.

    %K = 100 * (x - min) / (max - min); %D = 100 * SMA_m(x - min) / SMA_m(max - min);
    slow %D = SMA_x(%D). A flat range maps %K (and %D) to the midpoint 50.
    """

    __slots__ = (
        "n_period",
        "m_period",
        "x_period",
        "_min",
        "_max",
        "_d_numerator",
        "_d_denominator",
        "_slow_d",
        "_current",
    )

    def __init__(
        self,
        n_period: int | None = None,
        m_period: int | None = None,
        x_period: int | None = None,
    ) -> None:
        n_period = settings.stochastics_n_period if n_period is None else n_period
        m_period = settings.stochastics_m_period if m_period is None else m_period
        x_period = settings.stochastics_x_period if x_period is None else x_period
        require_period("n_period", n_period)
        require_period("m_period", m_period)
        require_period("x_period", x_period)
        self._min = Min(n_period)
        self._max = Max(n_period)
        self._d_numerator = Sma(m_period)
        self._d_denominator = Sma(m_period)
        self._slow_d = Sma(x_period)
        self.n_period = n_period
        self.m_period = m_period
        self.x_period = x_period
        self._current: StochasticsOutput | None = None

    def update(self, value: float | PriceLike) -> StochasticsOutput:
        price = price_of(value)
        low = self._min.update(price)
        high = self._max.update(price)
        span = high - low

        k = 50.0 if span == 0.0 else 100.0 * (price - low) / span
        numerator = self._d_numerator.update(price - low)
        denominator = self._d_denominator.update(span)
        d = 50.0 if denominator == 0.0 else 100.0 * numerator / denominator
        slow_d = self._slow_d.update(d)

        self._current = StochasticsOutput(k=k, d=d, slow_d=slow_d)
        return self._current

    @property
    def ready(self) -> bool:
        return self._max.ready and self._d_denominator.ready and self._slow_d.ready

    @property
    def value(self) -> StochasticsOutput | None:
        return self._current

    def reset(self) -> None:
        self._min.reset()
        self._max.reset()
        self._d_numerator.reset()
        self._d_denominator.reset()
        self._slow_d.reset()
        self._current = None


class AroonIndicator(Indicator[float, AroonOutput]):
    """Aroon up/down from the age of the highest and lowest of ``period + 1`` inputs.

    ``aroon_up = 100 * (period - age_of_max) / period`` and likewise for
    ``aroon_down``. Ties resolve to the most recent extremum.
    """

    __slots__ = ("period", "_max_index", "_min_index")

    def __init__(self, period: int | None = None) -> None:
        period = settings.aroon_period if period is None else period
        self.period = require_period("period", period)
        self._max_index = MaxIndex(period + 1)
        self._min_index = MinIndex(period + 1)

    def update(self, value: float | PriceLike) -> AroonOutput:
        price = price_of(value)
        max_age = self._max_index.update(price)
        min_age = self._min_index.update(price)
        return self._output(max_age, min_age)

    def _output(self, max_age: int, min_age: int) -> AroonOutput:
        return AroonOutput(
            aroon_up=100.0 * (self.period - max_age) / self.period,
            aroon_down=100.0 * (self.period - min_age) / self.period,
        )

    @property
    def ready(self) -> bool:
        return self._max_index.ready

    @property
    def value(self) -> AroonOutput | None:
        max_age = self._max_index.value
        min_age = self._min_index.value
        if max_age is None or min_age is None:
            return None
        return self._output(max_age, min_age)

    def reset(self) -> None:
        self._max_index.reset()
        self._min_index.reset()


class AroonOscillator(Indicator[float, float]):
    """``aroon_up - aroon_down``, in [-100, 100]."""

    __slots__ = ("_aroon",)

    def __init__(self, period: int | None = None) -> None:
        self._aroon = AroonIndicator(period)

    @property
    def period(self) -> int:
        return self._aroon.period

    def update(self, value: float | PriceLike) -> float:
        aroon = self._aroon.update(value)
        return aroon.aroon_up - aroon.aroon_down

    @property
    def ready(self) -> bool:
        return self._aroon.ready

    @property
    def value(self) -> float | None:
        aroon = self._aroon.value
        return None if aroon is None else aroon.aroon_up - aroon.aroon_down

    def reset(self) -> None:
        self._aroon.reset()
