"""Core data types (dataclasses) consumed and produced by indicators."""

from __future__ import annotations

import dataclasses
import numbers
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Protocol


# ─── Inputs ────────────────────────────────────────────────────────────────────


class PriceLike(Protocol):
    @property
    def price(self) -> float: ...


class PriceVolumeLike(Protocol):
    @property
    def price(self) -> float: ...

    @property
    def volume(self) -> float: ...


@dataclass(slots=True)
class Candle:
    """Single OHLCV bar.

    ``price`` is the representative price scalar indicators read when fed a
    candle instead of a bare number: ``(high + low + close + close) / 4``.
    """

    open: float
    high: float
    low: float
    close: float
    volume: float = 0.0
    timestamp: float = 0.0

    @property
    def hloc(self) -> float:
        return (self.high + self.low + self.open + self.close) / 4.0

    @property
    def hlc(self) -> float:
        return (self.high + self.low + self.close) / 3.0

    @property
    def hlcc(self) -> float:
        return (self.high + self.low + self.close * 2.0) / 4.0

    @property
    def price(self) -> float:
        return self.hlcc


def price_of(value: float | PriceLike) -> float:
    """Coerce a number or a ``price``-bearing record to a float."""
    if isinstance(value, numbers.Real):
        return float(value)
    return float(value.price)


def price_volume_of(value: tuple[float, float] | PriceVolumeLike) -> tuple[float, float]:
    """Coerce a ``(price, volume)`` sequence or a record with both attributes."""
    if isinstance(value, Sequence):
        price, volume = value
        return float(price), float(volume)
    return float(value.price), float(value.volume)


# ─── Outputs ───────────────────────────────────────────────────────────────────


class _Record:
    """Mixin giving output records a plain-tuple view."""

    __slots__ = ()

    def astuple(self) -> tuple[Any, ...]:
        return dataclasses.astuple(self)


@dataclass(slots=True, frozen=True)
class StandardDeviationOutput(_Record):
    mean: float
    sd: float


@dataclass(slots=True, frozen=True)
class BollingerBandsOutput(_Record):
    average: float
    upper_bound: float
    lower_bound: float


@dataclass(slots=True, frozen=True)
class MacdOutput(_Record):
    """MACD line, its signal line and the histogram (line - signal)."""

    macd: float
    signal: float
    histogram: float


@dataclass(slots=True, frozen=True)
class StochasticsOutput(_Record):
    """%K, %D and slow %D, each in [0, 100]."""

    k: float
    d: float
    slow_d: float


@dataclass(slots=True, frozen=True)
class AroonOutput(_Record):
    """Aroon up/down, each in [0, 100]."""

    aroon_up: float
    aroon_down: float


@dataclass(slots=True)
class IndicatorSnapshot:
    """Full snapshot of all suite indicator values at a point in time."""

    # Trend
    sma_fast: float = 0.0
    sma_slow: float = 0.0
    ema: float = 0.0

    # Momentum
    rsi: float = 50.0
    macd_line: float = 0.0
    macd_signal: float = 0.0
    macd_hist: float = 0.0
    stoch_k: float = 50.0
    stoch_d: float = 50.0
    aroon_oscillator: float = 0.0

    # Volatility
    bollinger_upper: float = 0.0
    bollinger_mid: float = 0.0
    bollinger_lower: float = 0.0

    # Volume
    vwma: float = 0.0
    vwap: float = 0.0

    # Binary signals
    signal_price_above_sma_fast: int = 0
    signal_sma_fast_gt_slow: int = 0
    signal_macd_positive: int = 0
    signal_rsi_oversold: int = 0
    signal_rsi_overbought: int = 0
    signal_price_above_vwap: int = 0
