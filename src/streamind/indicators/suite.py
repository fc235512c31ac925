"""
IndicatorSuite — fans one candle into every configured indicator and returns
a complete snapshot of indicator values + binary signals.

Periods and thresholds are read from ``Settings`` at construction time.
"""

from __future__ import annotations

import logging

from streamind.config import Settings
from streamind.config import settings as default_settings
from streamind.indicators.oscillators import AroonOscillator, Macd, Rsi, Stochastics
from streamind.indicators.streaming import BollingerBands, Ema, Sma, Vwap, Vwma
from streamind.models.types import Candle, IndicatorSnapshot

logger = logging.getLogger(__name__)


class IndicatorSuite:
    """Compute the full indicator set in O(1) per candle.

    Price indicators read ``candle.close``; VWMA reads ``(close, volume)`` and
    the session VWAP reads the typical price ``(high + low + close) / 3``.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        cfg = settings or default_settings
        self.settings = cfg

        # Trend
        self.sma_fast = Sma(cfg.suite_sma_fast_period)
        self.sma_slow = Sma(cfg.suite_sma_slow_period)
        self.ema = Ema(cfg.suite_ema_period)

        # Momentum
        self.rsi = Rsi(cfg.rsi_period)
        self.macd = Macd(cfg.macd_short_period, cfg.macd_long_period, cfg.macd_signal_period)
        self.stochastics = Stochastics(
            cfg.stochastics_n_period, cfg.stochastics_m_period, cfg.stochastics_x_period
        )
        self.aroon = AroonOscillator(cfg.aroon_period)

        # Volatility
        self.bollinger = BollingerBands(cfg.bollinger_period, cfg.bollinger_multiplier)

        # Volume
        self.vwma = Vwma(cfg.suite_vwma_period)
        self.vwap = Vwap()

        self._candle_count: int = 0
        self._warm: bool = False

    @property
    def indicators(self) -> tuple:
        return (
            self.sma_fast,
            self.sma_slow,
            self.ema,
            self.rsi,
            self.macd,
            self.stochastics,
            self.aroon,
            self.bollinger,
            self.vwma,
            self.vwap,
        )

    def update(self, candle: Candle) -> IndicatorSnapshot:
        """Update all indicators with a new candle and return a full snapshot."""
        close = candle.close
        self._candle_count += 1

        # ── Trend ──
        sma_fast = self.sma_fast.update(close)
        sma_slow = self.sma_slow.update(close)
        ema = self.ema.update(close)

        # ── Momentum ──
        rsi = self.rsi.update(close)
        macd = self.macd.update(close)
        stoch = self.stochastics.update(close)
        aroon = self.aroon.update(close)

        # ── Volatility ──
        bands = self.bollinger.update(close)

        # ── Volume ──
        vwma = self.vwma.update((close, candle.volume))
        vwap = self.vwap.update((candle.hlc, candle.volume))

        if not self._warm and self.ready:
            self._warm = True
            logger.debug("[Suite] Warm after %d candles", self._candle_count)

        cfg = self.settings
        # ── Binary Signals ──
        return IndicatorSnapshot(
            sma_fast=sma_fast,
            sma_slow=sma_slow,
            ema=ema,
            rsi=50.0 if rsi is None else rsi,
            macd_line=macd.macd,
            macd_signal=macd.signal,
            macd_hist=macd.histogram,
            stoch_k=stoch.k,
            stoch_d=stoch.d,
            aroon_oscillator=aroon,
            bollinger_upper=bands.upper_bound,
            bollinger_mid=bands.average,
            bollinger_lower=bands.lower_bound,
            vwma=vwma,
            vwap=vwap,
            signal_price_above_sma_fast=1 if close > sma_fast else 0,
            signal_sma_fast_gt_slow=1 if sma_fast > sma_slow else 0,
            signal_macd_positive=1 if macd.macd > 0 else 0,
            signal_rsi_oversold=1 if rsi is not None and rsi < cfg.rsi_oversold_threshold else 0,
            signal_rsi_overbought=(
                1 if rsi is not None and rsi > cfg.rsi_overbought_threshold else 0
            ),
            signal_price_above_vwap=1 if close > vwap else 0,
        )

    @property
    def ready(self) -> bool:
        """True once every indicator has seen a full period of history."""
        return all(indicator.ready for indicator in self.indicators)

    def reset_session(self) -> None:
        """Reset session-based indicators (VWAP). Call at market open."""
        self.vwap.reset()
        logger.info("[Suite] Session reset (VWAP)")

    def reset_all(self) -> None:
        """Full reset of all indicators."""
        for indicator in self.indicators:
            indicator.reset()
        self._candle_count = 0
        self._warm = False
        logger.info("[Suite] Full reset")
