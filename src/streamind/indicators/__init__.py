"""Indicators package."""

from streamind.indicators.base import Indicator  # noqa: F401
from streamind.indicators.extremum import (  # noqa: F401
    Max,
    MaxIndex,
    Min,
    MinIndex,
    MonotonicDeque,
)
from streamind.indicators.oscillators import (  # noqa: F401
    AroonIndicator,
    AroonOscillator,
    Macd,
    Rsi,
    Stochastics,
)
from streamind.indicators.streaming import (  # noqa: F401
    BollingerBands,
    Ema,
    ExponentialSmoothing,
    Rma,
    Sma,
    StandardDeviation,
    Vwap,
    Vwma,
)
from streamind.indicators.suite import IndicatorSuite  # noqa: F401
