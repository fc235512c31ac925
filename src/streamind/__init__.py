"""streamind — composable O(1) streaming technical indicators."""

__version__ = "0.1.0"

from streamind.indicators import (  # noqa: F401, E402
    AroonIndicator,
    AroonOscillator,
    BollingerBands,
    Ema,
    ExponentialSmoothing,
    Indicator,
    IndicatorSuite,
    Macd,
    Max,
    MaxIndex,
    Min,
    MinIndex,
    Rma,
    Rsi,
    Sma,
    StandardDeviation,
    Stochastics,
    Vwap,
    Vwma,
)
from streamind.operators import (  # noqa: F401, E402
    Composition,
    Constant,
    Diff,
    Fill,
    Identity,
    Map,
    Mature,
    Together,
    Window,
)
from streamind.adapters import IndicatorIterator, IndicatorStream  # noqa: F401, E402
from streamind.errors import InvalidParameter, InvalidRange, InvalidRelation  # noqa: F401, E402
from streamind.models.types import Candle  # noqa: F401, E402
