"""
Shared pytest fixtures.

Provides a seeded random-walk price series and matching OHLCV candles so
property tests are reproducible.
"""

import random

import pytest

from streamind.models.types import Candle


@pytest.fixture
def prices():
    """200 prices from a seeded random walk around 100, with some flat runs."""
    rng = random.Random(42)
    price = 100.0
    series = []
    for i in range(200):
        if i % 17 < 3:
            series.append(price)  # repeated values exercise ties
            continue
        price = max(1.0, price + rng.gauss(0.0, 1.5))
        series.append(round(price, 2))
    return series


@pytest.fixture
def candles(prices):
    """One candle per price: close = price, high/low straddle it."""
    rng = random.Random(7)
    out = []
    for i, close in enumerate(prices):
        spread = abs(rng.gauss(0.0, 0.8))
        out.append(
            Candle(
                open=close - 0.1,
                high=close + spread,
                low=close - spread,
                close=close,
                volume=float(rng.randint(0, 5000)),
                timestamp=float(i),
            )
        )
    return out
