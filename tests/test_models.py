"""
Unit tests for data models (Candle, output records, IndicatorSnapshot).

Tests: candle price projections, input coercion, record tuple views.
"""

import dataclasses
from fractions import Fraction

import pytest

from streamind.models.types import (
    Candle,
    IndicatorSnapshot,
    MacdOutput,
    price_of,
    price_volume_of,
)


class TestCandle:
    def test_price_projections(self):
        c = Candle(open=9.0, high=12.0, low=8.0, close=10.0, volume=100.0)
        assert c.hloc == pytest.approx(9.75)  # (12+8+9+10)/4
        assert c.hlc == pytest.approx(10.0)
        assert c.hlcc == pytest.approx(10.0)  # (12+8+10+10)/4
        assert c.price == c.hlcc

    def test_defaults(self):
        c = Candle(open=1.0, high=1.0, low=1.0, close=1.0)
        assert c.volume == 0.0
        assert c.timestamp == 0.0


class TestCoercion:
    def test_price_of_number(self):
        assert price_of(3) == 3.0
        assert isinstance(price_of(3), float)

    def test_price_of_candle(self):
        c = Candle(open=1.0, high=4.0, low=0.0, close=2.0)
        assert price_of(c) == pytest.approx(2.0)

    def test_price_of_other_real_numbers(self):
        assert price_of(Fraction(3, 2)) == 1.5

    def test_price_volume_of_pair(self):
        assert price_volume_of((101, 2)) == (101.0, 2.0)

    def test_price_volume_of_list(self):
        assert price_volume_of([101, 2]) == (101.0, 2.0)

    def test_price_volume_of_candle(self):
        c = Candle(open=1.0, high=4.0, low=0.0, close=2.0, volume=7.0)
        assert price_volume_of(c) == (pytest.approx(2.0), 7.0)


class TestRecords:
    def test_astuple(self):
        out = MacdOutput(macd=1.0, signal=0.5, histogram=0.5)
        assert out.astuple() == (1.0, 0.5, 0.5)

    def test_frozen(self):
        out = MacdOutput(macd=1.0, signal=0.5, histogram=0.5)
        with pytest.raises(dataclasses.FrozenInstanceError):
            out.macd = 2.0

    def test_snapshot_defaults_neutral(self):
        snap = IndicatorSnapshot()
        assert snap.rsi == 50.0
        assert snap.stoch_k == 50.0
        assert snap.signal_macd_positive == 0
