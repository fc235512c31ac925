"""
Unit tests for RSI, MACD and Stochastics.
"""

import pytest

from streamind.errors import InvalidRange, InvalidRelation
from streamind.indicators.oscillators import Macd, Rsi, Stochastics


class TestRsi:
    def test_known_sequence(self):
        rsi = Rsi(3)
        out = [rsi.update(v) for v in [100, 101, 100, 100, 100, 102]]
        assert out[0] is None
        assert out[1:] == pytest.approx([100.0, 50.0, 50.0, 50.0, 84.6153846])

    def test_all_gains_saturate_at_100(self):
        rsi = Rsi(period=14)
        for i in range(50):
            result = rsi.update(100.0 + i)  # strictly rising
        assert result == 100.0

    def test_all_losses_reach_0(self):
        rsi = Rsi(period=14)
        for i in range(50):
            result = rsi.update(100.0 - i * 0.5)  # falling
        assert result == 0.0

    def test_flat_input_saturates(self):
        rsi = Rsi(5)
        for _ in range(10):
            result = rsi.update(42.0)
        assert result == 100.0

    def test_range_bounds(self, prices):
        rsi = Rsi(period=14)
        for price in prices:
            result = rsi.update(price)
            if result is not None:
                assert 0 <= result <= 100

    def test_ready_after_period_changes(self):
        rsi = Rsi(3)
        for v in [1.0, 2.0, 3.0]:
            rsi.update(v)
        assert not rsi.ready
        rsi.update(4.0)
        assert rsi.ready


class TestMacd:
    def test_known_sequence(self):
        macd = Macd(2, 4, 2)
        out = [macd.update(v) for v in [100, 200, 300, 200]]
        assert [o.macd for o in out] == pytest.approx([0.0, 0.0, 50.0, 50.0 / 3])
        assert [o.signal for o in out] == pytest.approx([0.0, 0.0, 100.0 / 3, 200.0 / 9])
        assert out[-1].histogram == pytest.approx(-50.0 / 9)

    def test_histogram_is_difference(self):
        macd = Macd()
        for i in range(50):
            line, signal, hist = macd.update(100.0 + i).astuple()
        assert hist == pytest.approx(line - signal, abs=0.001)

    def test_default_periods(self):
        macd = Macd()
        assert (macd.short_period, macd.long_period, macd.signal_period) == (12, 26, 9)

    @pytest.mark.parametrize("short, long", [(26, 12), (12, 12)])
    def test_short_must_be_less_than_long(self, short, long):
        with pytest.raises(InvalidRelation) as exc:
            Macd(short, long, 9)
        assert str(exc.value) == (
            "invalid relation: expected to be short_period < long_period, "
            f"found {short} < {long}."
        )

    def test_zero_signal_period_rejected(self):
        with pytest.raises(InvalidRange):
            Macd(12, 26, 0)


class TestStochastics:
    def test_known_sequence(self):
        stoch = Stochastics(4, 2, 2)
        out = [stoch.update(v).astuple() for v in [100, 101, 102, 101, 100, 99]]
        assert out == pytest.approx(
            [
                (50, 50, 50),
                (100, 100, 75),
                (100, 100, 100),
                (50, 75, 87.5),
                (0, 25, 50),
                (0, 0, 12.5),
            ]
        )

    def test_flat_range_is_midpoint(self):
        stoch = Stochastics(3, 3, 3)
        for _ in range(5):
            result = stoch.update(7.0)
        assert result.astuple() == (50.0, 50.0, 50.0)

    def test_bounds(self, prices):
        stoch = Stochastics()
        for price in prices:
            result = stoch.update(price)
            for component in result.astuple():
                assert -1e-9 <= component <= 100.0 + 1e-9

    @pytest.mark.parametrize("args", [(0, 3, 3), (14, 0, 3), (14, 3, 0)])
    def test_zero_periods_rejected(self, args):
        with pytest.raises(InvalidRange):
            Stochastics(*args)
