"""
Unit tests for sliding-window extrema and the Aroon family.
"""

import pytest

from streamind.errors import InvalidRange
from streamind.indicators.extremum import Max, MaxIndex, Min, MinIndex, MonotonicDeque
from streamind.indicators.oscillators import AroonIndicator, AroonOscillator

SEQUENCE = [6, 7, 8, 3, 2, 4]


def _last_index_of(window, target):
    return max(i for i, v in enumerate(window) if v == target)


class TestMaxMin:
    @pytest.mark.parametrize("period", [1, 2, 5, 13])
    def test_matches_brute_force(self, prices, period):
        hi, lo = Max(period), Min(period)
        for i, price in enumerate(prices):
            window = prices[max(0, i - period + 1) : i + 1]
            assert hi.update(price) == max(window)
            assert lo.update(price) == min(window)

    def test_known_sequence(self):
        hi = Max(2)
        assert [hi.update(v) for v in SEQUENCE] == [6, 7, 8, 8, 3, 4]
        lo = Min(2)
        assert [lo.update(v) for v in SEQUENCE] == [6, 6, 7, 3, 2, 2]

    def test_ready(self):
        hi = Max(3)
        hi.update(1.0)
        hi.update(2.0)
        assert not hi.ready
        hi.update(3.0)
        assert hi.ready


class TestMaxMinIndex:
    def test_known_sequence(self):
        idx = MaxIndex(2)
        assert [idx.update(v) for v in SEQUENCE] == [0, 0, 0, 1, 1, 0]

    @pytest.mark.parametrize("period", [1, 3, 8])
    def test_matches_brute_force(self, prices, period):
        hi, lo = MaxIndex(period), MinIndex(period)
        for i, price in enumerate(prices):
            window = prices[max(0, i - period + 1) : i + 1]
            last = len(window) - 1
            assert hi.update(price) == last - _last_index_of(window, max(window))
            assert lo.update(price) == last - _last_index_of(window, min(window))

    def test_index_bounded_by_period(self, prices):
        idx = MinIndex(4)
        for price in prices:
            assert 0 <= idx.update(price) <= 3

    def test_ties_resolve_to_most_recent(self):
        idx = MaxIndex(5)
        for _ in range(4):
            assert idx.update(10.0) == 0


class TestMonotonicDeque:
    def test_size_never_exceeds_period(self, prices):
        dq = MonotonicDeque(6, maximum=False)
        for price in prices:
            dq.push(price)
            assert len(dq) <= 6

    def test_clear(self):
        dq = MonotonicDeque(3)
        dq.push(1.0)
        dq.clear()
        assert dq.extremum is None
        assert dq.age is None
        assert dq.seen == 0

    def test_zero_period_rejected(self):
        with pytest.raises(InvalidRange):
            MonotonicDeque(0)


class TestAroon:
    def test_known_sequence(self):
        aroon = AroonIndicator(4)
        out = [aroon.update(v).astuple() for v in SEQUENCE]
        assert out == pytest.approx(
            [(100, 100), (100, 75), (100, 50), (75, 100), (50, 100), (25, 75)]
        )

    def test_oscillator(self):
        osc = AroonOscillator(4)
        assert [osc.update(v) for v in SEQUENCE] == pytest.approx([0, 25, 50, -25, -50, -50])
        assert osc.period == 4

    def test_bounds(self, prices):
        aroon = AroonIndicator(10)
        for price in prices:
            result = aroon.update(price)
            assert 0.0 <= result.aroon_up <= 100.0
            assert 0.0 <= result.aroon_down <= 100.0

    def test_ready_after_period_plus_one(self):
        aroon = AroonIndicator(3)
        for v in [1.0, 2.0, 3.0]:
            aroon.update(v)
        assert not aroon.ready
        aroon.update(4.0)
        assert aroon.ready

    def test_defaults_from_settings(self):
        assert AroonIndicator().period == 14
