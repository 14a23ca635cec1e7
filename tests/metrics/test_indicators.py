"""Tests for moving averages, oscillator and convergence-divergence"""

import pytest

from qsig_app.metrics.indicators import (
    convergence_divergence,
    exponential_average,
    moving_average,
    oscillator,
)


class TestMovingAverage:
    """Test simple moving average"""

    def test_warm_up_is_none(self):
        assert moving_average([1, 2, 3, 4, 5], 3) == [None, None, 2.0, 3.0, 4.0]

    def test_matches_window_mean_everywhere(self):
        values = [3.0, 1.0, 4.0, 1.0, 5.0, 9.0, 2.0, 6.0, 5.0, 3.0, 5.0]
        period = 4
        result = moving_average(values, period)

        assert len(result) == len(values)
        for i, value in enumerate(result):
            if i < period - 1:
                assert value is None
            else:
                window = values[i - period + 1:i + 1]
                assert value == pytest.approx(sum(window) / period)

    def test_period_longer_than_input(self):
        assert moving_average([1.0, 2.0], 5) == [None, None]

    def test_zero_is_a_value(self):
        """A zero mean is reported, not treated as missing"""
        assert moving_average([-1.0, 1.0], 2) == [None, 0.0]


class TestExponentialAverage:
    """Test exponential moving average"""

    def test_seeded_with_first_value(self):
        # k = 2 / (3 + 1) = 0.5
        assert exponential_average([10.0, 20.0, 20.0], 3) == [10.0, 15.0, 17.5]

    def test_empty(self):
        assert exponential_average([], 3) == []

    def test_constant_input_stays_constant(self):
        assert exponential_average([7.0] * 10, 5) == [7.0] * 10


class TestOscillator:
    """Test relative strength oscillator"""

    def test_short_input_all_none(self):
        assert oscillator([1.0] * 14, 14) == [None] * 14
        assert oscillator([1.0, 2.0], 14) == [None, None]

    def test_length_and_warm_up(self):
        closes = [100.0 + (i % 3) for i in range(30)]
        result = oscillator(closes, 14)

        assert len(result) == len(closes)
        assert result[:14] == [None] * 14
        assert all(v is not None for v in result[14:])

    def test_hand_computed_values(self):
        # gains [1, 0, 2], losses [0, 1, 0]
        result = oscillator([1.0, 2.0, 1.0, 3.0], 2)

        assert result[:2] == [None, None]
        assert result[2] == pytest.approx(50.0)
        # avg_gain = (0.5 + 2) / 2 = 1.25, avg_loss = (0.5 + 0) / 2 = 0.25
        assert result[3] == pytest.approx(100 - 100 / 6)

    def test_only_gains_is_100(self):
        result = oscillator([float(i) for i in range(20)], 14)
        assert all(v == 100.0 for v in result[14:])

    def test_only_losses_is_0(self):
        result = oscillator([float(20 - i) for i in range(20)], 14)
        assert all(v == pytest.approx(0.0) for v in result[14:])

    def test_flat_is_neutral(self):
        result = oscillator([100.0] * 20, 14)
        assert all(v == 50.0 for v in result[14:])

    def test_values_bounded(self):
        closes = [100.0, 103.0, 101.0, 99.0, 104.0, 102.0, 98.0, 97.0,
                  105.0, 101.0, 100.0, 102.0, 99.0, 98.0, 103.0, 104.0]
        result = oscillator(closes, 5)
        assert all(0.0 <= v <= 100.0 for v in result[5:])


class TestConvergenceDivergence:
    """Test MACD line, signal and histogram"""

    def test_full_length(self):
        closes = [100.0 + i * 0.5 for i in range(40)]
        macd = convergence_divergence(closes)

        assert len(macd.macd_line) == len(closes)
        assert len(macd.signal_line) == len(closes)
        assert len(macd.histogram) == len(closes)
        assert all(v is not None for v in macd.histogram)

    def test_histogram_is_line_minus_signal(self):
        closes = [100.0, 102.0, 101.0, 105.0, 103.0, 107.0, 110.0, 108.0]
        macd = convergence_divergence(closes, 3, 6, 2)

        for line, sig, hist in zip(macd.macd_line, macd.signal_line, macd.histogram):
            assert hist == pytest.approx(line - sig)

    def test_constant_input_is_zero(self):
        macd = convergence_divergence([50.0] * 30)
        assert macd.macd_line == [0.0] * 30
        assert macd.histogram == [0.0] * 30

    def test_rising_input_positive_line(self):
        macd = convergence_divergence([float(i) for i in range(60)])
        assert macd.macd_line[-1] > 0
