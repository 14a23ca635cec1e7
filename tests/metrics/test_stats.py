"""Tests for statistics utilities"""

import math

import pytest

from qsig_app.metrics.stats import mean, stdev, zscore


class TestMean:
    """Test arithmetic mean"""

    def test_mean_simple(self):
        assert mean([1.0, 2.0, 3.0]) == 2.0

    def test_mean_empty_is_zero(self):
        """Empty window floors the divisor at one"""
        assert mean([]) == 0.0


class TestStdev:
    """Test population standard deviation"""

    def test_stdev_known_values(self):
        assert stdev([2, 4, 4, 4, 5, 5, 7, 9]) == pytest.approx(2.0)

    def test_stdev_constant_is_zero(self):
        assert stdev([3.0, 3.0, 3.0]) == 0.0

    def test_stdev_empty_is_zero(self):
        assert stdev([]) == 0.0


class TestZScore:
    """Test z-score"""

    def test_zscore_known_values(self):
        # mean 2, population stdev sqrt(2/3)
        assert zscore(3.0, [1.0, 2.0, 3.0]) == pytest.approx(1.0 / math.sqrt(2.0 / 3.0))

    def test_zscore_zero_spread(self):
        assert zscore(10.0, [5.0, 5.0, 5.0]) == 0.0

    def test_zscore_empty_window(self):
        assert zscore(1.0, []) == 0.0

    def test_zscore_sign(self):
        assert zscore(0.0, [1.0, 2.0, 3.0]) < 0
