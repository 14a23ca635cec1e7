"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta, timezone
from typing import Callable, Sequence

import pytest

from qsig_app.data.models import PricePoint, Series

START = datetime(2024, 1, 1, 0, 0, 0, tzinfo=timezone.utc)


def build_series(closes: Sequence[float], step: timedelta = timedelta(hours=1)) -> Series:
    """Hourly price series starting at a fixed UTC time."""
    return tuple(PricePoint(time=START + i * step, close=float(c)) for i, c in enumerate(closes))


@pytest.fixture
def make_series() -> Callable[..., Series]:
    """Factory for hourly series from a list of closes."""
    return build_series


@pytest.fixture
def flat_series() -> Series:
    """60 constant closes at 100.0."""
    return build_series([100.0] * 60)


@pytest.fixture
def rising_series() -> Series:
    """100 strictly increasing closes, 100..199."""
    return build_series([100.0 + i for i in range(100)])


@pytest.fixture
def rising_with_resistance() -> Series:
    """Rising closes with an early spike to 250 acting as resistance."""
    closes = [100.0 + i for i in range(100)]
    closes[10] = 250.0
    return build_series(closes)


@pytest.fixture
def falling_with_support() -> Series:
    """Falling closes with an early dip to 50 acting as support."""
    closes = [200.0 - i for i in range(100)]
    closes[10] = 50.0
    return build_series(closes)
