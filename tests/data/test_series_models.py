"""Tests for price series models and helpers."""

import pytest

from qsig_app.data.models import (
    apply_live_tick,
    closes_of,
    last_close,
    validate_series,
)
from qsig_app.errors import MalformedDataError


class TestSeriesHelpers:
    """Test read helpers."""

    def test_closes_and_last(self, make_series):
        series = make_series([1.0, 2.0, 3.0])
        assert closes_of(series) == [1.0, 2.0, 3.0]
        assert last_close(series) == 3.0

    def test_last_close_empty(self):
        assert last_close(()) is None


class TestApplyLiveTick:
    """Splicing a live price into the latest point."""

    def test_replaces_last_close(self, make_series):
        series = make_series([1.0, 2.0, 3.0])
        updated = apply_live_tick(series, 3.5)

        assert len(updated) == 3
        assert updated[-1].close == 3.5
        assert updated[-1].time == series[-1].time
        assert updated[:2] == series[:2]

    def test_original_untouched(self, make_series):
        series = make_series([1.0, 2.0])
        apply_live_tick(series, 9.0)
        assert series[-1].close == 2.0

    def test_empty_series_noop(self):
        assert apply_live_tick((), 1.0) == ()

    @pytest.mark.parametrize("price", [float("nan"), float("inf"), "1.0", None])
    def test_rejects_non_finite(self, make_series, price):
        with pytest.raises(MalformedDataError):
            apply_live_tick(make_series([1.0]), price)


class TestValidateSeries:
    """Non-finite close detection."""

    def test_valid(self, make_series):
        validate_series(make_series([1.0, 2.0]))

    def test_non_finite(self, make_series):
        with pytest.raises(MalformedDataError) as exc_info:
            validate_series(make_series([1.0, float("nan"), 2.0]))
        assert exc_info.value.context["index"] == 1
