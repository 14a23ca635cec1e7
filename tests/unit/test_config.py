"""Unit tests for configuration management."""

from pathlib import Path

import pytest

from qsig_app.config.defaults import EngineConfig, get_default_config
from qsig_app.config.loader import ConfigLoader
from qsig_app.config.validation import ConfigValidator


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        config = get_default_config()

        assert config.indicators.sma_fast == 20
        assert config.indicators.sma_slow == 50
        assert config.indicators.rsi_period == 14
        assert config.probability.min_points == 60
        assert config.probability.rsi_weight == 0.45
        assert config.probability.trend_weight == 0.35
        assert config.probability.momentum_weight == 0.20
        assert config.levels.window == 5
        assert config.levels.max_levels == 8
        assert config.projection.sigma_window == 24
        assert config.projection.damping == 0.8
        assert config.signal.edge_threshold == 0.55
        assert config.signal.level_window == 6
        assert config.exits.overbought == 70.0


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self) -> None:
        loader = ConfigLoader.create()
        assert isinstance(loader.config_dir, Path)

    def test_merge_config_defaults_only(self, tmp_path) -> None:
        loader = ConfigLoader.create(tmp_path)
        config = loader.merge_config("UNKNOWN-ASSET")

        assert config["signal"]["edge_threshold"] == 0.55
        assert config["levels"]["tolerance_pct"] == 0.004

    def test_merge_config_with_overrides(self, tmp_path) -> None:
        loader = ConfigLoader.create(tmp_path)
        config = loader.merge_config("UNKNOWN-ASSET", {"signal": {"edge_threshold": 0.6}})

        assert config["signal"]["edge_threshold"] == 0.6
        assert config["signal"]["stop_pct"] == 0.008

    def test_asset_file_precedence(self, tmp_path) -> None:
        (tmp_path / "assets.yaml").write_text(
            "assets:\n"
            "  XRP-USD:\n"
            "    signal:\n"
            "      edge_threshold: 0.6\n"
            "      stop_pct: 0.01\n"
        )
        loader = ConfigLoader.create(tmp_path)

        config = loader.merge_config("XRP-USD", {"signal": {"stop_pct": 0.02}})

        assert config["signal"]["edge_threshold"] == 0.6
        assert config["signal"]["stop_pct"] == 0.02
        assert loader.merge_config("BTC-USD")["signal"]["edge_threshold"] == 0.55
        assert loader.load_all_asset_ids() == ["XRP-USD"]

    def test_load_engine_config(self, tmp_path) -> None:
        loader = ConfigLoader.create(tmp_path)
        config = loader.load_engine_config("XRP-USD", {"exits": {"overbought": 80.0}})

        assert isinstance(config, EngineConfig)
        assert config.exits.overbought == 80.0
        assert config.exits.oversold == 30.0
        assert config.signal == get_default_config().signal

    def test_load_engine_config_rejects_invalid(self, tmp_path) -> None:
        loader = ConfigLoader.create(tmp_path)
        with pytest.raises(ValueError, match="edge_threshold"):
            loader.load_engine_config("XRP-USD", {"signal": {"edge_threshold": 0.4}})


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_defaults_are_valid(self) -> None:
        loader = ConfigLoader.create()
        defaults = loader._dataclass_to_dict(get_default_config())
        assert ConfigValidator.validate_config(defaults) == []

    def test_invalid_period(self) -> None:
        errors = ConfigValidator.validate_indicator_params({"rsi_period": 0})
        assert len(errors) == 1
        assert errors[0].field == "rsi_period"

    def test_fast_must_be_shorter_than_slow(self) -> None:
        errors = ConfigValidator.validate_indicator_params({"macd_fast": 30, "macd_slow": 26})
        assert [e.field for e in errors] == ["macd_fast"]

    def test_invalid_fraction(self) -> None:
        errors = ConfigValidator.validate_level_params({"tolerance_pct": 1.5})
        assert errors[0].field == "tolerance_pct"

    def test_booleans_are_not_numbers(self) -> None:
        errors = ConfigValidator.validate_projection_params({"damping": True, "sigma_window": True})
        assert {e.field for e in errors} == {"damping", "sigma_window"}

    def test_invalid_oscillator_bound(self) -> None:
        errors = ConfigValidator.validate_exit_params({"overbought": 120})
        assert errors[0].field == "overbought"


class TestBundledConfig:
    """Test the repository's own assets.yaml."""

    def test_bundled_assets_are_valid(self) -> None:
        loader = ConfigLoader.create()

        for asset_id in loader.load_all_asset_ids():
            assert ConfigValidator.validate_config(loader.merge_config(asset_id)) == []
            loader.load_engine_config(asset_id)
