"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def _check_positive_ints(params: dict[str, Any], names: list[str]) -> list[ValidationError]:
        errors = []
        for name in names:
            if name in params:
                value = params[name]
                if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a positive integer",
                        value=value
                    ))
        return errors

    @staticmethod
    def _check_fractions(params: dict[str, Any], names: list[str]) -> list[ValidationError]:
        errors = []
        for name in names:
            if name in params:
                value = params[name]
                if not _is_number(value) or value < 0 or value > 1:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a number between 0 and 1",
                        value=value
                    ))
        return errors

    @staticmethod
    def validate_indicator_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate indicator window lengths."""
        errors = ConfigValidator._check_positive_ints(
            params, ["sma_fast", "sma_slow", "rsi_period", "macd_fast", "macd_slow", "macd_signal"]
        )

        fast, slow = params.get("macd_fast"), params.get("macd_slow")
        if _is_number(fast) and _is_number(slow) and fast >= slow:
            errors.append(ValidationError(
                field="macd_fast",
                message="Must be shorter than macd_slow",
                value=fast
            ))

        return errors

    @staticmethod
    def validate_probability_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate probability blend parameters."""
        errors = ConfigValidator._check_positive_ints(params, ["min_points", "histogram_window"])
        errors.extend(ConfigValidator._check_fractions(
            params, ["rsi_weight", "trend_weight", "momentum_weight"]
        ))

        if "logistic_slope" in params:
            value = params["logistic_slope"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="logistic_slope",
                    message="Must be a positive number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_level_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate support/resistance parameters."""
        errors = ConfigValidator._check_positive_ints(params, ["window", "max_levels"])
        errors.extend(ConfigValidator._check_fractions(params, ["tolerance_pct"]))
        return errors

    @staticmethod
    def validate_projection_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate projection parameters."""
        errors = ConfigValidator._check_positive_ints(params, ["min_points", "sigma_window"])
        errors.extend(ConfigValidator._check_fractions(params, ["damping"]))
        return errors

    @staticmethod
    def validate_signal_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate signal derivation parameters."""
        errors = ConfigValidator._check_positive_ints(params, ["min_points", "level_window"])
        errors.extend(ConfigValidator._check_fractions(params, [
            "level_tolerance_pct", "breakout_buffer_pct", "stop_pct", "take_profit_pct"
        ]))

        # Threshold at or below one half would let both sides qualify
        if "edge_threshold" in params:
            value = params["edge_threshold"]
            if not _is_number(value) or value < 0.5 or value >= 1:
                errors.append(ValidationError(
                    field="edge_threshold",
                    message="Must be a number in [0.5, 1)",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_exit_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate momentum-fade exit parameters."""
        errors = ConfigValidator._check_fractions(params, ["fade_ratio"])

        for name in ("overbought", "oversold"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value < 0 or value > 100:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be an oscillator value between 0 and 100",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "indicators" in config:
            errors.extend(ConfigValidator.validate_indicator_params(config["indicators"]))

        if "probability" in config:
            errors.extend(ConfigValidator.validate_probability_params(config["probability"]))

        if "levels" in config:
            errors.extend(ConfigValidator.validate_level_params(config["levels"]))

        if "projection" in config:
            errors.extend(ConfigValidator.validate_projection_params(config["projection"]))

        if "signal" in config:
            errors.extend(ConfigValidator.validate_signal_params(config["signal"]))

        if "exits" in config:
            errors.extend(ConfigValidator.validate_exit_params(config["exits"]))

        return errors
