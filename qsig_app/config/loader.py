"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from .defaults import (
    EngineConfig,
    ExitParams,
    IndicatorParams,
    LevelParams,
    ProbabilityParams,
    ProjectionParams,
    SignalParams,
    get_default_config,
)
from .validation import ConfigValidator

_SECTIONS = {
    "indicators": IndicatorParams,
    "probability": ProbabilityParams,
    "levels": LevelParams,
    "projection": ProjectionParams,
    "signal": SignalParams,
    "exits": ExitParams,
}


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: EngineConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def _load_assets(self) -> dict[str, Any]:
        assets_file = self.config_dir / "assets.yaml"

        if not assets_file.exists():
            return {}

        with open(assets_file) as f:
            assets_config = yaml.safe_load(f) or {}

        return assets_config.get("assets") or {}  # type: ignore[no-any-return]

    def load_asset_config(self, asset_id: str) -> dict[str, Any]:
        """Load asset-specific configuration overrides."""
        return self._load_assets().get(asset_id, {})  # type: ignore[no-any-return]

    def load_all_asset_ids(self) -> list[str]:
        """Asset ids that carry overrides in assets.yaml."""
        return list(self._load_assets())

    def merge_config(
        self,
        asset_id: str,
        overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-call overrides (highest priority)
        2. Asset-specific overrides
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        asset_config = self.load_asset_config(asset_id)
        config = self._deep_merge(config, asset_config)

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load_engine_config(
        self,
        asset_id: str,
        overrides: Optional[dict[str, Any]] = None
    ) -> EngineConfig:
        """
        Build a validated EngineConfig for an asset.

        Raises:
            ValueError: If any merged parameter fails validation
        """
        merged = self.merge_config(asset_id, overrides)

        errors = ConfigValidator.validate_config(merged)
        if errors:
            details = "; ".join(f"{err.field}: {err.message} (got: {err.value})" for err in errors)
            raise ValueError(f"Invalid configuration for {asset_id}: {details}")

        sections = {}
        for name, params_cls in _SECTIONS.items():
            known = {f.name for f in fields(params_cls)}
            values = {k: v for k, v in merged.get(name, {}).items() if k in known}
            sections[name] = params_cls(**values)

        return EngineConfig(**sections)

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
