"""Configuration management: defaults, YAML overrides and validation."""

from .defaults import EngineConfig, get_default_config
from .loader import ConfigLoader

__all__ = ["EngineConfig", "get_default_config", "ConfigLoader"]
