"""Configuration for alert delivery sinks."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StdoutDeliveryConfig:
    """Configuration for stdout delivery."""
    format: str = "text"  # text, json
    include_timestamp: bool = True


@dataclass(frozen=True)
class AlertDeliveryConfig:
    """Retry policy shared by alert sinks."""
    enabled: bool = True
    retry_attempts: int = 2
    retry_delay_seconds: float = 0.5


def get_default_alert_config() -> AlertDeliveryConfig:
    """Get default alert delivery configuration."""
    return AlertDeliveryConfig()
