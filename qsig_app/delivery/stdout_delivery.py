"""Standard output alert delivery mechanism."""

import json
import sys
from datetime import datetime, timezone
from typing import Optional

from ..config.alert_delivery import StdoutDeliveryConfig
from .base import BaseAlertDelivery, DeliveryResult, DeliveryStatus


class StdoutAlertDelivery(BaseAlertDelivery):
    """Standard output alert delivery implementation."""

    def __init__(self, name: str = "stdout", config: Optional[StdoutDeliveryConfig] = None):
        super().__init__(name, config or StdoutDeliveryConfig())
        self.config: StdoutDeliveryConfig

    def send(self, text: str) -> DeliveryResult:
        """Print an alert to stdout."""
        try:
            print(self._format_alert(text), file=sys.stdout, flush=True)
        except OSError as e:
            self.logger.error(
                "Failed to print alert to stdout",
                delivery_name=self.name,
                error=str(e)
            )
            return DeliveryResult(
                status=DeliveryStatus.FAILED,
                message=f"Stdout error: {str(e)}",
                error=e
            )

        self.logger.debug("Alert printed to stdout", delivery_name=self.name)
        return DeliveryResult(status=DeliveryStatus.SUCCESS, message="Printed to stdout")

    def _format_alert(self, text: str) -> str:
        """Format alert for stdout output."""
        timestamp = datetime.now(timezone.utc).isoformat()
        if self.config.format == "json":
            payload = {"text": text}
            if self.config.include_timestamp:
                payload["timestamp"] = timestamp
            return json.dumps(payload)

        if self.config.include_timestamp:
            return f"[{timestamp}] ALERT: {text}"
        return f"ALERT: {text}"

    def health_check(self) -> bool:
        """Check if stdout is available."""
        try:
            return sys.stdout.writable()
        except (OSError, ValueError):
            return False
