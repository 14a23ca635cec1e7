"""In-memory alert sink for embedding callers and tests."""

from typing import Any

from .base import BaseAlertDelivery, DeliveryResult, DeliveryStatus


class MemoryAlertDelivery(BaseAlertDelivery):
    """Collects alert texts in order of delivery."""

    def __init__(self, name: str = "memory", config: Any = None):
        super().__init__(name, config)
        self.messages: list[str] = []

    def send(self, text: str) -> DeliveryResult:
        self.messages.append(text)
        return DeliveryResult(status=DeliveryStatus.SUCCESS, message="Stored in memory")

    def health_check(self) -> bool:
        return True

    def clear(self) -> None:
        self.messages.clear()
