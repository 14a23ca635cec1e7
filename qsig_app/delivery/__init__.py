"""Outbound alert sinks implementing the ``send(text)`` contract."""

from .base import BaseAlertDelivery, DeliveryResult, DeliveryStatus
from .memory_delivery import MemoryAlertDelivery
from .stdout_delivery import StdoutAlertDelivery

__all__ = [
    "BaseAlertDelivery",
    "DeliveryResult",
    "DeliveryStatus",
    "MemoryAlertDelivery",
    "StdoutAlertDelivery",
]
