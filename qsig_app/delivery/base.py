"""Base classes for alert delivery mechanisms."""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from ..errors import DeliveryError
from ..logging.config import get_logger


class DeliveryStatus(Enum):
    """Alert delivery status."""
    SUCCESS = "success"
    FAILED = "failed"
    DEAD_LETTER = "dead_letter"


@dataclass
class DeliveryResult:
    """Result of an alert delivery attempt."""
    status: DeliveryStatus
    message: Optional[str] = None
    attempt_count: int = 1
    delivery_time_ms: Optional[int] = None
    error: Optional[Exception] = None


class AlertDeliveryRetryableError(DeliveryError):
    """Retryable alert delivery error."""
    pass


class AlertDeliveryPermanentError(DeliveryError):
    """Permanent alert delivery error that should not be retried."""
    pass


class BaseAlertDelivery(ABC):
    """Base class for alert delivery mechanisms."""

    def __init__(self, name: str, config: Any = None):
        self.name = name
        self.config = config
        self.logger = get_logger(f"alert.delivery.{name}")
        self._delivery_count = 0
        self._error_count = 0

    @abstractmethod
    def send(self, text: str) -> DeliveryResult:
        """
        Deliver a single alert message.

        Args:
            text: Human-readable alert text

        Returns:
            Delivery result
        """
        pass

    @abstractmethod
    def health_check(self) -> bool:
        """Check if delivery mechanism is healthy."""
        pass

    def send_with_retry(
        self,
        text: str,
        max_retries: int = 3,
        retry_delay: float = 1
    ) -> DeliveryResult:
        """
        Deliver an alert with retry logic.

        Args:
            text: Alert text
            max_retries: Maximum number of retry attempts
            retry_delay: Delay between retries in seconds

        Returns:
            Final delivery result
        """
        attempt = 0
        last_error: Optional[Exception] = None

        while attempt <= max_retries:
            try:
                start_time = time.time()
                result = self.send(text)
                if result.status == DeliveryStatus.SUCCESS:
                    result.delivery_time_ms = int((time.time() - start_time) * 1000)
                    result.attempt_count = attempt + 1
                    self._delivery_count += 1
                    return result
                last_error = result.error

            except AlertDeliveryPermanentError as e:
                self._error_count += 1
                return DeliveryResult(
                    status=DeliveryStatus.FAILED,
                    message=f"Permanent error: {str(e)}",
                    attempt_count=attempt + 1,
                    error=e
                )

            except AlertDeliveryRetryableError as e:
                last_error = e

            except Exception as e:
                # Unknown error - treat as retryable
                last_error = e

            attempt += 1

            if attempt <= max_retries:
                self.logger.warning(
                    "Delivery attempt failed, retrying",
                    delivery_name=self.name,
                    attempt=attempt,
                    retry_delay=retry_delay,
                    error=str(last_error)
                )
                time.sleep(retry_delay)

        self._error_count += 1
        return DeliveryResult(
            status=DeliveryStatus.DEAD_LETTER,
            message=f"Max retries exceeded: {str(last_error)}",
            attempt_count=attempt,
            error=last_error
        )

    def get_stats(self) -> dict[str, Any]:
        """Get delivery statistics."""
        return {
            "name": self.name,
            "delivery_count": self._delivery_count,
            "error_count": self._error_count,
            "success_rate": (
                self._delivery_count / (self._delivery_count + self._error_count)
                if (self._delivery_count + self._error_count) > 0 else 0.0
            )
        }

    def reset_stats(self):
        """Reset delivery statistics."""
        self._delivery_count = 0
        self._error_count = 0
