"""
Error classification for the signal engine.

This module provides a structured exception hierarchy for the kinds of errors
encountered around the analytic core: malformed market data, external fetch
failures, invalid position transitions and alert delivery failures.
"""

from .data_quality import (
    DataQualityError,
    MalformedDataError,
    InsufficientDataError,
)
from .system_failures import (
    SystemFailureError,
    StateTransitionError,
    DeliveryError,
)
from .recovery import (
    RecoverableError,
    FetchError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MalformedDataError",
    "InsufficientDataError",
    # System Failures
    "SystemFailureError",
    "StateTransitionError",
    "DeliveryError",
    # Recovery Categories
    "RecoverableError",
    "FetchError",
]
