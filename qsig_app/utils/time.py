"""
Time semantics utilities for market vs wall-clock time handling.
"""

from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    """Current wall-clock time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_market_time(market_ts: Optional[datetime], fallback_ts: Optional[datetime] = None) -> datetime:
    """
    Ensure we have a valid market time, with proper fallback hierarchy.

    Args:
        market_ts: Preferred market timestamp
        fallback_ts: Optional fallback timestamp (e.g., from last known data)

    Returns:
        Valid UTC datetime, prioritizing market time
    """
    if market_ts is not None:
        return market_ts

    if fallback_ts is not None:
        return fallback_ts

    return utc_now()


def from_epoch_ms(epoch_ms: float) -> datetime:
    """Convert an epoch-milliseconds timestamp to an aware UTC datetime."""
    return datetime.fromtimestamp(epoch_ms / 1000.0, tz=timezone.utc)
