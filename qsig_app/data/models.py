"""
Canonical data models for a single asset's price series.

A Series is an immutable tuple of PricePoint objects ordered by time. The
only in-place style update the engine knows is splicing a live tick into the
close of the most recent point, which produces a new tuple.
"""

import math
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional, Sequence

from ..errors import MalformedDataError


@dataclass(frozen=True)
class PricePoint:
    """Reference price recorded for one time bucket."""
    time: datetime      # UTC market timestamp
    close: float


Series = tuple[PricePoint, ...]


def as_series(points: Sequence[PricePoint]) -> Series:
    """Snapshot any sequence of price points as an immutable series."""
    return tuple(points)


def closes_of(series: Sequence[PricePoint]) -> list[float]:
    """Close prices of a series, in order."""
    return [p.close for p in series]


def last_close(series: Sequence[PricePoint]) -> Optional[float]:
    """Close of the most recent point, None for an empty series."""
    return series[-1].close if series else None


def apply_live_tick(series: Sequence[PricePoint], price: float) -> Series:
    """
    Splice a live trade price into the most recent point.

    The last point's close is replaced; no point is appended. An empty
    series is returned unchanged.

    Raises:
        MalformedDataError: If the price is not a finite number
    """
    if not isinstance(price, (int, float)) or isinstance(price, bool) or not math.isfinite(price):
        raise MalformedDataError(
            f"Live tick price must be a finite number, got {price!r}",
            raw_data=repr(price)[:100],
            expected_format="finite float"
        )

    if not series:
        return as_series(series)

    updated = list(series)
    updated[-1] = replace(updated[-1], close=float(price))
    return tuple(updated)


def validate_series(series: Sequence[PricePoint]) -> None:
    """
    Reject series containing non-finite closes.

    Timestamp ordering is not checked: out-of-order or duplicate points are
    tolerated by every indicator.

    Raises:
        MalformedDataError: On the first non-finite close
    """
    for index, point in enumerate(series):
        if not math.isfinite(point.close):
            raise MalformedDataError(
                f"Non-finite close at index {index}",
                raw_data=repr(point)[:100],
                expected_format="finite float",
                context={"index": index}
            )


@dataclass(frozen=True)
class Fundamentals:
    """Coin snapshot shown next to the chart; any market figure may be absent."""
    name: Optional[str]
    symbol: str
    market_cap: Optional[float] = None
    volume_24h: Optional[float] = None
    circulating_supply: Optional[float] = None
    total_supply: Optional[float] = None
    price: Optional[float] = None
    price_change_24h_pct: Optional[float] = None
