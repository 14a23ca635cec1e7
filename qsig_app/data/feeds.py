"""
Interfaces of the external price collaborators.

Network clients for historical retrieval and live streaming live outside the
engine; they only need to satisfy these protocols.
"""

from typing import Iterator, Protocol

from .models import Series


class HistoricalSeriesSource(Protocol):
    """Source of historical closes for one asset."""

    def get_historical_series(self, range_days: int, quote_currency: str) -> Series:
        """
        Fetch the price history.

        Raises:
            FetchError: When the upstream request fails
        """
        ...


class LiveTickSource(Protocol):
    """Stream of live trade prices for one asset."""

    def ticks(self) -> Iterator[float]:
        """Yield trade prices as they arrive."""
        ...
