"""Data models for indicator snapshots"""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterator, Optional, Sequence

from ..data.models import PricePoint

COLUMNS = ("sma20", "sma50", "rsi", "macd_line", "signal_line", "histogram")


@dataclass(frozen=True)
class IndicatorRow:
    """Indicator values at a single series index"""
    time: datetime
    close: float
    sma20: Optional[float] = None
    sma50: Optional[float] = None
    rsi: Optional[float] = None
    macd_line: Optional[float] = None
    signal_line: Optional[float] = None
    histogram: Optional[float] = None


@dataclass(frozen=True)
class IndicatorFrame:
    """Indicator columns aligned 1:1 with a series; None before warm-up"""
    sma20: tuple[Optional[float], ...] = ()
    sma50: tuple[Optional[float], ...] = ()
    rsi: tuple[Optional[float], ...] = ()
    macd_line: tuple[Optional[float], ...] = ()
    signal_line: tuple[Optional[float], ...] = ()
    histogram: tuple[Optional[float], ...] = ()

    def __len__(self) -> int:
        return len(self.histogram)

    def _column(self, column: str) -> tuple[Optional[float], ...]:
        if column not in COLUMNS:
            raise KeyError(f"Unknown indicator column: {column}")
        return getattr(self, column)

    def last(self, column: str) -> Optional[float]:
        """Most recent value of a column, None if absent or empty"""
        values = self._column(column)
        return values[-1] if values else None

    def previous(self, column: str) -> Optional[float]:
        """Second most recent value of a column, None if absent"""
        values = self._column(column)
        return values[-2] if len(values) >= 2 else None

    def rows(self, series: Sequence[PricePoint]) -> Iterator[IndicatorRow]:
        """Chart-ready per-point records joining the series with each column"""
        columns = {name: self._column(name) for name in COLUMNS}
        for i, point in enumerate(series):
            values = {name: (col[i] if i < len(col) else None) for name, col in columns.items()}
            yield IndicatorRow(time=point.time, close=point.close, **values)
