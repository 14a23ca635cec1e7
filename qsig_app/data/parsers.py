"""
Parsers for converting raw market payloads to normalized price data.

Handles the market-chart history format (``{"prices": [[epoch_ms, price], ...]}``)
and trade-stream messages carrying the trade price as a string field ``"p"``.
"""

import json
import math
from typing import Any, Optional, Union

from ..errors import MalformedDataError
from ..logging.config import get_logger
from ..utils.time import from_epoch_ms
from .models import Fundamentals, PricePoint, Series

DEFAULT_SYMBOL = "xrp"

logger = get_logger(__name__)


def _load(payload: Union[str, bytes, dict[str, Any]]) -> Any:
    if isinstance(payload, (str, bytes)):
        try:
            return json.loads(payload)
        except json.JSONDecodeError as e:
            raise MalformedDataError(
                f"Invalid JSON payload: {e}",
                raw_data=str(payload)[:100],
                expected_format="json"
            ) from e
    return payload


def parse_market_chart(payload: Union[str, bytes, dict[str, Any]]) -> Series:
    """
    Parse a market-chart history payload into a price series.

    Entries with non-finite prices are dropped so the analytic core only ever
    sees finite closes.

    Args:
        payload: Decoded dict or raw JSON text with a ``prices`` list

    Returns:
        Series ordered as received

    Raises:
        MalformedDataError: If the payload shape is wrong
    """
    data = _load(payload)

    if not isinstance(data, dict) or not isinstance(data.get("prices"), list):
        raise MalformedDataError(
            "Market chart payload must contain a 'prices' list",
            raw_data=str(data)[:100],
            expected_format='{"prices": [[epoch_ms, price], ...]}'
        )

    points = []
    dropped = 0
    for entry in data["prices"]:
        if not isinstance(entry, (list, tuple)) or len(entry) < 2:
            raise MalformedDataError(
                f"Price entry must be a [timestamp, price] pair, got {entry!r}",
                raw_data=str(entry)[:100],
                expected_format="[epoch_ms, price]"
            )

        try:
            ts = float(entry[0])
            price = float(entry[1])
        except (TypeError, ValueError) as e:
            raise MalformedDataError(
                f"Non-numeric price entry: {entry!r}",
                raw_data=str(entry)[:100],
                expected_format="[epoch_ms, price]"
            ) from e

        if not math.isfinite(price) or not math.isfinite(ts):
            dropped += 1
            continue

        points.append(PricePoint(time=from_epoch_ms(ts), close=price))

    if dropped:
        logger.warning("Dropped non-finite price entries", dropped=dropped, kept=len(points))

    return tuple(points)


def parse_trade_tick(payload: Union[str, bytes, dict[str, Any]]) -> Optional[float]:
    """
    Extract the trade price from a trade-stream message.

    Returns:
        The price, or None when it does not parse to a finite number
        (such ticks are ignored)

    Raises:
        MalformedDataError: If the message is not an object with a ``p`` field
    """
    data = _load(payload)

    if not isinstance(data, dict) or "p" not in data:
        raise MalformedDataError(
            "Trade message must contain a 'p' price field",
            raw_data=str(data)[:100],
            expected_format='{"p": "<price>"}'
        )

    try:
        price = float(data["p"])
    except (TypeError, ValueError):
        return None

    return price if math.isfinite(price) else None


def _number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value) if math.isfinite(value) else None


def _usd(market_data: dict[str, Any], key: str) -> Optional[float]:
    quotes = market_data.get(key)
    return _number(quotes.get("usd")) if isinstance(quotes, dict) else None


def parse_coin_fundamentals(payload: Union[str, bytes, dict[str, Any]]) -> Fundamentals:
    """
    Parse a coin detail payload into a fundamentals snapshot.

    USD figures are read from ``market_data``; every missing or non-numeric
    figure becomes None. The symbol is upper-cased and defaults to XRP.

    Raises:
        MalformedDataError: If the payload is not an object
    """
    data = _load(payload)

    if not isinstance(data, dict):
        raise MalformedDataError(
            "Coin payload must be an object",
            raw_data=str(data)[:100],
            expected_format='{"name": ..., "symbol": ..., "market_data": {...}}'
        )

    market_data = data.get("market_data")
    if not isinstance(market_data, dict):
        market_data = {}

    name = data.get("name")
    return Fundamentals(
        name=name if isinstance(name, str) else None,
        symbol=str(data.get("symbol") or DEFAULT_SYMBOL).upper(),
        market_cap=_usd(market_data, "market_cap"),
        volume_24h=_usd(market_data, "total_volume"),
        circulating_supply=_number(market_data.get("circulating_supply")),
        total_supply=_number(market_data.get("total_supply")),
        price=_usd(market_data, "current_price"),
        price_change_24h_pct=_number(market_data.get("price_change_percentage_24h")),
    )
