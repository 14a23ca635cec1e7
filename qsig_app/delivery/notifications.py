"""Alert texts for position entries and exits"""

import math
from typing import Optional

from ..signals.models import Side
from ..state.models import ExitEvent, ExitKind, Position


def format_price(value: Optional[float]) -> str:
    """
    Compact price formatting.

    Values of 1000 and above get thousands separators and no decimals;
    smaller values keep up to 6 decimals. Absent values render as ``-``.
    """
    if value is None or not math.isfinite(value):
        return "-"
    if abs(value) >= 1000:
        return f"{value:,.0f}"
    text = f"{value:,.6f}".rstrip("0").rstrip(".")
    return text if text not in ("", "-0") else "0"


def entry_message(position: Position) -> str:
    return (
        f"{position.side.value} opened @ {format_price(position.entry)} | "
        f"SL {format_price(position.stop_loss)} | TP {format_price(position.take_profit)}"
    )


def exit_message(event: ExitEvent) -> str:
    if event.kind == ExitKind.TAKE_PROFIT:
        return f"Take Profit hit @ {format_price(event.price)}"
    if event.kind == ExitKind.STOP_LOSS:
        return f"Stop Loss hit @ {format_price(event.price)}"
    if event.kind == ExitKind.MOMENTUM_FADE:
        if event.side == Side.LONG:
            return "Exit (overbought + momentum fade)"
        return "Exit (oversold + momentum fade)"
    return f"Position closed @ {format_price(event.price)} ({event.side.value})"
