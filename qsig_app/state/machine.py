"""
Core position state machine logic.

Transitions:
- Flat -> Open: ``enter_position`` when the requested side equals the
  current signal's side
- Open -> Flat: ``evaluate_position`` checks, in priority order, take-profit
  touch, stop-loss touch and momentum fade; ``close_position`` closes
  unconditionally
"""

from datetime import datetime
from typing import Optional, Sequence

from ..config.defaults import ExitParams
from ..data.models import PricePoint
from ..errors import StateTransitionError
from ..logging.config import get_state_logger, log_state_transition
from ..models.indicators import IndicatorFrame
from ..signals.models import Side, Signal
from ..utils.time import ensure_market_time
from .models import (
    EntryResult,
    ExitEvent,
    ExitKind,
    Position,
    PositionState,
    PositionUpdate,
    position_state,
)

state_logger = get_state_logger(__name__)


def enter_position(
    side: Side,
    signal: Signal,
    last_close: Optional[float],
    current: Optional[Position] = None,
    opened_at: Optional[datetime] = None
) -> EntryResult:
    """
    Open a position on the side of the current signal.

    Args:
        side: Requested side (LONG or SHORT)
        signal: Signal active at the moment of entry
        last_close: Latest close, used when the signal carries no entry
        current: Position already held by the caller, if any
        opened_at: Open time (wall-clock now when None)

    Returns:
        EntryResult with the new position, or a rejection reason
    """
    side = Side(side)
    reason = None

    if current is not None:
        reason = f"{current.side.value} position already open"
    elif side == Side.NEUTRAL:
        reason = "cannot open a NEUTRAL position"
    elif signal.side != side:
        reason = f"signal side is {signal.side.value}, requested {side.value}"

    entry = signal.entry if signal.entry is not None else last_close
    if reason is None and entry is None:
        reason = "no entry price available"

    if reason is not None:
        state_logger.warning(
            "Entry rejected",
            requested_side=side.value,
            signal_side=signal.side.value,
            reason=reason
        )
        return EntryResult(rejected_reason=reason)

    position = Position(
        side=side,
        entry=entry,
        opened_at=ensure_market_time(opened_at),
        stop_loss=signal.stop_loss,
        take_profit=signal.take_profit,
    )

    log_state_transition(
        state_logger,
        from_state=PositionState.FLAT.value,
        to_state=PositionState.OPEN.value,
        trigger="enter",
        context={
            "side": side.value,
            "entry": position.entry,
            "stop_loss": position.stop_loss,
            "take_profit": position.take_profit,
            "opened_at": position.opened_at.isoformat(),
        }
    )
    return EntryResult(position=position)


def take_profit_hit(position: Position, price: float) -> bool:
    """Price reached or passed the target in the favorable direction."""
    if position.take_profit is None:
        return False
    if position.is_long:
        return price >= position.take_profit
    return price <= position.take_profit


def stop_loss_hit(position: Position, price: float) -> bool:
    """Price reached or passed the stop against the position."""
    if position.stop_loss is None:
        return False
    if position.is_long:
        return price <= position.stop_loss
    return price >= position.stop_loss


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def histogram_fading(frame: IndicatorFrame, fade_ratio: float = 0.5) -> bool:
    """
    MACD histogram flipped sign or shrank below ``fade_ratio`` of its
    previous magnitude.
    """
    last = frame.last("histogram")
    if last is None:
        last = 0.0
    prev = frame.previous("histogram")
    if prev is None:
        prev = last
    return _sign(prev) != _sign(last) or abs(last) < abs(prev) * fade_ratio


def momentum_fade_hit(
    position: Position,
    frame: IndicatorFrame,
    params: Optional[ExitParams] = None
) -> bool:
    """Oscillator stretched in the position's favor while momentum fades."""
    params = params or ExitParams()

    rsi_last = frame.last("rsi")
    if rsi_last is None:
        rsi_last = 50.0

    if position.is_long:
        stretched = rsi_last > params.overbought
    else:
        stretched = rsi_last < params.oversold

    return stretched and histogram_fading(frame, params.fade_ratio)


def _close(position: Position, kind: ExitKind, price: Optional[float],
           timestamp: Optional[datetime]) -> ExitEvent:
    event = ExitEvent(
        kind=kind,
        price=price,
        side=position.side,
        entry=position.entry,
        timestamp=timestamp,
    )
    log_state_transition(
        state_logger,
        from_state=PositionState.OPEN.value,
        to_state=PositionState.FLAT.value,
        trigger=kind.value,
        context={
            "side": position.side.value,
            "entry": position.entry,
            "exit_price": price,
            "stop_loss": position.stop_loss,
            "take_profit": position.take_profit,
        }
    )
    return event


def evaluate_position(
    position: Optional[Position],
    series: Sequence[PricePoint],
    frame: IndicatorFrame,
    params: Optional[ExitParams] = None
) -> PositionUpdate:
    """
    Check the automatic exit rules against the latest close.

    Args:
        position: Open position, or None when flat
        series: Current price series
        frame: Indicator frame computed from ``series``
        params: Momentum-fade thresholds (defaults when None)

    Returns:
        PositionUpdate with ``position=None`` and an exit event when a rule
        fired, otherwise the unchanged position
    """
    if position is None or not series:
        return PositionUpdate(position=position)

    price = series[-1].close
    timestamp = series[-1].time

    if take_profit_hit(position, price):
        kind = ExitKind.TAKE_PROFIT
    elif stop_loss_hit(position, price):
        kind = ExitKind.STOP_LOSS
    elif momentum_fade_hit(position, frame, params):
        kind = ExitKind.MOMENTUM_FADE
    else:
        return PositionUpdate(position=position)

    return PositionUpdate(
        position=None,
        exit_event=_close(position, kind, price, timestamp),
    )


def close_position(
    position: Optional[Position],
    series: Sequence[PricePoint] = ()
) -> ExitEvent:
    """
    Close a position unconditionally at the latest close.

    Raises:
        StateTransitionError: If there is no open position
    """
    if position is None:
        raise StateTransitionError(
            "No open position to close",
            current_state=position_state(position).value,
            attempted_transition=ExitKind.MANUAL_CLOSE.value
        )

    price = series[-1].close if series else None
    timestamp = series[-1].time if series else None
    return _close(position, ExitKind.MANUAL_CLOSE, price, timestamp)
