"""
State machine data models for the position lifecycle.

Positions are immutable values owned by the caller and passed into every
evaluation; the machine returns the updated value instead of mutating it.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from ..signals.models import Side


class PositionState(str, Enum):
    """Position lifecycle states."""
    FLAT = "flat"
    OPEN = "open"


class ExitKind(str, Enum):
    """Reasons a position is closed."""
    TAKE_PROFIT = "take-profit"
    STOP_LOSS = "stop-loss"
    MOMENTUM_FADE = "momentum-fade"
    MANUAL_CLOSE = "manual-close"


@dataclass(frozen=True)
class Position:
    """An open single-unit position."""
    side: Side                              # LONG or SHORT
    entry: float
    opened_at: datetime
    stop_loss: Optional[float] = None
    take_profit: Optional[float] = None

    @property
    def is_long(self) -> bool:
        return self.side == Side.LONG


@dataclass(frozen=True)
class ExitEvent:
    """A position exit, reported with the price it closed at."""
    kind: ExitKind
    price: Optional[float]
    side: Side
    entry: float
    timestamp: Optional[datetime] = None


@dataclass(frozen=True)
class PositionUpdate:
    """Result of evaluating a position against the latest data."""
    position: Optional[Position]
    exit_event: Optional[ExitEvent] = None

    @property
    def state(self) -> PositionState:
        return PositionState.OPEN if self.position is not None else PositionState.FLAT


@dataclass(frozen=True)
class EntryResult:
    """Outcome of an entry request; ``position`` is None when rejected."""
    position: Optional[Position] = None
    rejected_reason: Optional[str] = None

    @property
    def accepted(self) -> bool:
        return self.position is not None


def position_state(position: Optional[Position]) -> PositionState:
    """Lifecycle state implied by an optional position."""
    return PositionState.OPEN if position is not None else PositionState.FLAT
