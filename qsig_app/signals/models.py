"""
Result models for the signal pipeline.

All results are immutable and recomputed from scratch on every evaluation;
none of them carries identity across calls.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Side(str, Enum):
    """Trade signal side."""
    LONG = "LONG"
    SHORT = "SHORT"
    NEUTRAL = "NEUTRAL"


@dataclass(frozen=True)
class ProbabilityEstimate:
    """Up/down probability pair plus the pre-squash composite score."""
    up: float
    down: float
    score: float

    @classmethod
    def neutral(cls) -> "ProbabilityEstimate":
        return cls(up=0.5, down=0.5, score=0.0)


@dataclass(frozen=True)
class ProbabilityDrivers:
    """Bounded components blended into the probability score."""
    rsi_tilt: float = 0.0
    ma_trend: float = 0.0
    momentum: float = 0.0
    score: float = 0.0


@dataclass(frozen=True)
class Level:
    """Price cluster that repeatedly acted as a local extremum."""
    price: float
    hits: int = 1


@dataclass(frozen=True)
class Projection:
    """Expected short-horizon move as a fraction, and the implied price."""
    pct: float
    target: float
    probability: ProbabilityEstimate


@dataclass(frozen=True)
class Signal:
    """Discrete trade signal with its price plan and rationale."""
    side: Side
    long_pct: int
    short_pct: int
    entry: Optional[float] = None
    stop_loss: Optional[float] = None
    take_profit: Optional[float] = None
    reason: str = ""

    @property
    def is_directional(self) -> bool:
        return self.side != Side.NEUTRAL
