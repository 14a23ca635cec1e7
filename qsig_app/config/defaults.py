"""Default configuration parameters for the signal engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class IndicatorParams:
    """Indicator window lengths."""
    sma_fast: int = 20
    sma_slow: int = 50
    rsi_period: int = 14
    macd_fast: int = 12
    macd_slow: int = 26
    macd_signal: int = 9


@dataclass(frozen=True)
class ProbabilityParams:
    """Directional probability blend."""
    min_points: int = 60                # Below this the estimate is neutral
    rsi_weight: float = 0.45
    trend_weight: float = 0.35
    momentum_weight: float = 0.20
    trend_scale: float = 0.5            # Halves the relative SMA slope
    histogram_window: int = 30          # Reference window for the histogram z-score
    logistic_slope: float = 3.0


@dataclass(frozen=True)
class LevelParams:
    """Support/resistance clustering."""
    window: int = 5                     # Half-window around each candidate extremum
    tolerance_pct: float = 0.004        # Merge distance as a fraction of price
    max_levels: int = 8


@dataclass(frozen=True)
class ProjectionParams:
    """Short-horizon projection."""
    min_points: int = 30
    sigma_window: int = 24              # Returns used for the volatility estimate
    damping: float = 0.8


@dataclass(frozen=True)
class SignalParams:
    """Signal derivation."""
    min_points: int = 60
    edge_threshold: float = 0.55        # Required probability for a directional side
    level_window: int = 6
    level_tolerance_pct: float = 0.004
    breakout_buffer_pct: float = 0.0005
    stop_pct: float = 0.008
    take_profit_pct: float = 0.015


@dataclass(frozen=True)
class ExitParams:
    """Momentum-fade auto exit."""
    overbought: float = 70.0
    oversold: float = 30.0
    fade_ratio: float = 0.5             # Histogram shrink that counts as fading


@dataclass(frozen=True)
class EngineConfig:
    """Complete engine configuration."""
    indicators: IndicatorParams
    probability: ProbabilityParams
    levels: LevelParams
    projection: ProjectionParams
    signal: SignalParams
    exits: ExitParams


def get_default_config() -> EngineConfig:
    """Get the default configuration instance."""
    return EngineConfig(
        indicators=IndicatorParams(),
        probability=ProbabilityParams(),
        levels=LevelParams(),
        projection=ProjectionParams(),
        signal=SignalParams(),
        exits=ExitParams(),
    )
