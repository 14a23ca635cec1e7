"""Short-horizon price projection from the probability tilt and recent volatility"""

from typing import Optional, Sequence

from ..config.defaults import EngineConfig, get_default_config
from ..metrics.stats import stdev
from .models import ProbabilityEstimate, Projection
from .probability import compute_direction_probability


def period_returns(closes: Sequence[float]) -> list[float]:
    """Simple period-over-period returns; a zero prior close divides by one."""
    return [
        (closes[i] - closes[i - 1]) / (closes[i - 1] or 1)
        for i in range(1, len(closes))
    ]


def project_price(
    closes: Sequence[float],
    config: Optional[EngineConfig] = None,
    probability: Optional[ProbabilityEstimate] = None
) -> Projection:
    """
    Project the next-period move.

    ``expected_pct = (up - down) * stdev(last returns) * damping`` and the
    target is the last close scaled by it. Below the minimum point count the
    move is zero and the target is the last close (0.0 for no data).

    Args:
        closes: Close-price sequence
        config: Engine configuration (defaults when None)
        probability: Precomputed estimate for ``closes``, if available
    """
    config = config or get_default_config()
    params = config.projection

    if probability is None:
        probability = compute_direction_probability(closes, config)

    last = closes[-1] if closes else 0.0

    if len(closes) < params.min_points:
        return Projection(pct=0.0, target=last, probability=probability)

    sigma = stdev(period_returns(closes)[-params.sigma_window:])
    tilt = probability.up - probability.down
    expected_pct = tilt * (sigma * params.damping)

    return Projection(
        pct=expected_pct,
        target=last * (1 + expected_pct),
        probability=probability,
    )
