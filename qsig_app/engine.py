"""
Main evaluation engine.

``evaluate`` is a pure function of a series snapshot: it recomputes every
indicator, the probability estimate, the levels, the projection and the
signal from scratch and returns them as one immutable bundle.

``SignalSession`` owns the caller's two mutable cells, the current series
and the open position, and drives one synchronous evaluation pass per
stimulus (history load, live tick, timer, user action). Callers must not
run two passes concurrently.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterator, Optional, Sequence

from .config.alert_delivery import AlertDeliveryConfig, get_default_alert_config
from .config.defaults import EngineConfig, get_default_config
from .data.feeds import HistoricalSeriesSource, LiveTickSource
from .data.models import PricePoint, Series, apply_live_tick, as_series, closes_of, last_close
from .delivery.base import BaseAlertDelivery, DeliveryStatus
from .delivery.notifications import entry_message, exit_message
from .errors import DataQualityError
from .logging.config import get_logger
from .metrics.calculator import build_indicator_frame
from .models.indicators import IndicatorFrame
from .signals.generator import generate_signal
from .signals.levels import detect_levels
from .signals.models import Level, ProbabilityEstimate, Projection, Side, Signal
from .signals.probability import compute_direction_probability
from .signals.projection import project_price
from .state.machine import close_position, enter_position, evaluate_position
from .state.models import EntryResult, ExitEvent, Position, PositionUpdate

logger = get_logger(__name__)


@dataclass(frozen=True)
class EvaluationResult:
    """Everything derived from one series snapshot."""
    indicator_frame: IndicatorFrame
    probability: ProbabilityEstimate
    levels: tuple[Level, ...]
    projection: Projection
    signal: Signal


def evaluate(
    series: Sequence[PricePoint],
    config: Optional[EngineConfig] = None
) -> EvaluationResult:
    """
    Run the full analytic pipeline over a series snapshot.

    Args:
        series: Price series (not modified)
        config: Engine configuration (defaults when None)

    Returns:
        EvaluationResult; identical inputs always give equal results
    """
    config = config or get_default_config()
    closes = closes_of(series)

    frame = build_indicator_frame(closes, config.indicators)
    probability = compute_direction_probability(closes, config, frame)
    levels = detect_levels(
        series,
        window=config.signal.level_window,
        tolerance_pct=config.signal.level_tolerance_pct,
        max_levels=config.levels.max_levels,
    )
    projection = project_price(closes, config, probability)
    signal = generate_signal(series, closes, config, probability, levels)

    return EvaluationResult(
        indicator_frame=frame,
        probability=probability,
        levels=levels,
        projection=projection,
        signal=signal,
    )


class SignalSession:
    """
    Single-asset session holding the series, the position and an alert sink.

    Every mutating call is followed by a full re-evaluation; automatic exits
    are applied and alerted during that pass.
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        alerts: Optional[BaseAlertDelivery] = None,
        alert_config: Optional[AlertDeliveryConfig] = None
    ) -> None:
        self.config = config or get_default_config()
        self.alerts = alerts
        self.alert_config = alert_config or get_default_alert_config()
        self.series: Series = ()
        self.position: Optional[Position] = None
        self.result: Optional[EvaluationResult] = None
        self.exit_events: list[ExitEvent] = []

    def load_series(self, series: Sequence[PricePoint]) -> Optional[ExitEvent]:
        """Replace the series with a freshly fetched history and re-evaluate."""
        self.series = as_series(series)
        logger.info("Series loaded", points=len(self.series))
        return self.refresh()

    def load_history(
        self,
        source: HistoricalSeriesSource,
        range_days: int = 30,
        quote_currency: str = "usd"
    ) -> Optional[ExitEvent]:
        """
        Fetch a history window from a source and load it.

        Raises:
            FetchError: Propagated from the source; the current series is kept
        """
        return self.load_series(source.get_historical_series(range_days, quote_currency))

    def stream_ticks(self, source: LiveTickSource) -> Iterator[ExitEvent]:
        """Apply every tick from a live source, yielding the exits they trigger."""
        for price in source.ticks():
            event = self.apply_live_tick(price)
            if event is not None:
                yield event

    def apply_live_tick(self, price: float) -> Optional[ExitEvent]:
        """
        Splice a live price into the latest point and re-evaluate.

        Non-finite prices are ignored; an empty series stays empty.
        """
        try:
            self.series = apply_live_tick(self.series, price)
        except DataQualityError as e:
            logger.warning(
                "Ignoring live tick",
                error=str(e),
                error_type=type(e).__name__,
                price=repr(price)
            )
            return None

        return self.refresh()

    def refresh(self) -> Optional[ExitEvent]:
        """
        Re-evaluate the current series and apply automatic exit rules.

        Returns:
            Exit event when the open position was closed in this pass
        """
        self.result = evaluate(self.series, self.config)

        update: PositionUpdate = evaluate_position(
            self.position,
            self.series,
            self.result.indicator_frame,
            self.config.exits,
        )
        self.position = update.position

        if update.exit_event is not None:
            self._record_exit(update.exit_event)

        return update.exit_event

    def enter_position(self, side: Side, opened_at: Optional[datetime] = None) -> EntryResult:
        """Open a position if the current signal points the same way."""
        if self.result is None:
            self.result = evaluate(self.series, self.config)

        outcome = enter_position(
            side,
            self.result.signal,
            last_close(self.series),
            current=self.position,
            opened_at=opened_at,
        )

        if outcome.accepted:
            self.position = outcome.position
            self._notify(entry_message(outcome.position))

        return outcome

    def close_position(self) -> Optional[ExitEvent]:
        """Close the open position at the latest close; no-op when flat."""
        if self.position is None:
            return None

        event = close_position(self.position, self.series)
        self.position = None
        self._record_exit(event)
        return event

    def _record_exit(self, event: ExitEvent) -> None:
        self.exit_events.append(event)
        self._notify(exit_message(event))

    def _notify(self, text: str) -> None:
        if self.alerts is None or not self.alert_config.enabled:
            return

        result = self.alerts.send_with_retry(
            text,
            max_retries=self.alert_config.retry_attempts,
            retry_delay=self.alert_config.retry_delay_seconds
        )
        if result.status != DeliveryStatus.SUCCESS:
            logger.warning(
                "Alert delivery failed",
                delivery_name=self.alerts.name,
                status=result.status.value,
                message=result.message
            )
