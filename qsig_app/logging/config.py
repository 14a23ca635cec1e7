"""
Centralized logging configuration for the signal engine.

This module provides standardized logging configuration using structlog
for all components. All logging throughout the system should use this
configuration to ensure consistent formatting and structured logging.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import EventDict, FilteringBoundLogger


def flatten_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """
    Lift the ``context`` dict bound by the log helpers into top-level keys.

    Keys already present on the event win over context keys.
    """
    context = event_dict.pop("context", None)
    if isinstance(context, dict):
        for key, value in context.items():
            event_dict.setdefault(key, value)
    elif context is not None:
        event_dict["context"] = context
    return event_dict


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    # Convert string level to logging constant
    log_level = getattr(logging, level.upper())

    # Configure standard library logging
    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    # Build processor chain
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        flatten_context,
    ]

    # Add timestamp if requested
    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    # Add caller information if requested
    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    # Add any extra processors
    if extra_processors:
        processors.extend(extra_processors)

    # Add final formatting processor
    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    # Configure structlog
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_signal_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger for signal derivation decisions.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog logger bound to the signal generator subsystem
    """
    return get_logger(name).bind(
        subsystem="signal_generator",
        audit_trail=True
    )


def get_state_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger for position lifecycle transitions.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog logger bound to the position state machine subsystem
    """
    return get_logger(name).bind(
        subsystem="position_state_machine",
        audit_trail=True
    )


def log_signal_decision(
    logger: FilteringBoundLogger,
    side: str,
    long_pct: int,
    short_pct: int,
    reason: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a signal derivation with standardized format.

    Args:
        logger: Structlog logger instance
        side: Derived signal side (LONG, SHORT, NEUTRAL)
        long_pct: Up probability in integer percent
        short_pct: Down probability in integer percent
        reason: Human-readable rationale for the side
        context: Additional context data
    """
    bound_logger = logger.bind(
        side=side,
        long_pct=long_pct,
        short_pct=short_pct,
        reason=reason,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if side == "NEUTRAL":
        bound_logger.debug("Signal derived")
    else:
        bound_logger.info("Signal derived")


def log_state_transition(
    logger: FilteringBoundLogger,
    from_state: str,
    to_state: str,
    trigger: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a position state transition with standardized format.

    Args:
        logger: Structlog logger instance
        from_state: Current state
        to_state: Target state
        trigger: What triggered the transition
        context: Additional context data
    """
    bound_logger = logger.bind(
        from_state=from_state,
        to_state=to_state,
        trigger=trigger,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("State transition")
