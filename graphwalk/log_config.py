"""Structured logging configuration using structlog.

The library modules only ever call ``structlog.get_logger(__name__)``; this
module is where an application (or the demo script) decides how those events
are rendered. Events are routed through the standard library so that
``logging`` handlers and pytest's ``caplog`` see them.

Example:
    >>> from graphwalk.log_config import configure_logging, get_logger
    >>> configure_logging(level="DEBUG", json_logs=False)
    >>> logger = get_logger(__name__)
    >>> logger.info("traversal_requested", algorithm="bfs", start=1)
"""

import logging
import sys
from typing import Any

import structlog

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
CORRELATION_KEY = "correlation_id"


def configure_logging(level: str = "INFO", json_logs: bool = True) -> None:
    """Configure structlog and the standard library logging it writes through.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: If True, render JSON lines; if False, use the coloured
            ConsoleRenderer meant for development

    Raises:
        ValueError: If an invalid log level is provided
    """
    numeric_level = getattr(logging, level.upper(), None)
    if level.upper() not in LOG_LEVELS or not isinstance(numeric_level, int):
        msg = f"Invalid log level: {level}"
        raise ValueError(msg)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=numeric_level,
    )
    logging.getLogger().setLevel(numeric_level)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.MODULE,
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ],
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            ),
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a logger for ``name``; graphwalk modules pass their ``__name__``."""
    return structlog.get_logger(name)


def bind_correlation_id(correlation_id: str) -> None:
    """Tag every following event with ``correlation_id``.

    Used to group the graph construction and traversal events of a single
    run, e.g. one invocation of the demo script.

    Example:
        >>> bind_correlation_id("demo-1a2b3c4d")
        >>> logger.debug("edge_added", source=1, target=2)  # has correlation_id
    """
    structlog.contextvars.bind_contextvars(**{CORRELATION_KEY: correlation_id})


def unbind_correlation_id() -> None:
    """Stop tagging events with the run's correlation id."""
    structlog.contextvars.unbind_contextvars(CORRELATION_KEY)


def bind_context(**kwargs: Any) -> None:
    """Attach keyword context (graph name, start vertex...) to later events.

    Example:
        >>> bind_context(graph="lesson", start=1)
        >>> logger.debug("bfs_completed", visited_count=8)  # includes graph and start
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    """Drop the named context keys, leaving the rest bound."""
    structlog.contextvars.unbind_contextvars(*keys)


def clear_context() -> None:
    """Drop all bound context, including any correlation id."""
    structlog.contextvars.clear_contextvars()
