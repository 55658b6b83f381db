"""structlog configuration shared by the CLI and host applications."""

import logging
import sys

import structlog


def configure_logging(production: bool = False, level: str = "INFO") -> None:
    """Configure structlog processors and renderer.

    Args:
        production: JSON output for machine parsing when True, console
            output for human readability otherwise.
        level: Minimum log level name (e.g. "INFO", "DEBUG").
    """
    renderer = (
        structlog.processors.JSONRenderer()
        if production
        else structlog.dev.ConsoleRenderer()
    )
    min_level = logging.getLevelName(level.upper())
    if not isinstance(min_level, int):
        min_level = logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        context_class=dict,
        # stderr keeps stdout free for CLI JSON output
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
