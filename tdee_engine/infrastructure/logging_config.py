"""structlog setup for applications embedding the engine."""

from typing import Optional

import structlog

from .config import get_log_format, get_log_level, load_environment


def configure_logging(level: Optional[int] = None, log_format: Optional[str] = None) -> None:
    """Configure structlog processors and level filtering.

    The engine never calls this itself; the embedding application does,
    once, at startup.

    Args:
        level: Minimum log level, defaults to TDEE_LOG_LEVEL
        log_format: "console" or "json", defaults to TDEE_LOG_FORMAT
    """
    load_environment()
    level = level if level is not None else get_log_level()
    log_format = log_format or get_log_format()

    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )
