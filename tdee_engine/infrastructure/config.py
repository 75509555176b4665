"""Configuration utilities for infrastructure layer."""

import logging
import os

from dotenv import load_dotenv

LOG_FORMATS = ("console", "json")


def load_environment() -> None:
    """Load variables from a local .env file, keeping existing ones."""
    load_dotenv(override=False)


def get_log_level() -> int:
    """
    Get logging level for the engine's loggers.

    Returns:
        Numeric level from TDEE_LOG_LEVEL env var, defaults to INFO.
        Unknown names also fall back to INFO.
    """
    name = os.getenv("TDEE_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def get_log_format() -> str:
    """
    Get log renderer name.

    Returns:
        "console" or "json" from TDEE_LOG_FORMAT env var, defaults to "console"
    """
    value = os.getenv("TDEE_LOG_FORMAT", "console").lower()
    return value if value in LOG_FORMATS else "console"
