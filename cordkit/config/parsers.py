"""Environment variable parsers for cordkit configuration."""

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)


def _resolve_log_level(raw_level: str) -> int:
    """Return a logging level constant from a string, defaulting to INFO."""
    if not raw_level:
        return logging.INFO

    normalized = raw_level.strip().upper()

    level = getattr(logging, normalized, None)
    if isinstance(level, int) and level > 0:
        return level

    logger.warning("Unknown LOG_LEVEL '%s'; defaulting to INFO", raw_level)
    return logging.INFO


def _parse_float_env(name: str, default: float) -> float:
    """Parse float from environment variable with fallback."""
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        logger.warning("%s is not a number; using default %s", name, default)
        return default


def _parse_int_env(name: str, default: int) -> int:
    """Parse int from environment variable with fallback."""
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning("%s is not an integer; using default %s", name, default)
        return default


def _first_nonempty_env(*names: str) -> Optional[str]:
    """Get first non-empty environment variable from the given names."""
    for name in names:
        value = os.environ.get(name)
        if value and value.strip():
            return value.strip()
    return None
