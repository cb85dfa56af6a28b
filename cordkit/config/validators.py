"""Configuration validators for cordkit."""

import logging
from typing import Optional
from urllib.parse import urlparse

from cordkit.exceptions import ValidationException

logger = logging.getLogger(__name__)

SUPPORTED_API_VERSIONS = (9, 10)


def validate_base_url(name: str, value: str) -> str:
    """
    Validate an absolute http(s) base URL.

    Args:
        name: The setting name, used in the error.
        value: The URL to validate.

    Returns:
        The URL without a trailing slash.

    Raises:
        ValidationException: If the URL is not absolute http(s).
    """
    parsed = urlparse(value or "")
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValidationException(f"{name} must be an absolute http(s) URL", {"value": value})
    return value.rstrip("/")


def validate_api_version(value: int) -> int:
    """
    Validate the API version.

    Args:
        value: The requested version.

    Returns:
        The version.

    Raises:
        ValidationException: If the version is not supported.
    """
    if value not in SUPPORTED_API_VERSIONS:
        raise ValidationException(
            "Unsupported API version",
            {"api_version": value, "supported": SUPPORTED_API_VERSIONS},
        )
    return value


def validate_timeout(value: Optional[float]) -> float:
    """Validate a request timeout in seconds (0 < value <= 600)."""
    if value is None:
        return 30.0

    if not (0.0 < value <= 600.0):
        logger.warning("Request timeout %.2f out of range; using default 30.0", value)
        return 30.0

    return value


def validate_max_retries(value: Optional[int]) -> int:
    """Validate the transport retry count (1 to 10 attempts)."""
    if value is None:
        return 2

    if not (1 <= value <= 10):
        logger.warning("Max retries %d out of range (1~10); using default 2", value)
        return 2

    return value


def validate_cache_max_size(value: Optional[int]) -> int:
    if value is None or value < 0:
        return 0
    return value
