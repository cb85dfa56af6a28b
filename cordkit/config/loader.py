"""Configuration loader for cordkit."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from cordkit.config.base import (
    DEFAULT_API_BASE_URL,
    DEFAULT_API_VERSION,
    DEFAULT_USER_AGENT,
    ClientConfig,
)
from cordkit.config.parsers import (
    _first_nonempty_env,
    _parse_float_env,
    _parse_int_env,
    _resolve_log_level,
)
from cordkit.config.validators import (
    validate_api_version,
    validate_base_url,
    validate_cache_max_size,
    validate_max_retries,
    validate_timeout,
)

logger = logging.getLogger(__name__)

# Load the .env at the project root only; no upward search.
_dotenv_path = Path(__file__).resolve().parent.parent.parent / ".env"


def load_config() -> ClientConfig:
    """Load configuration from environment variables.

    Raises:
        ValidationException: If a URL or the API version is invalid.
    """
    if _dotenv_path.exists():
        load_dotenv(_dotenv_path)

    token = _first_nonempty_env("DISCORD_TOKEN", "DISCORD_BOT_TOKEN")
    if not token:
        logger.warning("DISCORD_TOKEN is not set; only webhook routes will authenticate")

    api_base_url = validate_base_url(
        "DISCORD_API_URL", os.environ.get("DISCORD_API_URL", DEFAULT_API_BASE_URL)
    )
    api_version = validate_api_version(_parse_int_env("DISCORD_API_VERSION", DEFAULT_API_VERSION))

    return ClientConfig(
        token=token,
        api_base_url=api_base_url,
        api_version=api_version,
        user_agent=os.environ.get("DISCORD_USER_AGENT", DEFAULT_USER_AGENT),
        request_timeout=validate_timeout(_parse_float_env("API_REQUEST_TIMEOUT", 30.0)),
        max_retries=validate_max_retries(_parse_int_env("API_MAX_RETRIES", 2)),
        retry_backoff_base=_parse_float_env("API_RETRY_BACKOFF_BASE", 2.0),
        retry_backoff_max=_parse_float_env("API_RETRY_BACKOFF_MAX", 32.0),
        cache_max_size=validate_cache_max_size(_parse_int_env("ENTITY_CACHE_MAX_SIZE", 0)),
        log_level=_resolve_log_level(os.environ.get("LOG_LEVEL", "INFO")),
    )
