"""Configuration module for cordkit."""

from cordkit.config.base import (
    DEFAULT_API_BASE_URL,
    DEFAULT_API_VERSION,
    DEFAULT_USER_AGENT,
    ClientConfig,
)
from cordkit.config.loader import load_config
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

__all__ = [
    # Base
    "ClientConfig",
    "load_config",
    # Defaults
    "DEFAULT_API_BASE_URL",
    "DEFAULT_API_VERSION",
    "DEFAULT_USER_AGENT",
    # Parsers
    "_resolve_log_level",
    "_parse_float_env",
    "_parse_int_env",
    "_first_nonempty_env",
    # Validators
    "validate_base_url",
    "validate_api_version",
    "validate_timeout",
    "validate_max_retries",
    "validate_cache_max_size",
]
