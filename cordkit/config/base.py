"""Base configuration classes for cordkit."""

import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


# Default Constants
DEFAULT_API_BASE_URL = "https://discord.com/api"
DEFAULT_API_VERSION = 10
DEFAULT_USER_AGENT = "DiscordBot (https://github.com/cordkit/cordkit, 0.1.0)"


@dataclass
class ClientConfig:
    """
    Client configuration.

    Holds every setting the REST client and the entity layer read at
    construction time.
    """

    # Discord
    token: Optional[str] = None
    """Bot token sent as ``Authorization: Bot <token>``; webhook routes work without it."""

    api_base_url: str = DEFAULT_API_BASE_URL
    api_version: int = DEFAULT_API_VERSION
    user_agent: str = DEFAULT_USER_AGENT

    # API Behavior
    request_timeout: float = 30.0
    max_retries: int = 2
    retry_backoff_base: float = 2.0
    retry_backoff_max: float = 32.0

    # Entity cache (0 means unbounded)
    cache_max_size: int = 0

    # Logging
    log_level: int = logging.INFO

    @property
    def api_url(self) -> str:
        """Versioned API root, e.g. ``https://discord.com/api/v10``."""
        return f"{self.api_base_url.rstrip('/')}/v{self.api_version}"

    def get_request_options(self):
        """Build the default per-request options from this configuration."""
        # Imported lazily: the rest package imports this module.
        from cordkit.rest.client import RequestOptions

        return RequestOptions(
            timeout=self.request_timeout,
            max_retries=self.max_retries,
            backoff_base=self.retry_backoff_base,
            backoff_max=self.retry_backoff_max,
        )
