"""Tests for ClientConfig loading and validation."""

import logging
import os
from unittest.mock import patch

import pytest

from cordkit.config import (
    DEFAULT_API_BASE_URL,
    DEFAULT_USER_AGENT,
    ClientConfig,
    _first_nonempty_env,
    _parse_float_env,
    _parse_int_env,
    _resolve_log_level,
    load_config,
    validate_api_version,
    validate_base_url,
    validate_cache_max_size,
    validate_max_retries,
    validate_timeout,
)
from cordkit.exceptions import ValidationException
from cordkit.rest.client import RequestOptions


@pytest.fixture
def no_dotenv():
    """Keep a developer's .env out of load_config tests."""
    with patch("cordkit.config.loader.load_dotenv") as mock_load:
        yield mock_load


class TestParsers:
    """Tests for environment parsing helpers."""

    def test_first_nonempty_env_skips_blank(self):
        with patch.dict(os.environ, {"VAR1": "   ", "VAR2": " value2 "}):
            assert _first_nonempty_env("VAR1", "VAR2") == "value2"

    def test_first_nonempty_env_none_when_missing(self):
        with patch.dict(os.environ, {}, clear=True):
            assert _first_nonempty_env("VAR1", "VAR2") is None

    def test_parse_float_env(self):
        with patch.dict(os.environ, {"FLOAT_VAR": "3.5"}):
            assert _parse_float_env("FLOAT_VAR", 1.0) == 3.5

    def test_parse_float_env_with_invalid_value(self, caplog):
        """Invalid floats warn and fall back to the default."""
        with patch.dict(os.environ, {"FLOAT_VAR": "invalid"}):
            assert _parse_float_env("FLOAT_VAR", 1.0) == 1.0
            assert any("FLOAT_VAR" in record.message for record in caplog.records)

    def test_parse_int_env(self):
        with patch.dict(os.environ, {"INT_VAR": "42"}):
            assert _parse_int_env("INT_VAR", 0) == 42

    def test_parse_int_env_with_invalid_value(self, caplog):
        with patch.dict(os.environ, {"INT_VAR": "not_a_number"}):
            assert _parse_int_env("INT_VAR", 7) == 7
            assert any("INT_VAR" in record.message for record in caplog.records)

    def test_resolve_log_level(self):
        assert _resolve_log_level("debug") == logging.DEBUG
        assert _resolve_log_level("") == logging.INFO
        assert _resolve_log_level("chatty") == logging.INFO


class TestValidators:
    """Tests for configuration validators."""

    def test_base_url_strips_trailing_slash(self):
        assert validate_base_url("DISCORD_API_URL", "https://example.com/api/") == (
            "https://example.com/api"
        )

    @pytest.mark.parametrize("value", ["", "discord.com/api", "ftp://discord.com"])
    def test_base_url_rejects_non_http(self, value):
        with pytest.raises(ValidationException):
            validate_base_url("DISCORD_API_URL", value)

    def test_api_version(self):
        assert validate_api_version(10) == 10
        with pytest.raises(ValidationException):
            validate_api_version(6)

    def test_timeout_out_of_range_defaults(self):
        assert validate_timeout(5.0) == 5.0
        assert validate_timeout(0.0) == 30.0
        assert validate_timeout(1000.0) == 30.0
        assert validate_timeout(None) == 30.0

    def test_max_retries_out_of_range_defaults(self):
        assert validate_max_retries(3) == 3
        assert validate_max_retries(0) == 2
        assert validate_max_retries(11) == 2

    def test_cache_max_size(self):
        assert validate_cache_max_size(100) == 100
        assert validate_cache_max_size(-1) == 0
        assert validate_cache_max_size(None) == 0


class TestClientConfig:
    def test_api_url(self):
        config = ClientConfig(api_base_url="https://discord.com/api/", api_version=9)
        assert config.api_url == "https://discord.com/api/v9"

    def test_get_request_options(self):
        """Default request options mirror the configured transport settings."""
        config = ClientConfig(request_timeout=5.0, max_retries=4, retry_backoff_base=1.5)
        options = config.get_request_options()

        assert isinstance(options, RequestOptions)
        assert options.timeout == 5.0
        assert options.max_retries == 4
        assert options.backoff_base == 1.5
        assert options.backoff_max == config.retry_backoff_max


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults(self, no_dotenv, caplog):
        """With an empty environment defaults apply and the missing token is logged."""
        with patch.dict(os.environ, {}, clear=True):
            config = load_config()

        assert config.token is None
        assert config.api_base_url == DEFAULT_API_BASE_URL
        assert config.api_version == 10
        assert config.user_agent == DEFAULT_USER_AGENT
        assert config.cache_max_size == 0
        assert any("DISCORD_TOKEN" in record.message for record in caplog.records)

    def test_reads_environment(self, no_dotenv):
        env = {
            "DISCORD_BOT_TOKEN": "secret",
            "DISCORD_API_URL": "http://localhost:8080/api/",
            "DISCORD_API_VERSION": "9",
            "API_REQUEST_TIMEOUT": "12.5",
            "API_MAX_RETRIES": "5",
            "ENTITY_CACHE_MAX_SIZE": "500",
            "LOG_LEVEL": "DEBUG",
        }
        with patch.dict(os.environ, env, clear=True):
            config = load_config()

        assert config.token == "secret"
        assert config.api_url == "http://localhost:8080/api/v9"
        assert config.request_timeout == 12.5
        assert config.max_retries == 5
        assert config.cache_max_size == 500
        assert config.log_level == logging.DEBUG

    def test_invalid_api_url_raises(self, no_dotenv):
        with patch.dict(os.environ, {"DISCORD_API_URL": "not a url"}, clear=True):
            with pytest.raises(ValidationException):
                load_config()
