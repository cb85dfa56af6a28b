"""Feature tests for custom exception hierarchy.

Tests focus on behavior:
- Exception inheritance chain
- Message formatting with details
- Specialized exception fields
"""

import pytest

from cordkit.discord.channel import ChannelType
from cordkit.exceptions import (
    APIException,
    ClientException,
    ConfigurationException,
    CordKitException,
    DecodeException,
    RateLimitException,
    RestException,
    RouteCompilationException,
    ServerException,
    TransportException,
    UnsupportedOperationError,
    ValidationException,
)


class TestCordKitException:
    """Tests for the base CordKitException."""

    def test_creates_with_message_only(self):
        """CordKitException can be created with just a message."""
        exc = CordKitException("Test error")
        assert exc.message == "Test error"
        assert exc.details == {}

    def test_str_returns_message_only_without_details(self):
        """str() returns just the message when no details."""
        assert str(CordKitException("Test error")) == "Test error"

    def test_str_formats_multiple_details(self):
        """str() formats every detail as key=value."""
        exc = CordKitException("Error", details={"a": 1, "b": 2})
        assert str(exc) == "Error (a=1, b=2)"


class TestHierarchy:
    """Tests for the inheritance chain."""

    @pytest.mark.parametrize(
        "exc_class",
        [
            RouteCompilationException,
            RestException,
            ConfigurationException,
        ],
    )
    def test_top_level_exceptions_share_base(self, exc_class):
        """Every recoverable error derives from CordKitException."""
        assert issubclass(exc_class, CordKitException)

    def test_rest_exceptions(self):
        """Transport, API and decode failures are all RestExceptions."""
        assert issubclass(TransportException, RestException)
        assert issubclass(APIException, RestException)
        assert issubclass(DecodeException, RestException)

    def test_api_exception_subclasses(self):
        """Status classes derive from APIException; 429 is a client error."""
        assert issubclass(ClientException, APIException)
        assert issubclass(ServerException, APIException)
        assert issubclass(RateLimitException, ClientException)

    def test_validation_is_configuration_error(self):
        assert issubclass(ValidationException, ConfigurationException)

    def test_unsupported_operation_is_not_recoverable(self):
        """UnsupportedOperationError is a TypeError, outside the recoverable tree."""
        assert issubclass(UnsupportedOperationError, TypeError)
        assert not issubclass(UnsupportedOperationError, CordKitException)


class TestRouteCompilationException:
    def test_carries_route(self):
        exc = RouteCompilationException("Path parameter count mismatch", "GET /x/{id}")
        assert exc.route == "GET /x/{id}"
        assert exc.details["route"] == "GET /x/{id}"


class TestTransportException:
    def test_carries_attempts(self):
        exc = TransportException("Request failed", 3, {"error": "boom"})
        assert exc.attempts == 3
        assert exc.details == {"error": "boom", "attempts": 3}


class TestAPIException:
    """Tests for APIException payload handling."""

    def test_lifts_code_and_message_from_error_body(self):
        """The usual error shape populates code and remote_message."""
        payload = {"code": 10003, "message": "Unknown Channel"}
        exc = APIException(404, payload)

        assert exc.status_code == 404
        assert exc.code == 10003
        assert exc.remote_message == "Unknown Channel"
        assert exc.payload is payload
        assert exc.message == "Unknown Channel"

    def test_text_payload_becomes_message(self):
        exc = APIException(502, "Bad Gateway")
        assert exc.code is None
        assert exc.remote_message == "Bad Gateway"

    def test_falls_back_to_status_message(self):
        """Without a usable body the message names the status."""
        exc = APIException(500)
        assert exc.message == "HTTP 500"
        assert exc.details == {"status_code": 500}


class TestRateLimitException:
    def test_carries_retry_after(self):
        exc = RateLimitException(429, {"message": "You are being rate limited."}, 1.5)
        assert exc.retry_after == 1.5
        assert exc.details["retry_after"] == 1.5
        assert exc.status_code == 429

    def test_retry_after_optional(self):
        exc = RateLimitException(429)
        assert exc.retry_after is None
        assert "retry_after" not in exc.details


class TestUnsupportedOperationError:
    def test_message_names_operation_and_type(self):
        """The message names the operation and the channel type by name."""
        exc = UnsupportedOperationError("topic", ChannelType.GUILD_VOICE)
        assert exc.operation == "topic"
        assert exc.channel_type == ChannelType.GUILD_VOICE
        assert str(exc) == "unsupported operation 'topic' for channel type 'GUILD_VOICE'"
