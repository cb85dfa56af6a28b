"""Custom exceptions for cordkit."""

from typing import Any, Optional


class CordKitException(Exception):
    """Base exception for all recoverable cordkit errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


# =============================================================================
# Route Exceptions
# =============================================================================

class RouteCompilationException(CordKitException):
    """Exception raised when a route template cannot be compiled."""

    def __init__(self, message: str, route: str, details: Optional[dict[str, Any]] = None):
        self.route = route
        super().__init__(message, {**(details or {}), "route": route})


# =============================================================================
# HTTP/API Client Exceptions
# =============================================================================

class RestException(CordKitException):
    """Base exception for errors raised while executing a request."""

    pass


class TransportException(RestException):
    """Exception raised when the request never got a response."""

    def __init__(self, message: str, attempts: int, details: Optional[dict[str, Any]] = None):
        self.attempts = attempts
        super().__init__(message, {**(details or {}), "attempts": attempts})


class APIException(RestException):
    """Exception raised when the API answers with a non-success status.

    The remote error body is kept untouched in ``payload``; ``code`` and
    ``remote_message`` are lifted out of it when it has the usual shape.
    """

    def __init__(
        self,
        status_code: int,
        payload: Any = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.status_code = status_code
        self.payload = payload
        self.code: Optional[int] = None
        self.remote_message: Optional[str] = None

        if isinstance(payload, dict):
            self.code = payload.get("code")
            self.remote_message = payload.get("message")
        elif isinstance(payload, str) and payload:
            self.remote_message = payload

        full_details = {**(details or {}), "status_code": status_code}
        if self.code is not None:
            full_details["code"] = self.code
        super().__init__(self.remote_message or f"HTTP {status_code}", full_details)


class ClientException(APIException):
    """Exception raised for 4xx client errors."""

    pass


class RateLimitException(ClientException):
    """Exception raised when the API answers 429."""

    def __init__(self, status_code: int, payload: Any = None, retry_after: Optional[float] = None):
        self.retry_after = retry_after
        super().__init__(status_code, payload, {"retry_after": retry_after} if retry_after else None)


class ServerException(APIException):
    """Exception raised for 5xx server errors."""

    pass


class DecodeException(RestException):
    """Exception raised when a success response does not have the expected shape."""

    pass


# =============================================================================
# Configuration Exceptions
# =============================================================================

class ConfigurationException(CordKitException):
    """Exception raised when configuration is invalid or incomplete."""

    pass


class ValidationException(ConfigurationException):
    """Exception raised when configuration validation fails."""

    pass


# =============================================================================
# Programmer Errors
# =============================================================================

class UnsupportedOperationError(TypeError):
    """Raised when a capability operation is used on the wrong kind of channel.

    This is not a ``CordKitException``: it signals a bug in the calling code,
    not a remote or data failure, and is not meant to be caught and retried.
    """

    def __init__(self, operation: str, channel_type: Any):
        self.operation = operation
        self.channel_type = channel_type
        super().__init__(f"unsupported operation '{operation}' for channel type '{channel_type!s}'")
