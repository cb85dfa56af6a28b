"""Request executor: runs compiled routes against the API."""

import asyncio
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, TypeVar
from urllib.parse import quote

import aiohttp

from cordkit.config import ClientConfig
from cordkit.discord.payload import Payload
from cordkit.exceptions import (
    APIException,
    ClientException,
    DecodeException,
    RateLimitException,
    ServerException,
    TransportException,
)
from cordkit.rest.retry import BackoffStrategy, calculate_backoff
from cordkit.rest.route import CompiledRoute

logger = logging.getLogger(__name__)

T = TypeVar("T")

Decoder = Callable[[Any], T]


@dataclass
class RequestOptions:
    """Per-request knobs passed through to the transport."""

    timeout: float = 30.0
    max_retries: int = 2
    """Total attempts for transport failures; API errors are never retried."""
    backoff_base: float = 2.0
    backoff_max: float = 32.0
    backoff_strategy: BackoffStrategy = BackoffStrategy.EXPONENTIAL
    reason: Optional[str] = None
    """Audit log reason, sent as ``X-Audit-Log-Reason``."""
    headers: Dict[str, str] = field(default_factory=dict)


def _json_or_text(raw: bytes) -> Any:
    text = raw.decode("utf-8", errors="replace")
    try:
        return json.loads(text)
    except ValueError:
        return text


def _parse_retry_after(payload: Any, headers: Mapping[str, str]) -> Optional[float]:
    if isinstance(payload, dict) and payload.get("retry_after") is not None:
        try:
            return float(payload["retry_after"])
        except (TypeError, ValueError):
            pass
    value = headers.get("Retry-After")
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def api_error(status: int, payload: Any, headers: Mapping[str, str]) -> APIException:
    """Map a non-success status to the matching ``APIException`` subclass."""
    if status == 429:
        return RateLimitException(status, payload, _parse_retry_after(payload, headers))
    if 400 <= status < 500:
        return ClientException(status, payload)
    if status >= 500:
        return ServerException(status, payload)
    return APIException(status, payload)


class RestClient:
    """
    Executes compiled routes over a shared ``aiohttp.ClientSession``.

    Safe for concurrent use: the session is created once, lazily, and no
    request state is kept on the instance.
    """

    def __init__(self, config: ClientConfig, session: Optional[aiohttp.ClientSession] = None):
        self.config = config
        self._session = session
        self._owns_session = session is None
        self._session_lock = asyncio.Lock()

    async def __aenter__(self) -> "RestClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def _get_session(self) -> aiohttp.ClientSession:
        async with self._session_lock:
            if self._session is None or (self._owns_session and self._session.closed):
                self._session = aiohttp.ClientSession()
                self._owns_session = True
            return self._session

    async def close(self) -> None:
        """Close the underlying session if this client created it."""
        async with self._session_lock:
            if self._session is not None and self._owns_session and not self._session.closed:
                await self._session.close()
                logger.debug("REST session closed")
            self._session = None if self._owns_session else self._session

    def _build_headers(self, options: RequestOptions) -> Dict[str, str]:
        headers = {"User-Agent": self.config.user_agent}
        if self.config.token:
            headers["Authorization"] = f"Bot {self.config.token}"
        if options.reason:
            headers["X-Audit-Log-Reason"] = quote(options.reason, safe=" ")
        headers.update(options.headers)
        return headers

    @staticmethod
    def _render_body(body: Any) -> Dict[str, Any]:
        # Rendered per attempt: multipart form data cannot be sent twice.
        if body is None:
            return {}
        if isinstance(body, Payload):
            body = body.to_body()
        if isinstance(body, aiohttp.FormData):
            return {"data": body}
        return {"json": body}

    async def do(
        self,
        compiled_route: CompiledRoute,
        body: Any = None,
        *,
        decoder: Optional[Decoder] = None,
        expect_response: bool = True,
        options: Optional[RequestOptions] = None,
    ) -> Any:
        """
        Perform one request for a compiled route.

        Args:
            compiled_route: The route to call.
            body: JSON-able value or a ``Payload``.
            decoder: Turns the parsed JSON into the caller's return type.
            expect_response: When False the body is discarded after the
                status check and ``None`` is returned.
            options: Per-request options; defaults come from the config.

        Returns:
            The decoded response, the parsed JSON when no decoder is given,
            or ``None``.

        Raises:
            TransportException: No response after all attempts.
            APIException: The API answered with status >= 400.
            DecodeException: The success body did not have the expected shape.
        """
        options = options or self.config.get_request_options()
        method = compiled_route.method
        url = compiled_route.url(self.config.api_url)
        headers = self._build_headers(options)
        session = await self._get_session()

        last_error: Optional[BaseException] = None
        attempts = max(1, options.max_retries)

        for attempt in range(1, attempts + 1):
            logger.debug("%s %s (attempt %d/%d)", method, url, attempt, attempts)
            try:
                async with session.request(
                    method,
                    url,
                    headers=headers,
                    timeout=aiohttp.ClientTimeout(total=options.timeout),
                    **self._render_body(body),
                ) as response:
                    status = response.status
                    raw = await response.read()
                    response_headers = response.headers
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                last_error = e
                logger.warning(
                    "Transport error on %s %s (%s/%s): %r", method, url, attempt, attempts, e
                )
                if attempt >= attempts:
                    break
                backoff = calculate_backoff(
                    options.backoff_strategy, attempt, options.backoff_base, options.backoff_max
                )
                logger.info("Retrying %s %s in %.1fs", method, url, backoff)
                await asyncio.sleep(backoff)
                continue

            return self._handle_response(
                compiled_route, status, raw, response_headers, decoder, expect_response
            )

        raise TransportException(
            f"Request failed: {method} {compiled_route.path}",
            attempts,
            {"error": repr(last_error)},
        ) from last_error

    def _handle_response(
        self,
        compiled_route: CompiledRoute,
        status: int,
        raw: bytes,
        headers: Mapping[str, str],
        decoder: Optional[Decoder],
        expect_response: bool,
    ) -> Any:
        if status >= 400:
            payload = _json_or_text(raw)
            logger.debug("%s has returned %s: %s", compiled_route.route, status, payload)
            raise api_error(status, payload, headers)

        if not expect_response:
            return None

        if not raw:
            if decoder is None:
                return None
            raise DecodeException(
                "Expected a response body but got none",
                {"route": str(compiled_route.route), "status_code": status},
            )

        try:
            data = json.loads(raw)
        except ValueError as e:
            raise DecodeException(
                "Response body is not valid JSON",
                {"route": str(compiled_route.route), "status_code": status},
            ) from e

        if decoder is None:
            return data
        try:
            return decoder(data)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise DecodeException(
                "Response body does not match the expected shape",
                {"route": str(compiled_route.route), "error": repr(e)},
            ) from e
