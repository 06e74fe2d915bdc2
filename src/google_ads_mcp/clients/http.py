"""Reliable JSON POST over httpx with bounded exponential-backoff retries."""

import asyncio
import json
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

import httpx
from tenacity import (
    AsyncRetrying,
    RetryError,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from google_ads_mcp.core.config import HTTPConfig
from google_ads_mcp.core.exceptions import TransportError

logger = logging.getLogger(__name__)

RETRYABLE_STATUS_CODES = frozenset({408, 429})


def is_retryable_status(status_code: int) -> bool:
    """5xx, 408 (request timeout) and 429 (rate limited) are worth retrying."""
    return status_code >= 500 or status_code in RETRYABLE_STATUS_CODES


@dataclass(frozen=True)
class HTTPResponse:
    status_code: int
    headers: httpx.Headers
    body: bytes

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def json(self) -> Any:
        return json.loads(self.body)


class _RetryableStatusError(Exception):
    """Signals a retryable response to tenacity; never escapes this module."""

    def __init__(self, response: HTTPResponse):
        super().__init__(f"retryable status {response.status_code}")
        self.response = response


class ReliableHTTPClient:
    """POSTs JSON bodies, retrying transport failures and retryable statuses.

    Transport errors (connection failures, timeouts) and 5xx/408/429
    responses are retried up to ``max_retries`` times, waiting
    ``retry_delay * 2**n`` seconds between attempts, capped at
    ``max_retry_delay``. Any other response is returned immediately.

    When retries run out on a retryable status, the last response is
    returned so the caller can report its status and body. When they run
    out on transport errors, ``TransportError`` is raised.

    Args:
        config: Timeouts and retry policy
        transport: Optional httpx transport, mainly for tests
        sleep: Coroutine used for backoff waits
    """

    def __init__(
        self,
        config: HTTPConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.config = config or HTTPConfig()
        self._sleep = sleep
        self._client = httpx.AsyncClient(
            timeout=self.config.timeout,
            headers={"User-Agent": self.config.user_agent},
            transport=transport,
        )

    async def __aenter__(self) -> "ReliableHTTPClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    def _retrying(self) -> AsyncRetrying:
        return AsyncRetrying(
            retry=retry_if_exception_type(
                (httpx.TransportError, _RetryableStatusError)
            ),
            stop=stop_after_attempt(self.config.max_retries + 1),
            wait=wait_exponential(
                multiplier=self.config.retry_delay, max=self.config.max_retry_delay
            ),
            sleep=self._sleep,
            before_sleep=before_sleep_log(logger, logging.WARNING),
        )

    async def _send(
        self, url: str, content: bytes, headers: dict[str, str]
    ) -> HTTPResponse:
        response = await self._client.post(url, content=content, headers=headers)
        result = HTTPResponse(
            status_code=response.status_code,
            headers=response.headers,
            body=response.content,
        )
        if is_retryable_status(result.status_code):
            raise _RetryableStatusError(result)
        return result

    async def post(
        self, url: str, body: Any, headers: dict[str, str] | None = None
    ) -> HTTPResponse:
        """POST ``body`` as JSON to ``url``.

        Raises:
            TransportError: If every attempt failed without a response, or the
                request could not be built or its response decoded
        """
        content = json.dumps(body).encode("utf-8")
        request_headers = {"Content-Type": "application/json", **(headers or {})}

        try:
            async for attempt in self._retrying():
                with attempt:
                    response = await self._send(url, content, request_headers)
        except RetryError as e:
            last = e.last_attempt.exception()
            if isinstance(last, _RetryableStatusError):
                logger.warning(
                    f"Giving up on {url} after {e.last_attempt.attempt_number} "
                    f"attempts: status {last.response.status_code}"
                )
                return last.response
            raise TransportError(f"max retries exceeded: {last}") from last
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(f"request failed: {e}") from e

        return response
