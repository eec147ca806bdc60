"""HTTP client for the configured item APIs."""

from __future__ import annotations

import asyncio
from typing import Any

import httpx

from core.config import DEFAULT_TIMEOUT_MS
from core.logging import get_logger
from core.result import Result, failure, success
from services.market.errors import (
    FulfillmentError,
    HttpStatusError,
    NetworkError,
    ParseError,
    RequestTimeoutError,
)

logger = get_logger(__name__)

SUPPORTED_METHODS = frozenset({"GET", "POST"})


class ApiClient:
    """
    HTTP client for third-party image APIs.

    Performs one request per call with no retries; every failure is
    returned as a FulfillmentError.

    Attributes:
        timeout_ms: Request timeout in milliseconds.
        debug: Log request and response details at DEBUG level.
    """

    def __init__(self, timeout_ms: int = DEFAULT_TIMEOUT_MS, *, debug: bool = False) -> None:
        """
        Initialize the client.

        Args:
            timeout_ms: Request timeout in milliseconds.
            debug: Log request and response details.

        Raises:
            ValueError: If timeout_ms is not positive.
        """
        if timeout_ms <= 0:
            msg = "timeout_ms must be positive"
            raise ValueError(msg)

        self.timeout_ms = timeout_ms
        self.debug = debug
        self._client: httpx.AsyncClient | None = None

    @property
    def timeout(self) -> float:
        """Return the timeout in seconds."""
        return self.timeout_ms / 1000

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                headers={"Accept": "application/json"},
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def fetch_json(
        self,
        url: str,
        method: str = "GET",
        item_name: str = "",
    ) -> Result[Any, FulfillmentError]:
        """
        Request a URL and decode the JSON body.

        Args:
            url: Absolute URL to request.
            method: HTTP method, GET or POST.
            item_name: Item the request is made for, used in errors and logs.

        Returns:
            Result containing the decoded JSON value or a FulfillmentError.

        Raises:
            ValueError: If method is not supported.
        """
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            msg = f"Unsupported method: {method}"
            raise ValueError(msg)

        client = await self._get_client()

        if self.debug:
            logger.debug("api_request", item=item_name, method=method, url=url)

        try:
            # httpx timeouts apply per phase; this bounds the whole exchange
            async with asyncio.timeout(self.timeout):
                response = await client.request(method=method, url=url)
        except (httpx.TimeoutException, TimeoutError):
            logger.error(
                "api_request_timeout",
                item=item_name,
                url=url,
                timeout_ms=self.timeout_ms,
            )
            return failure(
                RequestTimeoutError(
                    item_name,
                    details=f"No response within {self.timeout_ms} ms",
                )
            )
        except httpx.RequestError as e:
            logger.error("api_request_failed", item=item_name, url=url, error=str(e))
            return failure(NetworkError(item_name, details=str(e)))

        if response.status_code >= 400:
            logger.error(
                "api_error_status",
                item=item_name,
                url=url,
                status_code=response.status_code,
                response_text=response.text[:500],
            )
            return failure(
                HttpStatusError(
                    item_name,
                    status_code=response.status_code,
                    details=response.text[:500],
                )
            )

        try:
            data: Any = response.json()
        except ValueError as e:
            logger.error("api_response_not_json", item=item_name, url=url, error=str(e))
            return failure(ParseError(item_name, details=str(e)))

        if self.debug:
            logger.debug(
                "api_response",
                item=item_name,
                status_code=response.status_code,
                body=response.text[:500],
            )
        return success(data)
