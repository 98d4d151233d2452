"""
HTTP infrastructure for external lookups.

Provides:
- HTTPClientError: Raised for non-2xx responses and undecodable bodies
- HTTPClient: Async GET helper with a per-request timeout that either
  borrows a caller-supplied httpx.AsyncClient or opens a short-lived one

Lookups are not retried; a failed request is reported to the caller, which
treats it as "no results for this item".
"""

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class HTTPClientError(Exception):
    """Base exception for HTTP client errors."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: str | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class HTTPClient:
    """
    Async HTTP GET helper with timeout handling.

    Passing an httpx.AsyncClient lets callers share connection pools (and
    lets tests inject httpx.MockTransport); otherwise each request opens
    and closes its own client.

    Example:
        client = HTTPClient(timeout=5.0)
        data = await client.get_json(
            "https://en.wikipedia.org/api/rest_v1/page/summary/Python",
        )
    """

    def __init__(
        self,
        timeout: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
        user_agent: str | None = None,
    ):
        """
        Initialize HTTP client.

        Args:
            timeout: Request timeout in seconds.
            http_client: Optional shared httpx client.
            user_agent: Optional User-Agent header sent with every request.
        """
        self.timeout = timeout
        self._client = http_client
        self._headers = {"User-Agent": user_agent} if user_agent else {}

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """
        Perform a GET request.

        Raises:
            HTTPClientError: On non-2xx status codes.
            httpx.HTTPError: On transport errors and timeouts.
        """
        request_headers = {**self._headers, **(headers or {})}
        logger.debug(f"GET {url}")

        if self._client is not None:
            response = await self._client.get(
                url, params=params, headers=request_headers, timeout=self.timeout
            )
        else:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url, params=params, headers=request_headers)

        if response.status_code >= 400:
            raise HTTPClientError(
                f"HTTP {response.status_code} from {url}",
                status_code=response.status_code,
                response_body=response.text[:500],
            )
        return response

    async def get_json(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """
        Perform a GET request and decode the JSON body.

        Raises:
            HTTPClientError: On non-2xx status codes or invalid JSON.
        """
        response = await self.get(url, params=params, headers=headers)
        try:
            return response.json()
        except ValueError as e:
            raise HTTPClientError(
                f"Invalid JSON from {url}",
                status_code=response.status_code,
                response_body=response.text[:500],
            ) from e

    async def get_text(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> str:
        """Perform a GET request and return the decoded body text."""
        response = await self.get(url, params=params, headers=headers)
        return response.text
