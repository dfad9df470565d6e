"""
Async HTTP request executor for the Subtext API.

This module provides a pooled HTTP client that injects authentication
headers, retries transient failures with exponential backoff, and
converts every failure into the Subtext error taxonomy.
"""

from __future__ import annotations

import asyncio
from typing import Any

import httpx
from loguru import logger

from ..version import __version__
from .errors import (
    SubtextConnectionError,
    SubtextTimeoutError,
    error_from_response,
)
from .retry import DEFAULT_RETRY_POLICY, RetryPolicy

USER_AGENT = f"subtext-python/{__version__}"


class SubtextHttpClient:
    """HTTP client for the Subtext REST API.

    Features:
    - Connection pooling via httpx.AsyncClient (created on first request)
    - Automatic header injection (x-api-key, Content-Type, User-Agent)
    - Retry on transient statuses (429, 500, 502, 503, 504)
    - Timeout handling
    - Structured error conversion

    Each call to request() keeps its own retry counter, so concurrent calls
    never share retry state.

    Example:
        http = SubtextHttpClient("https://app.trysubtext.com", api_key="sk-...")
        async with http:
            body = await http.post("/api/threads", json={"thread_id": "t-1"})
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: int = 30000,
        retry_policy: RetryPolicy | None = None,
        max_connections: int = 100,
        max_keepalive: int = 20,
    ):
        """Initialize the HTTP client.

        Args:
            base_url: Base URL for all requests.
            api_key: Value of the x-api-key header.
            timeout: Per-request timeout in milliseconds.
            retry_policy: Retry configuration. Uses default if None.
            max_connections: Maximum total connections in pool.
            max_keepalive: Maximum keepalive connections.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retry_policy = retry_policy or DEFAULT_RETRY_POLICY

        self._headers = {
            "x-api-key": api_key,
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
        }
        self._limits = httpx.Limits(
            max_connections=max_connections,
            max_keepalive_connections=max_keepalive,
            keepalive_expiry=30.0,
        )
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client.

        Returns:
            The shared httpx.AsyncClient instance.
        """
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout / 1000,
                limits=self._limits,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client and release connections."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "SubtextHttpClient":
        """Enter async context manager."""
        await self._get_client()
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Exit async context manager."""
        await self.close()

    def _build_url(self, path: str) -> str:
        """Build full URL from path.

        Args:
            path: Request path (with or without leading slash).

        Returns:
            Full URL including base_url.
        """
        path = path.lstrip("/")
        return f"{self.base_url}/{path}"

    async def request(
        self,
        method: str,
        path: str,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """Make an HTTP request with header injection and retry.

        Args:
            method: HTTP method (GET, POST, etc.).
            path: Request path relative to base_url.
            json: Optional JSON-serializable body.

        Returns:
            The decoded JSON response body, or None if a successful
            response carried no JSON.

        Raises:
            SubtextTimeoutError: The request exceeded the timeout.
            SubtextConnectionError: No response was received.
            SubtextAPIError: A non-success response (specialised by status).
        """
        client = await self._get_client()
        url = self._build_url(path)
        retries = 0

        while True:
            logger.debug(f"{method} {path} (attempt {retries + 1})")
            try:
                response = await client.request(
                    method=method,
                    url=url,
                    headers=self._headers,
                    json=json,
                )
            except httpx.TimeoutException as e:
                logger.warning(f"Timeout after {self.timeout}ms for {method} {path}")
                raise SubtextTimeoutError(f"Request to {path} timed out") from e
            except httpx.RequestError as e:
                logger.warning(f"Connection error for {method} {path}: {e}")
                raise SubtextConnectionError(f"Failed to connect to {url}: {e}") from e

            status = response.status_code
            if response.is_success:
                return self._decode_body(response)

            if self.retry_policy.can_retry(status, retries):
                retries += 1
                delay = self.retry_policy.calculate_delay(retries)
                logger.info(
                    f"Retry {retries}/{self.retry_policy.max_retries} "
                    f"for {method} {path} (status={status}) in {delay:.2f}s"
                )
                await asyncio.sleep(delay)
                continue

            if self.retry_policy.should_retry_status(status):
                logger.warning(
                    f"Max retries ({self.retry_policy.max_retries}) exceeded "
                    f"for {method} {path} (status={status})"
                )
            raise error_from_response(status, self._parse_error_payload(response))

    async def post(
        self,
        path: str,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """Make a POST request.

        Args:
            path: Request path.
            json: Optional JSON body.

        Returns:
            The decoded JSON response body.
        """
        return await self.request("POST", path, json=json)

    @staticmethod
    def _decode_body(response: httpx.Response) -> Any:
        """Decode a successful response body.

        Returns:
            The parsed JSON, or None when the body is empty or not JSON.
        """
        try:
            return response.json()
        except ValueError:
            logger.warning(
                f"Undecodable {response.status_code} response body "
                f"({len(response.content)} bytes)"
            )
            return None

    @staticmethod
    def _parse_error_payload(response: httpx.Response) -> dict[str, Any]:
        """Extract the error payload from a failed response.

        Falls back to the reason phrase when the body is not a JSON object.
        """
        try:
            data = response.json()
        except ValueError:
            data = None
        if isinstance(data, dict):
            return data
        return {"error": response.reason_phrase or f"HTTP {response.status_code}"}
