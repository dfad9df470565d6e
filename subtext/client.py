"""
Subtext API client.

Creates threads, records user messages and records LLM runs on the Subtext
analytics backend. All operations are async and share one pooled
SubtextHttpClient.
"""

from __future__ import annotations

from typing import Any, TypeVar

from loguru import logger
from pydantic import BaseModel, ValidationError

from .config import settings
from .models import (
    CreateMessageRequest,
    CreateRunRequest,
    CreateThreadRequest,
    Message,
    Run,
    Thread,
)
from .runtime import RetryPolicy, SubtextAPIError, SubtextHttpClient

RecordT = TypeVar("RecordT", Thread, Message, Run)

THREADS_ENDPOINT = "/api/threads"
MESSAGES_ENDPOINT = "/api/messages"
RUNS_ENDPOINT = "/api/runs"


def _require(name: str, value: Any) -> None:
    """Reject a missing or empty required string argument."""
    if not isinstance(value, str) or not value:
        raise ValueError(f"{name} is required")


class SubtextClient:
    """Async client for the Subtext API.

    Each operation validates its arguments locally, sends a single POST
    (retried on transient failures) and returns a frozen record. Failures
    raise a SubtextAPIError subclass; missing arguments raise ValueError
    before any request is sent.

    Example:
        async with SubtextClient(api_key="your-api-key") as client:
            thread = await client.thread("thread-123", user_id="user-456")
            await client.message(thread.thread_id, "Hello, world!", "msg-456")
            await client.run(thread.thread_id, "run-789", "Hi! How can I help?")
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: int | None = None,
        max_retries: int | None = None,
    ):
        """Initialize the Subtext client.

        Args:
            api_key: Your Subtext API key. Defaults to SUBTEXT_API_KEY.
            base_url: Base URL of the Subtext API (internal use).
            timeout: Request timeout in milliseconds (default 30000).
            max_retries: Retries for transient failures (default 3).

        Raises:
            ValueError: If no API key is available or a limit is invalid.
        """
        api_key = settings.SUBTEXT_API_KEY if api_key is None else api_key
        if not api_key:
            raise ValueError("API key is required")

        timeout = settings.SUBTEXT_TIMEOUT if timeout is None else timeout
        max_retries = settings.SUBTEXT_MAX_RETRIES if max_retries is None else max_retries
        if timeout <= 0:
            raise ValueError("timeout must be a positive number of milliseconds")
        if max_retries < 0:
            raise ValueError("max_retries must not be negative")

        self._http = SubtextHttpClient(
            base_url=base_url or settings.SUBTEXT_BASE_URL,
            api_key=api_key,
            timeout=timeout,
            retry_policy=RetryPolicy(max_retries=max_retries),
        )

    @property
    def base_url(self) -> str:
        return self._http.base_url

    @property
    def timeout(self) -> int:
        return self._http.timeout

    @property
    def max_retries(self) -> int:
        return self._http.retry_policy.max_retries

    async def close(self) -> None:
        """Close the HTTP client and release connections."""
        await self._http.close()

    async def __aenter__(self) -> "SubtextClient":
        """Enter async context manager."""
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Exit async context manager."""
        await self.close()

    async def thread(self, thread_id: str, user_id: str | None = None) -> Thread:
        """Create a new thread.

        Args:
            thread_id: Caller-assigned thread ID.
            user_id: Optional user to associate with the thread.

        Returns:
            The created Thread.

        Raises:
            ValueError: If thread_id is missing.
            SubtextValidationError: If the server rejects the request.
            SubtextAuthenticationError: If the API key is invalid.
            SubtextServerError: If there's a server error.
            SubtextConnectionError: If there's a connection error.
            SubtextTimeoutError: If the request times out.
        """
        _require("thread_id", thread_id)

        request = CreateThreadRequest(thread_id=thread_id, user_id=user_id)
        return await self._create(THREADS_ENDPOINT, request, Thread)

    async def message(self, thread_id: str, message: str, message_id: str) -> Message:
        """Create a new user message.

        Args:
            thread_id: Thread the message belongs to.
            message: Message text.
            message_id: Caller-assigned message ID.

        Returns:
            The created Message.

        Raises:
            ValueError: If a required argument is missing.
            SubtextNotFoundError: If the thread doesn't exist.
            SubtextAPIError: For any other API or transport failure.
        """
        _require("thread_id", thread_id)
        _require("message", message)
        _require("message_id", message_id)

        request = CreateMessageRequest(
            thread_id=thread_id,
            message=message,
            message_id=message_id,
        )
        return await self._create(MESSAGES_ENDPOINT, request, Message)

    async def run(self, thread_id: str, run_id: str, response: str) -> Run:
        """Create a new run record for an LLM call.

        Args:
            thread_id: Thread the run belongs to.
            run_id: Caller-assigned run ID.
            response: The LLM response content.

        Returns:
            The created Run.

        Raises:
            ValueError: If a required argument is missing.
            SubtextNotFoundError: If the thread doesn't exist.
            SubtextAPIError: For any other API or transport failure.
        """
        _require("thread_id", thread_id)
        _require("run_id", run_id)
        _require("response", response)

        request = CreateRunRequest(
            thread_id=thread_id,
            run_id=run_id,
            response=response,
        )
        return await self._create(RUNS_ENDPOINT, request, Run)

    async def _create(
        self,
        endpoint: str,
        request: BaseModel,
        record_cls: type[RecordT],
    ) -> RecordT:
        """POST a request body and unwrap the ``data`` field of the reply."""
        body = await self._http.post(endpoint, json=request.model_dump(exclude_none=True))

        data = body.get("data") if isinstance(body, dict) else None
        if not data:
            raise SubtextAPIError(
                "Invalid response format: missing data field",
                200,
                body if isinstance(body, dict) else None,
            )

        try:
            record = record_cls.model_validate(data)
        except ValidationError as e:
            raise SubtextAPIError(
                f"Invalid response format: {e.error_count()} invalid field(s) in data",
                200,
                body,
            ) from e

        logger.debug(f"Created {record_cls.__name__} via {endpoint}")
        return record
