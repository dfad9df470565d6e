"""
Retry policy configuration.

Pure exponential backoff for transient HTTP statuses. The delay before
retry N (1-indexed) is: base_delay * (exponential_base ** N), optionally
capped at max_delay. With the defaults the waits are 2s, 4s and 8s.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class RetryPolicy(BaseModel):
    """Configuration for retry behavior.

    Attributes:
        max_retries: Retries allowed after the initial attempt.
        base_delay: Delay unit in seconds.
        exponential_base: Base for exponential backoff calculation.
        max_delay: Optional cap in seconds for a single delay.
        retry_on_status: HTTP status codes that trigger retry.
    """

    max_retries: int = Field(default=3, ge=0)
    base_delay: float = 1.0
    exponential_base: float = 2.0
    max_delay: float | None = None
    retry_on_status: tuple[int, ...] = (429, 500, 502, 503, 504)

    model_config = {"frozen": True}

    def calculate_delay(self, attempt: int) -> float:
        """Calculate delay before a given retry.

        Args:
            attempt: The retry number (1 for the first retry).

        Returns:
            Delay in seconds before resending the request.
        """
        delay = self.base_delay * (self.exponential_base**attempt)
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay

    def should_retry_status(self, status_code: int) -> bool:
        """Check if a status code should trigger a retry.

        Args:
            status_code: HTTP status code to check.

        Returns:
            True if the status code is in retry_on_status.
        """
        return status_code in self.retry_on_status

    def can_retry(self, status_code: int, retries_done: int) -> bool:
        """Check whether a response warrants another attempt.

        Args:
            status_code: HTTP status of the latest response.
            retries_done: Retries already spent on this call.

        Returns:
            True if the status is transient and budget remains.
        """
        return self.should_retry_status(status_code) and retries_done < self.max_retries


DEFAULT_RETRY_POLICY = RetryPolicy()
