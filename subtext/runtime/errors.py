"""
Error taxonomy for the Subtext API.

Every remote or transport failure surfaces as exactly one kind of
SubtextAPIError. Callers can discriminate on the ``kind`` attribute
(one of the ErrorKind constants) or on the exported subclasses.
"""

from __future__ import annotations

from typing import Any


class ErrorKind:
    """Discriminant tags for Subtext API failures."""

    API = "API"
    AUTHENTICATION = "AUTHENTICATION"
    VALIDATION = "VALIDATION"
    NOT_FOUND = "NOT_FOUND"
    SERVER = "SERVER"
    CONNECTION = "CONNECTION"
    TIMEOUT = "TIMEOUT"


class SubtextAPIError(Exception):
    """Base exception for all Subtext API errors.

    Also used directly for failures no specialised kind covers: unexpected
    HTTP statuses, exhausted rate limiting and malformed success responses.

    Attributes:
        kind: ErrorKind tag identifying the failure.
        message: Human-readable description.
        status_code: HTTP status, if a response was received.
        response_data: Decoded response payload, if any.
    """

    kind = ErrorKind.API

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_data: dict[str, Any] | None = None,
    ):
        """Initialize a SubtextAPIError.

        Args:
            message: Human-readable description.
            status_code: Optional HTTP status code.
            response_data: Optional structured response payload.
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_data = response_data

    def __str__(self) -> str:
        """Return string representation."""
        if self.status_code is None:
            return f"[{self.kind}] {self.message}"
        return f"[{self.kind}] {self.message} (status={self.status_code})"

    def __repr__(self) -> str:
        """Return detailed representation."""
        return (
            f"{type(self).__name__}(kind={self.kind!r}, "
            f"message={self.message!r}, "
            f"status_code={self.status_code!r})"
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging or reporting.

        Returns:
            Dictionary with kind, message, status code and payload.
        """
        return {
            "kind": self.kind,
            "message": self.message,
            "status_code": self.status_code,
            "response_data": self.response_data,
        }


class SubtextAuthenticationError(SubtextAPIError):
    """Raised when the API key is rejected (401)."""

    kind = ErrorKind.AUTHENTICATION

    def __init__(
        self,
        message: str = "Authentication failed. Please check your API key.",
        response_data: dict[str, Any] | None = None,
    ):
        super().__init__(message, 401, response_data)


class SubtextValidationError(SubtextAPIError):
    """Raised when the server rejects the request body (400)."""

    kind = ErrorKind.VALIDATION

    def __init__(
        self,
        message: str = "Validation error",
        response_data: dict[str, Any] | None = None,
    ):
        super().__init__(message, 400, response_data)


class SubtextNotFoundError(SubtextAPIError):
    """Raised when a referenced resource does not exist (404)."""

    kind = ErrorKind.NOT_FOUND

    def __init__(
        self,
        message: str = "Resource not found",
        response_data: dict[str, Any] | None = None,
    ):
        super().__init__(message, 404, response_data)


class SubtextServerError(SubtextAPIError):
    """Raised for 5xx responses, after retries where applicable."""

    kind = ErrorKind.SERVER

    def __init__(
        self,
        message: str = "Internal server error",
        status_code: int = 500,
        response_data: dict[str, Any] | None = None,
    ):
        super().__init__(message, status_code, response_data)


class SubtextConnectionError(SubtextAPIError):
    """Raised when no response was received (refused, DNS, network)."""

    kind = ErrorKind.CONNECTION

    def __init__(self, message: str = "Connection error"):
        super().__init__(message)


class SubtextTimeoutError(SubtextAPIError):
    """Raised when a request exceeds the configured timeout."""

    kind = ErrorKind.TIMEOUT

    def __init__(self, message: str = "Request timeout"):
        super().__init__(message)


def error_from_response(
    status_code: int,
    response_data: dict[str, Any],
) -> SubtextAPIError:
    """Map a non-success HTTP response onto the error taxonomy.

    The ``error`` field of the payload, when present, becomes the message.

    Args:
        status_code: Observed HTTP status.
        response_data: Decoded error payload.

    Returns:
        The matching SubtextAPIError instance (not raised).
    """
    detail = response_data.get("error")
    if not isinstance(detail, str):
        detail = None

    if status_code == 401:
        return SubtextAuthenticationError(response_data=response_data)
    if status_code == 400:
        return SubtextValidationError(detail or "Validation error", response_data)
    if status_code == 404:
        return SubtextNotFoundError(detail or "Resource not found", response_data)
    if 500 <= status_code < 600:
        return SubtextServerError(
            detail or "Internal server error", status_code, response_data
        )
    return SubtextAPIError(detail or f"HTTP {status_code}", status_code, response_data)
