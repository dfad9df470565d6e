"""
Request pipeline for the Subtext SDK.

This package provides the transport layer shared by all resource operations:
- SubtextAPIError and subclasses: Error taxonomy with a discriminant kind
- RetryPolicy: Exponential backoff for transient statuses
- SubtextHttpClient: Pooled async HTTP client with automatic headers
"""

from .errors import (
    ErrorKind,
    SubtextAPIError,
    SubtextAuthenticationError,
    SubtextConnectionError,
    SubtextNotFoundError,
    SubtextServerError,
    SubtextTimeoutError,
    SubtextValidationError,
    error_from_response,
)
from .http_client import SubtextHttpClient
from .retry import DEFAULT_RETRY_POLICY, RetryPolicy

__all__ = [
    "ErrorKind",
    "SubtextAPIError",
    "SubtextAuthenticationError",
    "SubtextConnectionError",
    "SubtextNotFoundError",
    "SubtextServerError",
    "SubtextTimeoutError",
    "SubtextValidationError",
    "error_from_response",
    "SubtextHttpClient",
    "RetryPolicy",
    "DEFAULT_RETRY_POLICY",
]
