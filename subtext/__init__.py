"""
Subtext Python SDK.

An async client library for the Subtext analytics API.

Example:
    from subtext import SubtextClient

    async with SubtextClient(api_key="your-api-key-here") as client:
        thread = await client.thread("thread-123")
        message = await client.message(thread.thread_id, "Hello, world!", "msg-456")
        run = await client.run(thread.thread_id, "run-789", "Hello! How can I help?")
"""

from loguru import logger

from .client import SubtextClient
from .config import Settings, settings
from .logging import setup_logging
from .models import (
    CreateMessageRequest,
    CreateRunRequest,
    CreateThreadRequest,
    Message,
    Run,
    Thread,
)
from .runtime import (
    ErrorKind,
    RetryPolicy,
    SubtextAPIError,
    SubtextAuthenticationError,
    SubtextConnectionError,
    SubtextNotFoundError,
    SubtextServerError,
    SubtextTimeoutError,
    SubtextValidationError,
)
from .version import __version__

# Silent until the application opts in via setup_logging()
logger.disable("subtext")

__all__ = [
    # Client
    "SubtextClient",
    # Models
    "Thread",
    "Message",
    "Run",
    "CreateThreadRequest",
    "CreateMessageRequest",
    "CreateRunRequest",
    # Errors
    "ErrorKind",
    "SubtextAPIError",
    "SubtextAuthenticationError",
    "SubtextValidationError",
    "SubtextNotFoundError",
    "SubtextServerError",
    "SubtextConnectionError",
    "SubtextTimeoutError",
    # Configuration
    "RetryPolicy",
    "Settings",
    "settings",
    "setup_logging",
    "__version__",
]
