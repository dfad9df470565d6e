"""
Subtext SDK data models.

Request bodies use the server's field names. Thread, Message and Run are
frozen records built from the ``data`` field of a successful response;
``to_dict()`` returns that payload unchanged, so server-assigned ids and
timestamps keep the type the server sent.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class CreateThreadRequest(BaseModel):
    """Request model for creating a thread."""

    thread_id: str
    user_id: str | None = None


class CreateMessageRequest(BaseModel):
    """Request model for creating a user message."""

    thread_id: str
    message: str
    message_id: str


class CreateRunRequest(BaseModel):
    """Request model for creating a run."""

    run_id: str
    thread_id: str
    response: str


class _Record(BaseModel):
    """Immutable record of a server payload."""

    # extra="allow" keeps fields the server adds so to_dict() round-trips
    model_config = ConfigDict(frozen=True, extra="allow")

    def to_dict(self) -> dict[str, Any]:
        """Convert the record to a plain dictionary."""
        unset = set(type(self).model_fields) - self.model_fields_set
        return self.model_dump(exclude=unset)


class Thread(_Record):
    """A conversation session tracked by Subtext.

    Attributes:
        id: Server-assigned identifier.
        thread_id: Caller-assigned thread ID.
        user_id: User associated with the thread, if any.
        created_at: Creation timestamp.
        modified_at: Last modification timestamp.
    """

    id: str | int
    thread_id: str
    user_id: str | None = None
    created_at: Any
    modified_at: Any

    def __str__(self) -> str:
        user_part = f" (user: {self.user_id})" if self.user_id else ""
        return f"Thread {self.thread_id}{user_part}"


class Message(_Record):
    """A tracked user utterance within a thread.

    Attributes:
        id: Server-assigned identifier.
        thread_id: Thread the message belongs to.
        message: Message text.
        message_id: Caller-assigned message ID.
        created_at: Creation timestamp.
    """

    id: str | int
    thread_id: str
    message: str
    message_id: str
    created_at: Any

    def __str__(self) -> str:
        text = self.message
        if len(text) > 50:
            text = f"{text[:50]}..."
        return f"Message {self.message_id} in thread {self.thread_id}: {text}"


class Run(_Record):
    """A tracked model response within a thread.

    Attributes:
        run_id: Caller-assigned run ID.
        thread_id: Thread the run belongs to.
        response: Model response text.
        created_at: Creation timestamp.
    """

    run_id: str
    thread_id: str
    response: str
    created_at: Any

    def __str__(self) -> str:
        return f"Run {self.run_id} in thread {self.thread_id}"
