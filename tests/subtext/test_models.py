"""Unit tests for Subtext data models."""

import pytest

from subtext.models import (
    CreateMessageRequest,
    CreateRunRequest,
    CreateThreadRequest,
    Message,
    Run,
    Thread,
)


@pytest.fixture
def thread_data():
    return {
        "id": "1",
        "thread_id": "thread-123",
        "user_id": "user-456",
        "created_at": "2024-01-01T00:00:00Z",
        "modified_at": "2024-01-02T00:00:00Z",
    }


class TestThread:
    """Tests for the Thread record."""

    def test_accessors(self, thread_data):
        thread = Thread.model_validate(thread_data)

        assert thread.id == "1"
        assert thread.thread_id == "thread-123"
        assert thread.user_id == "user-456"
        assert thread.created_at == "2024-01-01T00:00:00Z"
        assert thread.modified_at == "2024-01-02T00:00:00Z"

    def test_to_dict_round_trips(self, thread_data):
        assert Thread.model_validate(thread_data).to_dict() == thread_data

    def test_to_dict_keeps_absent_optional_field_absent(self, thread_data):
        del thread_data["user_id"]

        assert "user_id" not in Thread.model_validate(thread_data).to_dict()

    def test_to_dict_keeps_explicit_null(self, thread_data):
        thread_data["user_id"] = None

        assert Thread.model_validate(thread_data).to_dict() == thread_data

    def test_to_dict_keeps_extra_server_fields(self, thread_data):
        thread_data["metadata"] = {"channel": "web"}

        assert Thread.model_validate(thread_data).to_dict() == thread_data

    def test_to_dict_returns_copy(self, thread_data):
        thread = Thread.model_validate(thread_data)
        thread.to_dict()["thread_id"] = "changed"

        assert thread.thread_id == "thread-123"

    def test_is_frozen(self, thread_data):
        thread = Thread.model_validate(thread_data)
        with pytest.raises(Exception):
            thread.thread_id = "other"

    def test_str_with_user(self, thread_data):
        assert str(Thread.model_validate(thread_data)) == "Thread thread-123 (user: user-456)"

    def test_str_without_user(self, thread_data):
        del thread_data["user_id"]

        assert str(Thread.model_validate(thread_data)) == "Thread thread-123"


class TestMessage:
    """Tests for the Message record."""

    def make(self, text):
        return Message.model_validate(
            {
                "id": "2",
                "thread_id": "thread-123",
                "message": text,
                "message_id": "msg-456",
                "created_at": "2024-01-01T00:00:00Z",
            }
        )

    def test_str_short_message(self):
        assert str(self.make("Hello")) == "Message msg-456 in thread thread-123: Hello"

    def test_str_truncates_long_message(self):
        text = "x" * 60

        assert str(self.make(text)) == (
            f"Message msg-456 in thread thread-123: {'x' * 50}..."
        )

    def test_str_keeps_exactly_fifty_characters(self):
        assert str(self.make("y" * 50)).endswith("y" * 50)

    def test_to_dict_round_trips(self):
        message = self.make("Hello")

        assert Message.model_validate(message.to_dict()) == message


class TestRun:
    """Tests for the Run record."""

    def test_accessors_and_str(self):
        run = Run.model_validate(
            {
                "run_id": "run-789",
                "thread_id": "thread-123",
                "response": "Hi!",
                "created_at": "2024-01-01T00:00:00Z",
            }
        )

        assert run.run_id == "run-789"
        assert run.response == "Hi!"
        assert str(run) == "Run run-789 in thread thread-123"

    def test_missing_field_fails_validation(self):
        with pytest.raises(Exception):
            Run.model_validate({"run_id": "run-789"})


class TestRequestModels:
    """Tests for request bodies."""

    def test_thread_request_excludes_missing_user(self):
        body = CreateThreadRequest(thread_id="t-1").model_dump(exclude_none=True)
        assert body == {"thread_id": "t-1"}

    def test_message_request_fields(self):
        body = CreateMessageRequest(thread_id="t", message="m", message_id="id").model_dump()
        assert body == {"thread_id": "t", "message": "m", "message_id": "id"}

    def test_run_request_fields(self):
        body = CreateRunRequest(thread_id="t", run_id="r", response="ok").model_dump()
        assert body == {"run_id": "r", "thread_id": "t", "response": "ok"}


class TestServerAssignedValues:
    """Tests for values the server assigns."""

    def test_numeric_id_is_kept_as_sent(self):
        payload = {
            "id": 7,
            "thread_id": "t",
            "message": "hi",
            "message_id": "m",
            "created_at": 1704067200,
        }
        message = Message.model_validate(payload)

        assert message.id == 7
        assert message.created_at == 1704067200
        assert message.to_dict() == payload
