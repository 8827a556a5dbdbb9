"""Pytest configuration and shared fixtures."""
import httpx
import pytest

from llamachat.errors import HistoryWriteError
from llamachat.history import InMemoryTranscriptStore
from llamachat.llm import ChatMessage, OllamaProvider, Role

HELLO_REPLY = {
    "model": "llama3.1",
    "created_at": "2024-07-25T12:00:00.000000Z",
    "message": {"role": "assistant", "content": "hi there"},
    "done": True,
}


@pytest.fixture
def transcript_path(tmp_path):
    """Return a transcript file that starts out as an empty array."""
    path = tmp_path / "chat.json"
    path.write_text("[]")
    return path


@pytest.fixture
def sample_transcript():
    """Return a two-message transcript."""
    return [
        ChatMessage(role=Role.USER, content="hello"),
        ChatMessage(role=Role.ASSISTANT, content="hi there"),
    ]


@pytest.fixture
def make_provider():
    """Build an OllamaProvider backed by an in-process mock server.

    The returned factory accepts the reply body (dict, or raw bytes/str),
    a status code, and an optional list collecting every request sent.
    """
    def _make(body=HELLO_REPLY, status_code=200, requests=None, model="llama3.1"):
        def handler(request: httpx.Request) -> httpx.Response:
            if requests is not None:
                requests.append(request)
            if isinstance(body, (bytes, str)):
                return httpx.Response(status_code, content=body)
            return httpx.Response(status_code, json=body)

        return OllamaProvider(model=model, transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def unreachable_provider():
    """Return an OllamaProvider whose server refuses every connection."""
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    return OllamaProvider(transport=httpx.MockTransport(handler))



class CountingStore(InMemoryTranscriptStore):
    """In-memory store that records how often it is written."""

    def __init__(self, transcript=None):
        super().__init__(transcript)
        self.save_count = 0
        self.clear_count = 0

    def save(self, transcript):
        super().save(transcript)
        self.save_count += 1

    def clear(self):
        super().clear()
        self.clear_count += 1


class FailingStore(InMemoryTranscriptStore):
    """In-memory store whose writes always fail."""

    def save(self, transcript):
        raise HistoryWriteError(None, "disk full")

    def clear(self):
        raise HistoryWriteError(None, "disk full")


@pytest.fixture
def counting_store():
    """Return an empty store that counts saves and clears."""
    return CountingStore()


@pytest.fixture
def failing_store():
    """Return a store that raises HistoryWriteError on every write."""
    return FailingStore()
