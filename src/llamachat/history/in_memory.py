"""In-memory transcript store.

Keeps the transcript for the lifetime of the process only.
Used for ``llamachat chat --no-persist`` and in tests.
"""

from collections.abc import Sequence

from ..llm.models import ChatMessage
from .base import TranscriptStore


class InMemoryTranscriptStore(TranscriptStore):
    """Session-only transcript store."""

    def __init__(self, transcript: Sequence[ChatMessage] | None = None):
        self._transcript: list[ChatMessage] = list(transcript or [])

    @property
    def backend_type(self) -> str:
        return "memory"

    def load(self) -> list[ChatMessage]:
        """Return a copy of the stored transcript (empty if nothing saved)."""
        return list(self._transcript)

    def save(self, transcript: Sequence[ChatMessage]) -> None:
        self._transcript = list(transcript)

    def clear(self) -> None:
        self._transcript = []
