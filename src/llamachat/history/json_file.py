"""JSON file transcript store.

Stores the transcript as a JSON array of ``{"role", "content"}`` objects.
Writes go straight to the target file: there is no temporary file and no
backup, so a crash mid-write can leave a truncated file behind.
"""

import json
from collections.abc import Sequence
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from ..errors import HistoryNotFoundError, HistoryReadError, HistoryWriteError
from ..llm.models import ChatMessage
from .base import TranscriptStore

_TRANSCRIPT = TypeAdapter(list[ChatMessage])


class JsonTranscriptStore(TranscriptStore):
    """Transcript persisted to a single JSON file."""

    def __init__(self, path: str | Path = "chat.json"):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def backend_type(self) -> str:
        return "json"

    def load(self) -> list[ChatMessage]:
        try:
            raw = self._path.read_bytes()
        except FileNotFoundError as e:
            raise HistoryNotFoundError(self._path) from e
        except OSError as e:
            raise HistoryReadError(self._path, e.strerror or str(e)) from e

        try:
            return _TRANSCRIPT.validate_json(raw)
        except ValidationError as e:
            error = e.errors()[0] if e.errors() else None
            reason = error["msg"] if error else str(e)
            raise HistoryReadError(self._path, reason) from e

    def save(self, transcript: Sequence[ChatMessage]) -> None:
        payload = [message.model_dump(mode="json") for message in transcript]
        self._write(json.dumps(payload, indent=2, ensure_ascii=False))

    def clear(self) -> None:
        self._write("[]")

    def _write(self, text: str) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise HistoryWriteError(self._path, e.strerror or str(e)) from e
