"""Abstract base class for transcript stores.

This module defines the interface for transcript persistence.
The abstraction hides:
- Storage format (JSON file, nothing at all)
- Where the transcript lives
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path

from ..llm.models import ChatMessage


class TranscriptStore(ABC):
    """Abstract transcript store.

    Every save overwrites the stored transcript wholesale.
    """

    @abstractmethod
    def load(self) -> list[ChatMessage]:
        """Read the stored transcript.

        Raises:
            HistoryNotFoundError: Nothing stored yet
            HistoryReadError: Stored data is unreadable or malformed
        """

    @abstractmethod
    def save(self, transcript: Sequence[ChatMessage]) -> None:
        """Overwrite the stored transcript.

        Raises:
            HistoryWriteError: Transcript could not be written
        """

    @abstractmethod
    def clear(self) -> None:
        """Replace the stored transcript with an empty one.

        Raises:
            HistoryWriteError: Transcript could not be written
        """

    @property
    @abstractmethod
    def backend_type(self) -> str:
        """Get the backend type identifier."""

    @property
    def path(self) -> Path | None:
        """File backing this store, if any."""
        return None
