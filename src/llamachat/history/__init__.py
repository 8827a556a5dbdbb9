"""Transcript persistence for llamachat.

Keeps the conversation across runs of the client.
"""

from .base import TranscriptStore
from .factory import create_transcript_store
from .in_memory import InMemoryTranscriptStore
from .json_file import JsonTranscriptStore

__all__ = [
    "InMemoryTranscriptStore",
    "JsonTranscriptStore",
    "TranscriptStore",
    "create_transcript_store",
]
