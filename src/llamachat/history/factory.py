"""Factory for creating transcript stores."""

from typing import Any

from .base import TranscriptStore


def create_transcript_store(
    backend: str = "json",
    **kwargs: Any
) -> TranscriptStore:
    """Create a transcript store.

    Args:
        backend: Backend type ("json" or "memory")
        **kwargs: Backend-specific configuration
            For json:
                - path: str | Path (default: 'chat.json')

    Returns:
        TranscriptStore instance

    Raises:
        ValueError: If backend type is not supported
    """
    if backend == "json":
        from .json_file import JsonTranscriptStore
        return JsonTranscriptStore(**kwargs)

    elif backend == "memory":
        from .in_memory import InMemoryTranscriptStore
        return InMemoryTranscriptStore(**kwargs)

    raise ValueError(
        f"Unsupported transcript backend: {backend}. "
        f"Supported backends: json, memory"
    )
