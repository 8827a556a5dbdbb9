"""Provider factory functions for CLI.

Centralizes creation of the transcript store and the chat provider from a
ChatConfig, and the startup policy for loading the transcript.
Hides configuration details from command implementations.
"""

from pathlib import Path

import typer
from rich.console import Console

from ..config import ChatConfig
from ..errors import HistoryNotFoundError, HistoryReadError, HistoryWriteError
from ..history import TranscriptStore, create_transcript_store
from ..llm import ChatMessage, ChatProvider, create_llm_provider

# Default console for output
_console = Console()


def get_store(path: Path, persist: bool = True) -> TranscriptStore:
    """Create the transcript store.

    Args:
        path: JSON file holding the transcript
        persist: False keeps the transcript in memory only
    """
    if not persist:
        return create_transcript_store("memory")
    return create_transcript_store("json", path=path)


def get_provider(config: ChatConfig) -> ChatProvider:
    """Create the chat provider for the configured endpoint and model."""
    return create_llm_provider("ollama", endpoint=config.endpoint, model=config.model)


def load_transcript(
    store: TranscriptStore,
    fresh: bool = False,
    console: Console | None = None
) -> list[ChatMessage]:
    """Load the transcript a session starts from.

    A missing file is created empty. A malformed file stops the program
    rather than being overwritten by the next save.

    Args:
        store: Transcript store
        fresh: Reset the stored transcript instead of loading it
        console: Optional Rich console for output

    Returns:
        Loaded transcript

    Raises:
        SystemExit: If the transcript cannot be read or created
    """
    con = console or _console

    try:
        if fresh:
            store.clear()
            return []
        return store.load()
    except HistoryNotFoundError:
        try:
            store.clear()
        except HistoryWriteError as e:
            con.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(code=1)
        con.print(f"[dim]Created {store.path}[/dim]")
        return []
    except HistoryReadError as e:
        con.print(f"[red]Error: {e}[/red]")
        con.print("[dim]Fix the file or reset it with: llamachat clear[/dim]")
        raise typer.Exit(code=1)
    except HistoryWriteError as e:
        con.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)
