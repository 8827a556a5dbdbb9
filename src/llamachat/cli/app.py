"""Main CLI application using Typer."""
from pathlib import Path

import typer
from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import (
    DEFAULT_ENDPOINT,
    DEFAULT_MODEL,
    DEFAULT_TRANSCRIPT_PATH,
    ENV_ENDPOINT,
    ENV_HISTORY,
    ENV_MODEL,
    ChatConfig,
)
from ..errors import HistoryWriteError
from ..llm import Role
from .providers import get_provider, get_store, load_transcript

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="llamachat",
    help="Terminal chat client for a locally running language model",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()

HISTORY_OPTION = typer.Option(
    DEFAULT_TRANSCRIPT_PATH,
    "--history",
    "-f",
    envvar=ENV_HISTORY,
    dir_okay=False,
    help="JSON file holding the chat transcript"
)


@app.command()
def chat(
    endpoint: str = typer.Option(
        DEFAULT_ENDPOINT,
        "--endpoint",
        "-e",
        envvar=ENV_ENDPOINT,
        help="Chat API URL"
    ),
    model: str = typer.Option(
        DEFAULT_MODEL,
        "--model",
        "-m",
        envvar=ENV_MODEL,
        help="Model to chat with"
    ),
    history: Path = HISTORY_OPTION,
    fresh: bool = typer.Option(
        False,
        "--fresh",
        help="Start from an empty transcript (erases the saved one)"
    ),
    persist: bool = typer.Option(
        True,
        "--persist/--no-persist",
        help="Write the transcript to disk after every reply"
    ),
    mouse: bool = typer.Option(
        True,
        "--mouse/--no-mouse",
        help="Enable mouse support"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show the log panel at this level (debug, info, warning, error)"
    )
):
    """Open the chat interface."""
    from ..ui import run_tui

    try:
        config = ChatConfig(
            endpoint=endpoint,
            model=model,
            transcript_path=history,
            mouse=mouse,
        )
    except ValidationError as e:
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            console.print(f"[red]Error: {field}: {escape(error['msg'])}[/red]")
        raise typer.Exit(code=1)

    store = get_store(config.transcript_path, persist=persist)
    transcript = load_transcript(store, fresh=fresh, console=console)
    provider = get_provider(config)

    run_tui(
        config=config,
        provider=provider,
        store=store,
        transcript=transcript,
        log_level=log_level,
    )


@app.command(name="history")
def show_history(
    history: Path = HISTORY_OPTION,
    limit: int = typer.Option(
        0,
        "--limit",
        "-n",
        min=0,
        help="Only show the last N messages (0 shows all)"
    )
):
    """Print the saved transcript."""
    store = get_store(history)
    transcript = load_transcript(store, console=console)

    if not transcript:
        console.print("[yellow]No messages saved[/yellow]")
        return

    shown = transcript[-limit:] if limit else transcript

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=4)
    table.add_column("Role", width=10)
    table.add_column("Content")

    offset = len(transcript) - len(shown)
    for i, message in enumerate(shown, offset + 1):
        role_style = "green" if message.role is Role.USER else "yellow"
        table.add_row(
            str(i),
            f"[{role_style}]{message.role.value}[/{role_style}]",
            escape(message.content),
        )

    console.print(table)
    console.print(f"[dim]{len(transcript)} messages in {history}[/dim]")


@app.command()
def clear(
    history: Path = HISTORY_OPTION,
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Do not ask for confirmation"
    )
):
    """Erase the saved transcript."""
    if not yes:
        confirm = typer.confirm(f"Erase the chat history in {history}?")
        if not confirm:
            console.print("[dim]Aborted.[/dim]")
            return

    store = get_store(history)
    try:
        store.clear()
    except HistoryWriteError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)

    console.print(f"[green]Cleared {history}[/green]")


if __name__ == "__main__":
    app()
