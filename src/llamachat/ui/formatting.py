"""Text formatting utilities for the TUI.

Hides how conversation turns and errors are turned into Rich markup.
"""

from rich.markup import escape

from ..errors import (
    ChatConnectionError,
    LlamaChatError,
    ModelServerError,
    ReplyDecodeError,
)
from .config import MODEL_SEPARATOR, USER_SEPARATOR
from .themes import ERROR_COLOR, MODEL_COLOR, MUTED_COLOR, USER_COLOR


def format_user_turn(text: str) -> str:
    """Markup for a user prompt: colored separator, then the prompt."""
    return f"[{USER_COLOR}]{USER_SEPARATOR}[/]\n{escape(text)}"


def format_model_turn(text: str) -> str:
    """Markup for a model reply: colored separator, then the reply."""
    return f"[{MODEL_COLOR}]{MODEL_SEPARATOR}[/]\n{escape(text)}"


def describe_error(error: LlamaChatError) -> str:
    """One-line, user-facing description of an error."""
    if isinstance(error, ChatConnectionError):
        return f"Error: Could not connect to {error.model}. Is it running?"
    if isinstance(error, ModelServerError):
        detail = f": {error.detail}" if error.detail else ""
        return f"Error: {error.model} returned HTTP {error.status_code}{detail}"
    if isinstance(error, ReplyDecodeError):
        return f"Error: Malformed reply from {error.model} ({error.reason})"
    return f"Error: {error}"


def format_error(error: LlamaChatError) -> str:
    """Markup for an inline error line.

    Transport errors get a dim second line naming the endpoint.
    """
    line = f"[{ERROR_COLOR}]{escape(describe_error(error))}[/]"
    endpoint = getattr(error, "endpoint", None)
    if endpoint:
        line += f"\n[{MUTED_COLOR}]{escape(endpoint)}[/]"
    return line
