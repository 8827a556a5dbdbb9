"""Runtime configuration.

Hides where the endpoint, model and transcript location come from.
The CLI fills a ChatConfig from options and environment variables;
everything downstream receives it explicitly.
"""

from pathlib import Path

import httpx
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_ENDPOINT = "http://localhost:11434/api/chat"
DEFAULT_MODEL = "llama3.1"
DEFAULT_TRANSCRIPT_PATH = Path("chat.json")

# Environment variables read by the CLI (also loaded from .env)
ENV_ENDPOINT = "LLAMACHAT_ENDPOINT"
ENV_MODEL = "LLAMACHAT_MODEL"
ENV_HISTORY = "LLAMACHAT_HISTORY"


class ChatConfig(BaseModel):
    """Settings for one chat session."""

    model_config = ConfigDict(frozen=True)

    endpoint: str = Field(default=DEFAULT_ENDPOINT, description="Chat API URL")
    model: str = Field(default=DEFAULT_MODEL, min_length=1, description="Model identifier")
    transcript_path: Path = Field(
        default=DEFAULT_TRANSCRIPT_PATH,
        description="JSON file holding the chat transcript"
    )
    mouse: bool = Field(default=True, description="Enable mouse support in the TUI")

    @field_validator("endpoint")
    @classmethod
    def validate_endpoint(cls, v: str) -> str:
        """Reject URLs httpx cannot send to."""
        try:
            url = httpx.URL(v)
        except httpx.InvalidURL as e:
            raise ValueError(f"invalid endpoint URL: {e}") from e
        if url.scheme not in ("http", "https") or not url.host:
            raise ValueError("endpoint must be an http(s) URL with a host")
        return v
