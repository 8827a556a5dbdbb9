from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Sender of a chat message."""

    USER = "user"
    ASSISTANT = "assistant"


class ChatMessage(BaseModel):
    """Represents a chat message in a conversation."""

    model_config = ConfigDict(frozen=True)

    role: Role = Field(description="Role of the message sender: 'user' or 'assistant'")
    content: str = Field(description="Content of the message")


class ChatRequest(BaseModel):
    """Body of a chat call. Built fresh for every prompt, never persisted."""

    model_config = ConfigDict(frozen=True)

    messages: list[ChatMessage] = Field(description="Full transcript sent as context")
    model: str = Field(description="Model identifier")
    stream: bool = Field(default=False, description="Replies are always requested whole")


class ChatReply(BaseModel):
    """Reply from the chat endpoint.

    Only ``message`` is required; Ollama's timing and token counters are
    kept when present and unknown fields are ignored.
    """

    model_config = ConfigDict(frozen=True)

    model: str = Field(default="", description="Model that generated the reply")
    created_at: str | None = Field(default=None, description="Server timestamp")
    message: ChatMessage = Field(description="Generated message")
    done: bool = Field(default=False, description="Whether generation finished")
    total_duration: int | None = Field(default=None, description="Nanoseconds spent on the call")
    prompt_eval_count: int | None = Field(default=None, description="Prompt tokens")
    eval_count: int | None = Field(default=None, description="Generated tokens")
