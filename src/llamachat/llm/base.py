from abc import ABC, abstractmethod
from typing import Any

from .models import ChatReply, ChatRequest


class ChatProvider(ABC):
    """Abstract base class for chat model providers.

    This module hides the design decision of how a reply is obtained.
    Implementations must handle provider-specific details like:
    - HTTP client setup
    - Request/response format conversion
    - Mapping transport failures onto ChatTransportError subclasses

    Calls are synchronous; the TUI runs them in a worker thread.
    Supports the context manager protocol for resource cleanup:
        with provider:
            reply = provider.send(request)
    """

    @property
    @abstractmethod
    def model(self) -> str:
        """Get the default model name."""

    @property
    @abstractmethod
    def endpoint(self) -> str:
        """Get the URL requests are sent to."""

    @abstractmethod
    def send(self, request: ChatRequest) -> ChatReply:
        """Send a chat request and wait for the complete reply.

        Args:
            request: Transcript snapshot and model to use

        Returns:
            ChatReply holding the generated message

        Raises:
            ChatConnectionError: Server unreachable
            ModelServerError: Server answered with an error status
            ReplyDecodeError: Reply body is malformed
        """

    @abstractmethod
    def close(self) -> None:
        """Close any open connections or resources."""

    def __enter__(self) -> "ChatProvider":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
