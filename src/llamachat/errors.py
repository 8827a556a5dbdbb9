"""Exception hierarchy for llamachat.

Every failure a chat session can hit is one of these, so the UI can
render it as an inline message instead of terminating the process.
"""

from pathlib import Path


class LlamaChatError(Exception):
    """Base class for llamachat errors."""


class HistoryError(LlamaChatError):
    """Base class for transcript persistence errors."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


class HistoryReadError(HistoryError):
    """Transcript file could not be read or is not a JSON array of messages."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Could not read chat history from {path}: {reason}", path)
        self.reason = reason


class HistoryNotFoundError(HistoryReadError):
    """Transcript file does not exist."""

    def __init__(self, path: Path):
        super().__init__(path, "file does not exist")


class HistoryWriteError(HistoryError):
    """Transcript file could not be written."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Could not write chat history to {path}: {reason}", path)
        self.reason = reason


class ChatTransportError(LlamaChatError):
    """Base class for errors talking to the model server."""

    def __init__(self, message: str, endpoint: str, model: str):
        super().__init__(message)
        self.endpoint = endpoint
        self.model = model


class ChatConnectionError(ChatTransportError):
    """Model server is unreachable."""

    def __init__(self, endpoint: str, model: str, reason: str = ""):
        message = f"Could not connect to {model} at {endpoint}"
        if reason:
            message += f": {reason}"
        super().__init__(message, endpoint, model)
        self.reason = reason


class ReplyDecodeError(ChatTransportError):
    """Reply body is not JSON or does not match the chat reply schema."""

    def __init__(self, endpoint: str, model: str, reason: str):
        super().__init__(f"Malformed reply from {model}: {reason}", endpoint, model)
        self.reason = reason


class ModelServerError(ChatTransportError):
    """Model server answered with an HTTP error status."""

    def __init__(self, endpoint: str, model: str, status_code: int, detail: str = ""):
        message = f"{model} returned HTTP {status_code}"
        if detail:
            message += f": {detail}"
        super().__init__(message, endpoint, model)
        self.status_code = status_code
        self.detail = detail


class RequestInFlightError(LlamaChatError):
    """A prompt was submitted while the previous one is still awaiting a reply."""

    def __init__(self, model: str):
        super().__init__(f"Still waiting for {model} to reply")
        self.model = model
