"""
Llamachat: a terminal chat client for a locally running language model.

This package follows Parnas's information hiding principles,
where each module hides a specific design decision.
"""

__version__ = "0.1.0"

from .config import ChatConfig
from .errors import (
    ChatConnectionError,
    ChatTransportError,
    HistoryError,
    HistoryNotFoundError,
    HistoryReadError,
    HistoryWriteError,
    LlamaChatError,
    ModelServerError,
    ReplyDecodeError,
    RequestInFlightError,
)

__all__ = [
    "ChatConfig",
    "ChatConnectionError",
    "ChatTransportError",
    "HistoryError",
    "HistoryNotFoundError",
    "HistoryReadError",
    "HistoryWriteError",
    "LlamaChatError",
    "ModelServerError",
    "ReplyDecodeError",
    "RequestInFlightError",
]
