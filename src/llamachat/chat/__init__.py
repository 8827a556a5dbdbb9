"""Conversation state for llamachat."""

from .controller import ChatController, ChatState

__all__ = ["ChatController", "ChatState"]
