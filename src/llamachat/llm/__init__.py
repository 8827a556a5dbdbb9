from .base import ChatProvider
from .factory import create_llm_provider
from .models import ChatMessage, ChatReply, ChatRequest, Role
from .providers import OllamaProvider

__all__ = [
    "ChatProvider",
    "create_llm_provider",
    "ChatMessage",
    "ChatReply",
    "ChatRequest",
    "Role",
    "OllamaProvider",
]
