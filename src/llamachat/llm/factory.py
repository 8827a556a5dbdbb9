from typing import Any

from .base import ChatProvider
from .providers import OllamaProvider


def create_llm_provider(provider: str, **config: Any) -> ChatProvider:
    """Create a chat provider instance.

    This factory function hides the instantiation logic for providers.

    Args:
        provider: Provider type (currently only 'ollama')
        **config: Provider-specific configuration
            For Ollama:
                - endpoint: str (default: 'http://localhost:11434/api/chat')
                - model: str (default: 'llama3.1')
                - timeout: float | None (default: None)

    Returns:
        Initialized chat provider instance

    Raises:
        ValueError: If provider type is not supported

    Examples:
        >>> provider = create_llm_provider(
        ...     "ollama",
        ...     endpoint="http://localhost:11434/api/chat",
        ...     model="llama3.1"
        ... )
    """
    provider_lower = provider.lower()

    if provider_lower == "ollama":
        return OllamaProvider(**config)

    raise ValueError(
        f"Unsupported provider: {provider}. "
        f"Supported providers: 'ollama'"
    )
