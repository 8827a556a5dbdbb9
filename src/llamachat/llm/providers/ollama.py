from typing import Any

import httpx
from pydantic import ValidationError

from ...config import DEFAULT_ENDPOINT, DEFAULT_MODEL
from ...errors import ChatConnectionError, ModelServerError, ReplyDecodeError
from ..base import ChatProvider
from ..models import ChatReply, ChatRequest

JSON_HEADERS = {"Content-Type": "application/json"}


class OllamaProvider(ChatProvider):
    """Ollama chat provider talking to the ``/api/chat`` endpoint.

    Hidden design decisions:
    - httpx client setup (no timeout unless one is given)
    - JSON encoding of the request body
    - Translation of httpx failures and bad bodies into ChatTransportError
    """

    def __init__(
        self,
        endpoint: str = DEFAULT_ENDPOINT,
        model: str = DEFAULT_MODEL,
        timeout: float | None = None,
        **client_kwargs: Any
    ):
        """Initialize Ollama provider.

        Args:
            endpoint: Full chat URL (default: http://localhost:11434/api/chat)
            model: Default model to use
            timeout: Seconds before giving up on a reply, None waits forever
            **client_kwargs: Additional kwargs for httpx.Client (e.g. transport)
        """
        self._endpoint = endpoint
        self._model = model
        self._client = httpx.Client(timeout=timeout, **client_kwargs)

    @property
    def model(self) -> str:
        """Get the default model name."""
        return self._model

    @property
    def endpoint(self) -> str:
        """Get the chat URL."""
        return self._endpoint

    def send(self, request: ChatRequest) -> ChatReply:
        """Post a chat request and decode the reply.

        Args:
            request: Transcript snapshot; ``stream`` is forced off

        Returns:
            ChatReply with the generated message
        """
        body = request.model_copy(update={"stream": False}).model_dump_json()

        try:
            response = self._client.post(self._endpoint, content=body, headers=JSON_HEADERS)
        except httpx.DecodingError as e:
            raise ReplyDecodeError(self._endpoint, request.model, str(e)) from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise ChatConnectionError(self._endpoint, request.model, str(e)) from e

        if response.is_error:
            raise ModelServerError(
                self._endpoint,
                request.model,
                response.status_code,
                _error_detail(response),
            )

        try:
            return ChatReply.model_validate_json(response.content)
        except ValidationError as e:
            reason = e.errors()[0]["msg"] if e.errors() else str(e)
            raise ReplyDecodeError(self._endpoint, request.model, reason) from e

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()


def _error_detail(response: httpx.Response) -> str:
    """Extract Ollama's ``{"error": ...}`` message, falling back to the raw body."""
    try:
        payload = response.json()
    except ValueError:
        return response.text.strip()[:200]
    if isinstance(payload, dict) and "error" in payload:
        return str(payload["error"])
    return response.text.strip()[:200]
