"""Unit tests for the llm module."""
import json

import httpx
import pytest
from hypothesis import given
from hypothesis import strategies as st

from llamachat.errors import ChatConnectionError, ModelServerError, ReplyDecodeError
from llamachat.llm import (
    ChatMessage,
    ChatProvider,
    ChatReply,
    ChatRequest,
    OllamaProvider,
    Role,
    create_llm_provider,
)


def chat_request(messages, model: str = "llama3.1") -> ChatRequest:
    return ChatRequest(messages=messages, model=model)


class TestChatProvider:
    """Tests for ChatProvider interface."""

    def test_provider_is_abstract(self):
        """Test that ChatProvider cannot be instantiated directly."""
        with pytest.raises(TypeError):
            ChatProvider()  # type: ignore


class TestModels:
    """Tests for wire models."""

    def test_message_is_frozen(self):
        """Test that messages cannot be modified after creation."""
        message = ChatMessage(role=Role.USER, content="hello")
        with pytest.raises(ValueError):
            message.content = "changed"  # type: ignore

    def test_unknown_role_rejected(self):
        """Test that only user and assistant roles are accepted."""
        with pytest.raises(ValueError):
            ChatMessage(role="narrator", content="once upon a time")

    def test_request_serialization_shape(self):
        """Test the JSON body matches the chat API."""
        request = ChatRequest(
            messages=[ChatMessage(role=Role.USER, content="hello")],
            model="llama3.1",
        )

        assert json.loads(request.model_dump_json()) == {
            "messages": [{"role": "user", "content": "hello"}],
            "model": "llama3.1",
            "stream": False,
        }

    def test_reply_with_only_message(self):
        """Test that a reply carrying just a message is valid."""
        reply = ChatReply.model_validate_json(
            '{"message": {"role": "assistant", "content": "hi there"}}'
        )

        assert reply.message.content == "hi there"
        assert reply.model == ""
        assert reply.created_at is None
        assert reply.done is False

    def test_reply_keeps_ollama_counters(self):
        """Test that timing and token counters are parsed and extras ignored."""
        reply = ChatReply.model_validate({
            "model": "llama3.1",
            "created_at": "2024-07-25T12:00:00Z",
            "message": {"role": "assistant", "content": "ok"},
            "done": True,
            "done_reason": "stop",
            "total_duration": 1_500_000_000,
            "prompt_eval_count": 12,
            "eval_count": 3,
        })

        assert reply.done is True
        assert reply.total_duration == 1_500_000_000
        assert reply.prompt_eval_count == 12
        assert reply.eval_count == 3


class TestOllamaProvider:
    """Tests for the Ollama provider against a mock transport."""

    def test_send_posts_json_to_endpoint(self, make_provider):
        """Test the request line, header and body."""
        sent = []
        provider = make_provider(requests=sent)
        request = chat_request([ChatMessage(role=Role.USER, content="hello")])

        provider.send(request)

        assert len(sent) == 1
        http_request = sent[0]
        assert http_request.method == "POST"
        assert str(http_request.url) == "http://localhost:11434/api/chat"
        assert http_request.headers["Content-Type"] == "application/json"
        assert json.loads(http_request.content) == {
            "messages": [{"role": "user", "content": "hello"}],
            "model": "llama3.1",
            "stream": False,
        }

    def test_send_forces_stream_off(self, make_provider):
        """Test that a streaming request is still sent as non-streaming."""
        sent = []
        provider = make_provider(requests=sent)
        request = ChatRequest(messages=[], model="llama3.1", stream=True)

        provider.send(request)

        assert json.loads(sent[0].content)["stream"] is False

    def test_send_returns_reply(self, make_provider):
        """Test decoding a full reply."""
        provider = make_provider()
        reply = provider.send(chat_request([]))

        assert reply.model == "llama3.1"
        assert reply.message == ChatMessage(role=Role.ASSISTANT, content="hi there")
        assert reply.done is True

    def test_connection_refused(self, unreachable_provider):
        """Test that a refused connection becomes ChatConnectionError."""
        request = chat_request([])

        with pytest.raises(ChatConnectionError) as exc_info:
            unreachable_provider.send(request)

        assert exc_info.value.model == "llama3.1"
        assert exc_info.value.endpoint == "http://localhost:11434/api/chat"

    def test_non_json_body(self, make_provider):
        """Test that a non-JSON body becomes ReplyDecodeError."""
        provider = make_provider(body=b"<html>gateway</html>")

        with pytest.raises(ReplyDecodeError):
            provider.send(chat_request([]))

    def test_schema_mismatch(self, make_provider):
        """Test that JSON without a message becomes ReplyDecodeError."""
        provider = make_provider(body={"model": "llama3.1", "done": True})

        with pytest.raises(ReplyDecodeError):
            provider.send(chat_request([]))

    def test_undecompressable_body(self):
        """Test that a body with a broken content encoding becomes ReplyDecodeError."""
        def handler(request):
            return httpx.Response(
                200, headers={"Content-Encoding": "gzip"}, content=b"not gzip at all"
            )

        provider = OllamaProvider(transport=httpx.MockTransport(handler))

        with pytest.raises(ReplyDecodeError) as exc_info:
            provider.send(chat_request([]))

        assert isinstance(exc_info.value.__cause__, httpx.DecodingError)

    def test_invalid_url(self):
        """Test that an unparsable endpoint becomes ChatConnectionError."""
        provider = OllamaProvider(endpoint="http://localhost:notaport/api/chat")

        with pytest.raises(ChatConnectionError) as exc_info:
            provider.send(chat_request([]))

        assert exc_info.value.endpoint == "http://localhost:notaport/api/chat"
        provider.close()

    def test_http_error_carries_server_message(self, make_provider):
        """Test that an error status surfaces Ollama's error text."""
        provider = make_provider(body={"error": 'model "nope" not found'}, status_code=404)

        with pytest.raises(ModelServerError) as exc_info:
            provider.send(chat_request([]))

        assert exc_info.value.status_code == 404
        assert exc_info.value.detail == 'model "nope" not found'

    def test_http_error_with_plain_body(self, make_provider):
        """Test that a non-JSON error body is used as the detail."""
        provider = make_provider(body="upstream exploded", status_code=500)

        with pytest.raises(ModelServerError) as exc_info:
            provider.send(chat_request([]))

        assert exc_info.value.detail == "upstream exploded"

    def test_context_manager_closes_client(self, make_provider):
        """Test that leaving the with block closes the HTTP client."""
        with make_provider() as provider:
            pass

        assert provider._client.is_closed

    @given(st.text())
    def test_content_survives_the_wire(self, content: str):
        """Property test: any prompt text is sent unchanged."""
        sent = []

        def handler(request):
            sent.append(request)
            return httpx.Response(200, json={"message": {"role": "assistant", "content": content}})

        provider = OllamaProvider(transport=httpx.MockTransport(handler))
        reply = provider.send(chat_request([ChatMessage(role=Role.USER, content=content)]))

        assert json.loads(sent[0].content)["messages"][0]["content"] == content
        assert reply.message.content == content


class TestFactory:
    """Tests for create_llm_provider."""

    def test_create_ollama(self):
        """Test creating the Ollama provider."""
        provider = create_llm_provider("Ollama", endpoint="http://gpu-box:11434/api/chat")

        assert isinstance(provider, OllamaProvider)
        assert provider.endpoint == "http://gpu-box:11434/api/chat"
        assert provider.model == "llama3.1"
        provider.close()

    def test_unsupported_provider(self):
        """Test that unknown providers are rejected."""
        with pytest.raises(ValueError):
            create_llm_provider("openai")
