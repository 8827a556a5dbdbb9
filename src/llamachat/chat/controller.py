"""Conversation controller.

Owns the in-memory transcript and decides how submissions, replies and
errors change it. Knows nothing about Textual: the app feeds it events on
the UI thread and renders whatever it returns.
"""

from collections.abc import Callable, Sequence
from enum import Enum

from ..errors import ChatTransportError, RequestInFlightError
from ..history.base import TranscriptStore
from ..llm.models import ChatMessage, ChatReply, ChatRequest, Role

DebugCallback = Callable[[str, str, str], None]


class ChatState(str, Enum):
    """Where the conversation is in the request/reply cycle."""

    IDLE = "idle"
    AWAITING_REPLY = "awaiting_reply"


class ChatController:
    """Drives one conversation.

    The transcript only grows, except on clear(). Every accepted reply is
    written through to the store before control returns to the caller.

    Completions carry the epoch that was current when their request was
    dispatched; clear() bumps the epoch so a reply to a prompt that no
    longer exists is dropped instead of landing in a fresh transcript.
    """

    def __init__(
        self,
        store: TranscriptStore,
        model: str,
        transcript: Sequence[ChatMessage] | None = None,
        debug_callback: DebugCallback | None = None,
    ) -> None:
        self._store = store
        self._model = model
        self._transcript: list[ChatMessage] = list(transcript or [])
        self._state = ChatState.IDLE
        self._epoch = 0
        self._debug_callback = debug_callback

    @property
    def model(self) -> str:
        return self._model

    @property
    def state(self) -> ChatState:
        return self._state

    @property
    def epoch(self) -> int:
        return self._epoch

    @property
    def transcript(self) -> tuple[ChatMessage, ...]:
        """Read-only view of the conversation so far."""
        return tuple(self._transcript)

    def set_debug_callback(self, callback: DebugCallback | None) -> None:
        """Set the debug callback for execution logging.

        Args:
            callback: Called as callback(level, component, message)
        """
        self._debug_callback = callback

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback is not None:
            self._debug_callback(level, "Chat", message)

    def submit(self, text: str) -> ChatRequest | None:
        """Append a user prompt and build the request carrying it.

        Args:
            text: Prompt as typed

        Returns:
            ChatRequest with the full transcript, or None for empty input

        Raises:
            RequestInFlightError: The previous prompt has not been answered
        """
        if not text:
            return None
        if self._state is ChatState.AWAITING_REPLY:
            raise RequestInFlightError(self._model)

        self._transcript.append(ChatMessage(role=Role.USER, content=text))
        self._state = ChatState.AWAITING_REPLY
        self._debug("debug", f"Prompt #{len(self._transcript)} queued ({len(text)} chars)")
        return ChatRequest(messages=list(self._transcript), model=self._model, stream=False)

    def _is_stale(self, epoch: int | None) -> bool:
        return epoch is not None and epoch != self._epoch

    def on_reply(self, reply: ChatReply, epoch: int | None = None) -> ChatMessage | None:
        """Fold a model reply into the transcript and persist it.

        Args:
            reply: Decoded reply
            epoch: Epoch the request was dispatched in, None skips the check

        Returns:
            The appended assistant message, or None if the reply was stale

        Raises:
            HistoryWriteError: Transcript was updated in memory but not on disk
        """
        if self._is_stale(epoch):
            self._debug("warning", "Discarding reply to a cleared conversation")
            return None

        message = ChatMessage(role=Role.ASSISTANT, content=reply.message.content)
        self._transcript.append(message)
        self._state = ChatState.IDLE
        self._store.save(self._transcript)
        self._debug("info", f"Transcript saved ({len(self._transcript)} messages)")
        return message

    def on_error(self, error: ChatTransportError, epoch: int | None = None) -> bool:
        """Record a failed call. The transcript and the store are left untouched.

        Returns:
            False if the error belongs to a cleared conversation
        """
        if self._is_stale(epoch):
            self._debug("warning", f"Discarding error from a cleared conversation: {error}")
            return False

        self._state = ChatState.IDLE
        self._debug("error", str(error))
        return True

    def clear(self) -> None:
        """Erase the conversation on disk and in memory.

        Valid in any state; an in-flight reply becomes stale.

        Raises:
            HistoryWriteError: Stored transcript could not be reset; memory is kept
        """
        self._store.clear()
        self._transcript.clear()
        self._state = ChatState.IDLE
        self._epoch += 1
        self._debug("info", "Conversation cleared")
