"""Main Textual TUI application.

Orchestrates the UI components and wires user input to the chat
controller and the model provider.
"""

import time
from collections.abc import Sequence

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Input

from ..chat import ChatController
from ..config import ChatConfig
from ..errors import ChatTransportError, HistoryWriteError, LlamaChatError, RequestInFlightError
from ..history.base import TranscriptStore
from ..llm.base import ChatProvider
from ..llm.models import ChatMessage, ChatRequest
from .config import LogLevel
from .formatting import describe_error
from .messages import ReplyFailed, ReplyReceived
from .styles import APP_CSS
from .themes import DRACULA_CHAT
from .widgets import ConversationLog, DebugPanel, ModelHeader, PromptInput


class ChatApp(App):
    """Textual TUI for chatting with a local model."""

    CSS = APP_CSS
    TITLE = "Llamachat"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", priority=True),
        Binding("f12", "clear_history", "Clear History", priority=True),
        Binding("ctrl+d", "toggle_debug", "Log", priority=True),
    ]

    def __init__(
        self,
        config: ChatConfig,
        provider: ChatProvider,
        store: TranscriptStore,
        transcript: Sequence[ChatMessage] | None = None,
        log_level: str | None = None,
    ) -> None:
        super().__init__()
        self._config = config
        self._provider = provider
        self._store = store
        self._log_level = log_level
        self.controller = ChatController(store, model=config.model, transcript=transcript)

    def compose(self) -> ComposeResult:
        yield ModelHeader(self._config.model, self._config.endpoint, id="header")
        yield ConversationLog(id="conversation")
        yield DebugPanel(id="debug-panel")
        yield PromptInput(placeholder="Ask something and press Enter", id="prompt")

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.register_theme(DRACULA_CHAT)
        self.theme = "dracula-chat"

        log_panel = self.query_one("#debug-panel", DebugPanel)
        if self._log_level is not None:
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()
            log_panel.info("TUI", f"Log panel enabled with level: {self._log_level.upper()}")

        self.controller.set_debug_callback(self._route_debug)

        conversation = self.query_one("#conversation", ConversationLog)
        conversation.replay(self.controller.transcript)
        self._log_info(
            "History",
            f"Loaded {len(self.controller.transcript)} messages ({self._store.backend_type})",
        )
        self.query_one("#prompt", PromptInput).focus()

    def on_unmount(self) -> None:
        """Release the HTTP client when the app exits."""
        self._provider.close()

    def _route_debug(self, level: str, component: str, message: str) -> None:
        """Route controller debug messages to the log panel."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        log_panel.entry(component, message, LogLevel.from_string(level))

    def _log_info(self, component: str, message: str) -> None:
        self.query_one("#debug-panel", DebugPanel).info(component, message)

    def _show_error(self, error: LlamaChatError) -> None:
        """Render an error inline and as a toast; the session continues."""
        self.query_one("#conversation", ConversationLog).write_error(error)
        self.query_one("#debug-panel", DebugPanel).error("TUI", str(error))
        self.notify(describe_error(error), severity="error", timeout=5)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle prompt submission."""
        text = event.value
        try:
            request = self.controller.submit(text)
        except RequestInFlightError as e:
            self.notify(str(e), severity="warning", timeout=2)
            return
        if request is None:
            return

        prompt = self.query_one("#prompt", PromptInput)
        prompt.add_to_history(text)
        prompt.value = ""

        conversation = self.query_one("#conversation", ConversationLog)
        conversation.write_user(text)
        conversation.start_waiting(self._config.model)

        self._request_reply(request, self.controller.epoch)

    @work(thread=True, group="chat")
    def _request_reply(self, request: ChatRequest, epoch: int) -> None:
        """Run the blocking chat call off the UI thread.

        Only posts a message back; all state changes happen in the handlers.
        """
        started = time.monotonic()
        try:
            reply = self._provider.send(request)
        except ChatTransportError as e:
            self.post_message(ReplyFailed(e, epoch))
            return
        self.post_message(ReplyReceived(reply, epoch, time.monotonic() - started))

    def on_reply_received(self, event: ReplyReceived) -> None:
        """Fold a reply into the conversation."""
        save_error: HistoryWriteError | None = None
        try:
            message = self.controller.on_reply(event.reply, event.epoch)
        except HistoryWriteError as e:
            message = self.controller.transcript[-1]
            save_error = e

        if message is None:
            return

        conversation = self.query_one("#conversation", ConversationLog)
        conversation.write_model(message.content)
        conversation.end_waiting()
        self._log_info("HTTP", f"Reply from {self._config.model} in {event.elapsed:.2f}s")

        if save_error is not None:
            self._show_error(save_error)

    def on_reply_failed(self, event: ReplyFailed) -> None:
        """Report a failed call; the prompt stays in the transcript."""
        if not self.controller.on_error(event.error, event.epoch):
            return
        self.query_one("#conversation", ConversationLog).end_waiting()
        self._show_error(event.error)

    def action_clear_history(self) -> None:
        """Clear the transcript in memory and on disk."""
        try:
            self.controller.clear()
        except HistoryWriteError as e:
            self._show_error(e)
            return
        self.query_one("#conversation", ConversationLog).clear_conversation()
        self.notify("Chat history cleared", timeout=2)

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)


def run_tui(
    config: ChatConfig,
    provider: ChatProvider,
    store: TranscriptStore,
    transcript: Sequence[ChatMessage] | None = None,
    log_level: str | None = None,
) -> None:
    """Run the Textual TUI until the user quits.

    Args:
        config: Session configuration (model, endpoint, mouse)
        provider: Chat provider used for every prompt
        store: Transcript store replies are written through to
        transcript: Conversation loaded at startup
        log_level: Log level for panel (debug/info/warning/error), None to hide
    """
    app = ChatApp(
        config=config,
        provider=provider,
        store=store,
        transcript=transcript,
        log_level=log_level,
    )
    app.run(mouse=config.mouse)
