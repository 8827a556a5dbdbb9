"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Header content (model name, endpoint)
- Conversation rendering and scrolling
- Prompt history management
- Log rendering and level filtering
"""

from collections.abc import Iterable
from datetime import datetime

from rich.markup import escape as escape_markup
from textual.binding import Binding
from textual.widgets import Input, RichLog, Static

from ..errors import LlamaChatError
from ..llm.models import ChatMessage, Role
from .config import (
    INPUT_HISTORY_MAX_SIZE,
    LOG_MAX_MESSAGE_LENGTH,
    LOG_TIMESTAMP_FORMAT,
    PROMPT_HINT,
    LogLevel,
)
from .formatting import format_error, format_model_turn, format_user_turn


class ModelHeader(Static):
    """Fixed-height header naming the active model."""

    def __init__(self, model: str, endpoint: str, **kwargs) -> None:
        super().__init__(f"Model: {model}", markup=False, **kwargs)
        self.model = model
        self.border_subtitle = endpoint


class ConversationLog(RichLog):
    """Scrollable conversation output.

    Always scrolls to the newest line after a write.
    """

    BORDER_TITLE = "Conversation"
    BORDER_SUBTITLE = "0 messages"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=True,
            **kwargs
        )
        self._message_count = 0

    def _append(self, markup: str) -> None:
        self.write(markup, scroll_end=True)

    def write_user(self, text: str) -> None:
        """Render a user prompt."""
        self._append(format_user_turn(text))
        self._message_count += 1

    def write_model(self, text: str) -> None:
        """Render a model reply."""
        self._append(format_model_turn(text))
        self._message_count += 1

    def write_error(self, error: LlamaChatError) -> None:
        """Render an inline error line."""
        self._append(format_error(error))

    def replay(self, transcript: Iterable[ChatMessage]) -> None:
        """Render a previously saved transcript."""
        for message in transcript:
            if message.role is Role.USER:
                self.write_user(message.content)
            else:
                self.write_model(message.content)
        self.border_subtitle = f"{self._message_count} messages"

    def start_waiting(self, model: str) -> None:
        """Mark a request as in flight."""
        self.border_subtitle = f"Waiting for {model}..."
        self.add_class("-waiting")

    def end_waiting(self) -> None:
        """Mark the in-flight request as settled."""
        self.border_subtitle = f"{self._message_count} messages"
        self.remove_class("-waiting")

    def clear_conversation(self) -> None:
        """Clear the log and reset the message count."""
        self.clear()
        self._message_count = 0
        self.end_waiting()

    def get_plain_text(self) -> str:
        """Get plain text content of the log."""
        return "\n".join(line.text for line in self.lines)


class PromptInput(Input):
    """Single-line prompt with history support.

    Use Up/Down arrow keys to navigate through previously sent prompts.
    """

    BORDER_TITLE = "Prompt"
    BORDER_SUBTITLE = PROMPT_HINT

    BINDINGS = [
        Binding("up", "history_previous", "Previous prompt", show=False),
        Binding("down", "history_next", "Next prompt", show=False),
    ]

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._history: list[str] = []
        self._history_index: int = -1
        self._current_input: str = ""

    def add_to_history(self, prompt: str) -> None:
        """Add a prompt to history."""
        if prompt and (not self._history or self._history[-1] != prompt):
            self._history.append(prompt)
            del self._history[:-INPUT_HISTORY_MAX_SIZE]
        self._history_index = -1
        self._current_input = ""

    def action_history_previous(self) -> None:
        if not self._history:
            return
        if self._history_index == -1:
            self._current_input = self.value
            self._history_index = len(self._history) - 1
        elif self._history_index > 0:
            self._history_index -= 1
        self.value = self._history[self._history_index]
        self.cursor_position = len(self.value)

    def action_history_next(self) -> None:
        if self._history_index == -1:
            return
        if self._history_index < len(self._history) - 1:
            self._history_index += 1
            self.value = self._history[self._history_index]
        else:
            self._history_index = -1
            self.value = self._current_input
        self.cursor_position = len(self.value)


class DebugPanel(RichLog):
    """Log panel for real-time tracing with level filtering.

    Shows timestamped log messages from all components.
    Supports standard log levels: DEBUG < INFO < WARNING < ERROR.
    Hidden by default, shown with --log-level flag or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Hidden"

    LEVEL_COLORS = {
        LogLevel.DEBUG: "dim white",
        LogLevel.INFO: "cyan",
        LogLevel.WARNING: "yellow",
        LogLevel.ERROR: "red",
    }

    COMPONENT_COLORS = {
        "TUI": "cyan",
        "HTTP": "magenta",
        "History": "green",
        "Chat": "bright_yellow",
    }

    def __init__(self, *args, log_level: int = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=False,
            **kwargs
        )
        self._log_level = log_level

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
        else:
            self.border_subtitle = "Hidden"

    def entry(
        self,
        component: str,
        message: str,
        level: int = LogLevel.DEBUG
    ) -> None:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Component name (TUI, HTTP, History, Chat)
            message: Log message
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)
        """
        if level < self._log_level:
            return

        if len(message) > LOG_MAX_MESSAGE_LENGTH:
            message = message[:LOG_MAX_MESSAGE_LENGTH] + "..."

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
        level_color = self.LEVEL_COLORS.get(level, "white")
        comp_color = self.COMPONENT_COLORS.get(component, "white")

        self.write(
            f"[dim]{timestamp}[/] "
            f"[{level_color}]{LogLevel.name(level):<7}[/] "
            f"[{comp_color}]\\[{component}][/] {escape_markup(message)}"
        )

    def debug(self, component: str, message: str) -> None:
        self.entry(component, message, LogLevel.DEBUG)

    def info(self, component: str, message: str) -> None:
        self.entry(component, message, LogLevel.INFO)

    def warning(self, component: str, message: str) -> None:
        self.entry(component, message, LogLevel.WARNING)

    def error(self, component: str, message: str) -> None:
        self.entry(component, message, LogLevel.ERROR)

    def show(self) -> None:
        """Show the log panel."""
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        """Hide the log panel."""
        self.display = False
        self._update_subtitle()

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True
