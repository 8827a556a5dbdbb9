"""Terminal UI module for llamachat.

Provides a Textual-based TUI for chatting with a local model.

Module structure (Parnas principle - each module hides a design decision):
- widgets.py: Custom widgets (header, conversation log, prompt, log panel)
- styles.py: CSS styling (layout decisions)
- themes.py: Color palette and theme configuration
- formatting.py: Markup for conversation turns and errors
- messages.py: Worker-to-app completion messages
- app.py: Application orchestration (user interaction flow)
"""

from .app import ChatApp, run_tui
from .config import LogLevel
from .messages import ReplyFailed, ReplyReceived
from .widgets import ConversationLog, DebugPanel, ModelHeader, PromptInput

__all__ = [
    "ChatApp",
    "ConversationLog",
    "DebugPanel",
    "LogLevel",
    "ModelHeader",
    "PromptInput",
    "ReplyFailed",
    "ReplyReceived",
    "run_tui",
]
