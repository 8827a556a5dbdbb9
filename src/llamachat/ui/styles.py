"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Colors are theme variables; the theme maps them onto the palette.

Layout: one column, three rows.
- header: fixed height, model name
- conversation: takes the remaining space
- prompt: fixed height, single line
The log panel, when shown, sits between conversation and prompt.
"""

APP_CSS = """
Screen {
    layout: vertical;
    background: $background;
}

/* ============================================
   Header - Active Model
   ============================================ */
#header {
    height: 3;
    width: 100%;
    background: $background;
    border: round $accent;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    color: $foreground;
    text-style: bold;
    text-align: center;
    content-align: center middle;
}

/* ============================================
   Conversation - Scrollable Output
   ============================================ */
#conversation {
    height: 1fr;
    background: $background;
    border: round $primary;
    border-title-color: $primary;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;

    /* Request in flight */
    &.-waiting {
        border: round $warning;
        border-subtitle-color: $warning;
    }
}

/* ============================================
   Log Panel
   ============================================ */
#debug-panel {
    height: 10;
    display: none;
    background: $background;
    border: round $warning 60%;
    border-title-color: $warning;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    overflow-x: auto;
}

/* ============================================
   Prompt - Single Line Input
   ============================================ */
#prompt {
    height: 3;
    background: $surface;
    color: $foreground;
    border: round $secondary 60%;
    border-title-color: $secondary;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;

    &:focus {
        border: round $secondary;
    }
}

/* ============================================
   Notification Toasts
   ============================================ */
Toast {
    background: $surface;
    padding: 0 1;
}
"""
