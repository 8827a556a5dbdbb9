"""Theme definitions for the TUI.

This module hides the design decisions about:
- The fixed RGB palette every color is derived from
- How RGB triples become markup tags for the conversation log
- Theme variables (borders, cursor, scrollbars)
"""

from textual.theme import Theme

RGB = tuple[int, int, int]

# Dracula palette
BACKGROUND: RGB = (40, 42, 54)
FOREGROUND: RGB = (248, 248, 242)
OUTPUT_BORDER: RGB = (189, 147, 249)  # Purple
INPUT_BORDER: RGB = (139, 233, 253)   # Cyan
HEADER_BORDER: RGB = (80, 250, 123)   # Green
INPUT_FIELD: RGB = (68, 71, 90)       # Current line
USER_ACCENT: RGB = (80, 250, 123)     # Green
MODEL_ACCENT: RGB = (255, 184, 108)   # Orange
ERROR_ACCENT: RGB = (255, 85, 85)     # Red
MUTED: RGB = (98, 114, 164)           # Comment


def rgb_to_hex(color: RGB) -> str:
    """Convert an RGB triple to a ``#rrggbb`` tag usable in Rich markup."""
    r, g, b = color
    for channel in (r, g, b):
        if not 0 <= channel <= 255:
            raise ValueError(f"RGB channel out of range: {color}")
    return f"#{r:02x}{g:02x}{b:02x}"


USER_COLOR = rgb_to_hex(USER_ACCENT)
MODEL_COLOR = rgb_to_hex(MODEL_ACCENT)
ERROR_COLOR = rgb_to_hex(ERROR_ACCENT)
MUTED_COLOR = rgb_to_hex(MUTED)

DRACULA_CHAT = Theme(
    name="dracula-chat",
    primary=rgb_to_hex(OUTPUT_BORDER),
    secondary=rgb_to_hex(INPUT_BORDER),
    accent=rgb_to_hex(HEADER_BORDER),
    foreground=rgb_to_hex(FOREGROUND),
    background=rgb_to_hex(BACKGROUND),
    success=USER_COLOR,
    warning=MODEL_COLOR,
    error=ERROR_COLOR,
    surface=rgb_to_hex(INPUT_FIELD),
    panel=rgb_to_hex(BACKGROUND),
    dark=True,
    variables={
        # Input styling
        "input-cursor-background": rgb_to_hex(FOREGROUND),
        "input-cursor-foreground": rgb_to_hex(BACKGROUND),
        "input-selection-background": f"{rgb_to_hex(INPUT_BORDER)} 30%",

        # Border colors
        "border": rgb_to_hex(INPUT_FIELD),
        "border-blurred": rgb_to_hex(INPUT_FIELD),

        # Scrollbar styling
        "scrollbar": rgb_to_hex(INPUT_FIELD),
        "scrollbar-hover": MUTED_COLOR,
        "scrollbar-active": rgb_to_hex(OUTPUT_BORDER),
        "scrollbar-background": rgb_to_hex(BACKGROUND),
        "scrollbar-corner-color": rgb_to_hex(BACKGROUND),

        # Text variants
        "text-muted": MUTED_COLOR,
    },
)
