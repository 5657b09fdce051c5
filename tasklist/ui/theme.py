"""One Monokai color theme for the Task List application.

All UI components reference these constants via f-string interpolation in
their CSS definitions, so this module is the single source of truth for the
application's colors.

Color Categories
----------------
- **Base colors**: Background, foreground, selection, borders
- **Accent colors**: Focus, success and cancel accents for modals and buttons
- **Priority colors**: Row background per task priority

Usage in Components
-------------------
    from tasklist.ui.theme import BACKGROUND, ACCENT_COLOR, get_priority_color

    class MyWidget(Widget):
        DEFAULT_CSS = f'''
        MyWidget {{
            background: {BACKGROUND};
            border: thick {ACCENT_COLOR};
        }}
        '''

        def on_mount(self) -> None:
            self.styles.background = get_priority_color(Priority.HIGH)
"""

from tasklist.models import Priority


# ============================================================================
# BASE COLORS
# ============================================================================

BACKGROUND = "#272822"  # Main application background (dark charcoal)
FOREGROUND = "#F8F8F2"  # Primary text color (off-white)
SELECTION = "#49483E"   # Selected item background (medium gray)
COMMENT = "#75715E"     # Secondary/dimmed text (muted brown-gray)
BORDER = "#3E3D32"      # Borders and dividers (dark gray-green)


# ============================================================================
# ACCENT COLORS
# ============================================================================

ACCENT_COLOR = "#66D9EF"   # Focus and headers (cyan)
SUCCESS_COLOR = "#A6E22E"  # Save/confirm actions (green)
CANCEL_COLOR = "#F92672"   # Cancel/destructive actions (pink)


# ============================================================================
# INTERACTION STATES
# ============================================================================

MODAL_OVERLAY_BG = "#27282280"  # Semi-transparent dark overlay (50% opacity)


# ============================================================================
# PRIORITY COLORS
# ============================================================================
# Row background for each task priority. Every Priority member must have an
# entry; get_priority_color() refuses to guess for a missing one.

PRIORITY_COLORS = {
    Priority.LOW: "green",
    Priority.MEDIUM: "blue",
    Priority.HIGH: "yellow",
    Priority.URGENT: "red",
}

# Text drawn on top of a priority background
PRIORITY_TEXT_COLOR = "black"


class PriorityStyleError(LookupError):
    """Raised when a priority has no color mapping."""
    pass


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def get_priority_color(priority: Priority) -> str:
    """Get the background color for a task priority.

    Args:
        priority: The task priority

    Returns:
        Color name understood by Textual CSS and Rich

    Raises:
        PriorityStyleError: If the priority has no entry in PRIORITY_COLORS

    Examples:
        >>> get_priority_color(Priority.LOW)
        'green'
        >>> get_priority_color(Priority.URGENT)
        'red'
    """
    try:
        return PRIORITY_COLORS[priority]
    except KeyError:
        raise PriorityStyleError(f"No color mapped for priority {priority!r}") from None
