"""TopBar widget with the application title and the clear-completed action."""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Button, Static

from tasklist.ui.base_styles import BUTTON_BASE_CSS
from tasklist.ui.constants import APP_TITLE, CLEAR_COMPLETED_LABEL
from tasklist.ui.theme import ACCENT_COLOR, BORDER, SELECTION


class TopBar(Widget):
    """Title bar with a button that removes every completed task.

    Messages:
        ClearCompletedRequested: Emitted when the clear button is pressed
    """

    DEFAULT_CSS = BUTTON_BASE_CSS + f"""
    TopBar {{
        width: 100%;
        height: 3;
        background: {SELECTION};
        border-bottom: solid {BORDER};
    }}

    TopBar > Horizontal {{
        height: 3;
    }}

    TopBar #top-bar-title {{
        width: 1fr;
        height: 3;
        padding: 0 2;
        content-align: left middle;
        color: {ACCENT_COLOR};
        text-style: bold;
    }}
    """

    def __init__(self, title: str = APP_TITLE, **kwargs) -> None:
        """Initialize the top bar.

        Args:
            title: Text shown on the left of the bar
            **kwargs: Additional keyword arguments for Widget
        """
        super().__init__(**kwargs)
        self.title_text = title

    def compose(self) -> ComposeResult:
        with Horizontal():
            yield Static(self.title_text, id="top-bar-title")
            yield Button(CLEAR_COMPLETED_LABEL, id="clear-completed-button", classes="error")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "clear-completed-button":
            event.stop()
            self.post_message(self.ClearCompletedRequested())

    class ClearCompletedRequested(Message):
        """Message emitted when the user asks to clear completed tasks."""
        pass
