"""TaskItem widget for displaying and editing a single task.

This module provides the TaskItem widget which renders one task with:
- A checkbox bound to the completion flag
- A three-line label (name, priority, estimated hours)
- A background color taken from the task priority
- Inline rename: click the label (or press E), type, press Enter
- A button (or P) that opens the priority selection dialog

The widget never changes the store directly. Every change is posted as a
TaskItem.TaskUpdated message carrying an updated copy of the task, which
bubbles up to the application.
"""

from typing import Optional

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import Button, Checkbox, Input, Static

from tasklist.logging_config import get_logger
from tasklist.models import Task, is_blank_name
from tasklist.ui.components.priority_modal import PriorityModal
from tasklist.ui.constants import (
    PRIORITY_BUTTON_LABEL,
    PRIORITY_LINE_PREFIX,
    ESTIMATED_HOURS_LINE_PREFIX,
)
from tasklist.ui.keybindings import TASK_ITEM_BINDINGS
from tasklist.ui.theme import PRIORITY_TEXT_COLOR, get_priority_color

# Initialize logger for this module
logger = get_logger(__name__)


def format_task_label(task: Task) -> str:
    """Build the display text for a task.

    Args:
        task: Task to describe

    Returns:
        Name, priority and estimated hours, each on its own line
    """
    return (
        f"{task.name}\n"
        f"{PRIORITY_LINE_PREFIX}{task.priority.value}\n"
        f"{ESTIMATED_HOURS_LINE_PREFIX}{task.estimated_hours}\n"
    )


class TaskLabel(Static):
    """Clickable label showing a task's display text."""

    def on_click(self) -> None:
        """Ask the owning row to enter rename mode."""
        self.post_message(self.Pressed())

    class Pressed(Message):
        """Message emitted when the label is clicked."""
        pass


class TaskItem(Widget):
    """A widget representing a single task in the task list.

    Holds a transient draft name while renaming; the task itself is only
    replaced once the rename is committed.
    """

    DEFAULT_CSS = f"""
    TaskItem {{
        height: auto;
        width: 100%;
        margin: 0 0 1 0;
        padding: 0 1;
        color: {PRIORITY_TEXT_COLOR};
    }}

    TaskItem > Horizontal {{
        height: auto;
        width: 100%;
    }}

    TaskItem Checkbox {{
        width: auto;
        background: transparent;
        border: none;
    }}

    TaskItem #task-label {{
        width: 1fr;
        height: auto;
        padding: 0 1;
    }}

    TaskItem #name-input {{
        width: 1fr;
        display: none;
    }}

    TaskItem.editing #task-label {{
        display: none;
    }}

    TaskItem.editing #name-input {{
        display: block;
    }}

    TaskItem #priority-button {{
        width: 5;
        min-width: 5;
    }}
    """

    BINDINGS = TASK_ITEM_BINDINGS

    # Reactive properties
    editing: reactive[bool] = reactive(False)

    def __init__(self, task: Task, **kwargs) -> None:
        """Initialize a TaskItem widget.

        Args:
            task: The Task model to display
            **kwargs: Additional keyword arguments for Widget
        """
        super().__init__(**kwargs)
        self._task_model = task
        self.edited_name: str = task.name
        self._apply_priority_style()

    @property
    def task(self) -> Task:
        """Get the task associated with this item."""
        return self._task_model

    def compose(self) -> ComposeResult:
        """Compose the row layout.

        Yields:
            Widgets that make up the task row
        """
        with Horizontal():
            yield Checkbox("", self._task_model.is_completed, id="completed-toggle")
            yield TaskLabel(Text(format_task_label(self._task_model)), id="task-label")
            yield Input(value=self._task_model.name, id="name-input")
            yield Button(PRIORITY_BUTTON_LABEL, id="priority-button")

    def update_task(self, task: Task) -> None:
        """Update the task data and refresh the display.

        Args:
            task: Updated Task object
        """
        self._task_model = task
        self._apply_priority_style()

        if not self.is_mounted:
            return

        self.query_one("#task-label", TaskLabel).update(Text(format_task_label(task)))
        checkbox = self.query_one("#completed-toggle", Checkbox)
        if checkbox.value != task.is_completed:
            with checkbox.prevent(Checkbox.Changed):
                checkbox.value = task.is_completed

    def _apply_priority_style(self) -> None:
        self.styles.background = get_priority_color(self._task_model.priority)

    def watch_editing(self, editing: bool) -> None:
        """React to edit mode changes.

        Args:
            editing: New edit mode state
        """
        self.set_class(editing, "editing")

    # ==========================================================================
    # COMPLETION
    # ==========================================================================

    def on_checkbox_changed(self, event: Checkbox.Changed) -> None:
        """Emit an updated task when the completion checkbox changes.

        Args:
            event: The checkbox changed event
        """
        event.stop()
        logger.debug(f"TaskItem: completion toggled for task id={self._task_model.id} -> {event.value}")
        self.post_message(self.TaskUpdated(self._task_model.with_completion(event.value)))

    # ==========================================================================
    # RENAME
    # ==========================================================================

    def on_task_label_pressed(self, message: TaskLabel.Pressed) -> None:
        """Enter rename mode when the label is clicked."""
        message.stop()
        self.start_editing()

    def start_editing(self) -> None:
        """Switch to rename mode, seeding the draft with the current name.

        Does nothing if the row is already in rename mode.
        """
        if self.editing:
            return

        self.edited_name = self._task_model.name
        self.editing = True

        name_input = self.query_one("#name-input", Input)
        name_input.value = self.edited_name
        name_input.focus()
        logger.debug(f"TaskItem: rename started for task id={self._task_model.id}")

    def on_input_changed(self, event: Input.Changed) -> None:
        """Track the draft name as the user types."""
        event.stop()
        if event.input.id == "name-input":
            self.edited_name = event.value

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Commit the rename when Enter is pressed."""
        event.stop()
        if event.input.id == "name-input":
            self.edited_name = event.value
            self.commit_edit()

    def commit_edit(self) -> None:
        """Leave rename mode and emit the renamed task.

        A blank draft is discarded without emitting anything.
        """
        if not self.editing:
            return

        self._leave_edit_mode()

        if is_blank_name(self.edited_name):
            logger.debug(f"TaskItem: blank rename discarded for task id={self._task_model.id}")
            return

        logger.info(f"TaskItem: renamed task id={self._task_model.id} to '{self.edited_name[:50]}'")
        self.post_message(self.TaskUpdated(self._task_model.renamed(self.edited_name)))

    def cancel_edit(self) -> None:
        """Leave rename mode and drop the draft."""
        if not self.editing:
            return

        self._leave_edit_mode()
        self.edited_name = self._task_model.name
        logger.debug(f"TaskItem: rename cancelled for task id={self._task_model.id}")

    def _leave_edit_mode(self) -> None:
        self.editing = False
        if self.is_mounted:
            self.query_one("#completed-toggle", Checkbox).focus()

    # ==========================================================================
    # PRIORITY
    # ==========================================================================

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Open the priority dialog from the row's button."""
        if event.button.id == "priority-button":
            event.stop()
            self.open_priority_dialog()

    def open_priority_dialog(self) -> None:
        """Show the priority selection dialog for this task."""
        logger.debug(f"TaskItem: opening priority dialog for task id={self._task_model.id}")
        self.app.push_screen(
            PriorityModal(task=self._task_model),
            callback=self._on_priority_dialog_closed,
        )

    def _on_priority_dialog_closed(self, result: Optional[Task]) -> None:
        if result is None:
            return
        self.post_message(self.TaskUpdated(result))

    # ==========================================================================
    # ACTIONS
    # ==========================================================================

    def action_edit_name(self) -> None:
        """Start renaming this task (E key)."""
        self.start_editing()

    def action_change_priority(self) -> None:
        """Open the priority dialog (P key)."""
        self.open_priority_dialog()

    def action_cancel_edit(self) -> None:
        """Abandon an in-progress rename (Escape key)."""
        self.cancel_edit()

    class TaskUpdated(Message):
        """Message emitted when the row produces an updated task."""

        def __init__(self, task: Task) -> None:
            """Initialize the TaskUpdated message.

            Args:
                task: Updated copy of the task
            """
            super().__init__()
            self.task = task
