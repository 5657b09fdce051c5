"""Priority selection modal for the Task List application.

This module provides a modal dialog for changing a task's priority with:
- One radio row per priority, the task's current priority preselected
- Save and Cancel buttons
- Keyboard shortcuts (Ctrl+S to save, Escape to cancel)
- Clicking outside the dialog box cancels

Choosing a row only changes the dialog's own selection. The task is replaced
when the dialog is saved: it dismisses with the updated copy, or with None
when cancelled.
"""

from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Click
from textual.screen import ModalScreen
from textual.widgets import Button, RadioButton, RadioSet, Static

from tasklist.logging_config import get_logger
from tasklist.models import Priority, Task
from tasklist.ui.base_styles import MODAL_BASE_CSS, BUTTON_BASE_CSS
from tasklist.ui.constants import PRIORITY_DIALOG_TITLE, SAVE_LABEL, CANCEL_LABEL
from tasklist.ui.keybindings import PRIORITY_MODAL_BINDINGS

# Initialize logger for this module
logger = get_logger(__name__)

PRIORITY_OPTIONS = list(Priority)


class PriorityModal(ModalScreen):
    """Modal screen for choosing a task priority.

    Dismisses with the updated Task on save, or None on cancel.
    """

    DEFAULT_CSS = MODAL_BASE_CSS + BUTTON_BASE_CSS + """
    PriorityModal > Container {
        width: 40;
        height: auto;
    }

    PriorityModal .modal-header {
        width: 100%;
        height: 3;
        content-align: center middle;
        margin-bottom: 1;
    }

    PriorityModal RadioSet {
        width: 100%;
        margin-bottom: 1;
    }

    PriorityModal .button-container {
        width: 100%;
        height: 3;
        align: center middle;
        layout: horizontal;
    }
    """

    BINDINGS = PRIORITY_MODAL_BINDINGS

    def __init__(self, task: Task, **kwargs) -> None:
        """Initialize the priority modal.

        Args:
            task: Task whose priority is being changed
            **kwargs: Additional keyword arguments for ModalScreen
        """
        super().__init__(**kwargs)
        self.edit_task = task
        self.selected_priority: Priority = task.priority

    def compose(self) -> ComposeResult:
        """Compose the modal layout.

        Yields:
            Widgets that make up the modal dialog
        """
        with Container():
            yield Static(PRIORITY_DIALOG_TITLE, classes="modal-header")
            with RadioSet(id="priority-options"):
                for priority in PRIORITY_OPTIONS:
                    yield RadioButton(
                        priority.value,
                        value=(priority == self.selected_priority),
                        id=f"priority-{priority.value.lower()}",
                    )
            with Container(classes="button-container"):
                yield Button(SAVE_LABEL, id="save-button", classes="success")
                yield Button(CANCEL_LABEL, id="cancel-button", classes="error")

    def on_mount(self) -> None:
        """Focus the radio rows when the modal opens."""
        logger.info(
            f"PriorityModal: Opened for task id={self.edit_task.id}, "
            f"current priority={self.edit_task.priority.value}"
        )
        self.query_one("#priority-options", RadioSet).focus()

    def select_priority(self, priority: Priority) -> None:
        """Change the dialog's selection without touching the task.

        Args:
            priority: Newly selected priority
        """
        self.selected_priority = priority
        if self.is_mounted:
            radio = self.query_one(f"#priority-{priority.value.lower()}", RadioButton)
            if not radio.value:
                radio.value = True

    def on_radio_set_changed(self, event: RadioSet.Changed) -> None:
        """Track the selected radio row.

        Args:
            event: The radio set changed event
        """
        event.stop()
        self.selected_priority = PRIORITY_OPTIONS[event.index]
        logger.debug(f"PriorityModal: Selected {self.selected_priority.value}")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button press events.

        Args:
            event: The button pressed event
        """
        if event.button.id == "save-button":
            event.stop()
            self.action_save()
        elif event.button.id == "cancel-button":
            event.stop()
            self.action_cancel()

    def on_click(self, event: Click) -> None:
        """Treat a click on the overlay (outside the dialog box) as cancel."""
        if event.widget is self:
            self.action_cancel()

    def action_save(self) -> None:
        """Dismiss with the task carrying the selected priority."""
        updated = self.edit_task.with_priority(self.selected_priority)
        logger.info(
            f"PriorityModal: Saved priority {self.selected_priority.value} "
            f"for task id={self.edit_task.id}"
        )
        self.dismiss(updated)

    def action_cancel(self) -> None:
        """Dismiss without changing the task."""
        logger.info(f"PriorityModal: Cancelled for task id={self.edit_task.id}")
        self.dismiss(None)
