"""Keybindings for the Task List application.

This module defines the keyboard shortcuts for:
- Application controls (clear completed, new task, quit)
- Task rows (rename, change priority, cancel rename)
- The priority dialog (save, cancel)
"""

from textual.binding import Binding


# Application control keybindings
APP_BINDINGS = [
    Binding("ctrl+d", "clear_completed", "Clear Completed", show=True),
    Binding("ctrl+n", "focus_new_task", "New Task", show=True),
    Binding("ctrl+q", "quit", "Quit", priority=True, show=True),
]

# Task row keybindings (active while a control inside the row has focus)
TASK_ITEM_BINDINGS = [
    Binding("e", "edit_name", "Rename", show=True),
    Binding("p", "change_priority", "Priority", show=True),
    Binding("escape", "cancel_edit", "Cancel Rename", show=False),
]

# Priority dialog keybindings
PRIORITY_MODAL_BINDINGS = [
    Binding("escape", "cancel", "Cancel", priority=True),
    Binding("ctrl+s", "save", "Save", priority=True),
]


def get_all_bindings() -> list[Binding]:
    """Get the application-level keybindings.

    Returns:
        List of Binding objects for the App
    """
    return list(APP_BINDINGS)
