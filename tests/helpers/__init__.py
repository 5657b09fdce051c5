"""Test helper utilities for Task List UI tests."""

from tests.helpers.ui_helpers import (
    settle,
    get_task_item,
    toggle_task,
    rename_task,
    add_task_via_input,
    open_priority_dialog,
)

__all__ = [
    "settle",
    "get_task_item",
    "toggle_task",
    "rename_task",
    "add_task_via_input",
    "open_priority_dialog",
]
