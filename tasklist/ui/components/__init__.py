"""Task List UI components - reusable widgets and dialogs."""

from tasklist.ui.components.task_item import TaskItem
from tasklist.ui.components.task_list import TaskListView
from tasklist.ui.components.top_bar import TopBar
from tasklist.ui.components.priority_modal import PriorityModal

__all__ = ["TaskItem", "TaskListView", "TopBar", "PriorityModal"]
