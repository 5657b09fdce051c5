"""TaskListView widget for displaying the ordered task collection.

This module provides the TaskListView widget which renders every task as a
TaskItem, in collection order, with no filtering or sorting. TaskItem
messages are not handled here; they bubble through to the application.
"""

from typing import List, Optional

from textual.app import ComposeResult
from textual.widget import Widget
from textual.widgets import Static

from tasklist.logging_config import get_logger
from tasklist.models import Task
from tasklist.ui.components.task_item import TaskItem
from tasklist.ui.constants import EMPTY_LIST_MESSAGE
from tasklist.ui.theme import COMMENT

# Initialize logger for this module
logger = get_logger(__name__)


class TaskListView(Widget):
    """A widget that renders a list of TaskItem rows."""

    DEFAULT_CSS = f"""
    TaskListView {{
        width: 100%;
        height: auto;
        padding: 0 1;
    }}

    TaskListView .empty-message {{
        width: 100%;
        color: {COMMENT};
        text-align: center;
        padding: 1;
    }}
    """

    def __init__(self, empty_message: str = EMPTY_LIST_MESSAGE, **kwargs) -> None:
        """Initialize a TaskListView widget.

        Args:
            empty_message: Message to show when there are no tasks
            **kwargs: Additional keyword arguments for Widget
        """
        super().__init__(**kwargs)
        self.empty_message = empty_message
        self._tasks: List[Task] = []

    def compose(self) -> ComposeResult:
        """Compose the list layout.

        Yields:
            The empty-state message; rows are mounted by set_tasks()
        """
        yield Static(self.empty_message, classes="empty-message", id="task-list-empty")

    @property
    def tasks(self) -> List[Task]:
        """Tasks currently rendered, in display order."""
        return list(self._tasks)

    async def set_tasks(self, tasks: List[Task]) -> None:
        """Render a new snapshot of the task collection.

        Rows are updated in place when the id order is unchanged, so a row in
        the middle of a rename keeps its draft. Otherwise all rows are
        rebuilt.

        Args:
            tasks: Tasks to display, in order
        """
        tasks = list(tasks)
        items = list(self.query(TaskItem))

        if [item.task.id for item in items] == [task.id for task in tasks]:
            logger.debug(f"TaskListView: updating {len(tasks)} rows in place")
            for item, task in zip(items, tasks):
                if item.task != task:
                    item.update_task(task)
        else:
            logger.debug(f"TaskListView: rebuilding rows ({len(items)} -> {len(tasks)})")
            await self.remove_children(TaskItem)
            if tasks:
                await self.mount_all([TaskItem(task) for task in tasks])

        self._tasks = tasks
        self.query_one("#task-list-empty", Static).display = not tasks

    def get_item(self, task_id: int) -> Optional[TaskItem]:
        """Find the row displaying a task.

        Args:
            task_id: Id of the task

        Returns:
            The first TaskItem for that id, or None
        """
        for item in self.query(TaskItem):
            if item.task.id == task_id:
                return item
        return None
