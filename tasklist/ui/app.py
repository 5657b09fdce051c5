"""Main Textual application for Task List.

This module contains the TaskListApp, a single scrollable screen made of:
- Top bar: title and a button that clears completed tasks
- Task list: one row per task (toggle, rename, change priority)
- New task input: type a name and press Enter to append a task

The app owns the TaskStore. Rows post updated copies of their task, which
are merged back into the store by id before the list is re-rendered.
"""

from typing import Optional

from textual.app import App, ComposeResult
from textual.command import DiscoveryHit, Hit, Hits, Provider
from textual.containers import VerticalScroll
from textual.widgets import Footer, Input

from tasklist.config import Config
from tasklist.logging_config import get_logger
from tasklist.services.task_store import IdStrategy, TaskStore
from tasklist.ui.components.task_item import TaskItem
from tasklist.ui.components.task_list import TaskListView
from tasklist.ui.components.top_bar import TopBar
from tasklist.ui.constants import (
    APP_TITLE,
    MAX_NAME_LENGTH_IN_NOTIFICATION,
    NEW_TASK_PLACEHOLDER,
    NOTIFICATION_TIMEOUT_SHORT,
)
from tasklist.ui.keybindings import get_all_bindings
from tasklist.ui.theme import BACKGROUND, FOREGROUND, SELECTION

# Initialize logger for this module
logger = get_logger(__name__)


class TaskListCommands(Provider):
    """Command provider for Task List actions."""

    def _commands(self):
        app = self.app
        return [
            ("Clear Completed Tasks", "Remove every completed task (Ctrl+D)", app.action_clear_completed),
            ("New Task", "Focus the new task input (Ctrl+N)", app.action_focus_new_task),
        ]

    async def discover(self) -> Hits:
        """Provide commands that are always available for discovery."""
        for title, help_text, callback in self._commands():
            yield DiscoveryHit(title, callback, help=help_text)

    async def search(self, query: str) -> Hits:
        """Search for commands matching the query."""
        matcher = self.matcher(query)
        for title, help_text, callback in self._commands():
            score = matcher.match(title)
            if score > 0:
                yield Hit(
                    score,
                    matcher.highlight(title),
                    callback,
                    help=help_text,
                )


class TaskListApp(App):
    """Main Task List application."""

    CSS = f"""
    Screen {{
        background: {BACKGROUND};
        color: {FOREGROUND};
    }}

    #main-scroll {{
        width: 100%;
        height: 1fr;
    }}

    #new-task-input {{
        width: 100%;
        margin: 1 1 1 1;
    }}

    Footer {{
        background: {SELECTION};
    }}
    """

    BINDINGS = get_all_bindings()
    COMMANDS = App.COMMANDS | {TaskListCommands}

    # ==============================================================================
    # LIFECYCLE METHODS
    # ==============================================================================

    def __init__(
        self,
        store: Optional[TaskStore] = None,
        config: Optional[Config] = None,
        **kwargs
    ) -> None:
        """Initialize the Task List application.

        Args:
            store: Task store to display; seeded from configuration if None
            config: Configuration; loaded from the default location if None
            **kwargs: Additional keyword arguments for App
        """
        super().__init__(**kwargs)
        self.title = APP_TITLE
        self._config = config
        self._store = store

    @property
    def store(self) -> TaskStore:
        """The task collection owned by the application."""
        if self._store is None:
            self._store = self._create_seeded_store()
        return self._store

    def _create_seeded_store(self) -> TaskStore:
        config = self._config or Config()
        task_config = config.get_task_config()
        return TaskStore.with_seed_tasks(
            count=task_config['seed_count'],
            name_template=task_config['seed_name_template'],
            id_strategy=IdStrategy(task_config['id_strategy']),
        )

    def compose(self) -> ComposeResult:
        """Compose the application layout.

        Yields:
            Widgets that make up the application
        """
        with VerticalScroll(id="main-scroll"):
            yield TopBar(title=APP_TITLE, id="top-bar")
            yield TaskListView(id="task-list")
            yield Input(placeholder=NEW_TASK_PLACEHOLDER, id="new-task-input")
        yield Footer()

    async def on_mount(self) -> None:
        """Called when app is mounted and ready."""
        logger.info("Task List application mounted")
        await self._refresh_task_list()
        logger.info(f"Task List application ready with {len(self.store)} tasks")

    async def on_unmount(self) -> None:
        """Called when app is shutting down."""
        logger.info("Task List application shutting down")

    # ==============================================================================
    # EVENT HANDLERS
    # ==============================================================================

    async def on_task_item_task_updated(self, message: TaskItem.TaskUpdated) -> None:
        """Merge an updated task from a row back into the store.

        Args:
            message: TaskUpdated message carrying the new task
        """
        if self.store.update_task(message.task):
            await self._refresh_task_list()

    async def on_top_bar_clear_completed_requested(self, message: TopBar.ClearCompletedRequested) -> None:
        """Handle the top bar's clear button.

        Args:
            message: ClearCompletedRequested message
        """
        await self.action_clear_completed()

    async def on_input_submitted(self, event: Input.Submitted) -> None:
        """Append a task when Enter is pressed in the new task input.

        A blank name adds nothing and leaves the input untouched.

        Args:
            event: The input submitted event
        """
        if event.input.id != "new-task-input":
            return

        task = self.store.add_task(event.value)
        if task is None:
            logger.debug("New task input submitted with a blank name")
            return

        event.input.value = ""
        await self._refresh_task_list()

        item = self.query_one("#task-list", TaskListView).get_item(task.id)
        if item is not None:
            item.scroll_visible()

    # ==============================================================================
    # ACTION HANDLERS
    # ==============================================================================

    async def action_clear_completed(self) -> None:
        """Remove every completed task (Ctrl+D)."""
        removed = self.store.clear_completed()
        await self._refresh_task_list()

        if removed:
            names = ", ".join(task.name[:MAX_NAME_LENGTH_IN_NOTIFICATION] for task in removed[:3])
            more = f" and {len(removed) - 3} more" if len(removed) > 3 else ""
            self.notify(
                f"🗑 Removed {len(removed)} completed: {names}{more}",
                severity="information",
                timeout=NOTIFICATION_TIMEOUT_SHORT,
            )

    def action_focus_new_task(self) -> None:
        """Move focus to the new task input (Ctrl+N)."""
        new_task_input = self.query_one("#new-task-input", Input)
        new_task_input.focus()

    # ==============================================================================
    # HELPER METHODS
    # ==============================================================================

    async def _refresh_task_list(self) -> None:
        """Re-render the task list and the completion summary."""
        task_list = self.query_one("#task-list", TaskListView)
        await task_list.set_tasks(self.store.tasks)
        self.sub_title = f"{self.store.completed_count}/{len(self.store)} completed"
