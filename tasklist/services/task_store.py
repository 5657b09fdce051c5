"""
Task store for the Task List application.

Holds the ordered, in-memory task collection owned by the application and
implements the three ways it changes: merging an updated task back by id,
appending a new task, and clearing every completed task.
"""

from enum import Enum
from typing import Iterable, Iterator, List, Optional

from tasklist.logging_config import get_logger
from tasklist.models import Task, is_blank_name

logger = get_logger(__name__)


class TaskStoreError(Exception):
    """Base exception for task store errors."""
    pass


class DuplicateTaskIdError(TaskStoreError):
    """Raised when a collection would contain two tasks with the same id."""
    pass


class IdStrategy(str, Enum):
    """How new task ids are allocated.

    COUNTER keeps increasing from the highest id ever seen, so ids stay unique
    after completed tasks are cleared. LENGTH uses the current collection size,
    which can hand out an id that is still in use after a clear.
    """

    COUNTER = "counter"
    LENGTH = "length"


class TaskStore:
    """
    State container for the task collection.

    The store is created once by the application root and shared by reference
    with the view. Tasks are immutable records; an update replaces the entry
    with the matching id, keeping its position.
    """

    def __init__(
        self,
        tasks: Optional[Iterable[Task]] = None,
        id_strategy: IdStrategy = IdStrategy.COUNTER,
    ) -> None:
        """
        Initialize the store.

        Args:
            tasks: Initial tasks, in display order
            id_strategy: Id allocation strategy for new tasks

        Raises:
            DuplicateTaskIdError: If two initial tasks share an id
        """
        self._tasks: List[Task] = list(tasks or [])
        self.id_strategy = IdStrategy(id_strategy)

        seen = set()
        for task in self._tasks:
            if task.id in seen:
                raise DuplicateTaskIdError(f"Duplicate task id {task.id}")
            seen.add(task.id)

        self._next_id = max(seen) + 1 if seen else 0

    @classmethod
    def with_seed_tasks(
        cls,
        count: int = 20,
        name_template: str = "Task {number}",
        id_strategy: IdStrategy = IdStrategy.COUNTER,
    ) -> "TaskStore":
        """
        Create a store holding the startup tasks.

        Seed tasks get ids 0..count-1 and names built from name_template with
        {number} running from 1 to count.

        Args:
            count: Number of tasks to create
            name_template: Format string for task names
            id_strategy: Id allocation strategy for tasks added later

        Returns:
            A populated TaskStore
        """
        tasks = [
            Task(id=index, name=name_template.format(number=index + 1))
            for index in range(count)
        ]
        logger.info(f"Seeded task store with {count} tasks (id_strategy={IdStrategy(id_strategy).value})")
        return cls(tasks, id_strategy=id_strategy)

    @property
    def tasks(self) -> List[Task]:
        """Snapshot of the collection in display order."""
        return list(self._tasks)

    @property
    def completed_count(self) -> int:
        """Number of completed tasks in the collection."""
        return sum(1 for task in self._tasks if task.is_completed)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    def get_task(self, task_id: int) -> Optional[Task]:
        """
        Look up a task by id.

        Args:
            task_id: Id to find

        Returns:
            The first task with that id, or None
        """
        index = self._index_of(task_id)
        return self._tasks[index] if index is not None else None

    def update_task(self, task: Task) -> bool:
        """
        Merge an updated task back into the collection.

        The first entry with the same id is replaced in place. An unknown id
        is ignored; updates never insert.

        Args:
            task: Updated copy of a task

        Returns:
            True if an entry was replaced, False if the id was not found
        """
        index = self._index_of(task.id)
        if index is None:
            logger.debug(f"Update for unknown task id={task.id} ignored")
            return False

        self._tasks[index] = task
        logger.debug(
            f"Updated task id={task.id} at position {index}: "
            f"completed={task.is_completed}, priority={task.priority.value}"
        )
        return True

    def toggle_completion(self, task_id: int) -> Optional[Task]:
        """
        Flip the completion flag of a task.

        Args:
            task_id: Id of the task to toggle

        Returns:
            The updated task, or None if the id was not found
        """
        task = self.get_task(task_id)
        if task is None:
            return None
        updated = task.toggled()
        self.update_task(updated)
        return updated

    def add_task(self, name: str) -> Optional[Task]:
        """
        Append a new task.

        Args:
            name: Task name; blank or whitespace-only names are declined

        Returns:
            The created task, or None if the name was blank
        """
        if is_blank_name(name):
            logger.debug("Add task declined: blank name")
            return None

        task = Task(id=self._allocate_id(), name=name)
        self._tasks.append(task)
        logger.info(f"Added task id={task.id}, name='{name[:50]}'")
        return task

    def clear_completed(self) -> List[Task]:
        """
        Remove every completed task.

        Remaining tasks keep their relative order.

        Returns:
            The removed tasks, in their former order
        """
        removed = [task for task in self._tasks if task.is_completed]
        self._tasks = [task for task in self._tasks if not task.is_completed]
        logger.info(f"Cleared {len(removed)} completed tasks, {len(self._tasks)} remaining")
        return removed

    def _index_of(self, task_id: int) -> Optional[int]:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        return None

    def _allocate_id(self) -> int:
        if self.id_strategy is IdStrategy.LENGTH:
            task_id = len(self._tasks)
            if self._index_of(task_id) is not None:
                logger.warning(f"Allocated task id={task_id} is already in use (id_strategy=length)")
            return task_id

        task_id = self._next_id
        self._next_id += 1
        return task_id
