"""Task List services - state containers for application data."""

from tasklist.services.task_store import TaskStore, IdStrategy

__all__ = ["TaskStore", "IdStrategy"]
