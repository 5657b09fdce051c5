"""
Pytest configuration and fixtures for Task List tests.

Provides task factories, seeded stores and environment isolation.
"""

import pytest

from tasklist.models import Priority, Task
from tasklist.services.task_store import TaskStore


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """Remove TASKLIST_* overrides so every test sees default settings."""
    for name in (
        "TASKLIST_SEED_COUNT",
        "TASKLIST_SEED_NAME_TEMPLATE",
        "TASKLIST_ID_STRATEGY",
        "TASKLIST_LOG_LEVEL",
        "TASKLIST_DEV",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_task():
    """
    Factory for Task objects with sensible defaults.

    Example:
        def test_something(make_task):
            task = make_task(name="Write report", priority=Priority.HIGH)
    """
    def _make_task(
        id: int = 0,
        name: str = "Sample task",
        is_completed: bool = False,
        priority: Priority = Priority.LOW,
        **kwargs
    ) -> Task:
        return Task(
            id=id,
            name=name,
            is_completed=is_completed,
            priority=priority,
            **kwargs
        )

    return _make_task


@pytest.fixture
def seeded_store():
    """Store holding the twenty startup tasks (ids 0..19, names Task 1..Task 20)."""
    return TaskStore.with_seed_tasks()


@pytest.fixture
def small_store(make_task):
    """Store with three tasks of mixed state, useful for app tests."""
    return TaskStore([
        make_task(id=0, name="Write report"),
        make_task(id=1, name="Call plumber", priority=Priority.HIGH),
        make_task(id=2, name="Water plants", is_completed=True),
    ])
