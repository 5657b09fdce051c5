"""
Pydantic models for the Task List application.

Defines the task record and its priority enumeration. Tasks are treated as
immutable values: every change produces a validated copy that the task store
merges back into the collection by id.
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class Priority(str, Enum):
    """Ordinal urgency of a task, also driving its display color."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    URGENT = "URGENT"


def is_blank_name(text: str) -> bool:
    """Return True if text is empty or whitespace-only."""
    return not text or not text.strip()


class Task(BaseModel):
    """
    Represents a single to-do item.

    Hour and date fields are carried through unchanged; nothing in the
    application edits them.
    """

    id: int = Field(..., ge=0, description="Identifier, unique within a collection")
    name: str = Field(..., min_length=1, description="Display text")
    is_completed: bool = Field(default=False, description="Whether the task is done")
    priority: Priority = Field(default=Priority.LOW, description="Task priority")

    estimated_hours: int = Field(default=0, ge=0, description="Estimated effort in hours")
    actual_hours: int = Field(default=0, ge=0, description="Recorded effort in hours")
    due_date: str = Field(default="", description="Due date as free text")
    completion_date: str = Field(default="", description="Completion date as free text")

    class Config:
        """Pydantic configuration."""
        frozen = True
        json_schema_extra = {
            "example": {
                "id": 0,
                "name": "Task 1",
                "is_completed": False,
                "priority": "LOW",
                "estimated_hours": 0,
                "actual_hours": 0,
                "due_date": "",
                "completion_date": "",
            }
        }

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """
        Reject blank or whitespace-only names.

        Raises:
            ValueError: If the name has no visible characters
        """
        if is_blank_name(v):
            raise ValueError("Task name cannot be blank")
        return v

    def _copy_with(self, **changes) -> "Task":
        """Build a validated copy with the given fields replaced."""
        return Task.model_validate({**self.model_dump(), **changes})

    def with_completion(self, is_completed: bool) -> "Task":
        """Return a copy with the completion flag set."""
        return self._copy_with(is_completed=is_completed)

    def toggled(self) -> "Task":
        """Return a copy with the completion flag flipped."""
        return self.with_completion(not self.is_completed)

    def renamed(self, name: str) -> "Task":
        """
        Return a copy with a new name.

        Raises:
            pydantic.ValidationError: If the name is blank
        """
        return self._copy_with(name=name)

    def with_priority(self, priority: Priority) -> "Task":
        """Return a copy with a new priority."""
        return self._copy_with(priority=priority)
