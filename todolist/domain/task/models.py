"""Task domain models.

Pure domain models for the todo list. Uses Pydantic for validation
and cheap immutable copies (``model_copy``).
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Filter(str, Enum):
    """Which slice of the task list is shown."""

    ALL = "all"
    CHECKED = "checked"
    UNCHECKED = "unchecked"
    REMOVED = "removed"

    @property
    def label(self) -> str:
        """Human readable name used by the filter selector."""
        return FILTER_LABELS[self]


FILTER_LABELS = {
    Filter.ALL: "All tasks",
    Filter.CHECKED: "Completed",
    Filter.UNCHECKED: "Active",
    Filter.REMOVED: "Trash",
}


class Task(BaseModel):
    """A single todo item.

    Tasks are frozen. Every state change produces a new instance via
    ``model_copy(update=...)``, so snapshots handed to the UI never change
    underneath it.

    A task is "active" when neither checked nor removed, "checked" when
    completed, and "removed" while it sits in the trash.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    text: str
    checked: bool = False
    removed: bool = False


class TaskCounts(BaseModel):
    """Summary of how many tasks are in each state.

    ``total`` counts everything outside the trash.
    """

    total: int
    active: int
    checked: int
    removed: int
