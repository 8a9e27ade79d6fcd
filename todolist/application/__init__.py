"""Application layer for todolist.

Services:
    task_store - The in-memory TaskStore owning tasks and the filter
    view_rules - Which UI controls are offered for a given state

Example usage:
    >>> from todolist.application import TaskStore
    >>> store = TaskStore()
    >>> task = store.add("walk dog")
    >>> store.set_removed(task.id, True)
    >>> store.visible_tasks()
    ()
"""

from todolist.application.task_store import TaskStore
from todolist.application.view_rules import (
    DELETE_LABEL,
    RESTORE_LABEL,
    can_add,
    can_empty_trash,
    is_checkbox_enabled,
    is_text_editable,
    remove_action_label,
    shows_empty_trash,
)

__all__ = [
    "TaskStore",
    # View rules
    "DELETE_LABEL",
    "RESTORE_LABEL",
    "can_add",
    "can_empty_trash",
    "is_checkbox_enabled",
    "is_text_editable",
    "remove_action_label",
    "shows_empty_trash",
]
