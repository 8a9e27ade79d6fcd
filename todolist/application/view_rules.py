"""Rules deciding which controls the UI offers.

The store accepts any mutation for a known id; these predicates are what
keep the interface from offering edits that make no sense (editing a
finished task, adding while looking at the trash).
"""

from collections.abc import Iterable

from todolist.domain.task import Filter, Task

DELETE_LABEL = "Delete"
RESTORE_LABEL = "Restore"


def can_add(filter: Filter) -> bool:
    """The add form is hidden in the completed and trash views."""
    return filter not in (Filter.CHECKED, Filter.REMOVED)


def is_text_editable(task: Task) -> bool:
    return not task.checked and not task.removed


def is_checkbox_enabled(task: Task) -> bool:
    return not task.removed


def remove_action_label(task: Task) -> str:
    """Label for the per-task delete/restore button."""
    return RESTORE_LABEL if task.removed else DELETE_LABEL


def shows_empty_trash(filter: Filter) -> bool:
    return filter is Filter.REMOVED


def can_empty_trash(tasks: Iterable[Task]) -> bool:
    """Emptying the trash is only offered when something is in it."""
    return any(task.removed for task in tasks)
