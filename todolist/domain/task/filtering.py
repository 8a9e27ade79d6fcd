"""Pure filtering functions over task collections.

All functions in this module are pure - no I/O, no side effects.
They take data in, return data out.
"""

from collections.abc import Iterable

from .models import Filter, Task, TaskCounts


def matches_filter(task: Task, filter: Filter) -> bool:
    """Decide whether a task is visible under a filter.

    Removed tasks only ever show up in the trash view; every other view
    hides them regardless of their checked flag.

    Args:
        task: The task to test
        filter: The active filter

    Returns:
        True if the task belongs in the view
    """
    if filter is Filter.REMOVED:
        return task.removed
    if task.removed:
        return False
    if filter is Filter.CHECKED:
        return task.checked
    if filter is Filter.UNCHECKED:
        return not task.checked
    return True


def filter_tasks(tasks: Iterable[Task], filter: Filter) -> tuple[Task, ...]:
    """Return the tasks visible under ``filter``, preserving order."""
    return tuple(task for task in tasks if matches_filter(task, filter))


def find_task(tasks: Iterable[Task], task_id: int) -> Task | None:
    """Find a task by id, or None if no task has that id."""
    for task in tasks:
        if task.id == task_id:
            return task
    return None


def count_tasks(tasks: Iterable[Task]) -> TaskCounts:
    """Count tasks by state.

    Args:
        tasks: Tasks to count

    Returns:
        TaskCounts where ``total`` excludes tasks in the trash
    """
    active = checked = removed = 0
    for task in tasks:
        if task.removed:
            removed += 1
        elif task.checked:
            checked += 1
        else:
            active += 1
    return TaskCounts(
        total=active + checked,
        active=active,
        checked=checked,
        removed=removed,
    )
