"""Task domain - todo items and the filters over them.

All exports are pure (no I/O, no side effects).

Key Types:
    Task - A single todo item (frozen)
    Filter - Which slice of the list is shown
    TaskCounts - Per-state task counts

Functions:
    matches_filter - Visibility predicate for one task
    filter_tasks - Apply a filter to a collection
    find_task - Look up a task by id
    count_tasks - Count tasks by state
"""

from .filtering import count_tasks, filter_tasks, find_task, matches_filter
from .models import FILTER_LABELS, Filter, Task, TaskCounts

__all__ = [
    # Models
    "Task",
    "Filter",
    "FILTER_LABELS",
    "TaskCounts",
    # Filtering
    "matches_filter",
    "filter_tasks",
    "find_task",
    "count_tasks",
]
