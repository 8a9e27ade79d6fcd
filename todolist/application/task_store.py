"""In-memory task store.

Owns the ordered task collection and the current filter. The collection is
held as a tuple and replaced wholesale on every mutation, so a snapshot taken
from ``tasks`` or ``visible_tasks()`` stays consistent no matter what happens
afterwards.

Every mutation is total: unknown ids and empty submissions are no-ops,
never errors.
"""

import itertools
import logging
from collections.abc import Iterable

from todolist.domain.task import (
    Filter,
    Task,
    TaskCounts,
    count_tasks,
    filter_tasks,
    find_task,
)

logger = logging.getLogger(__name__)


class TaskStore:
    """Ordered, newest-first collection of tasks plus the selected filter.

    Create one per application run and hand it to whatever dispatches
    user events.

    Example:
        store = TaskStore()
        task = store.add("buy milk")
        store.set_checked(task.id, True)
        store.visible_tasks(Filter.CHECKED)  # (Task(text="buy milk", ...),)
    """

    def __init__(
        self,
        tasks: Iterable[Task] = (),
        filter: Filter | str = Filter.ALL,
    ) -> None:
        """Initialize the store.

        Args:
            tasks: Initial tasks, newest first.
            filter: Initial filter selection.

        Raises:
            ValueError: If two initial tasks share an id.
        """
        self._tasks: tuple[Task, ...] = tuple(tasks)
        ids = [task.id for task in self._tasks]
        if len(set(ids)) != len(ids):
            duplicates = sorted({i for i in ids if ids.count(i) > 1})
            raise ValueError(f"Duplicate task ids: {duplicates}")
        self._filter = Filter(filter)
        start = max((task.id for task in self._tasks), default=0) + 1
        self._ids = itertools.count(start)

    # =========================================================================
    # Reads
    # =========================================================================

    @property
    def tasks(self) -> tuple[Task, ...]:
        """Snapshot of every task, including those in the trash."""
        return self._tasks

    @property
    def filter(self) -> Filter:
        """The current filter selection."""
        return self._filter

    def get(self, task_id: int) -> Task | None:
        """Return the task with ``task_id``, or None."""
        return find_task(self._tasks, task_id)

    def visible_tasks(self, filter: Filter | str | None = None) -> tuple[Task, ...]:
        """Tasks shown under a filter, in collection order.

        Args:
            filter: Filter to apply. Defaults to the current selection.
        """
        selected = self._filter if filter is None else Filter(filter)
        return filter_tasks(self._tasks, selected)

    def counts(self) -> TaskCounts:
        """Per-state counts for the whole collection."""
        return count_tasks(self._tasks)

    # =========================================================================
    # Mutations
    # =========================================================================

    def add(self, text: str) -> Task | None:
        """Create a task and place it at the head of the list.

        Args:
            text: Task text. Empty text is ignored.

        Returns:
            The new task, or None when nothing was added.
        """
        if not text:
            return None
        task = Task(id=next(self._ids), text=text)
        self._tasks = (task,) + self._tasks
        logger.debug(f"Added task {task.id}")
        return task

    def edit(self, task_id: int, text: str) -> None:
        """Replace a task's text. Empty text is allowed."""
        self._update(task_id, text=text)

    def set_checked(self, task_id: int, value: bool) -> None:
        """Mark a task completed (True) or active again (False)."""
        self._update(task_id, checked=value)

    def set_removed(self, task_id: int, value: bool) -> None:
        """Move a task to the trash (True) or restore it (False)."""
        self._update(task_id, removed=value)

    def purge_removed(self) -> int:
        """Permanently drop every task in the trash.

        Returns:
            Number of tasks dropped.
        """
        kept = tuple(task for task in self._tasks if not task.removed)
        purged = len(self._tasks) - len(kept)
        self._tasks = kept
        if purged:
            logger.info(f"Emptied trash ({purged} tasks)")
        return purged

    def set_filter(self, filter: Filter | str) -> None:
        """Change the current filter.

        Raises:
            ValueError: If ``filter`` is not one of the Filter values.
        """
        self._filter = Filter(filter)
        logger.debug(f"Filter set to {self._filter.value}")

    def _update(self, task_id: int, **changes: object) -> None:
        """Swap in a copy of one task with ``changes`` applied."""
        if find_task(self._tasks, task_id) is None:
            logger.debug(f"Ignoring update for unknown task {task_id}")
            return
        self._tasks = tuple(
            task.model_copy(update=changes) if task.id == task_id else task
            for task in self._tasks
        )
