"""
Unit tests for the filter predicate and task counting.
"""
import pytest
from pydantic import ValidationError

from todolist.domain.task import (
    Filter,
    Task,
    count_tasks,
    filter_tasks,
    find_task,
    matches_filter,
)

ACTIVE = Task(id=1, text="active")
CHECKED = Task(id=2, text="checked", checked=True)
REMOVED = Task(id=3, text="removed", removed=True)
CHECKED_REMOVED = Task(id=4, text="checked and removed", checked=True, removed=True)


@pytest.mark.parametrize(
    "task, filter, expected",
    [
        (ACTIVE, Filter.ALL, True),
        (ACTIVE, Filter.CHECKED, False),
        (ACTIVE, Filter.UNCHECKED, True),
        (ACTIVE, Filter.REMOVED, False),
        (CHECKED, Filter.ALL, True),
        (CHECKED, Filter.CHECKED, True),
        (CHECKED, Filter.UNCHECKED, False),
        (CHECKED, Filter.REMOVED, False),
        (REMOVED, Filter.ALL, False),
        (REMOVED, Filter.UNCHECKED, False),
        (REMOVED, Filter.REMOVED, True),
        (CHECKED_REMOVED, Filter.CHECKED, False),
        (CHECKED_REMOVED, Filter.REMOVED, True),
    ],
)
def test_matches_filter(task, filter, expected):
    """Test the visibility table for every state/filter pair that matters."""
    assert matches_filter(task, filter) is expected


def test_filter_tasks_preserves_order():
    """Test that filtering keeps relative order."""
    tasks = [CHECKED, ACTIVE, REMOVED, Task(id=5, text="later")]

    visible = filter_tasks(tasks, Filter.ALL)

    assert [t.id for t in visible] == [2, 1, 5]


def test_find_task():
    """Test lookup by id."""
    assert find_task([ACTIVE, CHECKED], 2) is CHECKED
    assert find_task([ACTIVE, CHECKED], 42) is None


def test_count_tasks_excludes_trash_from_total():
    """Test that the total ignores removed tasks."""
    counts = count_tasks([ACTIVE, CHECKED, REMOVED, CHECKED_REMOVED])

    assert counts.total == 2
    assert counts.active == 1
    assert counts.checked == 1
    assert counts.removed == 2


def test_count_tasks_empty():
    """Test counting an empty collection."""
    counts = count_tasks([])

    assert counts.total == 0
    assert counts.removed == 0


def test_task_is_frozen():
    """Test that tasks cannot be mutated in place."""
    with pytest.raises(ValidationError):
        ACTIVE.text = "changed"


def test_filter_labels():
    """Test that every filter has a selector label."""
    assert [f.label for f in Filter] == ["All tasks", "Completed", "Active", "Trash"]
