"""
Unit tests for the in-memory TaskStore.
"""
import pytest

from todolist.application import TaskStore
from todolist.domain.task import Filter, Task


def test_add_places_new_task_first():
    """Test that a new task is unchecked, not removed, and ahead of older tasks."""
    store = TaskStore()
    store.add("old")

    store.add("x")

    visible = store.visible_tasks(Filter.ALL)
    assert [t.text for t in visible] == ["x", "old"]
    assert visible[0].checked is False
    assert visible[0].removed is False
    assert sum(1 for t in visible if t.text == "x") == 1


def test_add_empty_is_noop():
    """Test that adding empty text leaves the collection untouched."""
    store = TaskStore()
    store.add("keep")
    before = store.tasks

    result = store.add("")

    assert result is None
    assert store.tasks == before
    assert len(store.tasks) == 1


def test_ids_are_unique_even_when_added_back_to_back():
    """Test that rapid adds never produce duplicate ids."""
    store = TaskStore()
    for i in range(50):
        store.add(f"task {i}")

    ids = [t.id for t in store.tasks]
    assert len(set(ids)) == 50


def test_seeding_duplicate_ids_is_rejected():
    """Test that two seeded tasks cannot share an id."""
    with pytest.raises(ValueError, match=r"Duplicate task ids: \[3\]"):
        TaskStore(tasks=[Task(id=3, text="one"), Task(id=4, text="two"), Task(id=3, text="three")])


def test_ids_continue_after_seeded_tasks():
    """Test that ids for new tasks never collide with seeded ones."""
    store = TaskStore(tasks=[Task(id=7, text="seed")])

    task = store.add("fresh")

    assert task.id > 7


def test_edit_twice_same_as_once():
    """Test that editing is idempotent."""
    once = TaskStore()
    twice = TaskStore()
    a = once.add("draft")
    b = twice.add("draft")

    once.edit(a.id, "final")
    twice.edit(b.id, "final")
    twice.edit(b.id, "final")

    assert once.tasks == twice.tasks
    assert once.get(a.id).text == "final"


def test_edit_allows_empty_text_and_keeps_position():
    """Test that edit accepts empty text and does not reorder."""
    store = TaskStore()
    first = store.add("first")
    store.add("second")

    store.edit(first.id, "")

    assert [t.text for t in store.tasks] == ["second", ""]


def test_checked_task_moves_between_views():
    """Test that a checked task is in Checked and absent from Unchecked."""
    store = TaskStore()
    task = store.add("done soon")

    store.set_checked(task.id, True)

    assert task.id not in [t.id for t in store.visible_tasks(Filter.UNCHECKED)]
    assert task.id in [t.id for t in store.visible_tasks(Filter.CHECKED)]

    store.set_checked(task.id, False)
    assert task.id in [t.id for t in store.visible_tasks(Filter.UNCHECKED)]


@pytest.mark.parametrize("checked", [True, False])
def test_removed_only_visible_in_trash(checked):
    """Test that removed dominates the checked flag in every view."""
    store = TaskStore()
    task = store.add("bin me")
    store.set_checked(task.id, checked)

    store.set_removed(task.id, True)

    for view in (Filter.ALL, Filter.CHECKED, Filter.UNCHECKED):
        assert store.visible_tasks(view) == ()
    assert [t.id for t in store.visible_tasks(Filter.REMOVED)] == [task.id]


def test_restore_brings_task_back():
    """Test that set_removed(False) restores a trashed task."""
    store = TaskStore()
    task = store.add("oops")
    store.set_removed(task.id, True)

    store.set_removed(task.id, False)

    assert [t.id for t in store.visible_tasks(Filter.ALL)] == [task.id]
    assert store.visible_tasks(Filter.REMOVED) == ()


def test_purge_is_selective_and_irreversible():
    """Test that purge drops only removed tasks and they cannot be restored."""
    a = Task(id=1, text="A")
    b = Task(id=2, text="B", removed=True)
    c = Task(id=3, text="C", removed=True)
    store = TaskStore(tasks=[a, b, c])

    purged = store.purge_removed()

    assert purged == 2
    assert store.tasks == (a,)

    store.set_removed(b.id, False)
    assert store.tasks == (a,)


def test_purge_with_empty_trash_changes_nothing():
    """Test that purge is a no-op when nothing is removed."""
    store = TaskStore()
    store.add("one")
    store.add("two")
    before = store.tasks

    assert store.purge_removed() == 0
    assert store.tasks == before


def test_unknown_id_is_noop():
    """Test that mutations with an unknown id leave state unchanged."""
    store = TaskStore()
    store.add("a")
    store.add("b")
    before = store.tasks

    store.set_checked(999, True)
    store.set_removed(999, True)
    store.edit(999, "ghost")

    assert store.tasks == before


def test_snapshots_are_not_mutated_by_later_changes():
    """Test that a previously read snapshot stays as it was."""
    store = TaskStore()
    task = store.add("stable")
    snapshot = store.tasks

    store.set_checked(task.id, True)
    store.add("another")

    assert snapshot == (Task(id=task.id, text="stable"),)


def test_filter_defaults_to_all_and_drives_visible_tasks():
    """Test that visible_tasks() uses the current filter when none is given."""
    store = TaskStore()
    done = store.add("done")
    store.add("open")
    store.set_checked(done.id, True)

    assert store.filter is Filter.ALL
    assert len(store.visible_tasks()) == 2

    store.set_filter(Filter.CHECKED)
    assert [t.text for t in store.visible_tasks()] == ["done"]

    store.set_filter("unchecked")
    assert store.filter is Filter.UNCHECKED
    assert [t.text for t in store.visible_tasks()] == ["open"]


def test_set_filter_rejects_unknown_value():
    """Test that only the four filter values are accepted."""
    store = TaskStore()

    with pytest.raises(ValueError):
        store.set_filter("archived")

    assert store.filter is Filter.ALL


def test_counts_track_each_state():
    """Test that counts track each state."""
    store = TaskStore()
    a = store.add("a")
    b = store.add("b")
    store.add("c")
    store.set_checked(a.id, True)
    store.set_removed(b.id, True)

    counts = store.counts()

    assert (counts.total, counts.active, counts.checked, counts.removed) == (2, 1, 1, 1)


def test_end_to_end_scenario():
    """Test the buy milk / walk dog walkthrough."""
    store = TaskStore()
    milk = store.add("buy milk")
    dog = store.add("walk dog")

    assert [t.text for t in store.tasks] == ["walk dog", "buy milk"]

    store.set_checked(milk.id, True)
    assert [t.text for t in store.visible_tasks(Filter.UNCHECKED)] == ["walk dog"]
    assert [t.text for t in store.visible_tasks(Filter.CHECKED)] == ["buy milk"]

    store.set_removed(dog.id, True)
    assert [t.text for t in store.visible_tasks(Filter.ALL)] == ["buy milk"]

    store.purge_removed()
    assert store.visible_tasks(Filter.REMOVED) == ()
    assert [t.text for t in store.tasks] == ["buy milk"]
