"""Single task row widget for the todolist TUI."""

from typing import Optional

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widgets import Button, Checkbox, Input

from todolist.application import (
    is_checkbox_enabled,
    is_text_editable,
    remove_action_label,
)
from todolist.domain.task import Task


class TaskRow(Horizontal):
    """One line of the task list: checkbox, editable text, delete/restore.

    The row does not touch the store. It translates its child widgets'
    events into task-level messages that bubble up to the screen.
    """

    DEFAULT_CSS = """
    TaskRow {
        height: 3;
        padding: 0 1;
    }

    TaskRow Checkbox {
        width: 7;
        border: none;
    }

    TaskRow Input {
        width: 1fr;
    }

    TaskRow Button {
        width: 12;
        min-width: 12;
    }

    TaskRow.-checked Input {
        text-style: strike;
    }

    TaskRow.-removed {
        color: $text-muted;
    }
    """

    class CheckToggled(Message):
        """Posted when the task's checkbox changes."""

        def __init__(self, task_id: int, checked: bool) -> None:
            self.task_id = task_id
            self.checked = checked
            super().__init__()

    class TextEdited(Message):
        """Posted on every change to the task's text."""

        def __init__(self, task_id: int, text: str) -> None:
            self.task_id = task_id
            self.text = text
            super().__init__()

    class RemoveToggled(Message):
        """Posted when delete or restore is pressed."""

        def __init__(self, task_id: int, removed: bool) -> None:
            self.task_id = task_id
            self.removed = removed
            super().__init__()

    def __init__(
        self,
        task: Task,
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ) -> None:
        super().__init__(id=id, classes=classes)
        self._todo = task
        self.set_class(task.checked, "-checked")
        self.set_class(task.removed, "-removed")

    @property
    def todo(self) -> Task:
        """The task snapshot this row was built from."""
        return self._todo

    def compose(self) -> ComposeResult:
        task = self._todo
        yield Checkbox(
            value=task.checked,
            disabled=not is_checkbox_enabled(task),
            classes="task-check",
        )
        yield Input(
            value=task.text,
            disabled=not is_text_editable(task),
            classes="task-text",
        )
        yield Button(
            remove_action_label(task),
            variant="default" if task.removed else "error",
            classes="task-remove",
        )

    def on_checkbox_changed(self, event: Checkbox.Changed) -> None:
        event.stop()
        self.post_message(self.CheckToggled(self._todo.id, event.value))

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        if event.value == self._todo.text:
            return
        self._todo = self._todo.model_copy(update={"text": event.value})
        self.post_message(self.TextEdited(self._todo.id, event.value))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        # Enter in a task's text must not reach the new-task form.
        event.stop()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.post_message(self.RemoveToggled(self._todo.id, not self._todo.removed))
