"""Main screen for the todolist TUI.

The MainScreen shows the filter selector, the new-task form (or the
empty-trash button in the trash view), and the filtered task list.
Every handler here does the same three things: mutate the store,
re-read it, redraw.
"""

from textual.app import ComposeResult
from textual.containers import Container, Horizontal, VerticalScroll
from textual.screen import ModalScreen, Screen
from textual.widgets import Button, Footer, Header, Input, Label, Select, Static

from todolist.application import (
    TaskStore,
    can_add,
    can_empty_trash,
    shows_empty_trash,
)
from todolist.domain.task import Filter
from todolist.tui.widgets import TaskRow

FILTER_OPTIONS = [(f.label, f) for f in Filter]


class MainScreen(Screen):
    """Task list screen.

    Layout:
    +------------------------------------------------+
    | Header                                         |
    | [Filter v]  [new task........] [Add]  [QR]     |
    |------------------------------------------------|
    | [x] task text ...................... [Delete]  |
    | [ ] task text ...................... [Delete]  |
    +------------------------------------------------+
    | Footer with keybindings                        |
    +------------------------------------------------+
    """

    BINDINGS = [
        ("1", "set_filter('all')", "All"),
        ("2", "set_filter('checked')", "Completed"),
        ("3", "set_filter('unchecked')", "Active"),
        ("4", "set_filter('removed')", "Trash"),
    ]

    CSS = """
    #toolbar {
        height: auto;
        padding: 0 1;
    }

    #filter-select {
        width: 22;
    }

    #add-form {
        width: 1fr;
        height: auto;
    }

    #new-task-input {
        width: 1fr;
    }

    #empty-trash {
        margin-left: 1;
    }

    #task-list {
        height: 1fr;
        border-top: solid $primary;
    }

    #empty-message {
        color: $text-muted;
        text-align: center;
        margin-top: 2;
        width: 100%;
    }
    """

    def __init__(self, store: TaskStore) -> None:
        super().__init__()
        self._task_store = store

    @property
    def store(self) -> TaskStore:
        return self._task_store

    def compose(self) -> ComposeResult:
        """Compose the main screen layout."""
        yield Header()

        with Horizontal(id="toolbar"):
            yield Select(
                FILTER_OPTIONS,
                value=self._task_store.filter,
                allow_blank=False,
                id="filter-select",
            )
            with Horizontal(id="add-form"):
                yield Input(placeholder="What needs doing?", id="new-task-input")
                yield Button("Add", variant="primary", id="btn-add")
            yield Button("Empty trash", variant="error", id="empty-trash")
            yield Button("QR", id="btn-qr")

        yield VerticalScroll(id="task-list")
        yield Footer()

    async def on_mount(self) -> None:
        """Handle screen mount - draw the initial list."""
        await self.refresh_tasks()

    async def refresh_tasks(self) -> None:
        """Redraw controls and rows from the store's current snapshot."""
        store = self._task_store
        current = store.filter

        self.query_one("#add-form").display = can_add(current)
        empty_trash = self.query_one("#empty-trash", Button)
        empty_trash.display = shows_empty_trash(current)
        empty_trash.disabled = not can_empty_trash(store.tasks)

        task_list = self.query_one("#task-list", VerticalScroll)
        await task_list.remove_children()
        visible = store.visible_tasks()
        if visible:
            await task_list.mount(*(TaskRow(task) for task in visible))
        else:
            await task_list.mount(Static("Nothing here", id="empty-message"))

        self.app.sub_title = self._format_counts()

    def _format_counts(self) -> str:
        counts = self._task_store.counts()
        return (
            f"{counts.active} active | {counts.checked} completed | "
            f"{counts.removed} in trash"
        )

    # =========================================================================
    # Form and toolbar
    # =========================================================================

    async def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "new-task-input":
            await self._submit_new_task()

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle toolbar button presses."""
        if event.button.id == "btn-add":
            await self._submit_new_task()
        elif event.button.id == "empty-trash":
            await self.empty_trash()
        elif event.button.id == "btn-qr":
            self.app.action_show_qr()

    async def on_select_changed(self, event: Select.Changed) -> None:
        if event.select.id != "filter-select" or event.value is Select.BLANK:
            return
        if event.value == self._task_store.filter:
            return
        self._task_store.set_filter(event.value)
        await self.refresh_tasks()

    def action_set_filter(self, value: str) -> None:
        """Switch views from the keyboard by driving the selector."""
        self.query_one("#filter-select", Select).value = Filter(value)

    async def _submit_new_task(self) -> None:
        new_input = self.query_one("#new-task-input", Input)
        task = self._task_store.add(new_input.value)
        if task is None:
            return
        new_input.value = ""
        await self.refresh_tasks()

    async def empty_trash(self) -> None:
        purged = self._task_store.purge_removed()
        if purged:
            self.notify(f"Deleted {purged} task(s) permanently")
        await self.refresh_tasks()

    # =========================================================================
    # Task rows
    # =========================================================================

    async def on_task_row_check_toggled(self, event: TaskRow.CheckToggled) -> None:
        self._task_store.set_checked(event.task_id, event.checked)
        await self.refresh_tasks()

    def on_task_row_text_edited(self, event: TaskRow.TextEdited) -> None:
        # Editing never changes which tasks are visible, so no redraw.
        self._task_store.edit(event.task_id, event.text)

    async def on_task_row_remove_toggled(self, event: TaskRow.RemoveToggled) -> None:
        self._task_store.set_removed(event.task_id, event.removed)
        await self.refresh_tasks()


HELP_SECTIONS = [
    ("Tasks", [
        ("Enter", "Add the typed task"),
        ("Space", "Toggle the focused checkbox"),
        ("1-4", "Show all / completed / active / trash"),
    ]),
    ("Application", [
        ("s", "Show or hide the QR code"),
        ("Tab", "Move focus to next widget"),
        ("?", "Show this help"),
        ("q / Ctrl+Q", "Quit application"),
    ]),
]


def format_help(sections: list[tuple[str, list[tuple[str, str]]]]) -> str:
    """Render shortcut sections as Rich markup, one key per line."""
    lines = []
    for title, shortcuts in sections:
        lines.append(f"[bold]{title}[/bold]")
        for key, description in shortcuts:
            lines.append(f"  [yellow]{key:<12}[/yellow] {description}")
        lines.append("")
    lines.append("[dim]Press Escape or ? to close[/dim]")
    return "\n".join(lines)


class HelpModal(ModalScreen):
    """Modal dialog listing the keyboard shortcuts."""

    BINDINGS = [
        ("escape", "dismiss", "Close"),
        ("question_mark", "dismiss", "Close"),
    ]

    CSS = """
    HelpModal {
        align: center middle;
    }

    #help-modal {
        width: 56;
        height: auto;
        border: thick $primary;
        background: $surface;
        padding: 1 2;
    }

    #help-title {
        width: 100%;
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }
    """

    def compose(self) -> ComposeResult:
        with Container(id="help-modal"):
            yield Label("todolist - Keyboard Shortcuts", id="help-title")
            yield Static(format_help(HELP_SECTIONS), id="help-body")


__all__ = ["MainScreen", "HelpModal", "FILTER_OPTIONS", "HELP_SECTIONS"]
