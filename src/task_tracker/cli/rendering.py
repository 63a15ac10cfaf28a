"""Rich renderables for the interactive shell."""

from typing import Iterable, Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from task_tracker.cli.commands import MenuCommand
from task_tracker.constants import DISPLAY_DATE_FORMAT
from task_tracker.tasks.models import Task

EMPTY_LIST_MESSAGE = "The task list is empty. Add a new task (Option 1)."

_PRIORITY_STYLES = {1: "bold red", 2: "yellow", 3: "green"}


def render_banner() -> Panel:
    return Panel.fit(
        "[bold]Persistent Task Manager (PTM) Initialized[/bold]",
        border_style="cyan",
    )


def render_menu(commands: Iterable[MenuCommand]) -> Panel:
    table = Table(show_header=False, box=None, padding=(0, 2, 0, 0))
    table.add_column("Key", style="bold cyan", no_wrap=True)
    table.add_column("Label")
    for cmd in commands:
        table.add_row(f"{cmd.key}.", cmd.label)
    return Panel(table, title="[bold]Main Menu[/bold]", border_style="cyan")


def status_text(task: Task) -> str:
    return "[COMPLETED]" if task.completed else "[PENDING]"


def render_task_table(tasks: Sequence[Task], title: str = "Task List") -> Table:
    """Numbered table of tasks.

    Numbers are 1-based positions in ``tasks``. For the unsorted list they
    are the numbers complete and delete accept; a sorted view shows its own
    positions.
    """
    table = Table(title=title, title_justify="left", expand=False)
    table.add_column("#", style="bold cyan", no_wrap=True, justify="right")
    table.add_column("Status", no_wrap=True)
    table.add_column("Title", style="bold")
    table.add_column("Due", no_wrap=True)
    table.add_column("Priority", no_wrap=True)
    table.add_column("Description")

    # Text cells keep user-entered brackets from being read as markup
    for number, task in enumerate(tasks, start=1):
        table.add_row(
            Text(f"[{number}]"),
            Text(status_text(task), style="green" if task.completed else "yellow"),
            # Title is shown here but left out of the CSV export
            Text(task.title),
            Text(task.due_date.strftime(DISPLAY_DATE_FORMAT)),
            Text(task.priority_label, style=_PRIORITY_STYLES.get(task.priority, "dim")),
            Text(task.description),
        )
    return table
