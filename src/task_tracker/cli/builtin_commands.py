"""Built-in main-menu commands."""

from typing import TYPE_CHECKING

from task_tracker.cli.commands import MenuCommand
from task_tracker.constants import SORT_BY_DATE, SORT_BY_PRIORITY
from task_tracker.tasks.models import Task

if TYPE_CHECKING:
    from task_tracker.cli.app import TaskTrackerApp

INVALID_TASK_NUMBER_MESSAGE = "Invalid task number."


class AddTaskCommand(MenuCommand):
    """Prompt for a new task and append it to the store."""

    def __init__(self) -> None:
        super().__init__(key="1", label="Add New Task")

    def execute(self, app: "TaskTrackerApp") -> None:
        app.console.rule("Add New Task")
        title = app.prompter.ask_text("Title")
        description = app.prompter.ask_text("Description")
        priority = app.prompter.ask_priority()
        due_date = app.prompter.ask_due_date()

        app.store.add(Task(title, description, priority, due_date))
        app.console.print("SUCCESS: Task added and saved.", style="bold green")


class ViewTasksCommand(MenuCommand):
    """Show all tasks in insertion order."""

    def __init__(self) -> None:
        super().__init__(key="2", label="View All Tasks (Unsorted)")

    def execute(self, app: "TaskTrackerApp") -> None:
        app.show_tasks(app.store.list_tasks())


class _TaskNumberCommand(MenuCommand):
    """Shared flow for commands that act on one task picked by number."""

    empty_message = ""
    question = ""

    def execute(self, app: "TaskTrackerApp") -> None:
        tasks = app.store.list_tasks()
        if not tasks:
            app.console.print(self.empty_message)
            return
        app.show_tasks(tasks)

        number = app.prompter.ask_int(self.question)
        if number is None:
            return
        if self.apply(app, number):
            app.console.print(self.success_message(number), style="bold green")
        else:
            app.console.print(INVALID_TASK_NUMBER_MESSAGE, style="red")

    def apply(self, app: "TaskTrackerApp", number: int) -> bool:
        raise NotImplementedError

    def success_message(self, number: int) -> str:
        raise NotImplementedError


class CompleteTaskCommand(_TaskNumberCommand):
    """Mark one task as completed."""

    empty_message = "No tasks to mark complete."
    question = "Enter the number of the task to mark as complete: "

    def __init__(self) -> None:
        super().__init__(key="3", label="Mark Task as Complete")

    def apply(self, app: "TaskTrackerApp", number: int) -> bool:
        return app.store.mark_completed(number)

    def success_message(self, number: int) -> str:
        return f"SUCCESS: Task {number} marked as completed and saved."


class DeleteTaskCommand(_TaskNumberCommand):
    """Remove one task."""

    empty_message = "No tasks to delete."
    question = "Enter the number of the task to delete: "

    def __init__(self) -> None:
        super().__init__(key="4", label="Delete Task")

    def apply(self, app: "TaskTrackerApp", number: int) -> bool:
        return app.store.delete(number)

    def success_message(self, number: int) -> str:
        return f"SUCCESS: Task {number} deleted and saved."


class SortTasksCommand(MenuCommand):
    """Show a sorted view of the tasks without changing their stored order."""

    SORT_OPTIONS = {
        1: (SORT_BY_PRIORITY, "Sort by Priority (High to Low)"),
        2: (SORT_BY_DATE, "Sort by Due Date (Closest First)"),
    }

    def __init__(self) -> None:
        super().__init__(key="5", label="Sort and View Tasks")

    def execute(self, app: "TaskTrackerApp") -> None:
        app.console.rule("Sort Options")
        for number, (_, label) in self.SORT_OPTIONS.items():
            app.console.print(f"{number}. {label}")

        choice = app.prompter.ask_int("Enter sort choice (1 or 2): ")
        if choice is None:
            return
        option = self.SORT_OPTIONS.get(choice)
        if option is None:
            app.console.print("Invalid sort option. Returning to main menu.", style="red")
            return
        sort_key, label = option
        app.show_tasks(app.store.sorted_view(sort_key), title=label)


class ExitCommand(MenuCommand):
    """Save explicitly and leave the menu loop."""

    def __init__(self) -> None:
        super().__init__(key="6", label="Exit & Save")

    def execute(self, app: "TaskTrackerApp") -> None:
        app.store.save()
        app.console.print("Data saved. Exiting PTM. Goodbye!", style="bold")
        app.stop()


def builtin_commands() -> list[MenuCommand]:
    return [
        AddTaskCommand(),
        ViewTasksCommand(),
        CompleteTaskCommand(),
        DeleteTaskCommand(),
        SortTasksCommand(),
        ExitCommand(),
    ]
