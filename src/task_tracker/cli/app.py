"""Interactive menu application for the task tracker.

The application owns nothing global: it is handed one TaskStore and
drives it from a numbered menu until the user exits.
"""

from typing import Sequence

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory
from rich.console import Console
from rich.text import Text

from task_tracker.cli.builtin_commands import builtin_commands
from task_tracker.cli.commands import CommandRegistry
from task_tracker.cli.prompts import NOT_A_NUMBER_MESSAGE, InputFunc, Prompter, parse_int
from task_tracker.cli.rendering import (
    EMPTY_LIST_MESSAGE,
    render_banner,
    render_menu,
    render_task_table,
)
from task_tracker.logging import Loggers
from task_tracker.tasks.models import Task
from task_tracker.tasks.store import TaskStore

logger = Loggers.cli()


class TaskTrackerApp:
    """Menu-driven shell around a TaskStore.

    Args:
        store: The task store to operate on.
        console: Rich console for output. Defaults to a new Console.
        input_func: Callable taking a prompt and returning one line.
            Defaults to a prompt_toolkit PromptSession.
    """

    def __init__(
        self,
        store: TaskStore,
        console: Console | None = None,
        input_func: InputFunc | None = None,
    ) -> None:
        self.store = store
        self.console = console or Console()
        if input_func is None:
            session: PromptSession[str] = PromptSession(history=InMemoryHistory())
            input_func = session.prompt
        self.prompter = Prompter(input_func, self.console)
        self.command_registry = CommandRegistry()
        for command in builtin_commands():
            self.command_registry.register(command)
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    def stop(self) -> None:
        """Leave the menu loop after the current command."""
        self._running = False

    def show_tasks(self, tasks: Sequence[Task], title: str = "Task List") -> None:
        if not tasks:
            self.console.print(EMPTY_LIST_MESSAGE)
            return
        self.console.print(render_task_table(tasks, title=title))

    def run(self) -> None:
        """Run the menu loop until Exit & Save, end of input, or Ctrl-C."""
        self.console.print(render_banner())
        logger.info("app_started", tasks=len(self.store))
        self._running = True
        try:
            while self._running:
                self.run_once()
        except (EOFError, KeyboardInterrupt):
            # Ctrl-D and Ctrl-C end the session like Exit & Save
            self.store.save()
            self.console.print("\nData saved. Exiting PTM. Goodbye!")
            self._running = False
        logger.info("app_stopped", tasks=len(self.store))

    def run_once(self) -> None:
        """Show the menu, read one choice and dispatch it."""
        self.console.print(render_menu(self.command_registry.all_commands()))
        choice = parse_int(self.prompter.ask_text("Enter your choice"))
        if choice is None:
            self.console.print(NOT_A_NUMBER_MESSAGE, style="red")
            return

        command = self.command_registry.get(str(choice))
        if command is None:
            self.console.print(
                f"Invalid choice. Please enter a number from 1 to {len(self.command_registry)}.",
                style="red",
            )
            return

        try:
            command.execute(self)
        except (EOFError, KeyboardInterrupt):
            raise
        except Exception as e:
            logger.exception("command_failed", command=command.label)
            self.console.print(Text(f"An unexpected error occurred: {e}", style="red"))
