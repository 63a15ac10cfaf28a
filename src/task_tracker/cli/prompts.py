"""Line prompts with validation loops for the interactive shell."""

import re
from datetime import date, datetime
from typing import Callable

from rich.console import Console

from task_tracker.constants import INPUT_DATE_FORMAT, INPUT_DATE_HINT, PRIORITY_LABELS

InputFunc = Callable[[str], str]

# strptime alone accepts single-digit day and month
_DATE_SHAPE = re.compile(r"\d{2}-\d{2}-\d{4}")

NOT_A_NUMBER_MESSAGE = "Invalid input. Please enter a number."
PRIORITY_RANGE_MESSAGE = "Priority must be 1, 2, or 3."
DATE_FORMAT_MESSAGE = (
    f"Invalid date format. Please use {INPUT_DATE_HINT} (e.g., 25-11-2025)."
)


def parse_int(text: str) -> int | None:
    """Parse a whole number, or None if the text is not one."""
    try:
        return int(text.strip())
    except ValueError:
        return None


def parse_due_date(text: str) -> date | None:
    """Parse a DD-MM-YYYY date, or None if the text does not match."""
    text = text.strip()
    if not _DATE_SHAPE.fullmatch(text):
        return None
    try:
        return datetime.strptime(text, INPUT_DATE_FORMAT).date()
    except ValueError:
        return None


class Prompter:
    """Reads and validates user input.

    EOFError and KeyboardInterrupt from the input function propagate so the
    application loop can shut down.
    """

    def __init__(self, input_func: InputFunc, console: Console) -> None:
        self._input = input_func
        self._console = console

    def ask_text(self, label: str) -> str:
        return self._input(f"{label}: ")

    def ask_int(self, label: str) -> int | None:
        """Ask once for a number; reports and returns None on non-numeric input."""
        value = parse_int(self._input(label))
        if value is None:
            self._console.print(NOT_A_NUMBER_MESSAGE, style="red")
        return value

    def ask_priority(self) -> int:
        """Ask until the user enters 1, 2 or 3."""
        while True:
            value = parse_int(self._input("Priority (1=High, 2=Medium, 3=Low): "))
            if value is None:
                self._console.print(NOT_A_NUMBER_MESSAGE, style="red")
            elif value in PRIORITY_LABELS:
                return value
            else:
                self._console.print(PRIORITY_RANGE_MESSAGE, style="red")

    def ask_due_date(self) -> date:
        """Ask until the user enters a valid DD-MM-YYYY date."""
        while True:
            value = parse_due_date(self._input(f"Due Date ({INPUT_DATE_HINT}): "))
            if value is not None:
                return value
            self._console.print(DATE_FORMAT_MESSAGE, style="red")
