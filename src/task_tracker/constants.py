"""Shared constants for the task tracker."""

# strftime/strptime patterns
INPUT_DATE_FORMAT = "%d-%m-%Y"
DISPLAY_DATE_FORMAT = "%d-%m-%Y"
INPUT_DATE_HINT = "dd-MM-yyyy"

EXPORT_HEADER = "Description,Priority,DueDate,IsCompleted"

SNAPSHOT_VERSION = 1

PRIORITY_LABELS = {1: "HIGH", 2: "MEDIUM", 3: "LOW"}
UNKNOWN_PRIORITY_LABEL = "N/A"

SORT_BY_PRIORITY = "priority"
SORT_BY_DATE = "date"


def priority_label(priority: int) -> str:
    """Human-readable label for a priority number."""
    return PRIORITY_LABELS.get(priority, UNKNOWN_PRIORITY_LABEL)
