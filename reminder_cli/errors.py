"""Error types raised by the reminder store and operations."""

from pathlib import Path
from typing import Optional


class ReminderError(Exception):
    """Base class for all reminder errors."""


class StoreIOError(ReminderError):
    """The backing file could not be opened, read or written."""

    def __init__(self, path: Path, action: str, cause: OSError):
        self.path = Path(path)
        self.action = action
        self.cause = cause
        super().__init__(
            f"Could not {action} {self.path}: {cause.strerror or cause}\n"
            f"Please create the file or verify its permissions."
        )


class ParseError(ReminderError, ValueError):
    """A row in the backing file, or an id typed by the user, is malformed."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class NotFoundError(ReminderError, LookupError):
    """No reminder has the requested id."""

    def __init__(self, reminder_id: int):
        self.reminder_id = reminder_id
        super().__init__(f"Reminder {reminder_id} not found")
