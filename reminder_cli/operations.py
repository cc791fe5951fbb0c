"""Add, view and delete operations over the in-memory reminder list."""

from typing import List, Sequence

from .errors import NotFoundError, ParseError
from .models import Reminder, to_int


def next_id(reminders: Sequence[Reminder]) -> int:
    """Return one more than the highest id present, or 1 when empty."""
    max_id = 0
    for reminder in reminders:
        if reminder.id > max_id:
            max_id = reminder.id
    return max_id + 1


def add_reminder(reminders: List[Reminder], text: str) -> Reminder:
    """Append a new reminder with the next free id and return it."""
    reminder = Reminder(id=next_id(reminders), text=text)
    reminders.append(reminder)
    return reminder


def format_reminder(reminder: Reminder) -> str:
    return f"{reminder.id}: {reminder.text}"


def view_reminders(reminders: Sequence[Reminder]) -> List[str]:
    """Render each reminder as a display line, in list order."""
    return [format_reminder(reminder) for reminder in reminders]


def parse_id(raw: str) -> int:
    """Parse a user-typed reminder id."""
    reminder_id = to_int(raw)
    if reminder_id is None:
        raise ParseError(f"'{raw.strip()}' is not a valid reminder id")
    return reminder_id


def delete_reminder(reminders: List[Reminder], reminder_id: int) -> Reminder:
    """
    Remove the first reminder with the given id.

    Args:
        reminders: The list to modify in place
        reminder_id: Id of the reminder to remove

    Returns:
        The removed reminder

    Raises:
        NotFoundError: If no reminder has that id; the list is left untouched
    """
    for index, reminder in enumerate(reminders):
        if reminder.id == reminder_id:
            return reminders.pop(index)
    raise NotFoundError(reminder_id)
