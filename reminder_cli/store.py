"""CSV-backed persistence for the reminder list."""

import csv
from pathlib import Path
from typing import List, Optional, Sequence

from .errors import ParseError, StoreIOError
from .models import FIELDNAMES, Reminder


DEFAULT_DATA_FILE = "reminders.csv"


def parse_rows(reader) -> List[Reminder]:
    """
    Parse CSV rows into Reminders.

    The leading ``id,text`` header is skipped when present and blank rows
    are ignored. Error line numbers are physical lines in the file, so a
    quoted multi-line text shifts them.

    Args:
        reader: A ``csv.reader`` over the backing file

    Returns:
        Reminders in row order

    Raises:
        ParseError: If a row is malformed or an id appears twice
    """
    reminders = []
    seen_ids = set()

    first_row = True
    for row in reader:
        line_number = reader.line_num
        if not row:
            continue
        is_first, first_row = first_row, False
        if is_first and [cell.strip() for cell in row] == FIELDNAMES:
            continue

        reminder = Reminder.from_row(row, line_number)
        if reminder.id in seen_ids:
            raise ParseError(f"duplicate id {reminder.id}", line_number)
        seen_ids.add(reminder.id)
        reminders.append(reminder)

    return reminders


class ReminderStore:
    """Reads and writes the reminder list to a delimited text file."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else Path(DEFAULT_DATA_FILE)

    def ensure_file(self) -> None:
        """Create the backing file with just a header row if it doesn't exist."""
        if self.path.exists():
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreIOError(self.path, "create", e) from e
        self.save([])

    def load(self) -> List[Reminder]:
        """
        Load every reminder from the backing file.

        Returns:
            Reminders in file order (empty if the file was just created)

        Raises:
            StoreIOError: If the file can't be created or read
            ParseError: If a row is malformed
        """
        self.ensure_file()

        try:
            with open(self.path, "r", newline="", encoding="utf-8-sig") as f:
                return parse_rows(csv.reader(f))
        except OSError as e:
            raise StoreIOError(self.path, "read", e) from e
        except (UnicodeDecodeError, csv.Error) as e:
            raise ParseError(f"{self.path} is not a valid UTF-8 CSV file: {e}") from e

    def save(self, reminders: Sequence[Reminder]) -> None:
        """
        Overwrite the backing file with the given reminders.

        Raises:
            StoreIOError: If the file can't be written
        """
        try:
            with open(self.path, "w", newline="", encoding="utf-8") as f:
                writer = csv.writer(f)
                writer.writerow(FIELDNAMES)
                writer.writerows(reminder.to_row() for reminder in reminders)
        except OSError as e:
            raise StoreIOError(self.path, "write", e) from e
