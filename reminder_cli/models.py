"""Reminder record and its mapping to CSV rows."""

import re
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .errors import ParseError


FIELDNAMES = ["id", "text"]

DECIMAL_ID = re.compile(r"[+-]?[0-9]+")


def to_int(value: str) -> Optional[int]:
    """Convert an ASCII base-10 integer string, or return None."""
    value = value.strip()
    if not DECIMAL_ID.fullmatch(value):
        return None
    return int(value)


@dataclass
class Reminder:
    """A single user note."""
    id: int
    text: str

    @classmethod
    def from_row(cls, row: Sequence[str], line_number: Optional[int] = None) -> "Reminder":
        """Create a Reminder from a two-column CSV row."""
        if len(row) != len(FIELDNAMES):
            raise ParseError(
                f"expected {len(FIELDNAMES)} columns (id, text), got {len(row)}",
                line_number
            )

        raw_id, text = row
        reminder_id = to_int(raw_id)
        if reminder_id is None:
            raise ParseError(f"id {raw_id!r} is not an integer", line_number)

        return cls(id=reminder_id, text=text)

    def to_row(self) -> List[str]:
        return [str(self.id), self.text]
