"""Terminal helpers: screen clearing, usage text and line input."""

import sys
from typing import Callable, Optional, TextIO


CLEAR_SCREEN = "\033[2J\033[H"

USAGE = """Welcome to the reminder CLI app!
Available commands are:
'add': add a new reminder
'view': view your reminders
'delete': delete a selected reminder
'help': show this message
'quit': exit the app"""


def clear_console(stream: Optional[TextIO] = None) -> None:
    """Clear the terminal with an ANSI escape sequence."""
    stream = stream or sys.stdout
    stream.write(CLEAR_SCREEN)
    stream.flush()


def read_line(prompt: str, input_func: Callable[[str], str] = input) -> Optional[str]:
    """
    Read one line of user input.

    Returns:
        The line without its trailing newline, or None at end of input
    """
    try:
        return input_func(prompt)
    except EOFError:
        return None
