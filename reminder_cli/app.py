"""Main application for the reminder CLI."""

import sys
from pathlib import Path
from typing import Callable, List, Optional, TextIO

from .config import ConfigManager, GeneralConfig
from .console import USAGE, clear_console, read_line
from .errors import NotFoundError, ParseError, StoreIOError
from .models import Reminder
from .operations import add_reminder, delete_reminder, parse_id, view_reminders
from .store import ReminderStore


class ReminderApp:
    """
    Interactive command loop over an in-memory reminder list.

    Manages:
    - Configuration loading
    - Loading and saving the backing file
    - Reading and dispatching commands
    """

    def __init__(
        self,
        config_dir: Optional[Path] = None,
        input_func: Callable[[str], str] = input,
        output: Optional[TextIO] = None
    ):
        """
        Initialize the ReminderApp.

        Args:
            config_dir: Optional custom config directory path
            input_func: Function used to read a line, called with the prompt
            output: Stream to print to (defaults to stdout)
        """
        self.config_manager = ConfigManager(config_dir)
        self.config: GeneralConfig = self.config_manager.general
        self.store: Optional[ReminderStore] = None
        self.reminders: List[Reminder] = []
        self.running = False

        self._input = input_func
        self.output = output or sys.stdout

    def initialize(self) -> bool:
        """
        Load configuration and the reminder list.

        Returns:
            True on success
        """
        try:
            config = self.config_manager.load_config()
        except OSError as e:
            self._print(f"Error: could not read configuration {self.config_manager.config_file}: {e}")
            return False
        except ValueError as e:
            self._print(f"Error: invalid configuration in {self.config_manager.config_file}: {e}")
            return False

        return self.initialize_with(config)

    def initialize_with(self, config: GeneralConfig) -> bool:
        """
        Initialize with an already-built config (for testing).

        Returns:
            True on success
        """
        self.config = config
        self.store = ReminderStore(config.data_path)

        try:
            self.reminders = self.store.load()
        except StoreIOError as e:
            self._print(f"Error: {e}")
            return False
        except ParseError as e:
            self._print(f"Error: {self.store.path} is malformed: {e}")
            self._print("Fix or remove the offending row and restart.")
            return False

        self._print(f"Successfully read {len(self.reminders)} reminders from {self.store.path}")
        return True

    def run(self) -> None:
        """Run the command loop until quit or end of input."""
        self.running = True
        self._clear()
        self._print("Type 'help' for a list of commands.")

        try:
            while self.running:
                line = self._read(self.config.prompt)
                if line is None:
                    break
                self.handle_command(line)
        except KeyboardInterrupt:
            self._print("")

        self.quit()

    def handle_command(self, line: str) -> bool:
        """
        Dispatch a single command line.

        Returns:
            True if the loop should keep running
        """
        command = line.strip().lower()

        if command == "quit":
            self.running = False
        elif command == "help":
            self.show_help()
        elif command == "add":
            self.add()
        elif command == "view":
            self.view()
        elif command == "delete":
            self.delete()
        else:
            self._print("Unrecognized command")

        return self.running

    def show_help(self) -> None:
        self._clear()
        self._print(USAGE)

    def add(self) -> None:
        """Prompt for text, add a reminder and persist."""
        text = self._read("Reminder text: ")
        if text is None:
            self.running = False
            return

        reminder = add_reminder(self.reminders, text)
        self._print(f"Added reminder {reminder.id}")
        self.save()

    def view(self) -> None:
        if not self.reminders:
            self._print("No reminders yet")
            return
        for line in view_reminders(self.reminders):
            self._print(line)

    def delete(self) -> None:
        """Prompt for an id, delete the matching reminder and persist."""
        raw_id = self._read("Reminder id to delete: ")
        if raw_id is None:
            self.running = False
            return

        try:
            reminder = delete_reminder(self.reminders, parse_id(raw_id))
        except ParseError as e:
            self._print(f"Error: {e}")
            return
        except NotFoundError as e:
            self._print(str(e))
            return

        self._print(f"Deleted reminder {reminder.id}")
        self.save()

    def save(self) -> bool:
        """
        Write the full list to the backing file.

        Returns:
            True if the write succeeded
        """
        try:
            self.store.save(self.reminders)
        except StoreIOError as e:
            self._print(f"Error: {e}")
            self._print("Your changes are kept in memory; try again or quit.")
            return False
        return True

    def quit(self) -> None:
        """Stop the loop and say goodbye."""
        self.running = False
        self._clear()
        self._print("Thank you for using this app")

    def _read(self, prompt: str) -> Optional[str]:
        return read_line(prompt, self._input)

    def _clear(self) -> None:
        if self.config.clear_screen:
            clear_console(self.output)

    def _print(self, message: str) -> None:
        print(message, file=self.output)


def main():
    """Main entry point."""
    reminder_app = ReminderApp()

    if not reminder_app.initialize():
        sys.exit(1)

    reminder_app.run()


if __name__ == "__main__":
    main()
