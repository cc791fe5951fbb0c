"""Configuration parser for the reminder CLI."""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .store import DEFAULT_DATA_FILE


@dataclass
class GeneralConfig:
    """General settings for the reminder CLI."""
    data_file: str = DEFAULT_DATA_FILE  # Relative to the working directory
    clear_screen: bool = True
    prompt: str = "> "

    @classmethod
    def from_dict(cls, settings: dict) -> "GeneralConfig":
        """Create a GeneralConfig from a dictionary."""
        config = cls(
            data_file=settings.get("data_file", DEFAULT_DATA_FILE),
            clear_screen=settings.get("clear_screen", True),
            prompt=settings.get("prompt", "> "),
        )

        if not isinstance(config.data_file, str) or not config.data_file:
            raise ValueError("'data_file' must be a non-empty string")
        if not isinstance(config.clear_screen, bool):
            raise ValueError("'clear_screen' must be true or false")
        if not isinstance(config.prompt, str):
            raise ValueError("'prompt' must be a string")

        return config

    @property
    def data_path(self) -> Path:
        return Path(self.data_file).expanduser()


def parse_config_data(config_data: dict) -> GeneralConfig:
    """
    Parse configuration data into a GeneralConfig.

    Only the [general] table is read; anything else is ignored.

    Args:
        config_data: Raw parsed TOML data

    Returns:
        GeneralConfig with defaults for any missing keys
    """
    settings = config_data.get("general", {})
    if not isinstance(settings, dict):
        raise ValueError("[general] must be a table")
    return GeneralConfig.from_dict(settings)


def load_config_file(config_file: Path) -> dict:
    """Load and parse a TOML configuration file."""
    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_file}")

    with open(config_file, "rb") as f:
        return tomllib.load(f)


class ConfigManager:
    """Manages loading of the optional settings file."""

    DEFAULT_CONFIG_DIR = Path.home() / ".config" / "reminder-cli"
    CONFIG_FILE = "config.toml"

    def __init__(self, config_dir: Optional[Path] = None):
        self.config_dir = Path(config_dir) if config_dir else self.DEFAULT_CONFIG_DIR
        self.config_file = self.config_dir / self.CONFIG_FILE
        self.general: GeneralConfig = GeneralConfig()

    def load_config(self) -> GeneralConfig:
        """
        Load the settings file, falling back to defaults if it doesn't exist.

        Raises:
            tomllib.TOMLDecodeError: If the file isn't valid TOML
            ValueError: If a setting has the wrong type
        """
        try:
            config_data = load_config_file(self.config_file)
        except FileNotFoundError:
            self.general = GeneralConfig()
            return self.general

        self.general = parse_config_data(config_data)
        return self.general

    def load_from_data(self, config_data: dict) -> GeneralConfig:
        """Load settings from already-parsed config data."""
        self.general = parse_config_data(config_data)
        return self.general
