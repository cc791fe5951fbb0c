"""Interactive command-line reminder manager backed by a CSV file."""

__version__ = "1.0.0"
