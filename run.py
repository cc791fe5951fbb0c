#!/usr/bin/env python3
"""Entry point for running the reminder CLI from a checkout."""

from reminder_cli.app import main

if __name__ == "__main__":
    main()
