"""Console logging for AI errors, warnings and messages."""

from __future__ import annotations


def log_error(text: str) -> None:
    """Print an AI error line."""
    print(f"*** AI ERROR *** : {text}")


def log_warning(text: str) -> None:
    """Print an AI warning line."""
    print(f"* AI WARNING * : {text}")


def log_message(text: str) -> None:
    """Print an AI log message line."""
    print(f"* AI LOG MESSAGE * : {text}")