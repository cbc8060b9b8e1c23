"""Console I/O helpers for user-facing messages and prompts."""

from __future__ import annotations

import sys
from typing import NoReturn

import questionary

from . import log


def _use_questionary() -> bool:
    return sys.stdin.isatty() and sys.stdout.isatty()


def say(message: str) -> None:
    """Print a normal message to stdout.

    Args:
        message: Text to print.

    Example:
        >>> say("Hello")
        Hello
    """
    print(message)


def die(message: str, code: int = 1) -> NoReturn:
    """Print an error message and exit.

    Args:
        message: Error message to display.
        code: Exit code to use.

    Returns:
        Never returns. Exits the process via ``sys.exit``.
    """
    log.error(f"error: {message}")
    sys.exit(code)


def ask_line(text: str) -> str:
    """Read one answer for ``text`` and return it stripped.

    Uses questionary on an interactive terminal and plain ``input`` when
    either stream is redirected. End of input or an interrupted prompt
    aborts the run.

    Example:
        What is your project name? (e.g., my-awesome-api) my-api
    """
    if _use_questionary():
        value = questionary.text(text).ask()
        if value is None:
            die("aborted")
        return str(value).strip()
    try:
        return input(f"{text} ").strip()
    except (EOFError, KeyboardInterrupt):
        die("aborted")
