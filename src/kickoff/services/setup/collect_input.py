"""Interactive collection of setup answers."""

from __future__ import annotations

from typing import Callable

from ... import log
from ...models import SetupInput, validate_project_name

PROJECT_NAME_QUESTION = "What is your project name? (e.g., my-awesome-api)"
DESCRIPTION_QUESTION = "Project description (optional - press Enter to skip):"
AUTHOR_QUESTION = "Author name (optional - press Enter to skip):"

AskLine = Callable[[str], str]


def ask_project_name(ask: AskLine) -> str:
    """Ask for a project name until one passes validation.

    Every rejected answer is reported with the rule it broke before the
    question is repeated.
    """
    while True:
        name = ask(PROJECT_NAME_QUESTION).strip()
        problem = validate_project_name(name)
        if problem is None:
            return name
        log.warning(f"  ✗ {problem}")


def collect_setup_input(ask: AskLine) -> SetupInput:
    """Collect the project name, description, and author, in that order.

    Args:
        ask: Reads one answer for a question. ``io.ask_line`` in the CLI.

    Returns:
        Validated ``SetupInput``.
    """
    project_name = ask_project_name(ask)
    description = ask(DESCRIPTION_QUESTION)
    author = ask(AUTHOR_QUESTION)
    return SetupInput(project_name=project_name, description=description, author=author)
