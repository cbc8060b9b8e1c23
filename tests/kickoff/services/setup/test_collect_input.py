from __future__ import annotations

import pytest

from kickoff.services.setup import collect_input
from tests.kickoff.helpers import scripted_answers


def test_accepts_valid_name_on_first_attempt(capsys: pytest.CaptureFixture[str]) -> None:
    ask = scripted_answers(["good-name1", "", ""])

    setup_input = collect_input.collect_setup_input(ask)

    assert setup_input.project_name == "good-name1"
    assert setup_input.description == ""
    assert setup_input.author == ""
    assert ask.asked == [
        collect_input.PROJECT_NAME_QUESTION,
        collect_input.DESCRIPTION_QUESTION,
        collect_input.AUTHOR_QUESTION,
    ]
    assert "✗" not in capsys.readouterr().err


def test_reprompts_with_rule_specific_errors(capsys: pytest.CaptureFixture[str]) -> None:
    ask = scripted_answers(["", "-bad-", "BadName", "good-name1", "A cool API", "Jane"])

    setup_input = collect_input.collect_setup_input(ask)

    assert setup_input.project_name == "good-name1"
    assert setup_input.description == "A cool API"
    assert setup_input.author == "Jane"
    assert ask.asked.count(collect_input.PROJECT_NAME_QUESTION) == 4
    err = capsys.readouterr().err
    assert err.index("Project name cannot be empty") < err.index(
        "Project name cannot start or end with a hyphen"
    )
    assert err.index("Project name cannot start or end with a hyphen") < err.index(
        "Project name can only contain lowercase letters, numbers, and hyphens"
    )


def test_optional_answers_are_asked_once() -> None:
    ask = scripted_answers(["my-api", "  spaced out  ", "  "])

    setup_input = collect_input.collect_setup_input(ask)

    assert setup_input.description == "spaced out"
    assert setup_input.author == ""
    assert len(ask.asked) == 3
