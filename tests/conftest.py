# ruff: noqa: E402

import builtins
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import kickoff.io as io
import kickoff.log as kickoff_log


@pytest.fixture(autouse=True)
def _non_interactive_io(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(io, "_use_questionary", lambda: False)
    monkeypatch.setattr(kickoff_log, "_configured_level", None)
    monkeypatch.setattr(kickoff_log, "_no_color_override", None)
    monkeypatch.delenv("KICKOFF_LOG_LEVEL", raising=False)

    def fail_input(prompt: str = "") -> str:
        raise AssertionError("prompted unexpectedly")

    monkeypatch.setattr(builtins, "input", fail_input)
