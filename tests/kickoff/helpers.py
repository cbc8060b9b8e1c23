from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path

from kickoff import exec as exec_util

TEMPLATE_DESCRIPTOR = {"name": "template", "version": "1.0.0"}


def make_template_checkout(root: Path, descriptor: dict | None = None) -> Path:
    """Lay out the files of an unmodified template checkout under ``root``."""
    payload = TEMPLATE_DESCRIPTOR if descriptor is None else descriptor
    (root / "package.json").write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
    (root / "README.md").write_text("# template\n", encoding="utf-8")
    (root / "template-instructions.md").write_text("delete me\n", encoding="utf-8")
    scripts = root / "scripts"
    scripts.mkdir()
    (scripts / "init.py").write_text("# launcher\n", encoding="utf-8")
    (root / "src").mkdir()
    (root / "src" / "index.ts").write_text("export {};\n", encoding="utf-8")
    return root


def scripted_answers(answers: Iterable[str]):
    """Return an ``ask`` callable replaying ``answers`` and recording questions."""
    remaining = list(answers)
    asked: list[str] = []

    def ask(question: str) -> str:
        asked.append(question)
        if not remaining:
            raise AssertionError(f"unexpected prompt: {question}")
        return remaining.pop(0)

    ask.asked = asked  # type: ignore[attr-defined]
    return ask


class RecordingRunner:
    """Command runner that records requests and replays canned results."""

    def __init__(self, returncode: int = 0, *, missing: bool = False) -> None:
        self.returncode = returncode
        self.missing = missing
        self.requests: list[exec_util.CommandRequest] = []

    def run(self, request: exec_util.CommandRequest) -> exec_util.CommandResult | None:
        self.requests.append(request)
        if self.missing:
            return None
        return exec_util.CommandResult(
            argv=request.argv,
            returncode=self.returncode,
            stdout="",
            stderr="fatal: boom" if self.returncode else "",
        )
