from __future__ import annotations

import pytest

import kickoff.log as kickoff_log


def test_level_defaults_to_info_and_reads_env(monkeypatch: pytest.MonkeyPatch) -> None:
    assert kickoff_log.configured_level() is kickoff_log.LogLevel.INFO

    monkeypatch.setattr(kickoff_log, "_configured_level", None)
    monkeypatch.setenv("KICKOFF_LOG_LEVEL", "debug")
    assert kickoff_log.configured_level() is kickoff_log.LogLevel.DEBUG


def test_unknown_level_falls_back_to_info() -> None:
    kickoff_log.set_level("loud")

    assert kickoff_log.configured_level() is kickoff_log.LogLevel.INFO


def test_warnings_go_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    kickoff_log.info("step done")
    kickoff_log.warning("careful")

    captured = capsys.readouterr()
    assert "step done" in captured.out
    assert "careful" in captured.err
    assert "careful" not in captured.out


def test_debug_is_hidden_at_info(capsys: pytest.CaptureFixture[str]) -> None:
    kickoff_log.debug("internal detail")
    kickoff_log.set_level("debug")
    kickoff_log.debug("visible detail")

    out = capsys.readouterr().out
    assert "internal detail" not in out
    assert "visible detail" in out


def test_no_color_override_wins_over_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("KICKOFF_NO_COLOR", raising=False)
    assert kickoff_log._no_color() is False

    kickoff_log.set_no_color(True)
    assert kickoff_log._no_color() is True


def test_errors_are_shown_at_every_level(capsys: pytest.CaptureFixture[str]) -> None:
    kickoff_log.set_level("error")
    kickoff_log.warning("quiet")
    kickoff_log.error("error: boom")

    captured = capsys.readouterr()
    assert "quiet" not in captured.err
    assert "error: boom" in captured.err
    assert captured.out == ""
