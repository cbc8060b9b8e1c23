from __future__ import annotations

import json
from pathlib import Path

import pytest

from kickoff import config


def test_load_setup_config_defaults_without_file() -> None:
    assert config.load_setup_config(None) == config.SetupConfig()


def test_load_setup_config_reads_overrides(tmp_path: Path) -> None:
    path = tmp_path / "kickoff.json"
    path.write_text(
        json.dumps({"launcher_path": "bin/setup.py", "remove_self": False}),
        encoding="utf-8",
    )

    loaded = config.load_setup_config(path)

    assert loaded.launcher_path == "bin/setup.py"
    assert loaded.remove_self is False
    assert loaded.descriptor_filename == "package.json"


@pytest.mark.parametrize(
    ("content", "match"),
    [
        ("{broken", "failed to read config"),
        ("[]", "JSON object"),
        ('{"readme_filename": "../README.md"}', "invalid config"),
    ],
)
def test_load_setup_config_rejects_bad_files(tmp_path: Path, content: str, match: str) -> None:
    path = tmp_path / "kickoff.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(config.ConfigError, match=match):
        config.load_setup_config(path)


def test_load_setup_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(config.ConfigError, match="not found"):
        config.load_setup_config(tmp_path / "absent.json")


def test_write_json_appends_newline(tmp_path: Path) -> None:
    path = tmp_path / "out.json"

    config.write_json(path, {"b": 1, "a": 2})

    assert path.read_text(encoding="utf-8") == '{\n  "b": 1,\n  "a": 2\n}\n'
