"""Configuration helpers for Kickoff.

This module reads and writes JSON files and validates the optional setup
configuration file with Pydantic models.

Example:
    >>> from pathlib import Path
    >>> load_setup_config(None).descriptor_filename
    'package.json'
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, ValidationError

from .models import SetupConfig


class ConfigError(RuntimeError):
    """Raised when the setup configuration file cannot be used."""


def load_json(path: Path) -> dict | None:
    """Load a JSON file if it exists.

    Args:
        path: Path to the JSON file.

    Returns:
        Parsed payload, or ``None`` if the file does not exist.

    Example:
        >>> from pathlib import Path
        >>> load_json(Path("missing.json")) is None
        True
    """
    if not path.exists():
        return None
    with path.open("r", encoding="utf-8") as fh:
        return json.load(fh)


def write_json(path: Path, payload: dict | BaseModel) -> None:
    """Write a JSON payload to disk with a trailing newline.

    Keys are written in insertion order and non-ASCII text is kept as-is.

    Args:
        path: Path to the JSON file to write.
        payload: Dict or Pydantic model to serialize.
    """
    if isinstance(payload, BaseModel):
        payload = payload.model_dump()
    with path.open("w", encoding="utf-8") as fh:
        json.dump(payload, fh, indent=2, ensure_ascii=False)
        fh.write("\n")


def load_setup_config(path: Path | None) -> SetupConfig:
    """Load and validate the setup configuration.

    Args:
        path: Optional config file. ``None`` returns the defaults.

    Returns:
        Validated ``SetupConfig``.

    Raises:
        ConfigError: If the file is missing, malformed, or invalid.
    """
    if path is None:
        return SetupConfig()
    try:
        payload = load_json(path)
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(f"failed to read config {path}: {exc}") from exc
    if payload is None:
        raise ConfigError(f"config file not found: {path}")
    if not isinstance(payload, dict):
        raise ConfigError(f"config file must contain a JSON object: {path}")
    try:
        return SetupConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"invalid config {path}: {exc}") from exc
