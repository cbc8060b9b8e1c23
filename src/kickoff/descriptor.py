"""Read and rewrite the project descriptor (``package.json``)."""

from __future__ import annotations

import json
from pathlib import Path

from .config import load_json, write_json
from .models import SetupInput


class DescriptorError(RuntimeError):
    """Raised when the descriptor cannot be read, parsed, or written."""


def load_descriptor(path: Path) -> dict:
    """Load the descriptor at ``path``.

    Raises:
        DescriptorError: If the file is missing, unreadable, not JSON, or
            not a JSON object.
    """
    try:
        payload = load_json(path)
    except (OSError, UnicodeDecodeError) as exc:
        raise DescriptorError(f"failed to read {path.name}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise DescriptorError(f"failed to parse {path.name}: {exc}") from exc
    if payload is None:
        raise DescriptorError(f"{path.name} not found at {path.parent}")
    if not isinstance(payload, dict):
        raise DescriptorError(f"{path.name} must contain a JSON object")
    return payload


def apply_setup_input(descriptor: dict, setup_input: SetupInput) -> dict:
    """Return a copy of ``descriptor`` personalized with ``setup_input``.

    ``name`` is always replaced. ``description`` and ``author`` are only
    replaced by non-empty answers; blank answers keep what is there.

    Example:
        >>> apply_setup_input(
        ...     {"name": "template", "version": "1.0.0"},
        ...     SetupInput(project_name="my-api"),
        ... )
        {'name': 'my-api', 'version': '1.0.0'}
    """
    updated = dict(descriptor)
    updated["name"] = setup_input.project_name
    if setup_input.description:
        updated["description"] = setup_input.description
    if setup_input.author:
        updated["author"] = setup_input.author
    return updated


def write_descriptor(path: Path, payload: dict) -> None:
    """Write ``payload`` to ``path`` as indented JSON, keeping key order.

    Raises:
        DescriptorError: If the file cannot be written.
    """
    try:
        write_json(path, payload)
    except OSError as exc:
        raise DescriptorError(f"failed to write {path.name}: {exc}") from exc


def update_descriptor(path: Path, setup_input: SetupInput) -> dict:
    """Load, personalize, and write back the descriptor. Returns the payload."""
    payload = apply_setup_input(load_descriptor(path), setup_input)
    write_descriptor(path, payload)
    return payload
