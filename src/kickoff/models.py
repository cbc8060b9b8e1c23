"""Pydantic models for Kickoff setup input and configuration."""

from __future__ import annotations

import re
from pathlib import PurePosixPath

from pydantic import BaseModel, ConfigDict, field_validator

PROJECT_NAME_PATTERN = re.compile(r"[a-z0-9-]+")

EMPTY_NAME_MESSAGE = "Project name cannot be empty"
INVALID_CHARS_MESSAGE = "Project name can only contain lowercase letters, numbers, and hyphens"
EDGE_HYPHEN_MESSAGE = "Project name cannot start or end with a hyphen"


def validate_project_name(name: str) -> str | None:
    """Return the first rule a project name breaks, or ``None`` if valid.

    Example:
        >>> validate_project_name("my-api") is None
        True
        >>> validate_project_name("-bad-")
        'Project name cannot start or end with a hyphen'
    """
    if not name:
        return EMPTY_NAME_MESSAGE
    if not PROJECT_NAME_PATTERN.fullmatch(name):
        return INVALID_CHARS_MESSAGE
    if name.startswith("-") or name.endswith("-"):
        return EDGE_HYPHEN_MESSAGE
    return None


class SetupInput(BaseModel):
    """Answers collected for one setup run.

    Attributes:
        project_name: Validated package name.
        description: Optional description; empty means unchanged.
        author: Optional author; empty means unchanged.

    Example:
        >>> SetupInput(project_name="my-api").description
        ''
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    project_name: str
    description: str = ""
    author: str = ""

    @field_validator("project_name")
    @classmethod
    def check_project_name(cls, value: str) -> str:
        problem = validate_project_name(value)
        if problem is not None:
            raise ValueError(problem)
        return value


class SetupConfig(BaseModel):
    """Paths and policy used while personalizing a template checkout.

    Relative paths are resolved against the project root at run time.
    """

    model_config = ConfigDict(extra="forbid")

    descriptor_filename: str = "package.json"
    readme_filename: str = "README.md"
    instructions_filename: str = "template-instructions.md"
    launcher_path: str = "scripts/init.py"
    commit_message: str = "feat: initialize project from template"
    git_path: str = "git"
    remove_self: bool = True

    @field_validator(
        "descriptor_filename",
        "readme_filename",
        "instructions_filename",
        "launcher_path",
    )
    @classmethod
    def require_relative_path(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError("path must not be empty")
        candidate = PurePosixPath(normalized)
        if candidate.is_absolute() or ".." in candidate.parts:
            raise ValueError(f"path must stay inside the project root: {value}")
        return normalized

    @field_validator("commit_message", "git_path")
    @classmethod
    def require_text(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError("value must not be empty")
        return normalized
