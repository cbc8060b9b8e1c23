"""Git helper functions used to reset a template checkout's history."""

from __future__ import annotations

import shutil
from pathlib import Path

from . import exec as exec_util

GIT_DIRNAME = ".git"
INITIAL_COMMIT_MESSAGE = "feat: initialize project from template"


class GitCommandError(RuntimeError):
    """Raised when git is missing or a git command exits non-zero."""


class GitNotFoundError(GitCommandError):
    """Raised when the git executable cannot be found."""


def git_command(args: list[str], *, git_path: str | None = None) -> list[str]:
    """Build a git command using an optional executable path.

    Example:
        >>> git_command(["init"])
        ['git', 'init']
        >>> git_command(["init"], git_path="/usr/bin/git")
        ['/usr/bin/git', 'init']
    """
    resolved = git_path.strip() if isinstance(git_path, str) else ""
    if not resolved:
        resolved = "git"
    return [resolved, *args]


def _run_git(
    args: list[str],
    *,
    cwd: Path,
    git_path: str | None = None,
    runner: exec_util.CommandRunner | None = None,
) -> exec_util.CommandResult:
    request = exec_util.CommandRequest(
        argv=tuple(git_command(args, git_path=git_path)),
        cwd=cwd,
    )
    result = exec_util.run_with_runner(request, runner=runner)
    if result is None:
        raise GitNotFoundError(exec_util.missing_command_detail(request))
    if not result.ok:
        raise GitCommandError(exec_util.command_failure_detail(request, result))
    return result


def git_dir(root: Path) -> Path:
    return root / GIT_DIRNAME


def remove_git_dir(root: Path) -> bool:
    """Delete the repository metadata directory under ``root``.

    Args:
        root: Project root.

    Returns:
        ``True`` when a ``.git`` directory was removed.
    """
    target = git_dir(root)
    if not target.exists() and not target.is_symlink():
        return False
    if target.is_dir() and not target.is_symlink():
        shutil.rmtree(target)
    else:
        target.unlink()
    return True


def reinitialize_repository(
    root: Path,
    *,
    message: str = INITIAL_COMMIT_MESSAGE,
    git_path: str | None = None,
    runner: exec_util.CommandRunner | None = None,
) -> None:
    """Create a fresh repository at ``root`` with one commit of every file.

    Args:
        root: Project root.
        message: Commit message for the initial commit.
        git_path: Optional git executable override.
        runner: Optional command runner (tests inject fakes).

    Raises:
        GitCommandError: If git is missing or any step exits non-zero.
    """
    _run_git(["init"], cwd=root, git_path=git_path, runner=runner)
    _run_git(["add", "."], cwd=root, git_path=git_path, runner=runner)
    _run_git(["commit", "-m", message], cwd=root, git_path=git_path, runner=runner)
