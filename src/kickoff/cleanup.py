"""Removal of files that only exist to support first-time setup."""

from __future__ import annotations

from pathlib import Path

from .models import SetupConfig


class CleanupError(RuntimeError):
    """Raised when a template artifact exists but cannot be removed."""


def template_artifacts(root: Path, config: SetupConfig, *, remove_self: bool) -> tuple[Path, ...]:
    """Return the template-only paths to delete under ``root``.

    The launcher is only listed when ``remove_self`` is set.
    """
    artifacts = [root / config.instructions_filename]
    if remove_self:
        artifacts.append(root / config.launcher_path)
    return tuple(artifacts)


def is_template_checkout(root: Path, config: SetupConfig, *, remove_self: bool) -> bool:
    """Return whether any template-only file is still present under ``root``.

    Setup deletes these files, so a checkout without them has already been
    personalized.
    """
    return any(
        path.exists() or path.is_symlink()
        for path in template_artifacts(root, config, remove_self=remove_self)
    )


def _display_path(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return str(path)


def remove_template_artifacts(
    root: Path,
    artifacts: tuple[Path, ...],
    *,
    launcher_dir: Path | None = None,
) -> tuple[str, ...]:
    """Delete ``artifacts`` that exist and report each removal.

    Missing files are skipped without a message, so calling this twice is
    safe. When ``launcher_dir`` is given and ends up empty it is removed too.

    Args:
        root: Project root, used for relative display paths.
        artifacts: Files to delete.
        launcher_dir: Directory holding the setup launcher.

    Returns:
        Removal messages in the order the removals happened.

    Raises:
        CleanupError: If an existing path cannot be removed.
    """
    messages: list[str] = []
    for artifact in artifacts:
        if not artifact.is_file() and not artifact.is_symlink():
            continue
        try:
            artifact.unlink()
        except FileNotFoundError:
            continue
        except OSError as exc:
            raise CleanupError(
                f"failed to remove {_display_path(artifact, root)}: {exc}"
            ) from exc
        messages.append(f"Removed {_display_path(artifact, root)}")

    if launcher_dir is not None and launcher_dir != root and launcher_dir.is_dir():
        if not any(launcher_dir.iterdir()):
            try:
                launcher_dir.rmdir()
            except OSError as exc:
                raise CleanupError(
                    f"failed to remove {_display_path(launcher_dir, root)}: {exc}"
                ) from exc
            messages.append(f"Removed empty {_display_path(launcher_dir, root)} directory")
    return tuple(messages)
