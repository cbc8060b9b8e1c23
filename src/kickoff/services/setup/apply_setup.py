"""Apply collected setup answers to a template checkout.

The run only starts in a checkout that still has its template files, so it
cannot wipe the history of a project it already personalized. It is then a
fixed sequence: descriptor, README, template cleanup, then git history
reset. The first three steps are fatal on failure and stop the run where it
is; the git reset is best-effort and only yields a warning.
Nothing already written is rolled back.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from pydantic import BaseModel, ConfigDict, Field

from ... import cleanup, descriptor, git, readme
from ... import exec as exec_util
from ...models import SetupConfig, SetupInput
from ..result import (
    ServiceFailure,
    ServiceResult,
    ServiceSuccess,
    ServiceWarning,
    StepResult,
    service_failure,
    service_success,
    service_warning,
)

GIT_WARNING_MESSAGE = "Could not initialize git (this is optional)"
ALREADY_SET_UP_MESSAGE = "no template files left in {root}; setup has already run"
ALREADY_SET_UP_HINT = "Clone a fresh copy of the template to start another project."


def check_template_checkout(
    project_root: Path, config: SetupConfig, *, remove_self: bool
) -> ServiceFailure | None:
    """Refuse to run in a checkout that was already personalized."""
    if cleanup.is_template_checkout(project_root, config, remove_self=remove_self):
        return None
    return service_failure(
        code="policy_blocked",
        message=ALREADY_SET_UP_MESSAGE.format(root=project_root),
        recovery_hint=ALREADY_SET_UP_HINT,
    )


class ApplySetupRequest(BaseModel):
    """Input contract for one setup run.

    Attributes:
        project_root: Directory of the template checkout.
        setup_input: Validated answers.
        config: File names and git settings.
        remove_self: Delete the setup launcher as the last cleanup action.
    """

    project_root: Path
    setup_input: SetupInput
    config: SetupConfig = Field(default_factory=SetupConfig)
    remove_self: bool = True

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @property
    def descriptor_path(self) -> Path:
        return self.project_root / self.config.descriptor_filename

    @property
    def readme_path(self) -> Path:
        return self.project_root / self.config.readme_filename

    @property
    def launcher_dir(self) -> Path:
        return (self.project_root / self.config.launcher_path).parent


@dataclass(frozen=True)
class ApplySetupOutcome:
    """Outcome payload for a completed setup run.

    Args:
        project_root: Directory that was personalized.
        descriptor: Descriptor payload as written.
        messages: User-facing step lines in output order.
        warnings: Best-effort steps that did not succeed.
    """

    project_root: Path
    descriptor: dict
    messages: tuple[str, ...]
    warnings: tuple[ServiceWarning, ...] = ()


@dataclass(frozen=True)
class ApplySetupDependencies:
    """Side-effecting collaborators, replaceable in tests."""

    update_descriptor: Callable[[Path, SetupInput], dict] = descriptor.update_descriptor
    render_readme: Callable[[str, str], str] = readme.render_readme
    write_readme: Callable[[Path, str], None] = readme.write_readme
    template_artifacts: Callable[..., tuple[Path, ...]] = cleanup.template_artifacts
    remove_template_artifacts: Callable[..., tuple[str, ...]] = (
        cleanup.remove_template_artifacts
    )
    remove_git_dir: Callable[[Path], bool] = git.remove_git_dir
    reinitialize_repository: Callable[..., None] = git.reinitialize_repository
    runner: exec_util.CommandRunner | None = field(default=None)


class ApplySetupService:
    """Personalize a template checkout from validated answers."""

    def __init__(
        self,
        dependencies: ApplySetupDependencies | None = None,
        *,
        report: Callable[[str], None] | None = None,
    ) -> None:
        """Create the service.

        Args:
            dependencies: Step collaborators; defaults touch the real filesystem.
            report: Called with each step message as soon as the step finishes.
        """
        self._deps = dependencies or ApplySetupDependencies()
        self._report = report

    def run(self, request: ApplySetupRequest) -> ServiceResult[ApplySetupOutcome]:
        """Run every setup step in order.

        Args:
            request: Typed setup request.

        Returns:
            ``ServiceSuccess`` with the outcome (possibly carrying warnings),
            or the ``ServiceFailure`` of the first fatal step.
        """

        blocked = check_template_checkout(
            request.project_root, request.config, remove_self=request.remove_self
        )
        if blocked is not None:
            return blocked

        messages: list[str] = []
        warnings: list[ServiceWarning] = []

        updated = self.update_descriptor(request)
        if isinstance(updated, ServiceFailure):
            return updated
        payload = updated.outcome
        self._record(messages, f"Updated {request.config.descriptor_filename}")

        generated = self.regenerate_readme(request)
        if isinstance(generated, ServiceFailure):
            return generated
        self._record(messages, f"Generated {request.config.readme_filename}")

        removed = self.remove_template_artifacts(request)
        if isinstance(removed, ServiceFailure):
            return removed
        for line in removed.outcome:
            self._record(messages, line)

        cleared = self.remove_git_history(request)
        if isinstance(cleared, ServiceSuccess):
            if cleared.outcome:
                self._record(messages, "Removed git history")
            initialized = self.initialize_repository(request)
            if isinstance(initialized, ServiceSuccess):
                self._record(messages, "Initialized git repository with initial commit")
            elif isinstance(initialized, ServiceWarning):
                warnings.append(initialized)
        elif isinstance(cleared, ServiceWarning):
            warnings.append(cleared)

        return service_success(
            ApplySetupOutcome(
                project_root=request.project_root,
                descriptor=payload,
                messages=tuple(messages),
                warnings=tuple(warnings),
            )
        )

    def _record(self, messages: list[str], message: str) -> None:
        messages.append(message)
        if self._report is not None:
            self._report(message)

    def update_descriptor(self, request: ApplySetupRequest) -> StepResult[dict]:
        try:
            payload = self._deps.update_descriptor(request.descriptor_path, request.setup_input)
        except descriptor.DescriptorError as exc:
            return service_failure(
                code="io_failed",
                message=str(exc),
                recovery_hint="Run setup from the root of an unmodified template checkout.",
            )
        return service_success(payload)

    def regenerate_readme(self, request: ApplySetupRequest) -> StepResult[str]:
        content = self._deps.render_readme(
            request.setup_input.project_name, request.setup_input.description
        )
        try:
            self._deps.write_readme(request.readme_path, content)
        except readme.ReadmeError as exc:
            return service_failure(code="io_failed", message=str(exc))
        return service_success(content)

    def remove_template_artifacts(
        self, request: ApplySetupRequest
    ) -> StepResult[tuple[str, ...]]:
        artifacts = self._deps.template_artifacts(
            request.project_root, request.config, remove_self=request.remove_self
        )
        try:
            removed = self._deps.remove_template_artifacts(
                request.project_root, artifacts, launcher_dir=request.launcher_dir
            )
        except cleanup.CleanupError as exc:
            return service_failure(code="io_failed", message=str(exc))
        return service_success(tuple(removed))

    def remove_git_history(self, request: ApplySetupRequest) -> StepResult[bool]:
        try:
            removed = self._deps.remove_git_dir(request.project_root)
        except OSError as exc:
            return service_warning(
                code="io_failed",
                message=GIT_WARNING_MESSAGE,
                detail=f"failed to remove git history: {exc}",
            )
        return service_success(removed)

    def initialize_repository(self, request: ApplySetupRequest) -> StepResult[None]:
        try:
            self._deps.reinitialize_repository(
                request.project_root,
                message=request.config.commit_message,
                git_path=request.config.git_path,
                runner=self._deps.runner,
            )
        except git.GitNotFoundError as exc:
            return service_warning(
                code="dependency_missing", message=GIT_WARNING_MESSAGE, detail=str(exc)
            )
        except git.GitCommandError as exc:
            return service_warning(
                code="external_command_failed", message=GIT_WARNING_MESSAGE, detail=str(exc)
            )
        return service_success(None)
