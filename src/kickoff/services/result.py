"""Common service result contracts for orchestration entrypoints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Literal, TypeVar

ServiceFailureCode = Literal[
    "validation_failed",
    "dependency_missing",
    "policy_blocked",
    "external_command_failed",
    "io_failed",
    "unexpected_state",
]

T = TypeVar("T")


@dataclass(frozen=True)
class ServiceSuccess(Generic[T]):
    """Container for successful service outcomes.

    Args:
        outcome: Typed outcome payload returned by a service.
    """

    outcome: T


@dataclass(frozen=True)
class ServiceFailure:
    """Deterministic failure result for expected service errors.

    A failure halts the run; nothing after the failing step executes.

    Args:
        code: Stable failure code for callers and tests.
        message: Human-readable failure summary.
        recovery_hint: Optional actionable hint for recovery.
    """

    code: ServiceFailureCode
    message: str
    recovery_hint: str | None = None


@dataclass(frozen=True)
class ServiceWarning:
    """Non-fatal result for best-effort steps.

    Args:
        code: Stable failure code describing what went wrong.
        message: Human-readable warning shown to the user.
        detail: Underlying error text, logged at debug level.
    """

    code: ServiceFailureCode
    message: str
    detail: str | None = None


ServiceResult = ServiceSuccess[T] | ServiceFailure
StepResult = ServiceSuccess[T] | ServiceFailure | ServiceWarning


def service_success(outcome: T) -> ServiceSuccess[T]:
    """Create a successful service result."""

    return ServiceSuccess(outcome=outcome)


def service_failure(
    *,
    code: ServiceFailureCode,
    message: str,
    recovery_hint: str | None = None,
) -> ServiceFailure:
    """Create a deterministic service failure result.

    Args:
        code: Stable failure code.
        message: Human-readable failure summary.
        recovery_hint: Optional actionable hint for callers.

    Returns:
        ``ServiceFailure`` describing the expected failure.
    """

    return ServiceFailure(code=code, message=message, recovery_hint=recovery_hint)


def service_warning(
    *,
    code: ServiceFailureCode,
    message: str,
    detail: str | None = None,
) -> ServiceWarning:
    """Create a non-fatal warning result."""

    return ServiceWarning(code=code, message=message, detail=detail)
