from .result import (
    ServiceFailure,
    ServiceResult,
    ServiceSuccess,
    ServiceWarning,
    StepResult,
    service_failure,
    service_success,
    service_warning,
)

__all__ = [
    "ServiceFailure",
    "ServiceResult",
    "ServiceSuccess",
    "ServiceWarning",
    "StepResult",
    "service_failure",
    "service_success",
    "service_warning",
]
