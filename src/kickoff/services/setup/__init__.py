"""Project setup service modules."""

from .apply_setup import (
    ApplySetupDependencies,
    ApplySetupOutcome,
    ApplySetupRequest,
    ApplySetupService,
    check_template_checkout,
)
from .collect_input import collect_setup_input

__all__ = [
    "ApplySetupDependencies",
    "ApplySetupOutcome",
    "ApplySetupRequest",
    "ApplySetupService",
    "check_template_checkout",
    "collect_setup_input",
]
