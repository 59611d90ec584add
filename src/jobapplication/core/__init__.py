"""Core application evaluation components."""

from __future__ import annotations

from .evaluator import (
    ApplicationEvaluator,
    ApplicationEvaluatorConfig,
    ApplicationResult,
    Assessment,
    MissingApplicantError,
    MissingIdentityValidatorError,
)

__all__ = [
    "ApplicationEvaluator",
    "ApplicationEvaluatorConfig",
    "ApplicationResult",
    "Assessment",
    "MissingApplicantError",
    "MissingIdentityValidatorError",
]
