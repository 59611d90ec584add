"""Dependency injection container for the application evaluator."""

from __future__ import annotations

from dependency_injector import containers, providers

from .core import ApplicationEvaluator, ApplicationEvaluatorConfig
from .pipeline import EvaluationPipeline
from .services import IdentityValidatorConfig, PatternIdentityValidator


class EvaluationContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    identity_validator = providers.Singleton(PatternIdentityValidator)

    application_evaluator = providers.Singleton(
        ApplicationEvaluator,
        identity_validator=identity_validator,
    )

    pipeline = providers.Factory(
        EvaluationPipeline,
        evaluator=application_evaluator,
    )


def create_container(*, settings: dict | None = None) -> EvaluationContainer:
    """Instantiate container with optional overrides."""

    container = EvaluationContainer()

    if not settings:
        return container

    if "identity" in settings:
        identity_config = IdentityValidatorConfig(**settings["identity"])
        container.identity_validator.override(
            providers.Singleton(PatternIdentityValidator, config=identity_config)
        )

    if "evaluator" in settings:
        evaluator_config = ApplicationEvaluatorConfig(**settings["evaluator"])
        container.application_evaluator.override(
            providers.Singleton(
                ApplicationEvaluator,
                identity_validator=container.identity_validator,
                config=evaluator_config,
            )
        )

    return container
