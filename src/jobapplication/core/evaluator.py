"""Rule-based job application evaluator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

import structlog

from ..schemas import JobApplication
from ..services import IdentityValidator, ValidationMode


class ApplicationResult(str, Enum):
    """Outcome of an application evaluation."""

    AUTO_REJECTED = "auto_rejected"
    TRANSFERRED_TO_HR = "transferred_to_hr"
    # Not produced by any rule yet.
    TRANSFERRED_TO_LEAD = "transferred_to_lead"
    TRANSFERRED_TO_CTO = "transferred_to_cto"
    AUTO_ACCEPTED = "auto_accepted"


class MissingApplicantError(ValueError):
    """Raised when an application is evaluated without an applicant."""

    def __init__(self, application_id: str | None = None):
        super().__init__("Application has no applicant")
        self.application_id = application_id


class MissingIdentityValidatorError(ValueError):
    """Raised when an adult applicant reaches the evaluator without a validator."""

    def __init__(self) -> None:
        super().__init__("An identity validator is required to evaluate applicants of legal age")


@dataclass(slots=True)
class Assessment:
    """Decision together with the rule that produced it.

    ``similarity_rate`` is only set when the chain got as far as comparing
    tech stacks.
    """

    result: ApplicationResult
    rule: str
    similarity_rate: int | None = None


@dataclass
class ApplicationEvaluatorConfig:
    """Business rule constants for application evaluation."""

    min_age: int = 18
    detailed_validation_age: int = 50
    home_country: str = "Azerbaijan"
    reference_tech_stack: tuple[str, ...] = ("C#", "RabbitMQ", "Microservice", "Visual Studio")
    auto_reject_similarity: int = 25
    auto_accept_similarity: int = 75
    auto_accept_years_of_experience: int = 15

    def __post_init__(self) -> None:
        self.reference_tech_stack = tuple(self.reference_tech_stack)
        if not self.reference_tech_stack:
            raise ValueError("reference_tech_stack must not be empty")


class ApplicationEvaluator:
    """Decide whether an application is accepted, rejected or escalated.

    The decision chain short-circuits in a fixed order: applicant age, country
    of the identity validator, identity validity, then tech-stack similarity.
    The validator's ``validation_mode`` is written once for every applicant
    old enough to be considered, before any other validator access.
    """

    def __init__(
        self,
        identity_validator: IdentityValidator | None,
        *,
        config: ApplicationEvaluatorConfig | None = None,
    ) -> None:
        self._identity_validator = identity_validator
        self._config = config or ApplicationEvaluatorConfig()
        self._reference_keys = {tech.casefold() for tech in self._config.reference_tech_stack}
        self._logger = structlog.get_logger(__name__)

    def evaluate(self, application: JobApplication) -> ApplicationResult:
        return self.assess(application).result

    def assess(self, application: JobApplication) -> Assessment:
        """Run the decision chain and report which rule fired."""
        applicant = application.applicant
        if applicant is None:
            raise MissingApplicantError(application.application_id)

        if applicant.age < self._config.min_age:
            return self._decide(application, ApplicationResult.AUTO_REJECTED, "under_age")

        validator = self._identity_validator
        if validator is None:
            raise MissingIdentityValidatorError()
        validator.validation_mode = (
            ValidationMode.DETAILED
            if applicant.age > self._config.detailed_validation_age
            else ValidationMode.QUICK
        )

        if validator.country_data_provider.country_data.country != self._config.home_country:
            return self._decide(application, ApplicationResult.TRANSFERRED_TO_CTO, "foreign_country")

        if not validator.is_valid(applicant.identity_number):
            return self._decide(application, ApplicationResult.TRANSFERRED_TO_HR, "invalid_identity")

        rate = self.similarity_rate(application.tech_stack_list)

        if rate < self._config.auto_reject_similarity:
            return self._decide(application, ApplicationResult.AUTO_REJECTED, "low_similarity", rate)

        # Same outcome as the fallback below; kept as its own rule.
        if (
            rate > self._config.auto_accept_similarity
            and application.years_of_experience >= self._config.auto_accept_years_of_experience
        ):
            return self._decide(application, ApplicationResult.AUTO_ACCEPTED, "senior_high_similarity", rate)

        return self._decide(application, ApplicationResult.AUTO_ACCEPTED, "default", rate)

    def similarity_rate(self, tech_stack_list: Iterable[str]) -> int:
        """Percentage of reference technologies present in ``tech_stack_list``.

        Matching is case-insensitive and the result is truncated toward zero.
        """
        submitted = {tech.casefold() for tech in tech_stack_list}
        matched = len(self._reference_keys & submitted)
        return (100 * matched) // len(self._reference_keys)

    def _decide(
        self,
        application: JobApplication,
        result: ApplicationResult,
        rule: str,
        similarity_rate: int | None = None,
    ) -> Assessment:
        self._logger.debug(
            "application.decision",
            application_id=application.application_id,
            result=result.value,
            rule=rule,
            similarity_rate=similarity_rate,
        )
        return Assessment(result=result, rule=rule, similarity_rate=similarity_rate)
