from __future__ import annotations

import pytest
from pydantic import ValidationError

from jobapplication.container import create_container
from jobapplication.core import ApplicationResult
from jobapplication.schemas import Applicant, JobApplication
from jobapplication.schemas.config import AppConfig, load_config


def test_create_container_defaults():
    container = create_container()

    evaluator = container.application_evaluator()

    assert evaluator._config.home_country == "Azerbaijan"
    assert evaluator._identity_validator is container.identity_validator()


def test_create_container_with_overrides():
    container = create_container(
        settings={
            "evaluator": {
                "home_country": "Georgia",
                "reference_tech_stack": ["Python", "Postgres"],
                "auto_reject_similarity": 50,
            },
            "identity": {"country": "Georgia", "pattern": r"\d{11}"},
        }
    )

    validator = container.identity_validator()
    evaluator = container.application_evaluator()

    assert validator.country_data_provider.country_data.country == "Georgia"
    assert evaluator._config.reference_tech_stack == ("Python", "Postgres")
    assert evaluator._identity_validator is validator

    application = JobApplication(
        applicant=Applicant(age=30, identity_number="01234567890"),
        tech_stack_list=["python"],
    )
    assert evaluator.evaluate(application) is ApplicationResult.AUTO_ACCEPTED


def test_identity_override_reaches_default_evaluator():
    container = create_container(settings={"identity": {"country": "Spain"}})

    evaluator = container.application_evaluator()
    application = JobApplication(applicant=Applicant(age=30, identity_number="5ABC12D"))

    assert evaluator.evaluate(application) is ApplicationResult.TRANSFERRED_TO_CTO


def test_load_config_validation():
    data = {
        "evaluator": {"home_country": "Georgia"},
        "identity": {"revoked": ["5ABC12D"]},
    }
    app_config = load_config(data)
    assert isinstance(app_config, AppConfig)
    settings = app_config.to_settings()
    assert settings == {
        "evaluator": {"home_country": "Georgia"},
        "identity": {"revoked": ["5ABC12D"]},
    }


def test_load_config_rejects_non_mapping():
    with pytest.raises(ValueError):
        load_config(["evaluator"])


def test_load_config_rejects_empty_reference_stack():
    with pytest.raises(ValidationError):
        load_config({"evaluator": {"reference_tech_stack": []}})


def test_empty_config_produces_no_settings():
    assert load_config({}).to_settings() == {}


def test_load_config_rejects_malformed_identity_pattern():
    with pytest.raises(ValueError):
        load_config({"identity": {"pattern": "[A-Z"}})


def test_load_config_accepts_valid_identity_pattern():
    settings = load_config({"identity": {"pattern": r"\d{11}"}}).to_settings()

    assert settings == {"identity": {"pattern": r"\d{11}"}}
