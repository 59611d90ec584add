from __future__ import annotations

import pytest
from pydantic import ValidationError

from jobapplication.schemas import Applicant, JobApplication


def test_job_application_defaults():
    application = JobApplication()

    assert application.applicant is None
    assert application.tech_stack_list == []
    assert application.years_of_experience == 0
    assert application.application_id is None


def test_job_application_from_mapping():
    application = JobApplication.model_validate(
        {
            "application_id": "A-100",
            "applicant": {"age": 34, "identity_number": "5ABC12D"},
            "tech_stack_list": ["C#", "RabbitMQ"],
            "years_of_experience": 9,
        }
    )

    assert application.applicant == Applicant(age=34, identity_number="5ABC12D")
    assert application.tech_stack_list == ["C#", "RabbitMQ"]


def test_applicant_requires_age():
    with pytest.raises(ValidationError):
        Applicant.model_validate({"identity_number": "5ABC12D"})


def test_unknown_fields_are_rejected():
    with pytest.raises(ValidationError):
        JobApplication.model_validate({"applicant": {"age": 30}, "salary": 1000})
