from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Applicant(BaseModel):
    """Person applying for the position."""

    age: int
    identity_number: str | None = None

    model_config = ConfigDict(extra="forbid")


class JobApplication(BaseModel):
    """Application record submitted for evaluation."""

    application_id: str | None = None
    applicant: Applicant | None = None
    tech_stack_list: list[str] = Field(default_factory=list)
    years_of_experience: int = 0

    model_config = ConfigDict(extra="forbid")
