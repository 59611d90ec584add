"""Pydantic configuration schema for CLI YAML input."""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EvaluatorSettings(BaseModel):
    min_age: int | None = None
    detailed_validation_age: int | None = None
    home_country: str | None = None
    reference_tech_stack: list[str] | None = Field(default=None, min_length=1)
    auto_reject_similarity: int | None = None
    auto_accept_similarity: int | None = None
    auto_accept_years_of_experience: int | None = None

    model_config = ConfigDict(extra="forbid")


class IdentitySettings(BaseModel):
    country: str | None = None
    pattern: str | None = None
    revoked: list[str] | None = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("pattern")
    @classmethod
    def _compile_pattern(cls, value: str | None) -> str | None:
        if value is not None:
            try:
                re.compile(value)
            except re.error as exc:
                raise ValueError(f"invalid identity pattern {value!r}: {exc}") from exc
        return value


class AppConfig(BaseModel):
    evaluator: EvaluatorSettings = Field(default_factory=EvaluatorSettings)
    identity: IdentitySettings = Field(default_factory=IdentitySettings)

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        evaluator_settings = self.evaluator.model_dump(exclude_none=True)
        if evaluator_settings:
            settings["evaluator"] = evaluator_settings
        identity_settings = self.identity.model_dump(exclude_none=True)
        if identity_settings:
            settings["identity"] = identity_settings
        return settings


def load_config(raw: Any) -> AppConfig:
    if not isinstance(raw, dict):
        raise ValueError("Config must be a mapping")
    return AppConfig.model_validate(raw)
