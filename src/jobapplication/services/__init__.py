"""Identity validation services consumed by the evaluator."""

from __future__ import annotations

from .identity import (
    IdentityValidatorConfig,
    PatternIdentityValidator,
    StaticCountryData,
    StaticCountryDataProvider,
)
from .validation import (
    CountryData,
    CountryDataProvider,
    IdentityValidator,
    ValidationMode,
)

__all__ = [
    "CountryData",
    "CountryDataProvider",
    "IdentityValidator",
    "IdentityValidatorConfig",
    "PatternIdentityValidator",
    "StaticCountryData",
    "StaticCountryDataProvider",
    "ValidationMode",
]
