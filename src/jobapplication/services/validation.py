"""Identity validation collaborator contract."""

from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable


class ValidationMode(str, Enum):
    """How thoroughly the identity validator should check a number."""

    QUICK = "quick"
    DETAILED = "detailed"


@runtime_checkable
class CountryData(Protocol):
    @property
    def country(self) -> str:
        """Country the validator operates in."""


@runtime_checkable
class CountryDataProvider(Protocol):
    @property
    def country_data(self) -> CountryData:
        """Return the current country data."""


@runtime_checkable
class IdentityValidator(Protocol):
    """Identity validation dependency consumed by the evaluator.

    The evaluator writes ``validation_mode`` before it asks anything else, so
    implementations can read it inside ``is_valid``. A single instance must not
    be shared between concurrent evaluations.
    """

    validation_mode: ValidationMode

    @property
    def country_data_provider(self) -> CountryDataProvider:
        """Nested lookup for the validator's country."""

    def is_valid(self, identity_number: str | None) -> bool:
        """Return True when the identity number is valid."""
