"""Pattern-based identity validator used by the CLI."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

import structlog

from .validation import ValidationMode


@dataclass
class IdentityValidatorConfig:
    """Configuration for the pattern identity validator."""

    country: str = "Azerbaijan"
    # Azerbaijani personal ID (FIN) codes are seven uppercase alphanumerics.
    pattern: str = r"[A-Z0-9]{7}"
    revoked: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        self.revoked = tuple(self.revoked)


@dataclass(frozen=True)
class StaticCountryData:
    country: str


@dataclass
class StaticCountryDataProvider:
    country_data: StaticCountryData = field(default_factory=lambda: StaticCountryData("Azerbaijan"))


class PatternIdentityValidator:
    """Validate identity numbers against a regular expression.

    Quick mode only checks the shape of the number. Detailed mode also rejects
    numbers listed in ``revoked``.
    """

    def __init__(self, *, config: IdentityValidatorConfig | None = None) -> None:
        self._config = config or IdentityValidatorConfig()
        self._pattern = re.compile(self._config.pattern)
        self._revoked = {number.upper() for number in self._config.revoked}
        self._country_data_provider = StaticCountryDataProvider(
            StaticCountryData(self._config.country)
        )
        self.validation_mode = ValidationMode.QUICK
        self._logger = structlog.get_logger(__name__)

    @property
    def country_data_provider(self) -> StaticCountryDataProvider:
        return self._country_data_provider

    def is_valid(self, identity_number: str | None) -> bool:
        if not identity_number:
            return False
        normalized = identity_number.strip().upper()
        if self._pattern.fullmatch(normalized) is None:
            return False
        if self.validation_mode is ValidationMode.DETAILED and normalized in self._revoked:
            self._logger.info("identity.revoked", mode=self.validation_mode.value)
            return False
        return True
