from __future__ import annotations

import pytest

from jobapplication.services import (
    IdentityValidator,
    IdentityValidatorConfig,
    PatternIdentityValidator,
    ValidationMode,
)


def test_pattern_validator_satisfies_protocol():
    assert isinstance(PatternIdentityValidator(), IdentityValidator)


def test_default_country_lookup():
    validator = PatternIdentityValidator()

    assert validator.country_data_provider.country_data.country == "Azerbaijan"
    assert validator.validation_mode is ValidationMode.QUICK


@pytest.mark.parametrize(
    ("identity_number", "expected"),
    [
        ("5ABC12D", True),
        (" 5abc12d ", True),
        ("5ABC12", False),
        ("5ABC12D9", False),
        ("", False),
        (None, False),
    ],
)
def test_quick_mode_checks_shape(identity_number: str | None, expected: bool):
    validator = PatternIdentityValidator()

    assert validator.is_valid(identity_number) is expected


def test_revoked_numbers_only_rejected_in_detailed_mode():
    validator = PatternIdentityValidator(
        config=IdentityValidatorConfig(revoked=["5abc12d"]),
    )

    assert validator.is_valid("5ABC12D") is True

    validator.validation_mode = ValidationMode.DETAILED

    assert validator.is_valid("5ABC12D") is False
    assert validator.is_valid("7XYZ999") is True


def test_custom_country_and_pattern():
    validator = PatternIdentityValidator(
        config=IdentityValidatorConfig(country="Spain", pattern=r"\d{8}[A-Z]"),
    )

    assert validator.country_data_provider.country_data.country == "Spain"
    assert validator.is_valid("12345678Z") is True
    assert validator.is_valid("5ABC12D") is False
