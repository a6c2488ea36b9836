from __future__ import annotations

import pytest

from grocery_auth.domain.auth.credentials import (
    ValidationReason,
    ValidationResult,
    is_valid_email,
    validate_registration,
)


def _validate(
    name: str = "Ann",
    email: str = "ann@x.com",
    password: str = "abcdef",
    confirm_password: str = "abcdef",
) -> ValidationResult:
    return validate_registration(
        name=name,
        email=email,
        password=password,
        confirm_password=confirm_password,
    )


def test_valid_input_passes() -> None:
    result = _validate()

    assert result.is_valid is True
    assert result.reason is None
    assert result == ValidationResult.valid()


@pytest.mark.parametrize(
    ("kwargs", "expected"),
    [
        ({"name": ""}, ValidationReason.NAME_REQUIRED),
        ({"name": "   "}, ValidationReason.NAME_REQUIRED),
        ({"name": "A"}, ValidationReason.NAME_TOO_SHORT),
        ({"name": " A "}, ValidationReason.NAME_TOO_SHORT),
        ({"email": ""}, ValidationReason.EMAIL_REQUIRED),
        ({"email": "  "}, ValidationReason.EMAIL_REQUIRED),
        ({"email": "invalid-email"}, ValidationReason.INVALID_EMAIL_FORMAT),
        ({"email": "ann@x"}, ValidationReason.INVALID_EMAIL_FORMAT),
        ({"email": "ann@@x.com"}, ValidationReason.INVALID_EMAIL_FORMAT),
        ({"email": "an n@x.com"}, ValidationReason.INVALID_EMAIL_FORMAT),
        ({"email": "ann@x.com\n"}, ValidationReason.INVALID_EMAIL_FORMAT),
        ({"password": "", "confirm_password": ""}, ValidationReason.PASSWORD_REQUIRED),
        ({"password": "      "}, ValidationReason.PASSWORD_REQUIRED),
        ({"password": "123", "confirm_password": "123"}, ValidationReason.PASSWORD_TOO_SHORT),
        ({"confirm_password": ""}, ValidationReason.CONFIRMATION_REQUIRED),
        ({"confirm_password": "abcdeg"}, ValidationReason.PASSWORDS_DO_NOT_MATCH),
        ({"confirm_password": "ABCDEF"}, ValidationReason.PASSWORDS_DO_NOT_MATCH),
    ],
)
def test_each_rule_reports_its_reason(kwargs: dict[str, str], expected: ValidationReason) -> None:
    result = _validate(**kwargs)

    assert result.is_valid is False
    assert result.reason is expected


def test_empty_name_wins_over_later_failures() -> None:
    result = _validate(name="", email="a@b.com", password="pw1234", confirm_password="pw1234")

    assert result.reason is ValidationReason.NAME_REQUIRED


def test_first_failing_rule_wins_when_everything_is_wrong() -> None:
    assert _validate(name="A", email="", password="", confirm_password="x").reason is (
        ValidationReason.NAME_TOO_SHORT
    )
    assert _validate(email="bad", password="1", confirm_password="").reason is (
        ValidationReason.INVALID_EMAIL_FORMAT
    )
    assert _validate(password="123", confirm_password="").reason is (
        ValidationReason.PASSWORD_TOO_SHORT
    )


def test_reason_values_are_stable_strings() -> None:
    assert [reason.value for reason in ValidationReason] == [
        "name required",
        "name too short",
        "email required",
        "invalid email format",
        "password required",
        "password too short",
        "confirmation required",
        "passwords do not match",
    ]


def test_validation_is_idempotent() -> None:
    first = _validate(email="nope")
    second = _validate(email="nope")

    assert first == second


def test_is_valid_email_treats_engine_failures_as_non_match() -> None:
    assert is_valid_email(None) is False  # type: ignore[arg-type]
    assert is_valid_email("user@example.org") is True
