"""Email validator tests."""

import pytest

from users_api.validators import is_valid_email

INVALID_EMAILS = [
    "",
    "plainaddress",
    "@no-local-part.com",
    "missing-at-sign.com",
    "missing-domain@",
    "spaces are@invalid.com",
    "missing-tld@domain",
    "two@@example.com",
    "trailing@example.",
]


def test_accepts_simple_address() -> None:
    assert is_valid_email("john.doe@example.com") is True


def test_ignores_surrounding_whitespace() -> None:
    assert is_valid_email("  alice@example.com \n") is True


@pytest.mark.parametrize("candidate", INVALID_EMAILS)
def test_rejects_malformed_addresses(candidate: str) -> None:
    assert is_valid_email(candidate) is False


@pytest.mark.parametrize("candidate", [None, 12345, ["a@b.co"], {"email": "a@b.co"}])
def test_rejects_non_strings(candidate: object) -> None:
    assert is_valid_email(candidate) is False
