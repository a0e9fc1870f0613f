"""
Unit tests for contact form validation.
Tests required-field checks, email format checks and ContactMessage building.
"""

import pytest

from app.services.contact_validator import (
    INVALID_EMAIL_ERROR,
    REQUIRED_FIELDS_ERROR,
    build_contact_message,
    validate_contact_payload,
)


def _payload(**overrides) -> dict:
    payload = {"name": "Ada", "email": "ada@example.com", "message": "Love the prints"}
    payload.update(overrides)
    return payload


class TestRequiredFields:
    """name, email and message must all be present and non-empty."""

    def test_valid_payload_passes(self):
        assert validate_contact_payload(_payload()) is None

    def test_subject_is_optional(self):
        assert validate_contact_payload(_payload(subject="Print order")) is None

    @pytest.mark.parametrize("field", ["name", "email", "message"])
    def test_missing_field_fails(self, field):
        payload = _payload()
        del payload[field]
        assert validate_contact_payload(payload) == REQUIRED_FIELDS_ERROR

    @pytest.mark.parametrize("empty", ["", None, 0, False, [], {}])
    def test_empty_values_count_as_missing(self, empty):
        assert validate_contact_payload(_payload(name=empty)) == REQUIRED_FIELDS_ERROR

    def test_non_object_body_fails(self):
        assert validate_contact_payload(["ada@example.com"]) == REQUIRED_FIELDS_ERROR
        assert validate_contact_payload("hello") == REQUIRED_FIELDS_ERROR
        assert validate_contact_payload(None) == REQUIRED_FIELDS_ERROR

    def test_presence_checked_before_format(self):
        """A bad email with a missing name reports the required-fields error."""
        payload = _payload(name="", email="not-an-email")
        assert validate_contact_payload(payload) == REQUIRED_FIELDS_ERROR


class TestEmailFormat:
    """email must match local@domain.tld."""

    @pytest.mark.parametrize(
        "email",
        ["a@b.com", "first.last@studio.photo", "x+tag@sub.domain.co.uk"],
    )
    def test_accepts_valid_addresses(self, email):
        assert validate_contact_payload(_payload(email=email)) is None

    @pytest.mark.parametrize(
        "email",
        [
            "plainaddress",
            "missing-at.com",
            "no-tld@domain",
            "two@@ats.com",
            "spaces in@domain.com",
            "trailing@domain.com\n",
            "@domain.com",
            "user@.",
        ],
    )
    def test_rejects_invalid_addresses(self, email):
        assert validate_contact_payload(_payload(email=email)) == INVALID_EMAIL_ERROR


class TestBuildContactMessage:

    def test_copies_fields(self):
        contact = build_contact_message(_payload(subject="Prints"))
        assert contact.name == "Ada"
        assert contact.email == "ada@example.com"
        assert contact.subject == "Prints"
        assert contact.message == "Love the prints"

    def test_empty_subject_becomes_none(self):
        assert build_contact_message(_payload(subject="")).subject is None
        assert build_contact_message(_payload()).subject is None

    def test_message_is_frozen(self):
        contact = build_contact_message(_payload())
        with pytest.raises(Exception):
            contact.name = "Someone else"
