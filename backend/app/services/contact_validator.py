"""
Contact form validation.

Rules are checked in order and the first failure wins:
  1. name, email and message must be present and non-empty
  2. email must look like local@domain.tld
"""

import re
from typing import Any, Optional

from app.models.contact import ContactMessage

REQUIRED_FIELDS_ERROR = "Name, email, and message are required"
INVALID_EMAIL_ERROR = "Please enter a valid email address"

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

_REQUIRED_FIELDS = ("name", "email", "message")


def _field_text(payload: dict, field: str) -> str:
    """Return a field as text; empty values (None, "", 0, false, [], {}) become ""."""
    value = payload.get(field)
    if not value:
        return ""
    return value if isinstance(value, str) else str(value)


def validate_contact_payload(payload: Any) -> Optional[str]:
    """
    Check a parsed request body against the contact form rules.

    Returns:
        None when the payload is valid, otherwise the user-facing reason
        for the first rule that failed.
    """
    if not isinstance(payload, dict):
        return REQUIRED_FIELDS_ERROR

    if not all(_field_text(payload, field) for field in _REQUIRED_FIELDS):
        return REQUIRED_FIELDS_ERROR

    if not EMAIL_PATTERN.fullmatch(_field_text(payload, "email")):
        return INVALID_EMAIL_ERROR

    return None


def build_contact_message(payload: dict) -> ContactMessage:
    """
    Build a ContactMessage from a payload that already passed
    validate_contact_payload(). An empty subject is stored as None.
    """
    return ContactMessage(
        name=_field_text(payload, "name"),
        email=_field_text(payload, "email"),
        subject=_field_text(payload, "subject") or None,
        message=_field_text(payload, "message"),
    )
