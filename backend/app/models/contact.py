"""
Pydantic models for the contact form.

Models:
  ContactMessage       — validated visitor submission
  NormalizedEmail      — provider-agnostic outbound email
  SendOutcome          — result of one dispatch attempt
  ContactSuccess       — 200 response body
  ContactError         — 400 / 500 response body
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class ContactMessage(BaseModel):
    """A contact form submission that has passed validation."""
    model_config = ConfigDict(frozen=True)

    name: str
    email: str
    subject: Optional[str] = None
    message: str


class NormalizedEmail(BaseModel):
    """
    Outbound email, provider-agnostic.

    Adapters map these canonical names onto each provider's schema
    (Mailjet's PascalCase, SendGrid's personalizations, Mailgun's form
    fields, Resend's snake_case).
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    to: str
    from_: str = Field(alias="from")
    subject: str
    text: str
    reply_to: str


class SendOutcome(BaseModel):
    """Outcome of a single send attempt. Never persisted."""
    success: bool
    service: Optional[str] = None   # provider name, e.g. "Mailjet"
    message: Optional[str] = None   # informational status
    error: Optional[str] = None     # failure detail, server-side only


class ContactSuccess(BaseModel):
    success: bool = True
    message: str


class ContactError(BaseModel):
    success: bool = False
    error: str
