"""
Contact form router.

Receives portfolio contact submissions from the static site and relays them
by email through the configured provider (see services.email_dispatcher).

The endpoint is called cross-origin from the static site, so every response
sets Access-Control-Allow-Origin explicitly and OPTIONS is answered here
rather than by middleware.

Endpoints:
  POST    /api/contact   — submit a contact message
  OPTIONS /api/contact   — CORS preflight
"""

import logging

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse

from app.config import (
    CONTACT_RECIPIENT,
    CONTACT_SENDER,
    CONTACT_SITE_NAME,
    load_provider_credentials,
)
from app.models.contact import (
    ContactError,
    ContactMessage,
    ContactSuccess,
    NormalizedEmail,
)
from app.services.contact_validator import (
    REQUIRED_FIELDS_ERROR,
    build_contact_message,
    validate_contact_payload,
)
from app.services.email_dispatcher import dispatch_email

logger = logging.getLogger(__name__)

router = APIRouter()

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

CONTACT_PATH = "/api/contact"

SUCCESS_MESSAGE = "Thank you for your message! I'll get back to you soon."
GENERIC_ERROR = "Sorry, there was an error sending your message. Please try again."
DEFAULT_SUBJECT = "New Portfolio Contact Message"
SUBJECT_PREFIX = "Portfolio Contact: "

_ALLOW_ORIGIN = {"Access-Control-Allow-Origin": "*"}

_PREFLIGHT_HEADERS = {
    **_ALLOW_ORIGIN,
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

# Sent with the missing-fields 400 only
_REQUIRED_FIELDS_HEADERS = {
    **_ALLOW_ORIGIN,
    "Access-Control-Allow-Methods": "POST",
    "Access-Control-Allow-Headers": "Content-Type",
}


# ---------------------------------------------------------------------------
# Email rendering
# ---------------------------------------------------------------------------

def build_subject(contact: ContactMessage) -> str:
    if contact.subject:
        return f"{SUBJECT_PREFIX}{contact.subject}"
    return DEFAULT_SUBJECT


def build_email_text(contact: ContactMessage) -> str:
    """Render the plain-text body delivered to the portfolio owner."""
    return (
        "New contact form submission:\n"
        "\n"
        f"Name: {contact.name}\n"
        f"Email: {contact.email}\n"
        f"Subject: {contact.subject or 'No subject'}\n"
        "\n"
        "Message:\n"
        f"{contact.message}\n"
        "\n"
        "---\n"
        f"Sent from {CONTACT_SITE_NAME} contact form"
    ).strip()


def build_normalized_email(contact: ContactMessage) -> NormalizedEmail:
    return NormalizedEmail(
        to=CONTACT_RECIPIENT,
        from_=CONTACT_SENDER,
        subject=build_subject(contact),
        text=build_email_text(contact),
        reply_to=contact.email,
    )


def _error_response(status_code: int, error: str, headers: dict) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ContactError(error=error).model_dump(),
        headers=headers,
    )


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.options(CONTACT_PATH)
async def contact_preflight() -> Response:
    """Answer the CORS preflight with an empty 200."""
    return Response(status_code=200, headers=_PREFLIGHT_HEADERS)


@router.post(
    CONTACT_PATH,
    responses={
        200: {
            "description": "Message relayed (or logged when no provider is configured)",
            "content": {
                "application/json": {
                    "example": {"success": True, "message": SUCCESS_MESSAGE}
                }
            },
        },
        400: {"description": "Missing required field or invalid email address"},
        500: {"description": "Malformed body or the email provider failed"},
    },
)
async def submit_contact(request: Request) -> JSONResponse:
    """
    Validate a contact submission and email it to the portfolio owner.

    Provider failures are logged with their detail but reported to the
    caller only as a generic 500.
    """
    try:
        payload = await request.json()
    except ValueError as exc:
        logger.error(f"Contact form error: malformed request body: {exc}")
        return _error_response(500, GENERIC_ERROR, _ALLOW_ORIGIN)

    reason = validate_contact_payload(payload)
    if reason is not None:
        headers = _REQUIRED_FIELDS_HEADERS if reason == REQUIRED_FIELDS_ERROR else _ALLOW_ORIGIN
        return _error_response(400, reason, headers)

    try:
        contact = build_contact_message(payload)
        outcome = await dispatch_email(
            build_normalized_email(contact),
            load_provider_credentials(),
        )
    except Exception:
        logger.exception("Contact form error")
        return _error_response(500, GENERIC_ERROR, _ALLOW_ORIGIN)

    if not outcome.success:
        logger.error(
            f"Contact form error: failed to send email via {outcome.service}: {outcome.error}"
        )
        return _error_response(500, GENERIC_ERROR, _ALLOW_ORIGIN)

    if outcome.service:
        logger.info(f"Contact message from {contact.email} sent via {outcome.service}")
    return JSONResponse(
        status_code=200,
        content=ContactSuccess(message=SUCCESS_MESSAGE).model_dump(),
        headers=_ALLOW_ORIGIN,
    )
