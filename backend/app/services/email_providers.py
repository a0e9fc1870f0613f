"""
Outbound email provider adapters.

Translates a provider-agnostic NormalizedEmail into one provider's HTTP API
call. Every adapter makes exactly one request, raises EmailProviderError on
failure and returns a successful SendOutcome otherwise.

Supported providers, in dispatch priority order:
  - mailjet   (MAILJET_API_KEY + MAILJET_SECRET_KEY, basic auth, JSON)
  - sendgrid  (SENDGRID_API_KEY, bearer token, JSON)
  - mailgun   (MAILGUN_API_KEY + MAILGUN_DOMAIN, basic auth, multipart form)
  - resend    (RESEND_API_KEY, bearer token, JSON)

Adding a new provider:
  1. Write an async send_with_<provider>(email, credentials, client) function.
  2. Register it in PROVIDERS at the desired priority.
  3. Add its credential variables to config.PROVIDER_CREDENTIAL_KEYS.
"""

import base64
from dataclasses import dataclass
from typing import Awaitable, Callable

import httpx

from app.config import CONTACT_SENDER_NAME
from app.models.contact import NormalizedEmail, SendOutcome

MAILJET_URL = "https://api.mailjet.com/v3.1/send"
SENDGRID_URL = "https://api.sendgrid.com/v3/mail/send"
MAILGUN_URL = "https://api.mailgun.net/v3/{domain}/messages"
RESEND_URL = "https://api.resend.com/emails"


class EmailProviderError(Exception):
    """Raised when a provider rejects a message or returns an error payload."""


def _basic_auth(username: str, password: str) -> str:
    token = base64.b64encode(f"{username}:{password}".encode()).decode()
    return f"Basic {token}"


def _raise_for_status(response: httpx.Response, provider_name: str) -> None:
    """Raise EmailProviderError carrying the response body on any non-2xx status."""
    if not response.is_success:
        raise EmailProviderError(f"{provider_name} error: {response.text}")


# ---------------------------------------------------------------------------
# Mailjet
# ---------------------------------------------------------------------------

async def send_with_mailjet(
    email: NormalizedEmail,
    credentials: dict[str, str],
    client: httpx.AsyncClient,
) -> SendOutcome:
    """
    Send through Mailjet's v3.1 Send API.

    Mailjet answers 200 even when an individual message is rejected, so the
    per-message Status field is checked as well:
      {"Messages": [{"Status": "error", "Errors": [{"ErrorMessage": "..."}]}]}
    """
    response = await client.post(
        MAILJET_URL,
        headers={
            "Authorization": _basic_auth(
                credentials["MAILJET_API_KEY"], credentials["MAILJET_SECRET_KEY"]
            ),
            "Content-Type": "application/json",
        },
        json={
            "Messages": [
                {
                    "From": {"Email": email.from_, "Name": CONTACT_SENDER_NAME},
                    "To": [{"Email": email.to}],
                    "Subject": email.subject,
                    "TextPart": email.text,
                    "ReplyTo": {"Email": email.reply_to},
                }
            ]
        },
    )
    _raise_for_status(response, "Mailjet")

    result = response.json()
    messages = result.get("Messages") if isinstance(result, dict) else None
    if messages and messages[0].get("Status") == "error":
        errors = messages[0].get("Errors") or [{}]
        detail = errors[0].get("ErrorMessage", "unknown error")
        raise EmailProviderError(f"Mailjet error: {detail}")

    return SendOutcome(success=True, service="Mailjet")


# ---------------------------------------------------------------------------
# SendGrid
# ---------------------------------------------------------------------------

async def send_with_sendgrid(
    email: NormalizedEmail,
    credentials: dict[str, str],
    client: httpx.AsyncClient,
) -> SendOutcome:
    """Send through SendGrid's v3 mail/send endpoint (202 Accepted on success)."""
    response = await client.post(
        SENDGRID_URL,
        headers={
            "Authorization": f"Bearer {credentials['SENDGRID_API_KEY']}",
            "Content-Type": "application/json",
        },
        json={
            "personalizations": [
                {"to": [{"email": email.to}], "subject": email.subject}
            ],
            "from": {"email": email.from_},
            "content": [{"type": "text/plain", "value": email.text}],
            "reply_to": {"email": email.reply_to},
        },
    )
    _raise_for_status(response, "SendGrid")
    return SendOutcome(success=True, service="SendGrid")


# ---------------------------------------------------------------------------
# Mailgun
# ---------------------------------------------------------------------------

async def send_with_mailgun(
    email: NormalizedEmail,
    credentials: dict[str, str],
    client: httpx.AsyncClient,
) -> SendOutcome:
    """
    Send through Mailgun's messages endpoint for MAILGUN_DOMAIN.

    Mailgun takes form fields rather than JSON; the reply-to address goes in
    the "h:Reply-To" custom header field.
    """
    fields = {
        "from": email.from_,
        "to": email.to,
        "subject": email.subject,
        "text": email.text,
        "h:Reply-To": email.reply_to,
    }
    # (None, value) parts are sent as plain multipart/form-data fields
    response = await client.post(
        MAILGUN_URL.format(domain=credentials["MAILGUN_DOMAIN"]),
        headers={"Authorization": _basic_auth("api", credentials["MAILGUN_API_KEY"])},
        files=[(key, (None, value)) for key, value in fields.items()],
    )
    _raise_for_status(response, "Mailgun")
    return SendOutcome(success=True, service="Mailgun")


# ---------------------------------------------------------------------------
# Resend
# ---------------------------------------------------------------------------

async def send_with_resend(
    email: NormalizedEmail,
    credentials: dict[str, str],
    client: httpx.AsyncClient,
) -> SendOutcome:
    """Send through Resend's /emails endpoint."""
    response = await client.post(
        RESEND_URL,
        headers={
            "Authorization": f"Bearer {credentials['RESEND_API_KEY']}",
            "Content-Type": "application/json",
        },
        json={
            "from": email.from_,
            "to": [email.to],
            "subject": email.subject,
            "text": email.text,
            "reply_to": [email.reply_to],
        },
    )
    _raise_for_status(response, "Resend")
    return SendOutcome(success=True, service="Resend")


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

SendFunction = Callable[
    [NormalizedEmail, dict[str, str], httpx.AsyncClient], Awaitable[SendOutcome]
]


@dataclass(frozen=True)
class EmailProvider:
    """A provider adapter plus the credential variables it needs."""
    name: str
    required_keys: tuple[str, ...]
    send: SendFunction

    def is_configured(self, credentials: dict[str, str]) -> bool:
        return all(credentials.get(key) for key in self.required_keys)


# Dispatch priority: the first configured provider wins
PROVIDERS: tuple[EmailProvider, ...] = (
    EmailProvider("Mailjet", ("MAILJET_API_KEY", "MAILJET_SECRET_KEY"), send_with_mailjet),
    EmailProvider("SendGrid", ("SENDGRID_API_KEY",), send_with_sendgrid),
    EmailProvider("Mailgun", ("MAILGUN_API_KEY", "MAILGUN_DOMAIN"), send_with_mailgun),
    EmailProvider("Resend", ("RESEND_API_KEY",), send_with_resend),
)
