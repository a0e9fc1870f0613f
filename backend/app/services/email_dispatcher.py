"""
Email dispatcher.

Picks the first configured provider from email_providers.PROVIDERS, sends the
message through it once, and reports a SendOutcome. Errors never escape:
provider rejections, transport failures and unreadable responses all become
SendOutcome(success=False).

There is no failover. If the selected provider fails, lower-priority
providers are not tried.
"""

import logging
from typing import Optional

import httpx

from app.config import EMAIL_PROVIDER_TIMEOUT
from app.models.contact import NormalizedEmail, SendOutcome
from app.services.email_providers import PROVIDERS, EmailProvider

logger = logging.getLogger(__name__)

NOT_CONFIGURED_MESSAGE = "Email service not configured - check environment variables"


def get_http_client() -> httpx.AsyncClient:
    """Return a new AsyncClient for one dispatch. Patched in tests."""
    return httpx.AsyncClient(timeout=EMAIL_PROVIDER_TIMEOUT)


def select_provider(credentials: dict[str, str]) -> Optional[EmailProvider]:
    """Return the highest-priority provider whose credentials are all present."""
    for provider in PROVIDERS:
        if provider.is_configured(credentials):
            return provider
    return None


async def dispatch_email(
    email: NormalizedEmail,
    credentials: dict[str, str],
) -> SendOutcome:
    """
    Send an email through exactly one provider.

    When no provider is configured the email is only logged and the outcome
    is a success. This keeps local development usable without API keys; a
    production deployment must set at least one provider's credentials.

    Args:
        email:       The message to send.
        credentials: Provider credential variables (see config.load_provider_credentials).

    Returns:
        SendOutcome from the provider, or a failed outcome carrying the
        error message if anything went wrong.
    """
    provider = select_provider(credentials)
    if provider is None:
        logger.warning(
            "No email service configured. Email would be sent: %s",
            email.model_dump(by_alias=True),
        )
        return SendOutcome(success=True, message=NOT_CONFIGURED_MESSAGE)

    logger.info(f"Sending contact email via {provider.name}")
    try:
        async with get_http_client() as client:
            return await provider.send(email, credentials, client)
    except Exception as exc:
        logger.error(f"Email sending error ({provider.name}): {exc}")
        return SendOutcome(
            success=False,
            service=provider.name,
            error=str(exc) or "Unknown email error",
        )
