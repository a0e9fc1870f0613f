"""
Runtime configuration for the contact API.
Values come from the process environment, with a local .env file loaded first.

Addresses and timeouts are read once at import. Provider credentials are read
on every request via load_provider_credentials() so that keys added to the
environment take effect without a code change.
"""

import os
from typing import Mapping, Optional

from dotenv import load_dotenv

load_dotenv()

# Inbox that receives contact submissions (Cloudflare Email Routing address)
CONTACT_RECIPIENT = os.getenv("CONTACT_RECIPIENT", "noreply@canners.xyz")
CONTACT_SENDER = os.getenv("CONTACT_SENDER", "noreply@canners.xyz")
CONTACT_SENDER_NAME = os.getenv("CONTACT_SENDER_NAME", "Portfolio Contact Form")
CONTACT_SITE_NAME = os.getenv("CONTACT_SITE_NAME", "canners portfolio")

# Seconds before an outbound provider call is abandoned
EMAIL_PROVIDER_TIMEOUT = float(os.getenv("EMAIL_PROVIDER_TIMEOUT", "10"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Every credential variable any provider adapter may need
PROVIDER_CREDENTIAL_KEYS = (
    "MAILJET_API_KEY",
    "MAILJET_SECRET_KEY",
    "SENDGRID_API_KEY",
    "MAILGUN_API_KEY",
    "MAILGUN_DOMAIN",
    "RESEND_API_KEY",
)


def load_provider_credentials(
    environ: Optional[Mapping[str, str]] = None,
) -> dict[str, str]:
    """
    Collect the provider credential variables that are set and non-empty.

    Args:
        environ: Mapping to read from. Defaults to os.environ.

    Returns:
        Dict of credential name -> value, omitting unset or blank entries.
    """
    source = os.environ if environ is None else environ
    credentials: dict[str, str] = {}
    for key in PROVIDER_CREDENTIAL_KEYS:
        value = (source.get(key) or "").strip()
        if value:
            credentials[key] = value
    return credentials
