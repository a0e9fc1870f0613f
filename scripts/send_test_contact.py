#!/usr/bin/env python3
"""
Dev helper: send a test contact-form submission to the local backend.

Builds a contact payload, POST-s it to /api/contact and prints the response.
With --preflight it sends the CORS OPTIONS request instead.

Usage
-----
# Basic — sample submission to localhost:8000
python scripts/send_test_contact.py

# Custom fields
python scripts/send_test_contact.py --name "Ada" --email ada@example.com \
    --subject "Print enquiry" --message "Is the harbour series available?"

# Check the CORS preflight
python scripts/send_test_contact.py --preflight

# Target a deployed site
python scripts/send_test_contact.py --url https://canners.xyz

Which provider actually sends the email is decided by the backend's
environment (MAILJET_*, SENDGRID_API_KEY, MAILGUN_*, RESEND_API_KEY). With
none set the backend answers 200 and only logs the email.
"""

import argparse
import json
import sys
import textwrap
from pathlib import Path

import httpx
from dotenv import load_dotenv


# ---------------------------------------------------------------------------
# Payload builder
# ---------------------------------------------------------------------------

def build_payload(name: str, email: str, message: str, subject: str = "") -> dict:
    """Build the JSON body the portfolio contact form sends."""
    payload = {"name": name, "email": email, "message": message}
    if subject:
        payload["subject"] = subject
    return payload


# ---------------------------------------------------------------------------
# Pretty printer
# ---------------------------------------------------------------------------

def _print_response(response: httpx.Response) -> None:
    status = response.status_code
    symbol = "OK" if status == 200 else "FAIL"
    print(f"\n[{symbol}] HTTP {status}")
    for header in (
        "Access-Control-Allow-Origin",
        "Access-Control-Allow-Methods",
        "Access-Control-Allow-Headers",
    ):
        if header in response.headers:
            print(f"{header}: {response.headers[header]}")
    if not response.content:
        return
    try:
        print(json.dumps(response.json(), indent=2))
    except ValueError:
        print(response.text)


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main(argv=None) -> int:
    # scripts/ lives one level below the project root
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env")

    parser = argparse.ArgumentParser(
        prog="send_test_contact.py",
        description="Send a test contact-form submission to the portfolio backend.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent("""\
            Examples:
              python scripts/send_test_contact.py
              python scripts/send_test_contact.py --subject "Print enquiry"
              python scripts/send_test_contact.py --preflight
              python scripts/send_test_contact.py --url http://localhost:8000
        """),
    )
    parser.add_argument(
        "--url",
        default="http://localhost:8000",
        help="Backend base URL (default: http://localhost:8000)",
    )
    parser.add_argument("--name", default="Test Visitor", help='Sender name (default: "Test Visitor")')
    parser.add_argument(
        "--email",
        default="visitor@example.com",
        help="Sender email address (default: visitor@example.com)",
    )
    parser.add_argument("--subject", default="", help="Optional subject line")
    parser.add_argument(
        "--message",
        default="Hello! This is a test message from the contact form helper.",
        help="Message body",
    )
    parser.add_argument(
        "--preflight",
        action="store_true",
        help="Send the CORS OPTIONS preflight instead of a submission.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the payload JSON without sending it.",
    )

    args = parser.parse_args(argv)

    endpoint = f"{args.url.rstrip('/')}/api/contact"
    payload = build_payload(args.name, args.email, args.message, args.subject)

    print(f"Endpoint  : {endpoint}")
    if args.preflight:
        print("Method    : OPTIONS")
    else:
        print("Method    : POST")
        print(f"Name      : {args.name}")
        print(f"Email     : {args.email}")
        print(f"Subject   : {args.subject or '(none)'}")

    if args.dry_run:
        print("\n[DRY RUN] Payload:")
        print(json.dumps(payload, indent=2))
        return 0

    try:
        if args.preflight:
            response = httpx.options(
                endpoint,
                headers={
                    "Origin": "http://localhost:8080",
                    "Access-Control-Request-Method": "POST",
                },
                timeout=30,
            )
        else:
            response = httpx.post(endpoint, json=payload, timeout=30)
        _print_response(response)
        return 0 if response.status_code == 200 else 1
    except httpx.ConnectError:
        print(
            f"\nERROR: Could not connect to {endpoint}\n"
            "Is the backend running? Start it with:\n"
            "  cd backend && uvicorn app.main:app --reload",
            file=sys.stderr,
        )
        return 1
    except httpx.HTTPError as exc:
        print(f"\nERROR: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
