"""Basic-Auth header encoding."""

from __future__ import annotations

import base64


def basic_auth_header(email: str, api_token: str) -> str:
    """Build the Authorization header value for email + API token.

    Returns:
        "Basic " followed by base64("email:token").
    """
    credentials = f"{email}:{api_token}".encode()
    return f"Basic {base64.b64encode(credentials).decode('ascii')}"
