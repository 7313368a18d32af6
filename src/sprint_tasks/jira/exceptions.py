"""Custom exceptions for the Jira client."""

from __future__ import annotations


class JiraError(Exception):
    """Base exception for Jira client errors."""


class JiraConnectionError(JiraError):
    """Request never produced a response (DNS, TLS, timeout...)."""


class MalformedResponseError(JiraError):
    """Response body is not the JSON shape the client expects."""


class RequestFailedError(JiraError):
    """Server answered with a non-success status.

    Attributes:
        action: What the client was doing, e.g. "fetch sprint".
        status_code: HTTP status code.
        reason: HTTP reason phrase.
        body: Full response body text.
    """

    def __init__(self, action: str, status_code: int, reason: str = "", body: str = "") -> None:
        self.action = action
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(f"Failed to {action}. Status: {self.status}")

    @property
    def status(self) -> str:
        """Status line as shown to the operator, e.g. "404 Not Found"."""
        return f"{self.status_code} {self.reason}".strip()


class AuthenticationError(RequestFailedError):
    """Server rejected the credentials (HTTP 401)."""
