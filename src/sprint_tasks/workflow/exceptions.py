"""Exceptions for the sprint workflow."""

from __future__ import annotations


class WorkflowError(Exception):
    """Base exception for workflow errors."""


class NoActiveSprintError(WorkflowError):
    """Board has no active sprint."""

    def __init__(self, board_id: str) -> None:
        self.board_id = board_id
        super().__init__(f"No active sprint found for board {board_id}")


class IssueCreationError(WorkflowError):
    """Server refused to create the issue.

    Attributes:
        status_code: HTTP status code of the refusal.
        body: Full response body, shown to the operator as the diagnostic.
    """

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"Error creating task: {body}")


class AuthRetriesExhaustedError(WorkflowError):
    """Credentials were rejected more times than the retry policy allows."""

    def __init__(self, attempts: int) -> None:
        self.attempts = attempts
        super().__init__(f"Authentication failed after {attempts} attempt(s)")
