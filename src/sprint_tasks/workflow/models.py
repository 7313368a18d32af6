"""Data models for the sprint workflow."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from sprint_tasks.jira import Issue


class SessionState(StrEnum):
    """States of the session retry loop."""

    RESOLVING = "resolving"
    AWAITING_CREDENTIAL = "awaiting_credential"
    DISPATCHING = "dispatching"
    DONE = "done"


@dataclass
class RetryPolicy:
    """How many sprint-resolution attempts a session may make.

    Attributes:
        max_attempts: Upper bound on attempts, or None for unbounded.
    """

    max_attempts: int | None = None

    def allows(self, attempts: int) -> bool:
        """Whether another attempt may follow `attempts` failed ones."""
        return self.max_attempts is None or attempts < self.max_attempts


@dataclass
class TaskList:
    """Merged task view.

    Attributes:
        issues: Sprint issues followed by open backlog issues.
        warnings: Non-fatal problems hit while collecting (e.g. backlog fetch).
    """

    issues: list[Issue] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
