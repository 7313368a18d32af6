"""Data models for Jira agile and issue resources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from sprint_tasks.jira.exceptions import MalformedResponseError

ISSUE_TYPE_TASK = "Task"

# Jira Cloud sprint custom field
DEFAULT_SPRINT_FIELD = "customfield_10020"


@dataclass
class ParentRef:
    """Parent (epic or story) of an issue. Either field may be missing."""

    key: str | None = None
    summary: str | None = None

    @property
    def label(self) -> str | None:
        """Summary when present, otherwise the key."""
        return self.summary or self.key


@dataclass
class Issue:
    """Represents an issue returned by the agile API."""

    key: str
    summary: str
    parent: ParentRef | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Issue:
        """Build from a raw issue object ({"key": ..., "fields": {...}}).

        Raises:
            MalformedResponseError: If key or fields.summary is missing.
        """
        try:
            key = data["key"]
            fields = data["fields"]
            summary = fields["summary"]
        except (KeyError, TypeError) as e:
            raise MalformedResponseError(f"Issue is missing {e}") from e

        parent = None
        raw_parent = fields.get("parent")
        if isinstance(raw_parent, dict):
            parent_fields = raw_parent.get("fields") or {}
            parent = ParentRef(key=raw_parent.get("key"), summary=parent_fields.get("summary"))

        return cls(key=str(key), summary=summary or "", parent=parent)


@dataclass
class Sprint:
    """An agile sprint."""

    id: int
    state: str = "active"
    name: str = ""

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Sprint:
        """Build from a raw sprint object.

        Raises:
            MalformedResponseError: If id is missing or not an unsigned integer.
        """
        sprint_id = data.get("id") if isinstance(data, dict) else None
        if isinstance(sprint_id, bool) or not isinstance(sprint_id, int) or sprint_id < 0:
            raise MalformedResponseError(f"Sprint id is not an unsigned integer: {sprint_id!r}")
        return cls(id=sprint_id, state=data.get("state", "active"), name=data.get("name", ""))


@dataclass
class CreateIssueRequest:
    """Payload for POST /rest/api/2/issue, bound to a sprint."""

    project_key: str
    summary: str
    sprint_id: int
    description: str = ""
    issue_type: str = ISSUE_TYPE_TASK
    sprint_field: str = DEFAULT_SPRINT_FIELD

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the JSON body Jira expects."""
        return {
            "fields": {
                "project": {"key": self.project_key},
                "summary": self.summary,
                "description": self.description,
                "issuetype": {"name": self.issue_type},
                self.sprint_field: self.sprint_id,
            }
        }


@dataclass
class CreatedIssue:
    """Server response to a successful issue creation."""

    key: str
    id: str = ""
