"""Jira client - HTTP access to sprints, backlog and issue creation."""

from sprint_tasks.jira.auth import basic_auth_header
from sprint_tasks.jira.client import MAX_RESULTS, JiraClient
from sprint_tasks.jira.exceptions import (
    AuthenticationError,
    JiraConnectionError,
    JiraError,
    MalformedResponseError,
    RequestFailedError,
)
from sprint_tasks.jira.models import (
    DEFAULT_SPRINT_FIELD,
    ISSUE_TYPE_TASK,
    CreatedIssue,
    CreateIssueRequest,
    Issue,
    ParentRef,
    Sprint,
)

__all__ = [
    "DEFAULT_SPRINT_FIELD",
    "ISSUE_TYPE_TASK",
    "MAX_RESULTS",
    "AuthenticationError",
    "CreateIssueRequest",
    "CreatedIssue",
    "Issue",
    "JiraClient",
    "JiraConnectionError",
    "JiraError",
    "MalformedResponseError",
    "ParentRef",
    "RequestFailedError",
    "Sprint",
    "basic_auth_header",
]
