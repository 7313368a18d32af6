"""Sprint workflow - Sprint resolution, task aggregation and issue creation."""

from sprint_tasks.workflow.creator import IssueCreator
from sprint_tasks.workflow.exceptions import (
    AuthRetriesExhaustedError,
    IssueCreationError,
    NoActiveSprintError,
    WorkflowError,
)
from sprint_tasks.workflow.models import RetryPolicy, SessionState, TaskList
from sprint_tasks.workflow.session import Session
from sprint_tasks.workflow.sprint import SprintResolver
from sprint_tasks.workflow.tasks import (
    CLOSED_MARKERS,
    TaskAggregator,
    filter_backlog,
    format_issue,
    is_open_backlog_issue,
)

__all__ = [
    "CLOSED_MARKERS",
    "AuthRetriesExhaustedError",
    "IssueCreationError",
    "IssueCreator",
    "NoActiveSprintError",
    "RetryPolicy",
    "Session",
    "SessionState",
    "SprintResolver",
    "TaskAggregator",
    "TaskList",
    "WorkflowError",
    "filter_backlog",
    "format_issue",
    "is_open_backlog_issue",
]
