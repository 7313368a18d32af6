"""IssueCreator - Creates a task in the resolved sprint."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sprint_tasks.jira import (
    DEFAULT_SPRINT_FIELD,
    CreatedIssue,
    CreateIssueRequest,
    RequestFailedError,
)
from sprint_tasks.workflow.exceptions import IssueCreationError

if TYPE_CHECKING:
    from sprint_tasks.jira import JiraClient
    from sprint_tasks.prompts import InputSource

logger = logging.getLogger(__name__)


class IssueCreator:
    """Creates "Task" issues bound to a sprint.

    Summary and description are prompted for when not supplied.
    """

    def __init__(
        self,
        client: JiraClient,
        input_source: InputSource,
        sprint_field: str = DEFAULT_SPRINT_FIELD,
    ) -> None:
        """Initialize the creator.

        Args:
            client: JiraClient for the current session.
            input_source: Where missing summary/description come from.
            sprint_field: Custom field that binds the issue to a sprint.
        """
        self.client = client
        self.input_source = input_source
        self.sprint_field = sprint_field

    def build_request(
        self,
        sprint_id: int,
        project_key: str,
        summary: str | None = None,
        description: str | None = None,
    ) -> CreateIssueRequest:
        """Build the creation payload, prompting for absent values."""
        if summary is None:
            summary = self.input_source.ask("Enter task summary")
        if description is None:
            description = self.input_source.ask("Enter task description (optional)")

        return CreateIssueRequest(
            project_key=project_key,
            summary=summary,
            sprint_id=sprint_id,
            description=description or "",
            sprint_field=self.sprint_field,
        )

    def create(
        self,
        sprint_id: int,
        project_key: str,
        summary: str | None = None,
        description: str | None = None,
    ) -> CreatedIssue:
        """Create the issue.

        Raises:
            IssueCreationError: If the server refuses, including on HTTP 401.
        """
        request = self.build_request(sprint_id, project_key, summary, description)
        try:
            return self.client.create_issue(request)
        except RequestFailedError as e:
            logger.error("Issue creation failed with status %s", e.status)
            raise IssueCreationError(e.status_code, e.body) from e
