"""SprintResolver - Finds the active sprint of a board."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sprint_tasks.workflow.exceptions import NoActiveSprintError

if TYPE_CHECKING:
    from sprint_tasks.jira import JiraClient, Sprint

logger = logging.getLogger(__name__)


class SprintResolver:
    """Resolves a board's active sprint."""

    def __init__(self, client: JiraClient) -> None:
        self.client = client

    def resolve(self, board_id: str) -> Sprint:
        """Return the first active sprint of the board.

        Raises:
            NoActiveSprintError: If the board has no active sprint.
            AuthenticationError: If the credentials are rejected.
            RequestFailedError: On any other non-success status.
        """
        sprints = self.client.list_active_sprints(board_id)
        if not sprints:
            raise NoActiveSprintError(board_id)
        if len(sprints) > 1:
            logger.warning(
                "Board %s has %d active sprints, using %s",
                board_id,
                len(sprints),
                sprints[0].id,
            )

        sprint = sprints[0]
        logger.info("Resolved active sprint %s for board %s", sprint.id, board_id)
        return sprint
