"""TaskAggregator - Merges sprint issues with open backlog issues."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from sprint_tasks.jira import Issue, RequestFailedError
from sprint_tasks.workflow.models import TaskList

if TYPE_CHECKING:
    from sprint_tasks.jira import JiraClient

logger = logging.getLogger(__name__)

# Summary markers that flag a backlog issue as finished
CLOSED_MARKERS = ("[done]", "[closed]")

BacklogFilter = Callable[[Issue], bool]


def is_open_backlog_issue(issue: Issue) -> bool:
    """Heuristic status check on the free-text summary.

    An issue is open unless its summary contains "[done]" or "[closed]" in
    any letter case.
    """
    summary = issue.summary.lower()
    return not any(marker in summary for marker in CLOSED_MARKERS)


def filter_backlog(
    issues: Iterable[Issue], predicate: BacklogFilter = is_open_backlog_issue
) -> list[Issue]:
    """Keep the issues predicate accepts, in source order."""
    return [issue for issue in issues if predicate(issue)]


def format_issue(issue: Issue) -> str:
    """Render one display line: "[<parent>: ]<key>\\t<summary>"."""
    prefix = ""
    if issue.parent is not None and issue.parent.label:
        prefix = f"{issue.parent.label}: "
    return f"{prefix}{issue.key}\t{issue.summary}"


class TaskAggregator:
    """Builds the task view for a sprint and its board's backlog."""

    def __init__(
        self,
        client: JiraClient,
        backlog_filter: BacklogFilter = is_open_backlog_issue,
    ) -> None:
        """Initialize the aggregator.

        Args:
            client: JiraClient for the current session.
            backlog_filter: Predicate deciding which backlog issues are shown.
        """
        self.client = client
        self.backlog_filter = backlog_filter

    def collect(self, sprint_id: int, board_id: str) -> TaskList:
        """Fetch and merge sprint and backlog issues.

        Sprint issues come first, then filtered backlog issues, each group in
        server order. Duplicates across the groups are kept.

        Raises:
            RequestFailedError: If the sprint issues cannot be fetched.
        """
        result = TaskList(issues=self.client.list_sprint_issues(sprint_id))

        try:
            backlog = self.client.list_backlog_issues(board_id)
        except RequestFailedError as e:
            logger.warning("Backlog fetch failed for board %s: %s", board_id, e.status)
            result.warnings.append(f"Warning: Failed to fetch backlog issues. Status: {e.status}")
            return result

        open_backlog = filter_backlog(backlog, self.backlog_filter)
        logger.debug(
            "Kept %d of %d backlog issue(s) for board %s",
            len(open_backlog),
            len(backlog),
            board_id,
        )
        result.issues.extend(open_backlog)
        return result

    def render(self, sprint_id: int, board_id: str) -> tuple[list[str], list[str]]:
        """Collect and format the task view.

        Returns:
            (display lines, warnings)
        """
        tasks = self.collect(sprint_id, board_id)
        return [format_issue(issue) for issue in tasks.issues], tasks.warnings
