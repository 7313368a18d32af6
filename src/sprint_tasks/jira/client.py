"""JiraClient - Wraps the agile and issue REST endpoints used by sprint-tasks."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from sprint_tasks.jira.auth import basic_auth_header
from sprint_tasks.jira.exceptions import (
    AuthenticationError,
    JiraConnectionError,
    MalformedResponseError,
    RequestFailedError,
)
from sprint_tasks.jira.models import CreatedIssue, CreateIssueRequest, Issue, Sprint
from sprint_tasks.logging import sanitize_for_log, truncate_output

if TYPE_CHECKING:
    from sprint_tasks.config import Config

logger = logging.getLogger(__name__)

# Single bounded page; nothing beyond it is fetched
MAX_RESULTS = 1000

DEFAULT_TIMEOUT = 30.0


class JiraClient:
    """Client for a Jira site's agile (1.0) and issue (v2) REST APIs.

    One instance is built per session attempt, from the credentials current
    at that moment.
    """

    def __init__(
        self,
        base_url: str,
        auth_header: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Site root, e.g. "https://your-domain.atlassian.net".
            auth_header: Full Authorization header value.
            timeout: Per-request timeout in seconds.
            transport: Custom httpx transport (for testing).
        """
        self.base_url = base_url.rstrip("/")
        self.auth_header = auth_header
        self.timeout = timeout
        self.transport = transport
        self._client: httpx.Client | None = None

    @classmethod
    def from_config(
        cls,
        config: Config,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> JiraClient:
        """Build a client authenticated with config's email and API token."""
        return cls(
            base_url=config.base_url,
            auth_header=basic_auth_header(config.email, config.api_token),
            timeout=timeout,
            transport=transport,
        )

    @property
    def client(self) -> httpx.Client:
        """Get or create HTTP client for the REST API."""
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.base_url,
                headers={
                    "Authorization": self.auth_header,
                    "Content-Type": "application/json",
                    "Accept": "application/json",
                },
                timeout=self.timeout,
                transport=self.transport,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> JiraClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _request(
        self,
        action: str,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """Send a request and decode its JSON body.

        Args:
            action: Short description used in error messages.
            method: HTTP method.
            path: Path below the site root.
            params: Query parameters.
            json: JSON request body.

        Returns:
            Decoded JSON body.

        Raises:
            AuthenticationError: On HTTP 401.
            RequestFailedError: On any other non-success status.
            JiraConnectionError: If no response was received.
            MalformedResponseError: If the body is not JSON.
        """
        logger.debug("%s %s params=%s", method, path, params)
        try:
            response = self.client.request(method, path, params=params, json=json)
        except httpx.HTTPError as e:
            raise JiraConnectionError(f"Failed to {action}: {e}") from e

        if not response.is_success:
            logger.warning(
                "%s %s failed: %s - %s",
                method,
                path,
                response.status_code,
                sanitize_for_log(truncate_output(response.text, 500)),
            )
            error_cls = (
                AuthenticationError if response.status_code == 401 else RequestFailedError
            )
            raise error_cls(action, response.status_code, response.reason_phrase, response.text)

        try:
            return response.json()
        except ValueError as e:
            raise MalformedResponseError(f"Failed to {action}: response is not JSON") from e

    def list_active_sprints(self, board_id: str) -> list[Sprint]:
        """Get the active sprints of a board, in server order.

        Args:
            board_id: Agile board ID.

        Returns:
            List of Sprint objects (normally exactly one).
        """
        data = self._request(
            "fetch sprint",
            "GET",
            f"/rest/agile/1.0/board/{board_id}/sprint",
            params={"state": "active"},
        )
        values = _list_field(data, "values")
        sprints = [Sprint.from_api(value) for value in values]
        logger.info("Board %s has %d active sprint(s)", board_id, len(sprints))
        return sprints

    def list_sprint_issues(self, sprint_id: int) -> list[Issue]:
        """Get the issues of a sprint (first page only)."""
        data = self._request(
            "fetch sprint issues",
            "GET",
            f"/rest/agile/1.0/sprint/{sprint_id}/issue",
            params={"maxResults": MAX_RESULTS},
        )
        issues = [Issue.from_api(raw) for raw in _list_field(data, "issues")]
        logger.info("Found %d issue(s) in sprint %s", len(issues), sprint_id)
        return issues

    def list_backlog_issues(self, board_id: str) -> list[Issue]:
        """Get the backlog issues of a board (first page only)."""
        data = self._request(
            "fetch backlog issues",
            "GET",
            f"/rest/agile/1.0/board/{board_id}/backlog",
            params={"maxResults": MAX_RESULTS},
        )
        issues = [Issue.from_api(raw) for raw in _list_field(data, "issues")]
        logger.info("Found %d issue(s) in backlog of board %s", len(issues), board_id)
        return issues

    def create_issue(self, request: CreateIssueRequest) -> CreatedIssue:
        """Create an issue.

        Returns:
            CreatedIssue with the server-assigned key.
        """
        logger.info(
            "Creating %s in %s (sprint %s)",
            request.issue_type,
            request.project_key,
            request.sprint_id,
        )
        data = self._request("create task", "POST", "/rest/api/2/issue", json=request.to_payload())
        if not isinstance(data, dict) or "key" not in data:
            raise MalformedResponseError("Create issue response has no key")
        created = CreatedIssue(key=str(data["key"]), id=str(data.get("id", "")))
        logger.info("Created issue %s", created.key)
        return created


def _list_field(data: Any, name: str) -> list[Any]:
    """Extract a list-valued top-level field from a response body."""
    if not isinstance(data, dict):
        raise MalformedResponseError(f"Expected a JSON object with '{name}'")
    value = data.get(name)
    if not isinstance(value, list):
        raise MalformedResponseError(f"Response field '{name}' is missing or not a list")
    return value
