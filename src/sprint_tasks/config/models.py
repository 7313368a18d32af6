"""Data models for the Config Store."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from sprint_tasks.config.exceptions import ConfigError
from sprint_tasks.jira.models import DEFAULT_SPRINT_FIELD

# Field name -> JSON key in config.json
_KEYS = {
    "domain": "jira_domain",
    "email": "jira_email",
    "api_token": "jira_api_token",
    "board_id": "board_id",
}


@dataclass
class Config:
    """Credentials and board settings persisted between invocations.

    Attributes:
        domain: Jira site, e.g. "your-domain.atlassian.net".
        email: Account email used for Basic auth.
        api_token: API token used for Basic auth. Stored in plaintext.
        board_id: Agile board whose active sprint is used.
        project_key: Project new issues are created in.
        sprint_field: Custom field that binds an issue to a sprint.
    """

    domain: str
    email: str
    api_token: str = field(repr=False)
    board_id: str
    project_key: str | None = None
    sprint_field: str = DEFAULT_SPRINT_FIELD

    @property
    def base_url(self) -> str:
        """Site root URL, https unless the domain carries its own scheme."""
        domain = self.domain.strip().rstrip("/")
        if "://" in domain:
            return domain
        return f"https://{domain}"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Create config from the persisted JSON object.

        Raises:
            ConfigError: If the data is not an object or required keys are missing.
        """
        if not isinstance(data, dict):
            raise ConfigError("Config root must be a JSON object")

        missing = [key for key in _KEYS.values() if data.get(key) in (None, "")]
        if missing:
            raise ConfigError(f"Missing required fields: {', '.join(missing)}")

        return cls(
            domain=str(data["jira_domain"]),
            email=str(data["jira_email"]),
            api_token=str(data["jira_api_token"]),
            board_id=str(data["board_id"]),
            project_key=data.get("project_key") or None,
            sprint_field=data.get("sprint_field") or DEFAULT_SPRINT_FIELD,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON object written to config.json."""
        return {
            "jira_domain": self.domain,
            "jira_email": self.email,
            "jira_api_token": self.api_token,
            "board_id": self.board_id,
            "project_key": self.project_key,
            "sprint_field": self.sprint_field,
        }
