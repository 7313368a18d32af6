"""ConfigStore - Loads, creates and rewrites the persisted Config."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable
from pathlib import Path

import click

from sprint_tasks.config.exceptions import ConfigError
from sprint_tasks.config.models import Config
from sprint_tasks.prompts import InputSource

logger = logging.getLogger(__name__)

APP_NAME = "sprint-tasks"
CONFIG_FILE = "config.json"
CONFIG_ENV_VAR = "SPRINT_TASKS_CONFIG"


def default_config_dir() -> Path:
    """Per-user configuration directory (e.g. ~/.config/sprint-tasks)."""
    return Path(click.get_app_dir(APP_NAME))


def default_config_path() -> Path:
    """Resolve the config file path.

    Search order:
    1) $SPRINT_TASKS_CONFIG (explicit path)
    2) <config-dir>/sprint-tasks/config.json
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return default_config_dir() / CONFIG_FILE


class ConfigStore:
    """File-backed store for the single Config record."""

    def __init__(
        self,
        input_source: InputSource,
        path: Path | None = None,
        notify: Callable[[str], None] | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            input_source: Where missing values are collected from.
            path: Config file location. Defaults to default_config_path().
            notify: Receives operator-facing notices (e.g. file created).
        """
        self.input_source = input_source
        self.path = path if path is not None else default_config_path()
        self._notify = notify

    def load_or_create(self) -> Config:
        """Load the persisted config, prompting for and writing one first if absent.

        Raises:
            ConfigError: On any directory, read, write or parse failure.
        """
        if not self.path.exists():
            config = self._prompt_new()
            self.persist(config)
            logger.info("Created config file at %s", self.path)
            self._emit(f"Config file created at: {self.path}")

        return self.load()

    def load(self) -> Config:
        """Read and parse the persisted config.

        Raises:
            ConfigError: If the file cannot be read or parsed.
        """
        try:
            raw = self.path.read_bytes()
        except OSError as e:
            raise ConfigError(f"Failed to read config file {self.path}: {e}") from e

        try:
            data = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ConfigError(f"Failed to parse config file {self.path}: {e}") from e

        config = Config.from_dict(data)
        logger.debug("Loaded config for board %s from %s", config.board_id, self.path)
        return config

    def persist(self, config: Config) -> None:
        """Overwrite the persisted record with config.

        Raises:
            ConfigError: If the directory cannot be created or the file written.
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConfigError(f"Failed to create config directory {self.path.parent}: {e}") from e

        try:
            self.path.write_text(json.dumps(config.to_dict(), indent=2), encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Failed to write config file {self.path}: {e}") from e

        logger.debug("Wrote config file %s", self.path)

    def rotate_token(self, config: Config) -> Config:
        """Prompt for a replacement API token and persist it.

        Returns:
            The updated config (same object, mutated in place).
        """
        self._emit("Current API token appears to be invalid or expired.")
        config.api_token = self.input_source.ask("Enter new Jira API token", secret=True)
        self.persist(config)
        logger.info("API token rotated for %s", config.email)
        self._emit("Config updated with new API token.")
        return config

    def ensure_project_key(self, config: Config) -> str:
        """Return the configured project key, prompting for and persisting one if unset."""
        if config.project_key:
            return config.project_key

        key = ""
        while not key:
            key = self.input_source.ask("Enter Jira project key (e.g., PROJ)").strip()
        config.project_key = key
        self.persist(config)
        logger.info("Project key set to %s", key)
        return key

    def _prompt_new(self) -> Config:
        ask = self.input_source.ask
        return Config(
            domain=ask("Enter Jira domain (e.g., your-domain.atlassian.net)"),
            email=ask("Enter Jira email"),
            api_token=ask("Enter Jira API token", secret=True),
            board_id=ask("Enter Board ID"),
            project_key=ask("Enter Jira project key (optional)") or None,
        )

    def _emit(self, message: str) -> None:
        if self._notify is not None:
            self._notify(message)
