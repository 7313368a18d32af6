"""Config Store - Persisted credentials and board settings."""

from sprint_tasks.config.exceptions import ConfigError
from sprint_tasks.config.models import DEFAULT_SPRINT_FIELD, Config
from sprint_tasks.config.store import ConfigStore, default_config_dir, default_config_path

__all__ = [
    "DEFAULT_SPRINT_FIELD",
    "Config",
    "ConfigError",
    "ConfigStore",
    "default_config_dir",
    "default_config_path",
]
