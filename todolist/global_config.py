"""Global configuration storage for todolist.

Stores user preferences in ~/.todolist/config.json (or $TODOLIST_HOME).
Tasks themselves are never written to disk.
"""

import json
import logging
import os
from pathlib import Path

from pydantic import BaseModel, ValidationError, field_validator

from .domain.task import Filter

logger = logging.getLogger(__name__)

DEFAULT_QR_URL = "https://todo-app-ts-ecru.vercel.ap/"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AppConfig(BaseModel):
    """User preferences for the todo app."""

    qr_url: str = DEFAULT_QR_URL
    default_filter: Filter = Filter.ALL
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


def get_config_dir() -> Path:
    """Get the todolist config directory."""
    override = os.environ.get("TODOLIST_HOME")
    config_dir = Path(override) if override else Path.home() / ".todolist"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_file() -> Path:
    return get_config_dir() / "config.json"


def get_global_config() -> AppConfig:
    """Load global configuration, falling back to defaults."""
    config_file = get_config_file()
    if config_file.exists():
        try:
            data = json.loads(config_file.read_text(encoding="utf-8"))
            return AppConfig(**data)
        except (json.JSONDecodeError, ValidationError, TypeError) as e:
            logger.warning(f"Ignoring unreadable config {config_file}: {e}")
    return AppConfig()  # defaults


def save_global_config(config: AppConfig) -> None:
    """Save global configuration."""
    config_file = get_config_file()
    config_file.write_text(
        json.dumps(config.model_dump(mode="json"), indent=2),
        encoding="utf-8",
    )
