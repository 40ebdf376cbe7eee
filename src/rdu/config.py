"""User configuration for rdu."""

import json
import logging
import os
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from rdu.scanner import expand_path

logger = logging.getLogger(__name__)

CONFIG_DIR_ENV = "RDU_CONFIG_DIR"
CONFIG_FILE_NAME = "config.json"


class Settings(BaseModel):
    """Defaults applied when a command line flag is not given."""

    max_depth: int = Field(0, ge=0, description="Deepest level to report")
    human_readable: bool = Field(False, description="Show B/K/M/G units")
    sort: bool = Field(False, description="Sort output by ascending size")


def get_config_file() -> Path:
    """Location of the configuration file."""
    config_dir = os.environ.get(CONFIG_DIR_ENV) or "~/.rdu"
    return expand_path(config_dir) / CONFIG_FILE_NAME


def load_settings() -> Settings:
    """Load settings from disk, falling back to defaults."""
    config_file = get_config_file()
    if not config_file.exists():
        return Settings()

    try:
        with open(config_file) as f:
            return Settings.model_validate(json.load(f))
    except (json.JSONDecodeError, OSError, ValidationError) as e:
        logger.warning("Ignoring invalid config %s: %s", config_file, e)
        return Settings()


def save_settings(settings: Settings) -> bool:
    """Save settings to disk."""
    config_file = get_config_file()
    try:
        config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(config_file, "w") as f:
            json.dump(settings.model_dump(), f, indent=2)
        return True
    except OSError:
        return False
