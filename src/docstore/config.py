"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from docstore.models import ConflictPolicy


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:        str = "docstore"
    id_space:        int = Field(default=1000, ge=1, description="Generated ids are drawn from 0 .. id_space - 1")
    max_id_attempts: int = Field(default=100,  ge=1, description="Draws before giving up on a free id")
    on_conflict:     ConflictPolicy = Field(default=ConflictPolicy.replace, description="replace, reject or error")
    log_level:       str = Field(default="WARNING", description="Root log level for the CLI")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then DOCSTORE_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"DOCSTORE_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
