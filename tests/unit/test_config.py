"""Unit tests for config.py"""

import pytest
from pydantic import ValidationError

from docstore.config import load_config
from docstore.models import ConflictPolicy


def test_load_config_defaults():
    """Settings defaults apply when no config.yaml, env var, or override exists."""
    settings = load_config()
    assert settings.on_conflict == ConflictPolicy.replace
    assert settings.id_space == 1000
    assert settings.max_id_attempts == 100
    assert settings.log_level == "WARNING"


def test_load_config_reads_config_yaml(tmp_path):
    """Values from config.yaml in the cwd are applied."""
    (tmp_path / "config.yaml").write_text("on_conflict: reject\nid_space: 50\n")
    settings = load_config()
    assert settings.on_conflict == ConflictPolicy.reject
    assert settings.id_space == 50


def test_load_config_env_overrides_config_yaml(tmp_path, monkeypatch):
    """DOCSTORE_ON_CONFLICT takes precedence over config.yaml."""
    (tmp_path / "config.yaml").write_text("on_conflict: reject\n")
    monkeypatch.setenv("DOCSTORE_ON_CONFLICT", "error")
    settings = load_config()
    assert settings.on_conflict == ConflictPolicy.error


def test_load_config_cli_overrides_env(monkeypatch):
    """A non-None CLI override beats the env var."""
    monkeypatch.setenv("DOCSTORE_LOG_LEVEL", "INFO")
    settings = load_config(overrides={"log_level": "DEBUG"})
    assert settings.log_level == "DEBUG"


def test_load_config_ignores_none_overrides(monkeypatch):
    monkeypatch.setenv("DOCSTORE_LOG_LEVEL", "INFO")
    settings = load_config(overrides={"log_level": None})
    assert settings.log_level == "INFO"


def test_load_config_env_id_space_coerced(monkeypatch):
    """DOCSTORE_ID_SPACE env var is coerced to int."""
    monkeypatch.setenv("DOCSTORE_ID_SPACE", "25")
    assert load_config().id_space == 25


def test_load_config_invalid_yaml(tmp_path):
    """load_config raises ValueError when config.yaml contains invalid YAML."""
    (tmp_path / "config.yaml").write_text("key: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid config.yaml"):
        load_config()


def test_load_config_non_mapping_yaml(tmp_path):
    (tmp_path / "config.yaml").write_text("- a\n- b\n")
    with pytest.raises(ValueError, match="expected a mapping"):
        load_config()


@pytest.mark.parametrize("overrides", [
    {"id_space": 0},
    {"max_id_attempts": 0},
    {"on_conflict": "merge"},
])
def test_load_config_rejects_invalid_values(overrides):
    with pytest.raises(ValidationError):
        load_config(overrides=overrides)
