"""Root test configuration: keep config.yaml and DOCSTORE_* env vars from leaking into tests"""

import pytest

from docstore.config import Settings


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run every test in an empty cwd with no DOCSTORE_* overrides set."""
    monkeypatch.chdir(tmp_path)
    for name in Settings.model_fields:
        monkeypatch.delenv(f"DOCSTORE_{name.upper()}", raising=False)
