from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure the datastore package is importable during local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from datastore.core import config as core_config


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run every test from an empty working directory with fresh settings."""
    for var in ("DATA_FILE", "STORAGE_BACKEND", "DATABASE_URL", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    core_config.get_settings.cache_clear()
    yield tmp_path
    core_config.get_settings.cache_clear()
