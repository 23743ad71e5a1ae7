from __future__ import annotations

import pytest
from click.testing import CliRunner


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep OBJKIT_* settings from the host environment out of CLI tests."""
    for name in ("OBJKIT_SORT_KEYS", "OBJKIT_INDENT", "OBJKIT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def runner():
    return CliRunner()
