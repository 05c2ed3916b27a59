"""Shared pytest fixtures for simplecalc tests."""

from pathlib import Path

import pytest

from simplecalc.core.config import CONFIG_ENV_VAR
from simplecalc.core.session import Session


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every test in an empty directory with no config env var."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def session() -> Session:
    """Return a session seeded with the default constants."""
    return Session()


@pytest.fixture
def env() -> dict[str, float]:
    """Return an empty environment."""
    return {}
