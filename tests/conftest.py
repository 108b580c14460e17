from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from lic_cli import gitconfig  # noqa: E402


@pytest.fixture(autouse=True)
def _isolate_author(monkeypatch):
    """Keep the developer's git identity and environment out of every test."""
    for var in gitconfig.AUTHOR_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(gitconfig, "read_git_config", lambda key: "")


@pytest.fixture
def git_user(monkeypatch):
    def _set(name: str) -> None:
        monkeypatch.setattr(
            gitconfig,
            "read_git_config",
            lambda key: name if key == "user.name" else "",
        )

    return _set
