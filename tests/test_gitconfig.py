from __future__ import annotations

import subprocess

import pytest

from lic_cli import gitconfig

# conftest stubs read_git_config; keep a handle on the real one.
from lic_cli.gitconfig import read_git_config as real_read_git_config


def test_read_git_config_strips_output(monkeypatch):
    def fake_run(cmd, **kwargs):
        assert cmd == ["git", "config", "--get", "user.name"]
        return subprocess.CompletedProcess(cmd, 0, stdout="Jane Doe\n", stderr="")

    monkeypatch.setattr(gitconfig.subprocess, "run", fake_run)
    assert real_read_git_config("user.name") == "Jane Doe"


@pytest.mark.parametrize(
    "error",
    [FileNotFoundError("git"), subprocess.CalledProcessError(1, ["git"])],
)
def test_read_git_config_returns_empty_on_failure(monkeypatch, error):
    def fake_run(cmd, **kwargs):
        raise error

    monkeypatch.setattr(gitconfig.subprocess, "run", fake_run)
    assert real_read_git_config("user.name") == ""


def test_guess_author_prefers_git(monkeypatch, git_user):
    git_user("Git User")
    monkeypatch.setenv("USER", "shell-user")
    assert gitconfig.guess_author() == "Git User"


def test_guess_author_falls_back_to_environment(monkeypatch):
    monkeypatch.setenv("USER", "shell-user")
    monkeypatch.setenv("FULLNAME", "Full Name")
    assert gitconfig.guess_author() == "Full Name"


def test_guess_author_empty_when_nothing_found():
    assert gitconfig.guess_author() == ""


def test_read_git_config_ignores_undecodable_name(monkeypatch):
    def fake_run(cmd, **kwargs):
        raise UnicodeDecodeError("utf-8", b"Jos\xe9", 3, 4, "invalid continuation byte")

    monkeypatch.setattr(gitconfig.subprocess, "run", fake_run)
    assert real_read_git_config("user.name") == ""


def test_guess_author_falls_back_when_git_name_is_undecodable(monkeypatch):
    def fake_run(cmd, **kwargs):
        raise UnicodeDecodeError("utf-8", b"Jos\xe9", 3, 4, "invalid continuation byte")

    monkeypatch.setattr(gitconfig.subprocess, "run", fake_run)
    monkeypatch.setattr(gitconfig, "read_git_config", real_read_git_config)
    monkeypatch.setenv("USER", "shell-user")
    assert gitconfig.guess_author() == "shell-user"
