"""Discover the default copyright holder from git and the environment."""
from __future__ import annotations

import logging
import os
import subprocess

logger = logging.getLogger(__name__)

AUTHOR_ENV_VARS = (
    "GIT_AUTHOR_NAME",
    "AUTHOR",
    "FULLNAME",
    "NAME",
    "USER",
    "USERNAME",
)


def read_git_config(key: str) -> str:
    try:
        completed = subprocess.run(
            ["git", "config", "--get", key],
            check=True,
            capture_output=True,
            text=True,
        )
    except (subprocess.CalledProcessError, FileNotFoundError, UnicodeDecodeError) as exc:
        logger.debug("git config %s unavailable: %s", key, exc)
        return ""
    return completed.stdout.strip()


def guess_author() -> str:
    """Return git's ``user.name``, else the first populated author variable."""
    git_name = read_git_config("user.name")
    if git_name:
        return git_name
    for var in AUTHOR_ENV_VARS:
        value = os.environ.get(var, "").strip()
        if value:
            logger.debug("Using author from $%s", var)
            return value
    return ""
