"""Locate the repository root that owns `.docblock.toml`."""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILE_NAME = ".docblock.toml"
REPO_ROOT_ENV = "DOCBLOCK_REPO_ROOT"


def _is_repo_root(directory: Path) -> bool:
    # `.git` is a directory in a plain checkout and a file in worktrees.
    return (directory / CONFIG_FILE_NAME).is_file() or (directory / ".git").exists()


def resolve_repo_root(explicit: Path | None = None) -> Path:
    """First match of: ``explicit``, `$DOCBLOCK_REPO_ROOT`, the nearest
    ancestor of the cwd holding `.docblock.toml` or `.git`, the cwd itself.
    """

    if explicit is not None:
        return explicit.expanduser().resolve()
    from_env = os.getenv(REPO_ROOT_ENV)
    if from_env:
        return Path(from_env).expanduser().resolve()

    cwd = Path.cwd().resolve()
    return next((path for path in (cwd, *cwd.parents) if _is_repo_root(path)), cwd)


def config_path(repo_root: Path) -> Path:
    return repo_root / CONFIG_FILE_NAME
