"""Shared pytest fixtures for docblock tests."""

from __future__ import annotations

import os
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable

PACKAGE_ROOT = Path(__file__).resolve().parents[1]

_DOCBLOCK_ENV_VARS = (
    "DOCBLOCK_REPO_ROOT",
    "DOCBLOCK_INDENT_WIDTH",
    "DOCBLOCK_USE_TAB",
    "DOCBLOCK_MAX_LINE_LENGTH",
    "DOCBLOCK_MIN_LAST_COLUMN_WIDTH",
)


@dataclass(frozen=True, slots=True)
class CliResult:
    args: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str


@pytest.fixture(autouse=True)
def _isolate_docblock_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _DOCBLOCK_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def package_root() -> Path:
    return PACKAGE_ROOT


@pytest.fixture
def repo_root(tmp_path: Path) -> Path:
    root = tmp_path / "repo"
    root.mkdir()
    return root


@pytest.fixture
def cli_env(package_root: Path, repo_root: Path) -> dict[str, str]:
    env = {key: value for key, value in os.environ.items() if key not in _DOCBLOCK_ENV_VARS}
    existing = env.get("PYTHONPATH", "")
    root = str(package_root / "src")
    env["PYTHONPATH"] = root if not existing else f"{root}:{existing}"
    env["DOCBLOCK_REPO_ROOT"] = str(repo_root)
    return env


@pytest.fixture
def run_docblock(package_root: Path, cli_env: dict[str, str]) -> Callable[..., CliResult]:
    def _run(args: list[str], stdin: str | None = None, timeout: float = 15.0) -> CliResult:
        completed = subprocess.run(
            [sys.executable, "-m", "docblock", *args],
            cwd=package_root,
            env=cli_env,
            input=stdin,
            capture_output=True,
            text=True,
            check=False,
            timeout=timeout,
        )
        return CliResult(
            args=tuple(args),
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )

    return _run
