"""Config resolution shared by operation handlers."""

from __future__ import annotations

from pathlib import Path

from docblock.lib.config._paths import resolve_repo_root
from docblock.lib.config.settings import FormatterConfig, load_config, with_overrides


def resolve_root(repo_root: str | None = None) -> Path:
    """Resolve the repository root from explicit input, env, or cwd."""

    explicit_root = Path(repo_root).expanduser().resolve() if repo_root else None
    return resolve_repo_root(explicit_root)


def resolve_formatter_config(
    repo_root: str | None = None,
    overrides: dict[str, object | None] | None = None,
) -> FormatterConfig:
    """Load repository config, then apply per-call overrides on top."""

    config = load_config(resolve_root(repo_root))
    return with_overrides(config, overrides or {})
