"""Formatter settings and config file discovery."""

from docblock.lib.config._paths import CONFIG_FILE_NAME, config_path, resolve_repo_root
from docblock.lib.config.settings import (
    BULLET,
    FormatterConfig,
    load_config,
    load_config_with_sources,
    with_overrides,
)

__all__ = [
    "BULLET",
    "CONFIG_FILE_NAME",
    "FormatterConfig",
    "config_path",
    "load_config",
    "load_config_with_sources",
    "resolve_repo_root",
    "with_overrides",
]
