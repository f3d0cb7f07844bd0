"""CLI command handlers for config.* operations."""

from functools import partial
from typing import Annotated

from cyclopts import App, Parameter

from docblock.cli.commands import Emitter, mount_operations
from docblock.lib.ops.config import (
    ConfigInitInput,
    ConfigShowInput,
    config_init_sync,
    config_show_sync,
)

RepoRootOption = Annotated[
    str | None,
    Parameter(name="--repo-root", help="Directory holding .docblock.toml."),
]


def _config_show(emit: Emitter, repo_root: RepoRootOption = None) -> None:
    emit(config_show_sync(ConfigShowInput(repo_root=repo_root)))


def _config_init(emit: Emitter, repo_root: RepoRootOption = None) -> None:
    emit(config_init_sync(ConfigInitInput(repo_root=repo_root)))


def register_config_commands(app: App, emit: Emitter) -> dict[str, str]:
    return mount_operations(
        app,
        "config",
        {
            "config.show": partial(_config_show, emit),
            "config.init": partial(_config_init, emit),
        },
    )
