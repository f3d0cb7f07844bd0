"""Inspect and scaffold the repository's `.docblock.toml`."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING

from docblock.lib.config._paths import config_path
from docblock.lib.config.settings import (
    ENV_VAR_BY_FIELD,
    ConfigSource,
    FormatterConfig,
    load_config_with_sources,
)
from docblock.lib.ops._runtime import resolve_root
from docblock.lib.ops.registry import OperationSpec, Surface, operation

if TYPE_CHECKING:
    from docblock.lib.formatting import FormatContext

# Shown as comments above each key in a scaffolded file.
_KEY_NOTES: dict[str, str] = {
    "indent_width": "Columns of indentation before every comment line.",
    "use_tab": "Indent with one tab; indent_width still counts toward line length.",
    "max_line_length": "Width the last column of every table wraps to.",
    "min_last_column_width": "The last column never wraps narrower than this.",
}


@dataclass(frozen=True, slots=True)
class ConfigShowInput:
    repo_root: str | None = None


@dataclass(frozen=True, slots=True)
class ConfigInitInput:
    repo_root: str | None = None


@dataclass(frozen=True, slots=True)
class ConfigResolvedValue:
    key: str
    value: object
    source: ConfigSource
    env_var: str | None = None

    def describe_source(self) -> str:
        if self.source == "env var" and self.env_var:
            return f"[source: env var ({self.env_var})]"
        return f"[source: {self.source}]"


@dataclass(frozen=True, slots=True)
class ConfigShowOutput:
    path: str
    exists: bool
    values: tuple[ConfigResolvedValue, ...]

    def format_text(self, ctx: FormatContext | None = None) -> str:
        from docblock.cli.format_helpers import tabular

        _ = ctx
        suffix = "" if self.exists else " (not found)"
        rows = [[item.key, json.dumps(item.value), item.describe_source()] for item in self.values]
        return f"path: {self.path}{suffix}\n" + tabular(rows)


@dataclass(frozen=True, slots=True)
class ConfigInitOutput:
    path: str
    created: bool

    def format_text(self, ctx: FormatContext | None = None) -> str:
        _ = ctx
        return f"{'created' if self.created else 'exists'}: {self.path}"


def scaffold_text(defaults: FormatterConfig | None = None) -> str:
    """Commented `.docblock.toml` holding every key at its default value."""

    lines = [
        "# docblock formatter settings.",
        "# DOCBLOCK_* environment variables override these values.",
        "",
        "[format]",
    ]
    for key, value in asdict(defaults or FormatterConfig()).items():
        lines.append(f"# {_KEY_NOTES[key]}")
        lines.append(f"{key} = {json.dumps(value)}")
    return "\n".join(lines) + "\n"


def config_show_sync(payload: ConfigShowInput) -> ConfigShowOutput:
    repo_root = resolve_root(payload.repo_root)
    config, sources = load_config_with_sources(repo_root)
    path = config_path(repo_root)
    return ConfigShowOutput(
        path=path.as_posix(),
        exists=path.is_file(),
        values=tuple(
            ConfigResolvedValue(
                key=key,
                value=value,
                source=sources[key],
                env_var=ENV_VAR_BY_FIELD.get(key),
            )
            for key, value in asdict(config).items()
        ),
    )


def config_init_sync(payload: ConfigInitInput) -> ConfigInitOutput:
    path = config_path(resolve_root(payload.repo_root))
    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        with path.open("x", encoding="utf-8") as handle:
            handle.write(scaffold_text())
    except FileExistsError:
        return ConfigInitOutput(path=path.as_posix(), created=False)
    return ConfigInitOutput(path=path.as_posix(), created=True)


operation(
    OperationSpec[ConfigShowInput, ConfigShowOutput](
        name="config.show",
        description="Show resolved formatter settings and where each value came from.",
        sync_handler=config_show_sync,
        input_type=ConfigShowInput,
        output_type=ConfigShowOutput,
    )
)

operation(
    OperationSpec[ConfigInitInput, ConfigInitOutput](
        name="config.init",
        description="Write a default .docblock.toml to the repository root.",
        sync_handler=config_init_sync,
        input_type=ConfigInitInput,
        output_type=ConfigInitOutput,
        surfaces=frozenset({Surface.CLI}),
    )
)
