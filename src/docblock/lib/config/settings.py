"""Formatter settings and the repository-level config loader."""

from __future__ import annotations

import logging
import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Literal, cast

from docblock.lib.config._paths import config_path

logger = logging.getLogger(__name__)

BULLET = " * "

ConfigSource = Literal["builtin", "file", "env var"]


@dataclass(frozen=True, slots=True)
class FormatterConfig:
    """Layout settings; one instance is read for the whole of a render."""

    indent_width: int = 0
    use_tab: bool = False
    max_line_length: int = 80
    min_last_column_width: int = 20

    @property
    def indentation(self) -> str:
        """Prefix of every comment line.

        A tab replaces the whole width when tabs are on; width arithmetic
        still counts `indent_width` columns.
        """

        if self.indent_width > 0 and self.use_tab:
            return "\t"
        return " " * self.indent_width

    @property
    def line_start(self) -> str:
        return "\n" + self.indentation + BULLET


_FORMAT_KEY_MAP: dict[str, str] = {
    "indent_width": "indent_width",
    "indentation": "indent_width",
    "use_tab": "use_tab",
    "use_tab_for_indentation": "use_tab",
    "max_line_length": "max_line_length",
    "min_last_column_width": "min_last_column_width",
}

_ENV_OVERRIDE_MAP: dict[str, str] = {
    "DOCBLOCK_INDENT_WIDTH": "indent_width",
    "DOCBLOCK_USE_TAB": "use_tab",
    "DOCBLOCK_MAX_LINE_LENGTH": "max_line_length",
    "DOCBLOCK_MIN_LAST_COLUMN_WIDTH": "min_last_column_width",
}

ENV_VAR_BY_FIELD: dict[str, str] = {field: env for env, field in _ENV_OVERRIDE_MAP.items()}

_FIELD_MINIMUMS: dict[str, int] = {
    "indent_width": 0,
    "max_line_length": 1,
    "min_last_column_width": 1,
}

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


def _expected_type_name(field_name: str) -> str:
    if field_name == "use_tab":
        return "bool"
    return "int"


def _check_minimum(*, field_name: str, value: int, source: str) -> int:
    minimum = _FIELD_MINIMUMS[field_name]
    if value < minimum:
        raise ValueError(
            f"Invalid value for '{source}': expected int >= {minimum}, got {value!r}."
        )
    return value


def coerce_value(*, field_name: str, raw_value: object, source: str) -> object:
    """Type and range check one already-typed value (TOML, JSON, CLI)."""

    expected = _expected_type_name(field_name)
    if expected == "bool":
        if not isinstance(raw_value, bool):
            raise ValueError(
                f"Invalid value for '{source}': expected bool, got "
                f"{type(raw_value).__name__} ({raw_value!r})."
            )
        return raw_value

    if isinstance(raw_value, bool) or not isinstance(raw_value, int):
        raise ValueError(
            f"Invalid value for '{source}': expected int, got "
            f"{type(raw_value).__name__} ({raw_value!r})."
        )
    return _check_minimum(field_name=field_name, value=raw_value, source=source)


def _coerce_env_value(*, field_name: str, raw_value: str, env_name: str) -> object:
    normalized = raw_value.strip().lower()
    if _expected_type_name(field_name) == "bool":
        if normalized in _TRUTHY:
            return True
        if normalized in _FALSY:
            return False
        raise ValueError(
            f"Invalid environment override '{env_name}': expected bool, got {raw_value!r}."
        )

    try:
        value = int(normalized)
    except ValueError as error:
        raise ValueError(
            f"Invalid environment override '{env_name}': expected int, got {raw_value!r}."
        ) from error
    return _check_minimum(field_name=field_name, value=value, source=env_name)


def _default_values() -> dict[str, object]:
    defaults = FormatterConfig()
    return {field.name: getattr(defaults, field.name) for field in fields(FormatterConfig)}


def _apply_format_table(
    *,
    values: dict[str, object],
    sources: dict[str, ConfigSource],
    table: Mapping[str, object],
    prefix: str,
) -> None:
    for key, raw_value in table.items():
        source = f"{prefix}{key}"
        field_name = _FORMAT_KEY_MAP.get(key)
        if field_name is None:
            logger.warning("Ignoring unknown docblock config key '%s'.", source)
            continue
        values[field_name] = coerce_value(
            field_name=field_name,
            raw_value=raw_value,
            source=source,
        )
        sources[field_name] = "file"


def _apply_toml_payload(
    *,
    values: dict[str, object],
    sources: dict[str, ConfigSource],
    payload: dict[str, object],
    path: Path,
) -> None:
    top_level: dict[str, object] = {}
    for key, raw_value in payload.items():
        if key == "format":
            if not isinstance(raw_value, dict):
                raise ValueError(f"Invalid value for 'format' in '{path}': expected table.")
            _apply_format_table(
                values=values,
                sources=sources,
                table=cast("dict[str, object]", raw_value),
                prefix="format.",
            )
            continue
        top_level[key] = raw_value

    _apply_format_table(values=values, sources=sources, table=top_level, prefix="")


def _apply_env_overrides(
    values: dict[str, object],
    sources: dict[str, ConfigSource],
) -> None:
    for env_name, field_name in _ENV_OVERRIDE_MAP.items():
        raw_value = os.getenv(env_name)
        if raw_value is None:
            continue
        values[field_name] = _coerce_env_value(
            field_name=field_name,
            raw_value=raw_value,
            env_name=env_name,
        )
        sources[field_name] = "env var"


def _build_config(values: dict[str, object]) -> FormatterConfig:
    return FormatterConfig(
        indent_width=cast("int", values["indent_width"]),
        use_tab=cast("bool", values["use_tab"]),
        max_line_length=cast("int", values["max_line_length"]),
        min_last_column_width=cast("int", values["min_last_column_width"]),
    )


def load_config_with_sources(
    repo_root: Path,
) -> tuple[FormatterConfig, dict[str, ConfigSource]]:
    """Resolve formatter settings and record where each value came from."""

    values = _default_values()
    sources: dict[str, ConfigSource] = dict.fromkeys(values, "builtin")
    path = config_path(repo_root)
    if path.is_file():
        payload_obj = tomllib.loads(path.read_text(encoding="utf-8"))
        payload = cast("dict[str, object]", payload_obj)
        _apply_toml_payload(values=values, sources=sources, payload=payload, path=path)

    _apply_env_overrides(values, sources)
    return _build_config(values), sources


def load_config(repo_root: Path) -> FormatterConfig:
    """Load `.docblock.toml` and apply environment overrides."""

    config, _ = load_config_with_sources(repo_root)
    return config


def with_overrides(
    config: FormatterConfig,
    overrides: Mapping[str, object | None],
) -> FormatterConfig:
    """Return ``config`` with every non-None override applied and checked."""

    changes: dict[str, object] = {}
    for field_name, raw_value in overrides.items():
        if raw_value is None:
            continue
        if field_name not in _FIELD_MINIMUMS and field_name != "use_tab":
            raise KeyError(f"Unknown formatter setting '{field_name}'.")
        changes[field_name] = coerce_value(
            field_name=field_name,
            raw_value=raw_value,
            source=field_name,
        )
    if not changes:
        return config
    return replace(config, **changes)
