"""Render operation results as text, JSON, or porcelain records."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Literal, cast, get_args

from docblock.lib.formatting import FormatContext, TextFormattable
from docblock.lib.serialization import to_jsonable

OutputFormat = Literal["text", "json", "porcelain"]
OUTPUT_FORMATS: tuple[str, ...] = get_args(OutputFormat)


@dataclass(frozen=True, slots=True)
class OutputConfig:
    format: OutputFormat = "text"
    verbosity: int = 0


def resolve_output_format(
    requested: str | None,
    *,
    json_mode: bool = False,
    porcelain_mode: bool = False,
) -> OutputFormat:
    """`--json` and `--porcelain` win over `--format`; text is the default."""

    if json_mode:
        return "json"
    if porcelain_mode:
        return "porcelain"
    normalized = (requested or "text").strip().lower()
    if normalized not in OUTPUT_FORMATS:
        raise SystemExit(f"--format must be one of: {', '.join(OUTPUT_FORMATS)}")
    return cast("OutputFormat", normalized)


def render_json(value: Any) -> str:
    return json.dumps(to_jsonable(value), sort_keys=True)


def _porcelain_field(value: object) -> str:
    if isinstance(value, (dict, list)):
        return json.dumps(value, sort_keys=True)
    if isinstance(value, str) and "\n" in value:
        # A rendered comment must not split the record.
        return json.dumps(value)
    return str(value)


def render_porcelain(value: Any) -> str:
    """One line of tab-separated ``key=value`` fields, keys sorted."""

    payload = to_jsonable(value)
    if not isinstance(payload, dict):
        return _porcelain_field(payload)
    record = cast("dict[str, object]", payload)
    return "\t".join(f"{key}={_porcelain_field(record[key])}" for key in sorted(record))


def render_text(value: Any, verbosity: int = 0) -> str:
    if isinstance(value, TextFormattable):
        return value.format_text(FormatContext(verbosity=verbosity))
    return json.dumps(to_jsonable(value), sort_keys=True, indent=2)


def emit(value: Any, config: OutputConfig) -> None:
    """Print ``value`` to stdout in the configured format."""

    if config.format == "json":
        print(render_json(value))
    elif config.format == "porcelain":
        print(render_porcelain(value))
    else:
        print(render_text(value, config.verbosity))
