"""Ensure all registered operation output types implement TextFormattable.

Prevents silent JSON fallback from shipping for new output types that
forgot to add format_text().
"""

from __future__ import annotations

import dataclasses
import inspect
import types
from typing import Any, get_args, get_origin, get_type_hints

import pytest

from docblock.cli.output import resolve_output_format
from docblock.lib.formatting import FormatContext, TextFormattable
from docblock.lib.logging import level_from_verbosity
from docblock.lib.ops.registry import get_all_operations

_DUMMY_VALUES: dict[type, Any] = {
    str: "",
    int: 0,
    bool: False,
}


def _resolve_dummy(annotation: Any) -> Any:
    if annotation in _DUMMY_VALUES:
        return _DUMMY_VALUES[annotation]

    origin = get_origin(annotation)
    if origin is types.UnionType and type(None) in get_args(annotation):
        return None
    if origin is tuple:
        return ()
    return ""


def _make_dummy(output_type: type[Any]) -> Any:
    hints = get_type_hints(output_type)
    kwargs = {
        field.name: _resolve_dummy(hints[field.name])
        for field in dataclasses.fields(output_type)
        if field.default is dataclasses.MISSING
    }
    return output_type(**kwargs)


def test_all_output_types_are_text_formattable() -> None:
    missing = [
        f"{spec.output_type.__name__} (from {spec.name})"
        for spec in get_all_operations()
        if not hasattr(spec.output_type, "format_text")
    ]
    assert not missing, "Output types without format_text():\n" + "\n".join(missing)


def test_format_text_accepts_format_context() -> None:
    for spec in get_all_operations():
        params = list(inspect.signature(spec.output_type.format_text).parameters)
        assert len(params) >= 2, f"{spec.output_type.__name__}.format_text() takes no context"


def test_format_text_handles_minimal_instances() -> None:
    for spec in get_all_operations():
        instance = _make_dummy(spec.output_type)

        assert isinstance(instance, TextFormattable)
        for verbosity in (0, 1):
            assert isinstance(instance.format_text(FormatContext(verbosity=verbosity)), str)


@pytest.mark.parametrize(
    ("requested", "json_mode", "porcelain_mode", "expected"),
    [
        (None, False, False, "text"),
        ("", False, False, "text"),
        (" JSON ", False, False, "json"),
        ("text", True, False, "json"),
        ("text", False, True, "porcelain"),
    ],
)
def test_resolve_output_format(
    requested: str | None,
    json_mode: bool,
    porcelain_mode: bool,
    expected: str,
) -> None:
    resolved = resolve_output_format(
        requested, json_mode=json_mode, porcelain_mode=porcelain_mode
    )

    assert resolved == expected


@pytest.mark.parametrize(("verbosity", "level"), [(-1, 30), (0, 30), (1, 20), (2, 10), (5, 10)])
def test_log_level_from_verbosity(verbosity: int, level: int) -> None:
    assert level_from_verbosity(verbosity) == level
