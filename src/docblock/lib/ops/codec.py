"""Turn MCP tool arguments into operation input dataclasses."""

from __future__ import annotations

import inspect
import types
from collections.abc import Callable, Mapping
from dataclasses import MISSING, Field, fields, is_dataclass
from typing import Any, TypeVar, Union, cast, get_args, get_origin, get_type_hints

PayloadT = TypeVar("PayloadT")

_BOOL_WORDS = {"1": True, "true": True, "yes": True, "on": True}
_BOOL_WORDS.update({"0": False, "false": False, "no": False, "off": False})


def unwrap_optional(annotation: Any) -> Any:
    """``T | None`` -> ``T``; any other annotation is returned unchanged."""

    if get_origin(annotation) not in (types.UnionType, Union):
        return annotation
    members = [arg for arg in get_args(annotation) if arg is not type(None)]
    if len(members) == 1:
        return members[0]
    return annotation


def _to_bool(value: object, field_name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in _BOOL_WORDS:
        return _BOOL_WORDS[value.strip().lower()]
    raise TypeError(f"Field '{field_name}' expects a boolean, got {value!r}")


def _to_int(value: object, field_name: str) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise TypeError(f"Field '{field_name}' expects an integer, got {value!r}")


def _to_str(value: object, field_name: str) -> str:
    _ = field_name
    return str(value)


_CONVERTERS: dict[Any, Callable[[object, str], object]] = {
    bool: _to_bool,
    int: _to_int,
    str: _to_str,
}


def coerce_field(annotation: Any, value: object, *, field_name: str) -> object:
    """Convert one argument to its declared scalar type; other values pass through."""

    if value is None:
        return None
    converter = _CONVERTERS.get(unwrap_optional(annotation))
    if converter is None:
        return value
    return converter(value, field_name)


def _field_default(field: Field[Any]) -> object:
    if field.default is not MISSING:
        return field.default
    if field.default_factory is not MISSING:
        return field.default_factory()
    return inspect.Parameter.empty


def payload_from_arguments(payload_type: type[PayloadT], arguments: object) -> PayloadT:
    """Build ``payload_type`` from a tool's keyword arguments."""

    if arguments is None:
        arguments = {}
    if not isinstance(arguments, Mapping):
        raise TypeError(f"Tool input must be an object, got {type(arguments).__name__}")
    if not is_dataclass(payload_type):
        raise TypeError(f"{payload_type.__name__} is not a dataclass payload")

    given = {str(key): value for key, value in cast("Mapping[object, object]", arguments).items()}
    hints = get_type_hints(payload_type)
    values: dict[str, object] = {}
    for field in fields(payload_type):
        if field.name in given:
            values[field.name] = coerce_field(
                hints.get(field.name, Any), given[field.name], field_name=field.name
            )
            continue
        default = _field_default(field)
        if default is inspect.Parameter.empty:
            raise TypeError(f"Missing required field '{field.name}'")
        values[field.name] = default
    return cast("PayloadT", payload_type(**values))


def tool_signature(payload_type: type[object]) -> inspect.Signature:
    """Keyword-only signature mirroring the payload fields, for tool schemas."""

    hints = get_type_hints(payload_type, include_extras=True)
    return inspect.Signature(
        [
            inspect.Parameter(
                field.name,
                inspect.Parameter.KEYWORD_ONLY,
                default=_field_default(field),
                annotation=hints.get(field.name, field.type),
            )
            for field in fields(cast("Any", payload_type))
        ]
    )
