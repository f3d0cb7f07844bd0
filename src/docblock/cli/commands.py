"""Mount registered operations as Cyclopts commands."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from docblock.lib.ops.registry import Surface, operations_for

if TYPE_CHECKING:
    from collections.abc import Mapping

    from cyclopts import App

type Emitter = Callable[[Any], None]


def mount_operations(
    app: App,
    group: str,
    handlers: Mapping[str, Callable[..., None]],
) -> dict[str, str]:
    """Add one command per CLI operation in ``group``.

    Returns the mounted operation names with their help text. Every CLI
    operation of the group needs a handler; a missing one is a wiring bug.
    """

    mounted: dict[str, str] = {}
    for spec in operations_for(Surface.CLI, group):
        handler = handlers.get(spec.name)
        if handler is None:
            raise ValueError(f"No CLI handler registered for operation '{spec.name}'")
        handler.__name__ = f"cmd_{spec.group}_{spec.command}"
        app.command(handler, name=spec.command, help=spec.description)
        mounted[spec.name] = spec.description
    return mounted
