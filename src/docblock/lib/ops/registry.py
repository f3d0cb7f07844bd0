"""Operation registry shared by the CLI and MCP surfaces.

Operations are named ``<group>.<command>``; the CLI mounts them as
``docblock <group> <command>`` and the MCP server as ``<group>_<command>``.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")


class Surface(StrEnum):
    CLI = "cli"
    MCP = "mcp"


BOTH_SURFACES = frozenset({Surface.CLI, Surface.MCP})


@dataclass(frozen=True, slots=True)
class OperationSpec(Generic[InputT, OutputT]):
    """One operation and the surfaces it is exposed on."""

    name: str
    description: str
    sync_handler: Callable[[InputT], OutputT]
    input_type: type[InputT]
    output_type: type[OutputT]
    surfaces: frozenset[Surface] = BOTH_SURFACES

    @property
    def group(self) -> str:
        return self.name.partition(".")[0]

    @property
    def command(self) -> str:
        return self.name.partition(".")[2]

    @property
    def mcp_name(self) -> str:
        return self.name.replace(".", "_")

    async def run(self, payload: InputT) -> OutputT:
        """Run the sync handler off the event loop; it may read config files."""

        return await asyncio.to_thread(self.sync_handler, payload)


_OPERATIONS: dict[str, OperationSpec[Any, Any]] = {}
_loaded = False


def operation(spec: OperationSpec[InputT, OutputT]) -> OperationSpec[InputT, OutputT]:
    """Add ``spec`` to the registry and return it."""

    if "." not in spec.name:
        raise ValueError(f"Operation name '{spec.name}' must look like '<group>.<command>'")
    if not spec.surfaces:
        raise ValueError(f"Operation '{spec.name}' is not exposed on any surface")
    existing = _OPERATIONS.get(spec.name)
    if existing is not None:
        raise ValueError(
            f"Duplicate operation name '{spec.name}' "
            f"(first registered by {existing.sync_handler.__qualname__})"
        )
    _OPERATIONS[spec.name] = spec
    return spec


def _load_operation_modules() -> None:
    global _loaded
    if _loaded:
        return
    # Each module registers its operations at import time.
    from docblock.lib.ops import block, config

    _ = (block, config)
    _loaded = True


def get_all_operations() -> list[OperationSpec[Any, Any]]:
    """Every registered operation, ordered by name."""

    _load_operation_modules()
    return sorted(_OPERATIONS.values(), key=lambda spec: spec.name)


def get_operation(name: str) -> OperationSpec[Any, Any]:
    _load_operation_modules()
    return _OPERATIONS[name]


def operations_for(surface: Surface, group: str | None = None) -> list[OperationSpec[Any, Any]]:
    """Operations exposed on ``surface``, optionally limited to one group."""

    return [
        spec
        for spec in get_all_operations()
        if surface in spec.surfaces and (group is None or spec.group == group)
    ]
