"""Operations exposed on the CLI and the MCP server.

Registry names resolve lazily so operation modules can import the registry
without importing this package's exports first.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = ["OperationSpec", "Surface", "get_all_operations", "get_operation"]


def __getattr__(name: str) -> Any:
    if name in __all__:
        return getattr(import_module("docblock.lib.ops.registry"), name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
