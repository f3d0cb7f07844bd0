"""FastMCP server exposing docblock operations as tools."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, cast

import structlog
from mcp.server.fastmcp import FastMCP

from docblock.lib.logging import configure_logging
from docblock.lib.ops.codec import payload_from_arguments, tool_signature
from docblock.lib.ops.registry import OperationSpec, Surface, operations_for
from docblock.lib.serialization import to_jsonable

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(_: FastMCP[Any]) -> AsyncIterator[dict[str, bool]]:
    # stdout carries the protocol; logs go to stderr as JSON.
    configure_logging(json_mode=True)
    logger.info("docblock MCP server started.")
    yield {"ready": True}


mcp = FastMCP("docblock", lifespan=lifespan)


def _build_tool_handler(spec: OperationSpec[Any, Any]) -> Any:
    """Wrap one operation as a keyword-argument tool returning JSON data."""

    async def tool(**arguments: object) -> object:
        payload = payload_from_arguments(spec.input_type, arguments)
        return to_jsonable(await spec.run(payload))

    tool.__name__ = spec.mcp_name
    tool.__doc__ = spec.description
    cast("Any", tool).__signature__ = tool_signature(spec.input_type)
    return tool


def _register_tools(server: FastMCP[Any]) -> dict[str, str]:
    registered: dict[str, str] = {}
    for spec in operations_for(Surface.MCP):
        server.tool(name=spec.mcp_name, description=spec.description)(_build_tool_handler(spec))
        registered[spec.name] = spec.description
    return registered


_MCP_DESCRIPTIONS = _register_tools(mcp)


def get_registered_mcp_tools() -> set[str]:
    return {name.replace(".", "_") for name in _MCP_DESCRIPTIONS}


def get_registered_mcp_descriptions() -> dict[str, str]:
    return dict(_MCP_DESCRIPTIONS)


def run_server() -> None:
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run_server()
