"""Surface parity checks between registry, CLI, and MCP server."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from docblock.cli.main import get_registered_cli_commands, get_registered_cli_descriptions
from docblock.lib.ops.registry import OperationSpec, Surface, get_all_operations, operation
from docblock.server.main import get_registered_mcp_descriptions, get_registered_mcp_tools


@dataclass(frozen=True, slots=True)
class _DupInput:
    pass


@dataclass(frozen=True, slots=True)
class _DupOutput:
    ok: bool


def _dup_sync(_: _DupInput) -> _DupOutput:
    return _DupOutput(ok=True)


def _spec(
    name: str, surfaces: frozenset[Surface] | None = None
) -> OperationSpec[_DupInput, _DupOutput]:
    extra = {} if surfaces is None else {"surfaces": surfaces}
    return OperationSpec[_DupInput, _DupOutput](
        name=name,
        description="duplicate",
        sync_handler=_dup_sync,
        input_type=_DupInput,
        output_type=_DupOutput,
        **extra,
    )


def test_every_operation_is_mounted_on_its_surfaces() -> None:
    cli_commands = get_registered_cli_commands()
    mcp_tools = get_registered_mcp_tools()

    for op in get_all_operations():
        assert (op.name in cli_commands) == (Surface.CLI in op.surfaces), op.name
        assert (op.mcp_name in mcp_tools) == (Surface.MCP in op.surfaces), op.name


def test_expected_surfaces() -> None:
    assert get_registered_cli_commands() == {
        "block.render",
        "block.lines",
        "config.show",
        "config.init",
    }
    assert get_registered_mcp_tools() == {"block_render", "block_lines", "config_show"}


def test_cli_help_matches_mcp_description() -> None:
    cli_descriptions = get_registered_cli_descriptions()
    mcp_descriptions = get_registered_mcp_descriptions()

    for op in get_all_operations():
        if op.surfaces == {Surface.CLI, Surface.MCP}:
            assert cli_descriptions[op.name] == mcp_descriptions[op.name]


def test_spec_names_derive_surface_names() -> None:
    spec = _spec("block.check")

    assert (spec.group, spec.command, spec.mcp_name) == ("block", "check", "block_check")


@pytest.mark.parametrize(
    ("spec", "message"),
    [
        (_spec("block.render"), "Duplicate operation name"),
        (_spec("render"), "must look like"),
        (_spec("block.nowhere", frozenset()), "not exposed on any surface"),
    ],
)
def test_invalid_registrations_are_rejected(
    spec: OperationSpec[_DupInput, _DupOutput], message: str
) -> None:
    get_all_operations()

    with pytest.raises(ValueError, match=message):
        operation(spec)
