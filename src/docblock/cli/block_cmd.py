"""CLI command handlers for block.* operations."""

import json
import sys
from collections.abc import Callable
from functools import partial
from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter

from docblock.cli.commands import Emitter, mount_operations
from docblock.lib.ops.block import BlockRenderInput, block_lines_sync, block_render_sync


def load_document(path: str | None) -> object:
    """Read one JSON document from a file, or from stdin for `-` / no path."""

    if path is None or path == "-":
        raw = sys.stdin.read()
        source = "<stdin>"
    else:
        document_path = Path(path).expanduser()
        raw = document_path.read_text(encoding="utf-8")
        source = document_path.as_posix()
    try:
        return json.loads(raw)
    except json.JSONDecodeError as error:
        raise ValueError(
            f"Invalid JSON document in {source}: {error.msg} "
            f"(line {error.lineno}, column {error.colno})."
        ) from error


def _build_input(
    path: str | None,
    indent: int | None,
    tab: bool | None,
    max_line_length: int | None,
    min_last_column_width: int | None,
    repo_root: str | None,
) -> BlockRenderInput:
    return BlockRenderInput(
        document=load_document(path),
        indent_width=indent,
        use_tab=tab,
        max_line_length=max_line_length,
        min_last_column_width=min_last_column_width,
        repo_root=repo_root,
    )


def _block_command(
    emit: Emitter,
    sync_handler: Callable[[BlockRenderInput], object],
    path: Annotated[
        str | None,
        Parameter(help="JSON document to render; reads stdin when omitted or '-'."),
    ] = None,
    indent: Annotated[
        int | None,
        Parameter(name=["--indent", "-i"], help="Columns of indentation before each line."),
    ] = None,
    tab: Annotated[
        bool | None,
        Parameter(name="--tab", help="Indent with a single tab instead of spaces."),
    ] = None,
    max_line_length: Annotated[
        int | None,
        Parameter(name="--max-line-length", help="Line width the last column wraps to."),
    ] = None,
    min_last_column_width: Annotated[
        int | None,
        Parameter(
            name="--min-last-column-width",
            help="Narrowest wrap width for the last column.",
        ),
    ] = None,
    repo_root: Annotated[
        str | None,
        Parameter(name="--repo-root", help="Directory holding .docblock.toml."),
    ] = None,
) -> None:
    payload = _build_input(path, indent, tab, max_line_length, min_last_column_width, repo_root)
    emit(sync_handler(payload))


def register_block_commands(app: App, emit: Emitter) -> dict[str, str]:
    return mount_operations(
        app,
        "block",
        {
            "block.render": partial(_block_command, emit, block_render_sync),
            "block.lines": partial(_block_command, emit, block_lines_sync),
        },
    )
