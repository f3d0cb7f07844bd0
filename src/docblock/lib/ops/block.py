"""Doc comment rendering operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import structlog

from docblock.lib.envelope import assemble_comment
from docblock.lib.generator import render_blocks
from docblock.lib.ops._runtime import resolve_formatter_config
from docblock.lib.ops.registry import OperationSpec, operation

if TYPE_CHECKING:
    from docblock.lib.config.settings import FormatterConfig
    from docblock.lib.formatting import FormatContext

logger = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class BlockRenderInput:
    document: Any
    indent_width: int | None = None
    use_tab: bool | None = None
    max_line_length: int | None = None
    min_last_column_width: int | None = None
    repo_root: str | None = None

    def overrides(self) -> dict[str, object | None]:
        return {
            "indent_width": self.indent_width,
            "use_tab": self.use_tab,
            "max_line_length": self.max_line_length,
            "min_last_column_width": self.min_last_column_width,
        }


@dataclass(frozen=True, slots=True)
class BlockRenderOutput:
    comment: str
    tables: int
    one_line: bool

    def format_text(self, ctx: FormatContext | None = None) -> str:
        _ = ctx
        return self.comment


@dataclass(frozen=True, slots=True)
class CommentLine:
    number: int
    width: int
    text: str

    def as_row(self, max_line_length: int) -> list[str]:
        marker = "!" if self.width > max_line_length else ""
        return [str(self.number), f"{self.width}{marker}", self.text]


@dataclass(frozen=True, slots=True)
class BlockLinesOutput:
    max_line_length: int
    longest: int
    overflowing: tuple[int, ...]
    lines: tuple[CommentLine, ...]

    def format_text(self, ctx: FormatContext | None = None) -> str:
        from docblock.cli.format_helpers import kv_block, tabular

        summary = kv_block(
            [
                ("max_line_length", str(self.max_line_length)),
                ("longest", str(self.longest)),
                (
                    "overflowing",
                    ", ".join(str(number) for number in self.overflowing)
                    if self.overflowing
                    else None,
                ),
            ]
        )
        if ctx is not None and ctx.verbosity > 0:
            rows = [line.as_row(self.max_line_length) for line in self.lines]
            return summary + "\n\n" + tabular(rows, align=">><")
        return summary


def _render(payload: BlockRenderInput) -> tuple[FormatterConfig, list[str], str]:
    config = resolve_formatter_config(payload.repo_root, payload.overrides())
    blocks = render_blocks(payload.document, config)
    comment = assemble_comment(blocks, config)
    logger.debug(
        "Rendered doc comment.",
        tables=len(blocks),
        lines=comment.count("\n") + 1,
        indent_width=config.indent_width,
        max_line_length=config.max_line_length,
    )
    return config, blocks, comment


def display_width(line: str, config: FormatterConfig) -> int:
    """Column width of one comment line, a leading tab counting as the indent width."""

    if config.use_tab and config.indent_width > 0 and line.startswith("\t"):
        return config.indent_width + len(line) - 1
    return len(line)


def block_render_sync(payload: BlockRenderInput) -> BlockRenderOutput:
    _, blocks, comment = _render(payload)
    return BlockRenderOutput(comment=comment, tables=len(blocks), one_line="\n" not in comment)


def block_lines_sync(payload: BlockRenderInput) -> BlockLinesOutput:
    config, _, comment = _render(payload)
    lines = tuple(
        CommentLine(number=number, width=display_width(text, config), text=text)
        for number, text in enumerate(comment.split("\n"), start=1)
    )
    return BlockLinesOutput(
        max_line_length=config.max_line_length,
        longest=max(line.width for line in lines),
        overflowing=tuple(
            line.number for line in lines if line.width > config.max_line_length
        ),
        lines=lines,
    )


operation(
    OperationSpec[BlockRenderInput, BlockRenderOutput](
        name="block.render",
        description="Render a document of tables into a doc comment.",
        sync_handler=block_render_sync,
        input_type=BlockRenderInput,
        output_type=BlockRenderOutput,
    )
)

operation(
    OperationSpec[BlockRenderInput, BlockLinesOutput](
        name="block.lines",
        description="Render a document and report the width of every comment line.",
        sync_handler=block_lines_sync,
        input_type=BlockRenderInput,
        output_type=BlockLinesOutput,
    )
)
