"""Table layout: column widths, padding, last-column wrapping, row joining.

Every column but the last is padded to the widest cell in it plus one space,
so the following column starts at the same offset in every row. The last
column takes whatever line width is left and is word-wrapped, continuation
lines starting under the first line's last-column text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from docblock.lib.config.settings import BULLET
from docblock.lib.wordwrap import wrap_words

if TYPE_CHECKING:
    from collections.abc import Sequence

    from docblock.lib.config.settings import FormatterConfig
    from docblock.lib.types import Cell, Table


def transpose(table: Table) -> list[list[str]]:
    """Group present cells by column position; short rows add nothing past their end."""

    columns: list[list[str]] = []
    for row in table:
        for index, cell in enumerate(row):
            while len(columns) <= index:
                columns.append([])
            if cell is not None:
                columns[index].append(cell)
    return columns


def column_widths(table: Table) -> list[int]:
    """Printed width of every column except the last, separator space included.

    >>> column_widths((("@author", "Name"), ("@copyright", "2025 Name")))
    [11]
    """

    columns = transpose(table)
    return [max((len(cell) for cell in column), default=0) + 1 for column in columns[:-1]]


def pad_columns(table: Table, widths: Sequence[int]) -> list[list[Cell]]:
    rows: list[list[Cell]] = []
    for row in table:
        padded: list[Cell] = []
        for index, cell in enumerate(row):
            if cell is not None and index < len(widths):
                cell = cell.ljust(widths[index])
            padded.append(cell)
        rows.append(padded)
    return rows


def last_column_width(config: FormatterConfig, preceding_width: int) -> int:
    """Wrap width left for the last column after indentation, bullet and columns.

    Never below `min_last_column_width`, even when that pushes lines past
    `max_line_length`.
    """

    available = (
        config.max_line_length - config.indent_width - len(BULLET) - preceding_width
    )
    if available > config.min_last_column_width:
        return available
    return config.min_last_column_width


def wrap_last_column(
    rows: Sequence[Sequence[Cell]],
    *,
    last_index: int,
    preceding_width: int,
    config: FormatterConfig,
) -> list[list[Cell]]:
    width = last_column_width(config, preceding_width)
    line_break = config.line_start + " " * preceding_width
    wrapped: list[list[Cell]] = []
    for row in rows:
        cells = list(row)
        if last_index < len(cells):
            cell = cells[last_index]
            if cell is not None:
                cells[last_index] = wrap_words(cell, width, line_break)
        wrapped.append(cells)
    return wrapped


def render_table(table: Table, config: FormatterConfig) -> str:
    """Render one table as a block of bullet-joined lines, without delimiters."""

    widths = column_widths(table)
    rows = pad_columns(table, widths)
    rows = wrap_last_column(
        rows,
        last_index=len(widths),
        preceding_width=sum(widths),
        config=config,
    )
    lines = ["".join(cell for cell in row if cell is not None).rstrip() for row in rows]
    return config.line_start.join(lines)
