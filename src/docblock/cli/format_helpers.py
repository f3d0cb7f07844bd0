"""Shared text formatting primitives for CLI output."""

from __future__ import annotations


def tabular(rows: list[list[str]], sep: str = "  ", align: str = "") -> str:
    """Align columns by max width per column.

    ``align`` holds one character per column, ``<`` (default) or ``>``.

    >>> tabular([["1", "12", "/**"], ["10", "7", " */"]], align=">><")
    ' 1  12  /**\\n10   7   */'
    """
    if not rows:
        return ""
    col_count = max(len(row) for row in rows)
    col_widths = [
        max((len(row[col]) if col < len(row) else 0) for row in rows)
        for col in range(col_count)
    ]
    lines: list[str] = []
    for row in rows:
        cells: list[str] = []
        for col in range(col_count):
            cell = row[col] if col < len(row) else ""
            if col < len(align) and align[col] == ">":
                cells.append(cell.rjust(col_widths[col]))
            else:
                cells.append(cell.ljust(col_widths[col]))
        lines.append(sep.join(cells).rstrip())
    return "\n".join(lines)


def kv_block(pairs: list[tuple[str, str | None]]) -> str:
    """Render key: value pairs, skipping None values.

    >>> kv_block([("longest", "80"), ("overflowing", None)])
    'longest: 80'
    """
    return "\n".join(f"{k}: {v}" for k, v in pairs if v is not None)
