"""Normalize loosely nested document input into positional tables.

A document is a sequence (or mapping) of entries, one per table:

- ``"text"`` becomes a table with one row holding one cell;
- ``["@return", "string", "Description."]`` becomes a one-row table;
- ``[["@param", ...], ["@param", ...]]`` is already a table.

Mapping keys never matter at any level; only the iteration order of the
values is kept. Shapes outside these rules raise ``DocumentShapeError``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import cast

from docblock.lib.errors import DocumentShapeError
from docblock.lib.types import Cell, Document, DocumentEntry, EntryKind, Row


def _is_nested(value: object) -> bool:
    if isinstance(value, Mapping):
        return True
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _values(value: object) -> list[object] | None:
    """Return positional values of a mapping or sequence, else None."""

    if isinstance(value, Mapping):
        return list(cast("Mapping[object, object]", value).values())
    if _is_nested(value):
        return list(cast("Sequence[object]", value))
    return None


def _normalize_row(raw_row: object, path: str) -> Row:
    cells = _values(raw_row)
    if cells is None:
        raise DocumentShapeError(path, f"expected a row of cells, got {type(raw_row).__name__}")

    normalized: list[Cell] = []
    absent_index: int | None = None
    for index, cell in enumerate(cells):
        if cell is None:
            if absent_index is None:
                absent_index = index
            continue
        if not isinstance(cell, str):
            raise DocumentShapeError(
                f"{path}[{index}]",
                f"expected a string cell, got {type(cell).__name__}",
            )
        if absent_index is not None:
            raise DocumentShapeError(
                f"{path}[{absent_index}]",
                "absent cell is followed by a present cell; only trailing cells may be omitted",
            )
        normalized.append(cell)
    return tuple(normalized)


def classify_entry(entry: object, path: str = "document[0]") -> DocumentEntry:
    """Resolve one document entry to its table and the shape it was given in."""

    if isinstance(entry, str):
        return DocumentEntry(kind=EntryKind.TEXT, table=((entry,),))

    items = _values(entry)
    if items is None:
        raise DocumentShapeError(
            path,
            f"expected a string, a row or a table, got {type(entry).__name__}",
        )
    if not items:
        raise DocumentShapeError(path, "expected a non-empty table")

    nested = [_is_nested(item) for item in items]
    if all(nested):
        rows = tuple(
            _normalize_row(item, f"{path}[{index}]") for index, item in enumerate(items)
        )
        if not any(rows):
            raise DocumentShapeError(path, "expected at least one cell in the table")
        return DocumentEntry(kind=EntryKind.TABLE, table=rows)

    if any(nested):
        for index, item in enumerate(items):
            if item is None:
                raise DocumentShapeError(f"{path}[{index}]", "row is absent")
        raise DocumentShapeError(
            path,
            "table mixes cells and nested rows; nest every row or none of them",
        )

    row = _normalize_row(items, path)
    if not row:
        raise DocumentShapeError(path, "expected at least one present cell in the row")
    return DocumentEntry(kind=EntryKind.ROW, table=(row,))


def classify_document(document: object) -> tuple[DocumentEntry, ...]:
    """Resolve every top-level entry of a document."""

    if isinstance(document, str):
        raise DocumentShapeError(
            "document",
            "expected a sequence of tables, got a bare string; wrap it in a list",
        )
    entries = _values(document)
    if entries is None:
        raise DocumentShapeError(
            "document",
            f"expected a sequence or mapping of tables, got {type(document).__name__}",
        )
    if not entries:
        raise DocumentShapeError("document", "expected at least one table")
    return tuple(
        classify_entry(entry, f"document[{index}]") for index, entry in enumerate(entries)
    )


def normalize_document(document: object) -> Document:
    """Return the document as an ordered tuple of positional tables."""

    return tuple(entry.table for entry in classify_document(document))
