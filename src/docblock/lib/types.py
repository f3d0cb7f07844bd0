"""Positional table types shared by the layout pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

type Cell = str | None
type Row = tuple[Cell, ...]
type Table = tuple[Row, ...]
type Document = tuple[Table, ...]


class EntryKind(StrEnum):
    """Shape a document entry was given in before normalization."""

    TEXT = "text"
    ROW = "row"
    TABLE = "table"


@dataclass(frozen=True, slots=True)
class DocumentEntry:
    """One top-level document entry resolved to its table."""

    kind: EntryKind
    table: Table
