"""Text output protocol for operation results.

Lives in the lib layer so operation outputs (lib/) and CLI code (cli/) can
both depend on it without lib -> cli imports.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class FormatContext:
    """Knobs passed to `format_text()` implementations."""

    verbosity: int = 0  # 0=normal, 1+=verbose


@runtime_checkable
class TextFormattable(Protocol):
    """Output dataclasses that provide a human-readable text rendering."""

    def format_text(self, ctx: FormatContext | None = None) -> str: ...
