"""Comment delimiters around rendered blocks."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from docblock.lib.config.settings import FormatterConfig

OPENING = "/**"
CLOSING = " */"


def one_line_comment(block: str, config: FormatterConfig) -> str | None:
    """Return the `/** ... */` one-liner when the block fits on one line."""

    if "\n" in block:
        return None
    candidate = f"{OPENING} {block}{CLOSING}"
    if config.indent_width + len(candidate) > config.max_line_length:
        return None
    return config.indentation + candidate


def assemble_comment(blocks: Sequence[str], config: FormatterConfig) -> str:
    """Join blocks with blank bullet lines and wrap them in comment delimiters."""

    if len(blocks) == 1:
        one_liner = one_line_comment(blocks[0], config)
        if one_liner is not None:
            return one_liner

    indentation = config.indentation
    separator = "\n" + indentation + " *"
    body = separator.join(config.line_start + block for block in blocks)
    return indentation + OPENING + body + "\n" + indentation + CLOSING
