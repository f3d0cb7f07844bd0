"""Doc comment generation from nested arrays of strings."""

from __future__ import annotations

from dataclasses import replace

from docblock.lib.config.settings import FormatterConfig
from docblock.lib.envelope import assemble_comment
from docblock.lib.layout import render_table
from docblock.lib.normalize import normalize_document


def render_blocks(document: object, config: FormatterConfig) -> list[str]:
    """Render every table of ``document`` to its block, without delimiters."""

    return [render_table(table, config) for table in normalize_document(document)]


def render_document(document: object, config: FormatterConfig | None = None) -> str:
    """Render ``document`` into one delimited doc comment.

    ``document`` is an ordered collection of tables. A table is given as a
    sequence of rows, each row a sequence of string cells; a single row may
    be given unnested, and a single-cell table may be a plain string. For a
    method comment, one table could hold the summary and another one row per
    parameter, with columns for the tag, the type, the name and the
    description. Mapping keys are ignored at every level.
    """

    resolved = config if config is not None else FormatterConfig()
    return assemble_comment(render_blocks(document, resolved), resolved)


class DocblockGenerator:
    """Generates doc comments, keeping formatter settings between calls.

    Setters return the generator so calls can be chained::

        DocblockGenerator().set_indentation(4).set_max_line_length(100)
    """

    def __init__(self, config: FormatterConfig | None = None) -> None:
        self._config = config if config is not None else FormatterConfig()

    @property
    def config(self) -> FormatterConfig:
        return self._config

    def from_array(self, document: object) -> str:
        # One snapshot for the whole render.
        return render_document(document, self._config)

    def set_indentation(self, indentation: int) -> DocblockGenerator:
        """Set how many columns of indentation precede every comment line."""

        self._config = replace(self._config, indent_width=indentation)
        return self

    def get_indentation(self) -> int:
        return self._config.indent_width

    def set_use_tab(self, use_tab: bool) -> DocblockGenerator:
        """Indent with a single tab instead of spaces when indentation is set."""

        self._config = replace(self._config, use_tab=use_tab)
        return self

    def get_use_tab(self) -> bool:
        return self._config.use_tab

    def set_max_line_length(self, length: int) -> DocblockGenerator:
        self._config = replace(self._config, max_line_length=length)
        return self

    def get_max_line_length(self) -> int:
        return self._config.max_line_length

    def set_min_last_column_width(self, length: int) -> DocblockGenerator:
        self._config = replace(self._config, min_last_column_width=length)
        return self

    def get_min_last_column_width(self) -> int:
        return self._config.min_last_column_width
