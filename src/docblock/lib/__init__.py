"""Core docblock library exports."""

from docblock.lib.config.settings import BULLET, FormatterConfig
from docblock.lib.errors import DocblockError, DocumentShapeError
from docblock.lib.generator import DocblockGenerator, render_document

__all__ = [
    "BULLET",
    "DocblockError",
    "DocblockGenerator",
    "DocumentShapeError",
    "FormatterConfig",
    "render_document",
]
