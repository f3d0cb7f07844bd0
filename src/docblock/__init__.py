"""Render aligned, word-wrapped doc comments from nested string arrays."""

__version__ = "0.1.0"
