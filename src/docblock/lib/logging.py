"""Structlog configuration for the CLI and the MCP server."""

from __future__ import annotations

import logging as std_logging
import sys

import structlog

_LEVELS_BY_VERBOSITY: tuple[int, ...] = (
    std_logging.WARNING,
    std_logging.INFO,
    std_logging.DEBUG,
)


def level_from_verbosity(verbosity: int) -> int:
    index = min(max(verbosity, 0), len(_LEVELS_BY_VERBOSITY) - 1)
    return _LEVELS_BY_VERBOSITY[index]


def configure_logging(json_mode: bool = False, verbosity: int = 0) -> None:
    """Configure structlog; all log output goes to stderr."""

    level = level_from_verbosity(verbosity)
    # Rendered comments go to stdout, so logs must never land there.
    handler = std_logging.StreamHandler(sys.stderr)
    handler.setFormatter(std_logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    std_logging.basicConfig(level=level, handlers=[handler])

    processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if json_mode:
        processors.extend(
            [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
        )
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
