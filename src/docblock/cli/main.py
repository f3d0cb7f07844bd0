"""Cyclopts CLI entry point for docblock."""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from typing import TYPE_CHECKING, Annotated

from cyclopts import App, Parameter

from docblock import __version__
from docblock.cli.block_cmd import register_block_commands
from docblock.cli.config_cmd import register_config_commands
from docblock.cli.output import OutputConfig, resolve_output_format
from docblock.cli.output import emit as emit_output
from docblock.lib.errors import DocblockError

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

logger = logging.getLogger(__name__)

# Failures a user can fix (bad document, bad config, missing file).
USER_ERRORS = (DocblockError, KeyError, ValueError, OSError)

_OUTPUT: ContextVar[OutputConfig] = ContextVar("_OUTPUT", default=OutputConfig())

_FLAG_VERBOSITY = {"-v": 1, "--verbose": 1, "-vv": 2}
_IGNORED_FLAGS = frozenset({"--no-json", "--no-porcelain"})


def emit(payload: object) -> None:
    """Print a command result in the output format chosen on the command line."""

    emit_output(payload, _OUTPUT.get())


def _format_value(arg: str, rest: Iterator[str]) -> str:
    if arg.startswith("--format="):
        return arg.partition("=")[2]
    value = next(rest, None)
    if value is None:
        raise SystemExit("--format requires a value")
    return value


def split_output_flags(argv: Sequence[str]) -> tuple[list[str], OutputConfig]:
    """Pull output flags out of ``argv`` wherever they appear.

    Output flags are accepted before or after the command name, so they are
    removed here and the remaining arguments go to Cyclopts. Everything after
    ``--`` is passed through untouched.
    """

    remaining: list[str] = []
    requested: str | None = None
    json_mode = porcelain_mode = False
    verbosity = 0

    args = iter(argv)
    for arg in args:
        if arg == "--":
            remaining.append(arg)
            remaining.extend(args)
            break
        if arg == "--json":
            json_mode = True
        elif arg == "--porcelain":
            porcelain_mode = True
        elif arg == "--format" or arg.startswith("--format="):
            requested = _format_value(arg, args)
        elif arg in _FLAG_VERBOSITY:
            verbosity += _FLAG_VERBOSITY[arg]
        elif arg not in _IGNORED_FLAGS:
            remaining.append(arg)

    output_format = resolve_output_format(
        requested, json_mode=json_mode, porcelain_mode=porcelain_mode
    )
    return remaining, OutputConfig(format=output_format, verbosity=verbosity)


app = App(
    name="docblock",
    help="Render aligned, word-wrapped doc comments from JSON tables.",
    version=__version__,
    help_formatter="plain",
)


@app.default
def root(
    json_output: Annotated[bool, Parameter(name="--json", help="Print results as JSON.")] = False,
    output_format: Annotated[
        str | None,
        Parameter(name="--format", help="Output format: text, json or porcelain."),
    ] = None,
    porcelain: Annotated[
        bool,
        Parameter(name="--porcelain", help="Print one tab-separated key=value record."),
    ] = False,
    verbose: Annotated[
        bool,
        Parameter(
            name=["--verbose", "-v"],
            help="Show line tables and info logs; -vv for debug.",
        ),
    ] = False,
) -> None:
    """Show help; the parameters document the output flags every command accepts."""

    _ = (json_output, output_format, porcelain, verbose)
    app.help_print()


@app.command(name="serve")
def serve() -> None:
    """Serve the block and config operations as MCP tools on stdio."""

    from docblock.server.main import run_server

    run_server()


block_app = App(name="block", help="Render doc comments.", help_formatter="plain")
config_app = App(
    name="config",
    help="Inspect and scaffold .docblock.toml.",
    help_formatter="plain",
)
app.command(block_app)
app.command(config_app)

_CLI_DESCRIPTIONS: dict[str, str] = {
    **register_block_commands(block_app, emit),
    **register_config_commands(config_app, emit),
}


def get_registered_cli_commands() -> set[str]:
    return set(_CLI_DESCRIPTIONS)


def get_registered_cli_descriptions() -> dict[str, str]:
    return dict(_CLI_DESCRIPTIONS)


def _error_text(error: Exception) -> str:
    # KeyError's str() wraps the message in quotes.
    if isinstance(error, KeyError) and error.args:
        return str(error.args[0])
    return str(error).strip() or type(error).__name__


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point for the `docblock` script and `python -m docblock`."""

    from docblock.lib.logging import configure_logging

    args, output = split_output_flags(sys.argv[1:] if argv is None else argv)
    # Before any command runs, so log lines never reach stdout.
    configure_logging(json_mode=output.format == "json", verbosity=output.verbosity)

    token = _OUTPUT.set(output)
    try:
        app(args)
    except USER_ERRORS as error:
        logger.debug("Command failed.", exc_info=True)
        print(f"error: {_error_text(error)}", file=sys.stderr)
        raise SystemExit(1) from None
    finally:
        _OUTPUT.reset(token)
