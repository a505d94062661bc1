"""
exprcalc CLI Utilities.

Shared utility functions used across CLI modules.
"""

from __future__ import annotations

import logging
import platform
from pathlib import Path

import typer

from exprcalc._version import get_version
from exprcalc.cli.reporting import format_error
from exprcalc.cli_ui import print_error, print_plain
from exprcalc.core.config import CalcConfig, load_config
from exprcalc.core.errors import CalcError, ConfigError, EvalError, LexerError, ParserError

# Exit codes
EXIT_SYNTAX_ERROR = 1
EXIT_EVAL_ERROR = 2
EXIT_CONFIG_ERROR = 3


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"exprcalc version {get_version()}")
        typer.echo(f"  Python:        {platform.python_implementation()} {platform.python_version()}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        raise typer.Exit()


def configure_logging(level: str, debug: bool = False) -> None:
    """Configure root logging once for a CLI invocation."""
    logging.basicConfig(
        level=logging.DEBUG if debug else getattr(logging, level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


def load_config_or_exit(config_path: Path | None) -> CalcConfig:
    """Load configuration, exiting with a message on invalid files."""
    try:
        return load_config(config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=EXIT_CONFIG_ERROR) from e


def report_error(err: CalcError, source: str) -> int:
    """Print an error for the given input line and return its exit code."""
    if isinstance(err, (LexerError, ParserError)):
        print_plain(format_error(err, source), stderr=True)
        return EXIT_SYNTAX_ERROR
    if isinstance(err, EvalError):
        print_error(f"error: {err.message}")
        return EXIT_EVAL_ERROR
    print_error(str(err))
    return EXIT_SYNTAX_ERROR
