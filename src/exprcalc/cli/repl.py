"""
Interactive read-eval-print loop.

Each line is lexed, parsed, and evaluated on its own; an error in one line is
reported and the loop moves on to the next.
"""

import logging
from collections.abc import Callable
from pathlib import Path

import typer

from exprcalc.cli.utils import configure_logging, load_config_or_exit, report_error
from exprcalc.cli_ui import console, print_info, print_result
from exprcalc.core.config import ReplConfig
from exprcalc.core.errors import CalcError
from exprcalc.core.evaluator import calculate

logger = logging.getLogger(__name__)


def run_repl(config: ReplConfig, read_line: Callable[[str], str] | None = None) -> int:
    """
    Run the loop until a quit keyword or end of input.

    Args:
        config: Prompt and quit keywords
        read_line: Reads one line given a prompt (default: the rich console)

    Returns:
        Number of lines evaluated successfully
    """
    if read_line is None:
        read_line = console.input

    quit_hint = " or ".join(f"'{k}'" for k in config.quit_keywords)
    print_info(f"Exit with Ctrl+D or by typing {quit_hint}.")

    evaluated = 0
    while True:
        try:
            line = read_line(config.prompt).strip()
        except (EOFError, KeyboardInterrupt):
            break

        if line in config.quit_keywords:
            break
        if not line:
            continue

        try:
            result = calculate(line)
        except CalcError as e:
            report_error(e, line)
            continue

        print_result(result)
        evaluated += 1

    logger.debug("Session ended after %d evaluation(s)", evaluated)
    return evaluated


def repl_command(
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Path to exprcalc.toml (default: ./exprcalc.toml)"
    ),
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug logging"),
) -> None:
    """Start an interactive session."""
    config = load_config_or_exit(config_path)
    configure_logging(config.log_level, debug)
    run_repl(config.repl)
