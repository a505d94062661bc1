"""
One-shot expression evaluation command.
"""

import logging
from pathlib import Path

import typer

from exprcalc.cli.utils import configure_logging, load_config_or_exit, report_error
from exprcalc.cli_ui import print_result, print_success, print_tree, print_warning
from exprcalc.core.errors import CalcError, GraphExportError
from exprcalc.core.evaluator import evaluate
from exprcalc.core.graph import write_graph
from exprcalc.core.parser import parse_expr

logger = logging.getLogger(__name__)


def eval_command(
    expression: str = typer.Option(
        ..., "--expression", "-e", help="The expression to evaluate"
    ),
    debug: bool = typer.Option(
        False, "--debug", "-d", help="Print the parse tree and enable debug logging"
    ),
    graph: bool = typer.Option(False, "--graph", "-g", help="Write a graph of the parse tree"),
    graph_file: str | None = typer.Option(
        None, "--graph-file", "-f", help="File to save the graph to (a '.gv' file)"
    ),
    pdf: bool | None = typer.Option(
        None, "--pdf/--no-pdf", help="Render the graph to PDF with Graphviz 'dot'"
    ),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Path to exprcalc.toml (default: ./exprcalc.toml)"
    ),
) -> None:
    """Evaluate a single expression and print the result."""
    config = load_config_or_exit(config_path)
    configure_logging(config.log_level, debug)
    logger.debug("Evaluating %r", expression)

    try:
        tree = parse_expr(expression)
    except CalcError as e:
        raise typer.Exit(code=report_error(e, expression)) from e

    if debug:
        print_tree(tree)

    if graph or graph_file:
        target = graph_file or config.graph.file
        render = config.graph.render_pdf if pdf is None else pdf
        # Export problems are reported but never change the result
        try:
            written = write_graph(tree, target, render, config.graph.dot_binary)
        except GraphExportError as e:
            print_warning(f"Failed to create graph: {e}")
        else:
            print_success(f"Wrote graph to {written}")

    try:
        result = evaluate(tree)
    except CalcError as e:
        raise typer.Exit(code=report_error(e, expression)) from e

    print_result(result)
