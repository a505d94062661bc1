"""
exprcalc CLI Package.

- eval.py: one-shot evaluation of an expression
- repl.py: interactive read-eval-print loop
- reporting.py: caret rendering of syntax errors
- utils.py: shared utilities
"""

import sys

import typer

from exprcalc.cli.eval import eval_command
from exprcalc.cli.repl import repl_command, run_repl
from exprcalc.cli.utils import version_callback

app = typer.Typer(
    help="""exprcalc - parse and evaluate integer arithmetic expressions

Operators: + - % * / ^ and parentheses, on signed 64-bit integers.

  • exprcalc eval -e "(2+3)*4"
  • exprcalc repl
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """exprcalc CLI main callback for global options."""
    pass


app.command(name="eval")(eval_command)
app.command(name="repl")(repl_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


__all__ = ["app", "main", "run_repl"]


if __name__ == "__main__":
    main(sys.argv[1:])
