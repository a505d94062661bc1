"""
Rich console helpers for the exprcalc CLI.

Styled status messages and a tree view of parsed expressions.
"""

from rich.console import Console
from rich.style import Style
from rich.text import Text
from rich.tree import Tree

from exprcalc.core.ir import ParseNode

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


# Style definitions
STYLES = {
    "result": Style(color="bright_white", bold=True),
    "success": Style(color="green", bold=True),
    "error": Style(color="red", bold=True),
    "warning": Style(color="yellow"),
    "info": Style(color="cyan"),
    "muted": Style(color="bright_black"),
    "operator": Style(color="bright_cyan"),
}


def print_result(value: int) -> None:
    """Print an evaluation result, indented like the REPL echo."""
    console.print(Text(f"    {value}", style=STYLES["result"]))


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(Text(f"✓ {message}", style=STYLES["success"]))


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(Text(f"✗ {message}", style=STYLES["error"]))


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(Text(f"⚠ {message}", style=STYLES["warning"]))


def print_info(message: str) -> None:
    """Print an info message."""
    err_console.print(Text(f"ℹ {message}", style=STYLES["info"]))


def print_plain(message: str, stderr: bool = False) -> None:
    """Print unstyled text without markup interpretation."""
    (err_console if stderr else console).print(Text(message), soft_wrap=True)


def build_tree(node: ParseNode) -> Tree:
    """Render a parse tree as a rich Tree, one line per node."""

    def label(current: ParseNode) -> Text:
        style = STYLES["muted"] if current.is_leaf else STYLES["operator"]
        text = Text(current.label, style=style)
        text.append(f"  {current.long_label}, depth {current.depth}", style=STYLES["muted"])
        return text

    root = Tree(label(node))
    pending: list[tuple[Tree, ParseNode]] = [(root, node)]
    while pending:
        parent, current = pending.pop()
        for child in current.children:
            pending.append((parent.add(label(child)), child))
    return root


def print_tree(node: ParseNode) -> None:
    """Print a parse tree."""
    console.print(build_tree(node))
