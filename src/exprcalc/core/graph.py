"""
Graphviz export of parse trees.

Writes an undirected ``graph { ... }`` description with one vertex per tree
node and, optionally, renders it to PDF with the external ``dot`` program.
Export reads the tree through its public accessors only and never changes it.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

from exprcalc.core.errors import GraphExportError
from exprcalc.core.ir import ParseNode

logger = logging.getLogger(__name__)

DOT_TIMEOUT_SECONDS = 30


def _quote(text: str) -> str:
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


def to_dot(node: ParseNode) -> str:
    """Build a Graphviz description of a parse tree.

    Vertices are numbered in pre-order (``n0`` is the root). Each vertex is
    labelled with the node's short label; the long label and depth go into
    the tooltip.
    """
    vertices: list[str] = []
    edges: list[str] = []

    pending: list[tuple[ParseNode, str | None]] = [(node, None)]
    while pending:
        current, parent = pending.pop()
        vid = f"n{len(vertices)}"
        tooltip = f"{current.long_label} depth={current.depth}"
        vertices.append(f"    {vid} [label = {_quote(current.label)}, tooltip = {_quote(tooltip)}]")
        if parent is not None:
            edges.append(f"    {parent} -- {vid}")
        pending.extend((child, vid) for child in reversed(current.children))

    lines = ["graph {", *vertices, *edges, "}"]
    return "\n".join(lines) + "\n"


def write_graph(
    node: ParseNode,
    path: str | Path,
    render_pdf: bool = False,
    dot_binary: str = "dot",
) -> Path:
    """
    Write a tree's graph description and optionally render it.

    Args:
        node: Root of the tree to export
        path: Target ``.gv`` file (need not exist)
        render_pdf: Also run ``dot -Tpdf`` and write ``<stem>.pdf``
        dot_binary: Name or path of the Graphviz ``dot`` executable

    Returns:
        Path of the last file written (the PDF when rendered)

    Raises:
        GraphExportError: If the path is not a ``.gv`` file, cannot be
            written, or rendering fails
    """
    gv_path = Path(path)
    if gv_path.suffix != ".gv":
        raise GraphExportError(f"Provide the path to a '.gv' file, got '{gv_path}'")

    try:
        gv_path.write_text(to_dot(node))
    except OSError as e:
        raise GraphExportError(f"Cannot write graph file '{gv_path}': {e}") from e
    logger.debug("Wrote graph description to %s", gv_path)

    if not render_pdf:
        return gv_path

    executable = shutil.which(dot_binary)
    if executable is None:
        raise GraphExportError(f"Graphviz executable '{dot_binary}' not found")

    pdf_path = gv_path.with_suffix(".pdf")
    try:
        subprocess.run(
            [executable, "-Tpdf", str(gv_path), "-o", str(pdf_path)],
            capture_output=True,
            check=True,
            timeout=DOT_TIMEOUT_SECONDS,
        )
    except subprocess.CalledProcessError as e:
        stderr = e.stderr.decode(errors="replace").strip() if e.stderr else ""
        raise GraphExportError(f"'{dot_binary}' failed: {stderr or e}") from e
    except subprocess.TimeoutExpired as e:
        raise GraphExportError(f"'{dot_binary}' timed out after {e.timeout}s") from e

    logger.debug("Rendered %s", pdf_path)
    return pdf_path
