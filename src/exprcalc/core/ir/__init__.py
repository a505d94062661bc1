"""Parse tree types for exprcalc."""

from .expressions import (
    Branch,
    Leaf,
    Operator,
    ParseNode,
    branch,
    leaf,
    paren,
)

__all__ = [
    "Branch",
    "Leaf",
    "Operator",
    "ParseNode",
    "branch",
    "leaf",
    "paren",
]
