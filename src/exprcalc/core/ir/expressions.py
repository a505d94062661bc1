"""
Parse tree types for exprcalc.

An expression is parsed into a ``ParseNode``: either a ``Leaf`` holding an
integer literal or a ``Branch`` holding an operator and its owned children.

Arity rules:
- ``Leaf``: no children
- ``Branch`` with ``Operator.PAREN``: exactly one child (``left``)
- any other ``Branch``: exactly two children (``left`` and ``right``)

Every node records its ``depth``: leaves are 0 and a branch is one more than
its deepest child. Depth is only used for diagnostics and graph export.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class Operator(StrEnum):
    """Operators carried by branch nodes."""

    SUM = "+"
    SUB = "-"
    MOD = "%"
    MULT = "*"
    DIV = "/"
    EXP = "^"
    PAREN = "(...)"


_LONG_NAMES: dict[Operator, str] = {
    Operator.SUM: "Op=PLUS",
    Operator.SUB: "Op=MINUS",
    Operator.MOD: "Op=MODULO",
    Operator.MULT: "Op=MULTIPLICATION",
    Operator.DIV: "Op=DIVISION",
    Operator.EXP: "Op=EXPONENTIATION",
    Operator.PAREN: "Parentheses",
}


# ---------------------------------------------------------------------------
# Node types
# ---------------------------------------------------------------------------


class Leaf(BaseModel):
    """An integer literal."""

    value: int = Field(description="The literal value")
    depth: int = Field(default=0, ge=0, description="Distance from the deepest leaf")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.value)

    @property
    def children(self) -> tuple[ParseNode, ...]:
        return ()

    @property
    def is_leaf(self) -> bool:
        return True

    @property
    def label(self) -> str:
        """Short label, e.g. ``7``."""
        return str(self.value)

    @property
    def long_label(self) -> str:
        """Descriptive label, e.g. ``Literal=7``."""
        return f"Literal={self.value}"

    def walk(self) -> Iterator[ParseNode]:
        yield self


class Branch(BaseModel):
    """An operator applied to one (parentheses) or two owned subtrees."""

    op: Operator
    left: ParseNode
    right: ParseNode | None = None
    depth: int = Field(ge=1, description="Distance from the deepest leaf")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_shape(self) -> Branch:
        if self.op == Operator.PAREN:
            if self.right is not None:
                raise ValueError("a parenthesis node takes exactly one child")
        elif self.right is None:
            raise ValueError(f"operator {self.op.value!r} takes exactly two children")
        deepest = max(child.depth for child in self.children)
        if self.depth <= deepest:
            raise ValueError(
                f"branch depth {self.depth} must exceed child depth {deepest}"
            )
        return self

    def __str__(self) -> str:
        # Pieces are pushed in reverse so they pop in reading order
        parts: list[str] = []
        pending: list[ParseNode | str] = [self]
        while pending:
            item = pending.pop()
            if isinstance(item, str):
                parts.append(item)
            elif isinstance(item, Leaf):
                parts.append(str(item.value))
            elif item.op == Operator.PAREN:
                pending.extend([")", item.left, "("])
            else:
                assert item.right is not None
                pending.extend([")", item.right, f" {item.op.value} ", item.left, "("])
        return "".join(parts)

    @property
    def children(self) -> tuple[ParseNode, ...]:
        if self.right is None:
            return (self.left,)
        return (self.left, self.right)

    @property
    def is_leaf(self) -> bool:
        return False

    @property
    def label(self) -> str:
        """Short label, e.g. ``+`` or ``(...)``."""
        return self.op.value

    @property
    def long_label(self) -> str:
        """Descriptive label, e.g. ``Op=PLUS``."""
        return _LONG_NAMES[self.op]

    def walk(self) -> Iterator[ParseNode]:
        """Pre-order traversal: this node, then each subtree left to right."""
        pending: list[ParseNode] = [self]
        while pending:
            node = pending.pop()
            yield node
            pending.extend(reversed(node.children))


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

ParseNode = Leaf | Branch

# Rebuild models for recursive forward references
Leaf.model_rebuild()
Branch.model_rebuild()


# ---------------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------------


def leaf(value: int) -> Leaf:
    """Build a literal node."""
    return Leaf(value=value)


def branch(op: Operator, left: ParseNode, right: ParseNode | None = None) -> Branch:
    """Build an operator node one level above its deepest child."""
    depth = 1 + max(left.depth, right.depth if right is not None else 0)
    return Branch(op=op, left=left, right=right, depth=depth)


def paren(inner: ParseNode) -> Branch:
    """Wrap a sub-expression in a parenthesis node."""
    return branch(Operator.PAREN, inner)
