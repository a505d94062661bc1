"""
Expression evaluator for exprcalc.

Reduces a parse tree to a signed 64-bit integer. Pure evaluation: no I/O, no
side effects, and no use of Python's eval().

Arithmetic rules:
- Every result must lie in [-2**63, 2**63 - 1], otherwise
  ``ArithmeticOverflowError`` is raised. Nothing wraps around.
- ``/`` truncates toward zero.
- ``%`` is the remainder of that truncating division, so its sign follows the
  dividend and ``a == (a / b) * b + a % b`` holds.
- ``/`` and ``%`` by zero raise ``DivisionByZeroError``.
- ``^`` requires a non-negative exponent (``NegativeExponentError``);
  ``x ^ 0`` is 1 for every x, including 0.
"""

from __future__ import annotations

import logging

from exprcalc.core.errors import (
    ArithmeticOverflowError,
    DivisionByZeroError,
    EvalError,
    NegativeExponentError,
)
from exprcalc.core.ir import Branch, Leaf, Operator, ParseNode
from exprcalc.core.lexer import INT64_MAX, INT64_MIN
from exprcalc.core.parser import parse_expr

logger = logging.getLogger(__name__)


def evaluate(node: ParseNode) -> int:
    """Evaluate a parse tree.

    Args:
        node: Root of a tree produced by the parser.

    Returns:
        The computed value.

    Raises:
        EvalError: If evaluation fails (division by zero, overflow, a
            negative exponent, or a tree nested too deeply to walk).
    """
    try:
        return _interpret(node)
    except RecursionError as e:
        raise EvalError("Expression nested too deeply to evaluate", node) from e


def calculate(source: str) -> int:
    """Lex, parse, and evaluate an expression string."""
    result = evaluate(parse_expr(source))
    logger.debug("%s = %d", source, result)
    return result


def _interpret(node: ParseNode) -> int:
    """Dispatch evaluation to the appropriate handler."""
    if isinstance(node, Leaf):
        return node.value

    if isinstance(node, Branch):
        if node.op == Operator.PAREN:
            return _interpret(node.left)

        # Left-associative chains grow down the left spine; walk it in a loop
        # so long chains do not exhaust the recursion limit
        spine: list[Branch] = []
        current: ParseNode = node
        while isinstance(current, Branch) and current.op != Operator.PAREN:
            spine.append(current)
            current = current.left

        value = _interpret(current)
        for op_node in reversed(spine):
            assert op_node.right is not None
            value = _apply(op_node, value, _interpret(op_node.right))
        return value

    raise EvalError(f"Unknown node type: {type(node).__name__}")


def _apply(node: Branch, left: int, right: int) -> int:
    """Apply a binary operator to already evaluated operands."""
    op = node.op

    if op == Operator.SUM:
        return _checked(left + right, node, left, right)
    if op == Operator.SUB:
        return _checked(left - right, node, left, right)
    if op == Operator.MULT:
        return _checked(left * right, node, left, right)
    if op == Operator.DIV:
        if right == 0:
            raise DivisionByZeroError(op, node)
        return _checked(_trunc_div(left, right), node, left, right)
    if op == Operator.MOD:
        if right == 0:
            raise DivisionByZeroError(op, node)
        return left - right * _trunc_div(left, right)
    if op == Operator.EXP:
        if right < 0:
            raise NegativeExponentError(f"Negative exponent in {left} ^ {right}", node)
        return _checked_pow(left, right, node)

    raise EvalError(f"Unknown binary op: {op}", node)


def _checked(value: int, node: Branch, left: int, right: int) -> int:
    if value < INT64_MIN or value > INT64_MAX:
        raise ArithmeticOverflowError(
            f"Integer overflow in {left} {node.op.value} {right}", node
        )
    return value


def _trunc_div(left: int, right: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(left) // abs(right)
    if (left < 0) != (right < 0):
        return -quotient
    return quotient


def _checked_pow(base: int, exponent: int, node: Branch) -> int:
    """Exponentiation by squaring, failing as soon as a result leaves 64 bits."""
    if base in (0, 1):
        return base if exponent else 1
    if base == -1:
        return -1 if exponent % 2 else 1

    # |base| >= 2 from here on, so the loop runs at most 64 times
    result = 1
    factor, remaining = base, exponent
    while remaining:
        if remaining & 1:
            result = _checked(result * factor, node, base, exponent)
        remaining >>= 1
        if remaining:
            factor = _checked(factor * factor, node, base, exponent)
    return result
