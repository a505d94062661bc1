"""Shared pytest fixtures for exprcalc tests."""

import pytest

from exprcalc.core.ir import ParseNode
from exprcalc.core.parser import parse_expr


@pytest.fixture
def tree():
    """Return a parser for building trees from source text."""

    def _tree(source: str) -> ParseNode:
        return parse_expr(source)

    return _tree


@pytest.fixture
def config_file(tmp_path):
    """Return a writer for exprcalc.toml files in a temporary directory."""

    def _write(content: str):
        path = tmp_path / "exprcalc.toml"
        path.write_text(content)
        return path

    return _write
