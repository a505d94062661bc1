"""Tests for Graphviz export of parse trees."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from exprcalc.core import graph
from exprcalc.core.errors import GraphExportError
from exprcalc.core.graph import to_dot, write_graph


class TestToDot:
    """to_dot() describes every node and edge."""

    def test_single_leaf(self, tree) -> None:
        dot = to_dot(tree("7"))
        assert dot.startswith("graph {\n")
        assert dot.rstrip().endswith("}")
        assert 'n0 [label = "7", tooltip = "Literal=7 depth=0"]' in dot
        assert "--" not in dot

    def test_binary_tree(self, tree) -> None:
        dot = to_dot(tree("1+2*3"))
        assert 'n0 [label = "+"' in dot
        assert 'n1 [label = "1"' in dot
        assert 'n2 [label = "*"' in dot
        assert "n0 -- n1" in dot
        assert "n0 -- n2" in dot
        assert "n2 -- n3" in dot
        assert "n2 -- n4" in dot
        assert dot.count("--") == 4

    def test_duplicate_labels_get_distinct_vertices(self, tree) -> None:
        dot = to_dot(tree("1+1+1"))
        assert dot.count('label = "1"') == 3
        assert dot.count('label = "+"') == 2

    def test_parentheses_vertex(self, tree) -> None:
        dot = to_dot(tree("(1)"))
        assert 'label = "(...)"' in dot
        assert "n0 -- n1" in dot

    def test_long_chain(self, tree) -> None:
        dot = to_dot(tree("+".join(["1"] * 3000)))
        assert dot.count("--") == 2 * 2999
        assert dot.count('label = "1"') == 3000


class TestWriteGraph:
    """write_graph() writes files and drives dot."""

    def test_writes_gv_file(self, tree, tmp_path: Path) -> None:
        target = tmp_path / "tree.gv"
        written = write_graph(tree("1+2"), target)
        assert written == target
        assert target.read_text() == to_dot(tree("1+2"))

    def test_rejects_other_extensions(self, tree, tmp_path: Path) -> None:
        with pytest.raises(GraphExportError, match="'.gv'"):
            write_graph(tree("1"), tmp_path / "tree.dot")

    def test_unwritable_path(self, tree, tmp_path: Path) -> None:
        with pytest.raises(GraphExportError, match="Cannot write"):
            write_graph(tree("1"), tmp_path / "missing" / "tree.gv")

    def test_missing_dot_binary(self, tree, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.setattr(graph.shutil, "which", lambda name: None)
        with pytest.raises(GraphExportError, match="not found"):
            write_graph(tree("1"), tmp_path / "tree.gv", render_pdf=True)
        # The description is still written before rendering is attempted
        assert (tmp_path / "tree.gv").exists()

    def test_renders_pdf(self, tree, tmp_path: Path, monkeypatch) -> None:
        calls = []

        def fake_run(cmd, **kwargs):
            calls.append(cmd)
            return subprocess.CompletedProcess(cmd, 0, b"", b"")

        monkeypatch.setattr(graph.shutil, "which", lambda name: f"/usr/bin/{name}")
        monkeypatch.setattr(graph.subprocess, "run", fake_run)

        written = write_graph(tree("1+2"), tmp_path / "tree.gv", render_pdf=True)

        assert written == tmp_path / "tree.pdf"
        assert calls == [
            ["/usr/bin/dot", "-Tpdf", str(tmp_path / "tree.gv"), "-o", str(tmp_path / "tree.pdf")]
        ]

    def test_render_failure(self, tree, tmp_path: Path, monkeypatch) -> None:
        def failing_run(cmd, **kwargs):
            raise subprocess.CalledProcessError(1, cmd, b"", b"syntax error")

        monkeypatch.setattr(graph.shutil, "which", lambda name: f"/usr/bin/{name}")
        monkeypatch.setattr(graph.subprocess, "run", failing_run)

        with pytest.raises(GraphExportError, match="syntax error"):
            write_graph(tree("1"), tmp_path / "tree.gv", render_pdf=True)
