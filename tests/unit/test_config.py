"""Tests for exprcalc.toml configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from exprcalc.core.config import CalcConfig, load_config
from exprcalc.core.errors import ConfigError


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path / "exprcalc.toml")
        assert config == CalcConfig()
        assert config.repl.prompt == "> "
        assert config.repl.quit_keywords == ["quit", "q"]
        assert config.graph.file == "tree.gv"
        assert config.graph.render_pdf is False

    def test_missing_section_gives_defaults(self, config_file) -> None:
        path = config_file('[other]\nkey = "value"\n')
        assert load_config(path) == CalcConfig()

    def test_full_config(self, config_file) -> None:
        path = config_file(
            """
[exprcalc]
log_level = "info"

[exprcalc.repl]
prompt = ">>> "
quit_keywords = ["exit"]

[exprcalc.graph]
file = "out/ast.gv"
render_pdf = true
dot_binary = "/opt/graphviz/bin/dot"
"""
        )
        config = load_config(path)
        assert config.log_level == "INFO"
        assert config.repl.prompt == ">>> "
        assert config.repl.quit_keywords == ["exit"]
        assert config.graph.file == "out/ast.gv"
        assert config.graph.render_pdf is True
        assert config.graph.dot_binary == "/opt/graphviz/bin/dot"

    def test_partial_config_keeps_defaults(self, config_file) -> None:
        path = config_file('[exprcalc.repl]\nprompt = "calc> "\n')
        config = load_config(path)
        assert config.repl.prompt == "calc> "
        assert config.repl.quit_keywords == ["quit", "q"]
        assert config.log_level == "WARNING"

    def test_invalid_toml(self, config_file) -> None:
        path = config_file("[exprcalc\n")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(path)

    def test_invalid_value(self, config_file) -> None:
        path = config_file('[exprcalc]\nlog_level = "LOUD"\n')
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(path)

    def test_invalid_type(self, config_file) -> None:
        path = config_file('[exprcalc.graph]\nrender_pdf = "sometimes"\n')
        with pytest.raises(ConfigError):
            load_config(path)
