"""
Configuration models.

Parses the [exprcalc] section from exprcalc.toml and provides typed settings
for the interactive loop, graph export, and logging.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from exprcalc.core.errors import ConfigError

DEFAULT_CONFIG_FILE = "exprcalc.toml"

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class ReplConfig(BaseModel):
    """Interactive loop configuration."""

    prompt: str = "> "
    quit_keywords: list[str] = Field(default_factory=lambda: ["quit", "q"])


class GraphConfig(BaseModel):
    """Parse tree graph export configuration."""

    file: str = "tree.gv"
    render_pdf: bool = False
    dot_binary: str = "dot"


class CalcConfig(BaseModel):
    """Complete configuration."""

    log_level: str = "WARNING"
    repl: ReplConfig = Field(default_factory=ReplConfig)
    graph: GraphConfig = Field(default_factory=GraphConfig)

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level '{value}'")
        return level


def load_config(toml_path: Path | None = None) -> CalcConfig:
    """
    Load configuration from exprcalc.toml.

    Args:
        toml_path: Path to the TOML file (default: ./exprcalc.toml)

    Returns:
        CalcConfig with parsed values or defaults

    Raises:
        ConfigError: If the file is not valid TOML or holds invalid values
    """
    if toml_path is None:
        toml_path = Path(DEFAULT_CONFIG_FILE)

    if not toml_path.exists():
        return CalcConfig()

    try:
        with open(toml_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {toml_path}: {e}") from e

    section: dict[str, Any] = data.get("exprcalc", {})
    if not section:
        return CalcConfig()

    try:
        return CalcConfig.model_validate(section)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {toml_path}:\n{e}") from e
