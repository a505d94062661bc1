"""Version lookup for exprcalc."""

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

DIST_NAME = "exprcalc"
UNKNOWN_VERSION = "0.0.0"


def get_version() -> str:
    """
    Return the running exprcalc version.

    A source checkout reports the version in its ``pyproject.toml``; an
    installed copy reports its distribution metadata.
    """
    pyproject = Path(__file__).resolve().parents[2] / "pyproject.toml"
    if pyproject.is_file():
        with pyproject.open("rb") as f:
            project = tomllib.load(f).get("project", {})
        if project.get("name") == DIST_NAME and "version" in project:
            return str(project["version"])
    try:
        return version(DIST_NAME)
    except PackageNotFoundError:
        return UNKNOWN_VERSION
