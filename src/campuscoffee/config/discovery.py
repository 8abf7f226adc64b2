"""Locate the campuscoffee configuration.

Settings live either in a dedicated ``campuscoffee.toml`` or in the
``[tool.campuscoffee]`` table of a project's ``pyproject.toml``. The
nearest directory wins; within one directory the dedicated file wins.
``CAMPUSCOFFEE_CONFIG`` names a file directly and disables the search.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_FILENAME = "campuscoffee.toml"
PYPROJECT_FILENAME = "pyproject.toml"
CONFIG_ENV_VAR = "CAMPUSCOFFEE_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file governing *start* (default: cwd), or None.

    A ``pyproject.toml`` only counts when it has a ``[tool.campuscoffee]``
    table. A ``CAMPUSCOFFEE_CONFIG`` path that does not exist yields None.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = Path(env_path)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        dedicated = directory / CONFIG_FILENAME
        if dedicated.is_file():
            return dedicated
        pyproject = directory / PYPROJECT_FILENAME
        if pyproject.is_file() and _has_tool_table(pyproject):
            return pyproject
    return None


def config_section(path: Path, data: dict[str, Any]) -> dict[str, Any]:
    """Settings table of a parsed config file.

    ``pyproject.toml`` nests them under ``[tool.campuscoffee]``; a
    ``campuscoffee.toml`` holds them at top level.
    """
    if path.name == PYPROJECT_FILENAME:
        return data.get("tool", {}).get("campuscoffee", {})
    return data


def _has_tool_table(pyproject: Path) -> bool:
    try:
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError:
        # someone else's broken pyproject is not our config
        return False
    return "campuscoffee" in data.get("tool", {})
