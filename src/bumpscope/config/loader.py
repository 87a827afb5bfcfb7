"""Locate and load ``[tool.bumpscope]`` from pyproject.toml."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from bumpscope.config.models import BumpScopeConfig
from bumpscope.exceptions import ConfigNotFoundError, ConfigValidationError
from bumpscope.logging import get_logger

logger = get_logger(__name__)

TOOL_NAME = "bumpscope"


def find_pyproject_toml(start: Path | None = None) -> Path:
    """Find pyproject.toml in ``start`` or one of its parents.

    Raises:
        ConfigNotFoundError: If no pyproject.toml exists up to the filesystem root
    """
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
    raise ConfigNotFoundError(f"No pyproject.toml found in {current} or its parents")


def load_pyproject_toml(path: Path) -> dict[str, Any]:
    """Parse a pyproject.toml file.

    Raises:
        ConfigNotFoundError: If the file does not exist
        ConfigValidationError: If the file is not valid TOML
    """
    if not path.is_file():
        raise ConfigNotFoundError(f"File not found: {path}")
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigValidationError(f"Invalid TOML in {path}: {e}") from e


def extract_bumpscope_config(pyproject: dict[str, Any]) -> dict[str, Any]:
    """Return the ``[tool.bumpscope]`` table, or an empty dict."""
    return pyproject.get("tool", {}).get(TOOL_NAME, {})


def load_config(path: Path | None = None) -> BumpScopeConfig:
    """Load configuration for a project directory.

    Defaults are used when no pyproject.toml is found.

    Args:
        path: Project directory or pyproject.toml file

    Raises:
        ConfigValidationError: If the configuration values are invalid
    """
    if path is not None and path.is_file():
        pyproject_path = path
    else:
        try:
            pyproject_path = find_pyproject_toml(path)
        except ConfigNotFoundError:
            logger.debug("no pyproject.toml found, using defaults", path=str(path or Path.cwd()))
            return BumpScopeConfig()

    data = extract_bumpscope_config(load_pyproject_toml(pyproject_path))
    try:
        return BumpScopeConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid [tool.{TOOL_NAME}] in {pyproject_path}:\n{e}") from e
