#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the bbml CLI.

This module handles automatic discovery of configuration files, loading
configs from TOML, YAML or JSON, and merging them with command-line values.
"""

import argparse
import json
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from bbml.constants import CONFIG_FILENAMES, PYPROJECT_TOOL_SECTION


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the [tool.bbml] section from a pyproject.toml file.

    Parameters
    ----------
    pyproject_path : Path
        Path to pyproject.toml file

    Returns
    -------
    dict
        Configuration dictionary from [tool.bbml], or empty dict if absent

    Raises
    ------
    argparse.ArgumentTypeError
        If pyproject.toml cannot be parsed

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading pyproject.toml {pyproject_path}: {e}") from e

    config = data.get("tool", {}).get(PYPROJECT_TOOL_SECTION, {})
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] section in {pyproject_path} must be a table, "
            f"got {type(config).__name__}"
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by walking up from ``start_dir``.

    Each directory is checked for ``.bbml.toml``, ``.bbml.yaml``,
    ``.bbml.yml`` and ``.bbml.json`` in that order, then for a
    ``pyproject.toml`` with a ``[tool.bbml]`` section.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except argparse.ArgumentTypeError:
                # Invalid pyproject.toml, keep searching
                pass

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a configuration file in the parent chain, then the home directory."""
    config_in_parents = find_config_in_parents(start_dir)
    if config_in_parents:
        return config_in_parents

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a TOML, YAML, JSON or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary loaded from file

    Raises
    ------
    argparse.ArgumentTypeError
        If the file is missing, has an unsupported extension, cannot be
        parsed, or does not contain a mapping

    """
    path = Path(config_path)
    if not path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration file not found: {path}")

    if path.name == "pyproject.toml":
        return _load_pyproject_section(path)

    suffix = path.suffix.lower()
    try:
        if suffix == ".toml":
            with open(path, "rb") as f:
                config = tomllib.load(f)
        elif suffix in (".yaml", ".yml"):
            with open(path, encoding="utf-8") as f:
                config = yaml.safe_load(f) or {}
        elif suffix == ".json":
            with open(path, encoding="utf-8") as f:
                config = json.load(f)
        else:
            raise argparse.ArgumentTypeError(
                f"Unsupported configuration file format: {path.suffix}. Use .toml, .yaml, .yml or .json"
            )
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise argparse.ArgumentTypeError(f"Invalid configuration file {path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading configuration file {path}: {e}") from e

    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"Configuration file {path} must contain a mapping, got {type(config).__name__}"
        )
    return config


def merge_configs(base_config: Dict[str, Any], override_config: Dict[str, Any]) -> Dict[str, Any]:
    """Merge two flat configurations; non-None values in ``override_config`` win."""
    merged = {key.replace("-", "_"): value for key, value in base_config.items()}
    for key, value in override_config.items():
        if value is not None:
            merged[key.replace("-", "_")] = value
    return merged
