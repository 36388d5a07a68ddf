"""Reads the widget's TOML configuration files.

A deployment keeps ``config/default.toml`` next to the host page's server
code and may add one override file per environment, for example
``config/production.toml`` with a longer simulated reply delay.
"""

import os
import tomllib
from pathlib import Path
from typing import Any

# How many directories above the working directory are searched for config/
SEARCH_DEPTH = 5


def get_config_dir() -> Path:
    """Locate the directory holding the widget's TOML files.

    PARLEY_CONFIG_DIR wins when set and must exist. Otherwise the first
    ``config/`` found from the working directory upwards is used, so the
    engine can be started from a subdirectory of the host project.
    """
    override = os.environ.get("PARLEY_CONFIG_DIR")
    if override:
        path = Path(override)
        if not path.exists():
            raise FileNotFoundError(f"Config directory not found: {override}")
        return path

    current = Path.cwd()
    for _ in range(SEARCH_DEPTH):
        candidate = current / "config"
        if candidate.exists():
            return candidate
        current = current.parent

    return Path("config")


def get_environment() -> str:
    """Name of the override file to layer on top of default.toml."""
    return os.environ.get("PARLEY_ENV", "development")


def load_toml(file_path: Path) -> dict[str, Any]:
    """Parse one widget configuration file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the TOML syntax is invalid
    """
    if not file_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    with file_path.open("rb") as f:
        return tomllib.load(f)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Layer override onto base without modifying either.

    Tables such as ``[widget]`` merge key by key; arrays such as
    ``help_options`` and scalars are replaced whole.
    """
    merged = base.copy()
    for key, value in override.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config() -> dict[str, Any]:
    """Return default.toml with the current environment's file layered on.

    The environment file is optional; default.toml is not.
    """
    config_dir = get_config_dir()

    default_path = config_dir / "default.toml"
    if not default_path.exists():
        raise FileNotFoundError(
            f"Default configuration file not found: {default_path}. "
            "Create config/default.toml or set PARLEY_CONFIG_DIR."
        )

    config = load_toml(default_path)
    env_path = config_dir / f"{get_environment()}.toml"
    if env_path.exists():
        config = deep_merge(config, load_toml(env_path))
    return config
