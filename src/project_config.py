"""Utility helpers for loading project-wide configuration."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover - fallback for older Python
    import tomli as tomllib  # type: ignore[import-untyped]


_CONFIG_FILENAME = "config.toml"
_CONFIG_ENV = "SUDOKU_CONFIG"


def project_root() -> Path:
    return Path(__file__).resolve().parents[1]


def _config_path() -> Path:
    override = os.environ.get(_CONFIG_ENV)
    if override:
        return Path(override)
    return project_root() / _CONFIG_FILENAME


@lru_cache(maxsize=1)
def get_config() -> Dict[str, Any]:
    """Load and cache the project configuration as a dictionary.

    A missing file yields an empty mapping so every caller falls back to its
    built-in defaults.
    """
    path = _config_path()
    if not path.exists():
        return {}
    with path.open("rb") as fh:
        return tomllib.load(fh)


def reload() -> None:
    """Clear the cached configuration."""

    get_config.cache_clear()


def get_section(path: str, default: Any = None) -> Any:
    """Retrieve a nested configuration value using dotted notation."""

    data: Any = get_config()
    for part in path.split("."):
        if isinstance(data, dict) and part in data:
            data = data[part]
        else:
            if default is not None:
                return default
            raise KeyError(f"Configuration path '{path}' not found")
    return data


def get_generator_option(name: str, *, profile: str | None = None, default: Any = None) -> Any:
    """Return ``[generator] <name>``, letting ``[generator.by_profile.<profile>]`` override it.

    Unknown profiles fall back to the base value, then to ``default``.
    """

    section = get_section("generator", {})
    value = section.get(name, default)
    if profile:
        overrides = section.get("by_profile", {}).get(profile, {})
        if name in overrides:
            value = overrides[name]
    return value


def resolve_path(value: str | Path) -> Path:
    """Resolve ``value`` against the project root unless it is absolute."""

    path = Path(value)
    if not path.is_absolute():
        path = project_root() / path
    return path


__all__ = ["get_config", "get_generator_option", "get_section", "project_root", "reload", "resolve_path"]
