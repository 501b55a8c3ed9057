"""Locations of the tracklist config and log files.

Both live beside the checkout: ``config/config.toml`` and
``logs/tracklist.log`` under the directory holding ``pyproject.toml``.
``TRACKLIST_CONFIG_PATH`` points the config file somewhere else.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final

CONFIG_PATH_ENV_VAR: Final[str] = "TRACKLIST_CONFIG_PATH"
_ROOT_MARKERS: Final[tuple[str, ...]] = ("pyproject.toml", ".git")


def _detect_repo_root(start: Path | None = None) -> Path:
    """Return the nearest parent of ``start`` holding a root marker.

    Falls back to the working directory when no parent has one.
    """
    origin = (start or Path(__file__).resolve()).parent
    for candidate in (origin, *origin.parents):
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    return Path.cwd()


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Return the config file path, honouring ``TRACKLIST_CONFIG_PATH``.

    Args:
        env: Environment to read instead of ``os.environ``.
    """
    override = (env if env is not None else os.environ).get(CONFIG_PATH_ENV_VAR, "").strip()
    if override:
        return Path(override).expanduser().resolve()
    return (_detect_repo_root() / "config" / "config.toml").resolve()


def default_log_dir() -> Path:
    return (_detect_repo_root() / "logs").resolve()


def default_log_file() -> Path:
    return default_log_dir() / "tracklist.log"


__all__ = [
    "CONFIG_PATH_ENV_VAR",
    "default_config_path",
    "default_log_dir",
    "default_log_file",
]
