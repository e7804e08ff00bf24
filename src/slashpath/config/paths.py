"""Where slashpath looks for its own configuration file.

The file lives at ``<repo_root>/config/slashpath.toml``. Setting
``SLASHPATH_CONFIG`` to a non-blank value points the library elsewhere.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final


CONFIG_ENV_VAR: Final[str] = "SLASHPATH_CONFIG"
CONFIG_RELATIVE_PATH: Final[Path] = Path("config") / "slashpath.toml"
_ROOT_MARKERS: Final[tuple[str, ...]] = ("pyproject.toml", ".git")


def env_override(env: Mapping[str, str] | None, name: str) -> Path | None:
    """Return the path named by ``env[name]``, or None when unset or blank."""

    value = (env if env is not None else os.environ).get(name, "").strip()
    if not value:
        return None
    return Path(value).expanduser().resolve()


def _detect_repo_root(start: Path | None = None) -> Path:
    """Walk up from ``start`` until a directory holds a root marker.

    Falls back to the current working directory.
    """
    origin = (start or Path(__file__).resolve()).parent
    for directory in (origin, *origin.parents):
        if any((directory / marker).exists() for marker in _ROOT_MARKERS):
            return directory
    return Path.cwd()


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Return the TOML config location, honouring ``SLASHPATH_CONFIG``."""

    override = env_override(env, CONFIG_ENV_VAR)
    if override is not None:
        return override
    return (_detect_repo_root() / CONFIG_RELATIVE_PATH).resolve()


__all__ = [
    "CONFIG_ENV_VAR",
    "default_config_path",
    "env_override",
]
