"""Where beatlist keeps its config file and logs.

Both live beside the checkout (``config/config.toml`` and
``logs/beatlist.log`` under the repository root) so a clone is self-contained.
``BEATLIST_CONFIG`` points the config at any other file.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Final

CONFIG_ENV_VAR: Final[str] = "BEATLIST_CONFIG"
_ROOT_MARKERS: Final[tuple[str, ...]] = ("pyproject.toml", ".git")


def resolve_overridable_path(
    *,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Return ``env[env_var]`` when it is set and non-blank, else the default.

    ``env`` falls back to ``os.environ``. The result is absolute with ``~``
    expanded.
    """
    override = ""
    if env_var:
        override = (os.environ if env is None else env).get(env_var, "").strip()
    chosen = Path(override) if override else default_factory()
    return chosen.expanduser().resolve()


def _detect_repo_root(start: Path | None = None) -> Path:
    """Nearest ancestor of ``start`` holding a root marker, else the working directory."""

    origin = (start or Path(__file__).resolve()).parent
    return next(
        (
            candidate
            for candidate in (origin, *origin.parents)
            if any((candidate / marker).exists() for marker in _ROOT_MARKERS)
        ),
        Path.cwd(),
    )


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    return resolve_overridable_path(
        env=env,
        env_var=CONFIG_ENV_VAR,
        default_factory=lambda: _detect_repo_root() / "config" / "config.toml",
    )


def default_log_dir() -> Path:
    return (_detect_repo_root() / "logs").resolve()


def default_log_file() -> Path:
    return default_log_dir() / "beatlist.log"


__all__ = [
    "CONFIG_ENV_VAR",
    "default_config_path",
    "default_log_dir",
    "default_log_file",
    "resolve_overridable_path",
]
