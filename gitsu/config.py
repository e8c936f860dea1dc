"""Centralized configuration for gitsu.

All environment variables and paths are defined here. Use get_config() to access
configuration values - it loads dotenv once and caches the result.
"""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_DB_FILENAME = "db.sqlite"


def _expand_path(value: str | None, default: Path) -> Path:
    """Expand an environment-provided path, falling back to default.

    Args:
        value: Raw environment value (may be None or blank).
        default: Path to use when value is unset.

    Returns:
        Absolute path with ``~`` expanded.
    """
    if value is None or not value.strip():
        return default
    return Path(value.strip()).expanduser()


def _validate_log_level(level: str | None, default: str = "WARNING") -> str:
    """Validate a logging level name.

    Args:
        level: Level name such as "DEBUG" or "info".
        default: Level to use if the name is unknown.

    Returns:
        Upper-case level name known to the logging module.
    """
    if not level or not level.strip():
        return default
    name = level.strip().upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    return default


def _get_default_home() -> Path:
    """Per-user data directory (~/.gitsu)."""
    return Path.home() / ".gitsu"


@dataclass(frozen=True)
class Config:
    """Immutable configuration container."""

    # Paths
    data_dir: Path
    db_path: Path

    # External tool
    git_binary: str

    # Logging
    log_level: str


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Load and return configuration. Cached after first call."""
    # Single load_dotenv call for entire application
    load_dotenv()

    data_dir = _expand_path(os.getenv("GITSU_HOME"), _get_default_home())
    db_path = _expand_path(os.getenv("GITSU_DB_PATH"), data_dir / DEFAULT_DB_FILENAME)

    return Config(
        data_dir=data_dir,
        db_path=db_path,
        git_binary=os.getenv("GITSU_GIT_BINARY", "").strip() or "git",
        log_level=_validate_log_level(os.getenv("LOG_LEVEL")),
    )
