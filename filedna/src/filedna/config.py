"""Runtime configuration for create-dna-for-file."""

from __future__ import annotations

import logging
import os

from filedna.errors import FileDnaError

DEFAULT_CHUNK_SIZE = 64 * 1024
MAX_CHUNK_SIZE = 64 * 1024 * 1024
DEFAULT_LOG_LEVEL = "WARNING"


class ConfigError(FileDnaError):
    """Raised when an environment setting is invalid."""


def chunk_size() -> int:
    raw = os.getenv("FILEDNA_CHUNK_SIZE")
    if raw is None or not raw.strip():
        return DEFAULT_CHUNK_SIZE
    try:
        value = int(raw.strip())
    except ValueError as exc:
        raise ConfigError(f"FILEDNA_CHUNK_SIZE must be an integer, got {raw!r}") from exc
    if value <= 0:
        raise ConfigError(f"FILEDNA_CHUNK_SIZE must be positive, got {value}")
    if value > MAX_CHUNK_SIZE:
        raise ConfigError(f"FILEDNA_CHUNK_SIZE must be at most {MAX_CHUNK_SIZE}, got {value}")
    return value


def log_level() -> int:
    name = (os.getenv("FILEDNA_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ConfigError(f"FILEDNA_LOG_LEVEL is not a logging level: {name!r}")
    return level
