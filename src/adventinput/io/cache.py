"""Local store layout and read/write helpers for cached inputs."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

INPUT_FILENAME = "input"


class CacheWriteError(RuntimeError):
    """Raised when a fetched input cannot be persisted under the store root."""

    def __init__(self, path: Path, reason: OSError) -> None:
        super().__init__(f"Could not cache input at {path}: {reason}")
        self.path = path


def cache_path_for(key: int, *, root: Path) -> Path:
    """Return the path where the input for day `key` is stored."""
    return root / str(key) / INPUT_FILENAME


def read_cached(path: Path) -> str | None:
    """Return the cached text at `path`, or ``None`` on a miss.

    Any read failure counts as a miss so an unreadable or corrupt entry is
    refetched and overwritten instead of failing the caller.
    """
    try:
        with path.open(encoding="utf-8", newline="") as handle:
            text = handle.read()
    except FileNotFoundError:
        logger.debug("Cache miss for %s", path)
        return None
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Treating unreadable cache entry %s as a miss: %s", path, exc)
        return None
    logger.debug("Cache hit for %s", path)
    return text


def write_cached(path: Path, text: str) -> Path:
    """Persist `text` at `path`, creating parent directories as needed."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise CacheWriteError(path.parent, exc) from exc

    try:
        with path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(text)
    except OSError as exc:
        raise CacheWriteError(path, exc) from exc

    logger.info("Cached %d characters at %s", len(text), path)
    return path


__all__ = ["CacheWriteError", "INPUT_FILENAME", "cache_path_for", "read_cached", "write_cached"]
