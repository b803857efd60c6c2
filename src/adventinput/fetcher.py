"""Read-through cache for daily puzzle inputs."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from adventinput.config import FetcherConfig, load_config
from adventinput.io.cache import CacheWriteError, cache_path_for, read_cached, write_cached
from adventinput.io.remote import endpoint_for, fetch_text

logger = logging.getLogger(__name__)


class CachedFetcher:
    """Serve puzzle inputs from the local store, downloading them on a miss.

    Each call to :meth:`get` makes at most one network request. A downloaded
    input is written under ``<cache_path>/<day>/input`` before it is returned,
    so later calls for the same day never touch the network.
    """

    def __init__(self, config: FetcherConfig) -> None:
        self._config = config

    @classmethod
    def open(
        cls,
        path: Path | None = None,
        *,
        overrides: Mapping[str, Any] | None = None,
    ) -> "CachedFetcher":
        """Load configuration and return a ready fetcher.

        Raises ``ConfigurationError`` or ``UrlParseError`` when the settings
        are unusable.
        """
        return cls(load_config(path, overrides=overrides))

    @property
    def config(self) -> FetcherConfig:
        return self._config

    def path_for(self, key: int) -> Path:
        return cache_path_for(_check_key(key), root=self._config.cache_path)

    def endpoint_for(self, key: int) -> str:
        return endpoint_for(self._config.url, _check_key(key))

    def get(self, key: int) -> str:
        """Return the input text for day `key`.

        Raises ``HttpError`` or ``RequestRejectedError`` when the download
        fails, and ``CacheWriteError`` when the result cannot be stored under
        the ``fail_closed`` policy.
        """
        path = self.path_for(key)
        cached = read_cached(path)
        if cached is not None:
            return cached

        text = fetch_text(self.endpoint_for(key), session=self._config.session)

        try:
            write_cached(path, text)
        except CacheWriteError as exc:
            if self._config.write_failure_policy != "resilient":
                raise
            logger.warning("Returning day %s input without caching it: %s", key, exc)
        return text


def _check_key(key: int) -> int:
    if isinstance(key, bool) or not isinstance(key, int):
        raise ValueError(f"day must be an integer, got {key!r}")
    if key < 1:
        raise ValueError(f"day must be positive, got {key}")
    return key


__all__ = ["CachedFetcher"]
