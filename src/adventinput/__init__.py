"""Cached, authenticated access to daily puzzle inputs."""

__version__ = "0.1.0"

from adventinput.config import ConfigurationError, FetcherConfig, UrlParseError, load_config  # noqa: E402
from adventinput.fetcher import CachedFetcher  # noqa: E402
from adventinput.io.cache import CacheWriteError  # noqa: E402
from adventinput.io.remote import HttpError, RequestRejectedError  # noqa: E402

__all__ = [
    "CacheWriteError",
    "CachedFetcher",
    "ConfigurationError",
    "FetcherConfig",
    "HttpError",
    "RequestRejectedError",
    "UrlParseError",
    "__version__",
    "load_config",
]
