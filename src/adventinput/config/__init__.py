"""Configuration models and loaders for the input fetcher."""

from .loader import (
    DEFAULT_CONFIG_CANDIDATES,
    ConfigurationError,
    UrlParseError,
    build_config,
    dump_example_config,
    load_config,
)
from .models import FetcherConfig, WriteFailurePolicy

__all__ = [
    "ConfigurationError",
    "DEFAULT_CONFIG_CANDIDATES",
    "FetcherConfig",
    "UrlParseError",
    "WriteFailurePolicy",
    "build_config",
    "dump_example_config",
    "load_config",
]
