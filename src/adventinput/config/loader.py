"""Config loading entry points for the input fetcher."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from .models import FetcherConfig

try:  # Python 3.11+
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for earlier interpreters
    import tomli as tomllib  # type: ignore[assignment]

DEFAULT_CONFIG_CANDIDATES: tuple[Path, ...] = (
    Path("config.toml"),
    Path("config.yaml"),
    Path("config.yml"),
    Path("config.json"),
)
ENV_PREFIX = "ADVENT_INPUT_"
REQUIRED_KEYS: tuple[str, ...] = ("cache_path", "url", "session")
OPTIONAL_KEYS: tuple[str, ...] = ("write_failure_policy",)

# pydantic-core error types raised when a string cannot be parsed as a URL.
_URL_PARSE_ERROR_TYPES = frozenset({"url_parsing", "url_syntax_violation", "url_too_long", "url_scheme"})

EXAMPLE_CONFIG: dict[str, str] = {
    "cache_path": "./inputs",
    "url": "https://adventofcode.com/2020",
    "session": "<paste the value of your session cookie>",
    "write_failure_policy": "fail_closed",
}


class ConfigurationError(RuntimeError):
    """Raised when settings are missing, malformed or cannot be loaded."""


class UrlParseError(RuntimeError):
    """Raised when the base endpoint is not a valid absolute URL."""


def load_config(
    path: Path | None = None,
    *,
    overrides: Mapping[str, Any] | None = None,
    environ: Mapping[str, str] | None = None,
) -> FetcherConfig:
    """Load fetcher settings from file, environment and explicit overrides."""

    config_path = path if path is not None else _default_config_path()
    if config_path is not None:
        settings = _expect_mapping(_read_structured_file(config_path), config_path)
    else:
        settings = {}

    settings.update(_settings_from_env(os.environ if environ is None else environ))

    if overrides:
        settings.update(overrides)

    return build_config(settings)


def build_config(settings: Mapping[str, Any]) -> FetcherConfig:
    """Validate raw settings into a :class:`FetcherConfig`.

    Missing or malformed values raise :class:`ConfigurationError`; a ``url``
    that does not parse raises :class:`UrlParseError`.
    """

    missing = [key for key in REQUIRED_KEYS if _is_blank(settings.get(key))]
    if missing:
        raise ConfigurationError(f"Missing required setting(s): {', '.join(missing)}.")

    try:
        config = FetcherConfig.model_validate(dict(settings))
    except ValidationError as exc:
        url_errors = [
            err for err in exc.errors() if err["loc"][:1] == ("url",) and err["type"] in _URL_PARSE_ERROR_TYPES
        ]
        if url_errors:
            raise UrlParseError(f"Invalid url {settings['url']!r}: {url_errors[0]['msg']}") from exc
        fields = sorted({str(err["loc"][0]) for err in exc.errors() if err["loc"]})
        raise ConfigurationError(f"Malformed setting(s): {', '.join(fields)}.") from exc

    if not (config.url.path or "").startswith("/"):
        raise ConfigurationError(f"url {str(config.url)!r} cannot be used as a base for day paths.")

    return config


def dump_example_config(dest: Path) -> None:
    """Write a template configuration to ``dest``."""

    suffix = dest.suffix.lower()
    if suffix == ".toml":
        raise ConfigurationError("TOML export is not supported yet; use a YAML or JSON destination.")

    dest.parent.mkdir(parents=True, exist_ok=True)

    if suffix == ".json":
        dest.write_text(json.dumps(EXAMPLE_CONFIG, indent=2), encoding="utf-8")
        return
    dest.write_text(
        yaml.safe_dump(EXAMPLE_CONFIG, sort_keys=False),
        encoding="utf-8",
    )


def _default_config_path() -> Path | None:
    for candidate in DEFAULT_CONFIG_CANDIDATES:
        if candidate.exists():
            return candidate
    return None


def _settings_from_env(environ: Mapping[str, str]) -> dict[str, str]:
    """Collect ``ADVENT_INPUT_*`` variables for the known setting keys."""

    result: dict[str, str] = {}
    for key in REQUIRED_KEYS + OPTIONAL_KEYS:
        value = environ.get(ENV_PREFIX + key.upper(), "").strip()
        if value:
            result[key] = value
    return result


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _expect_mapping(payload: Any, source: Path) -> dict[str, Any]:
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise ConfigurationError(f"Expected mapping data in {source}, got {type(payload)!r}.")
    return dict(payload)


def _read_structured_file(path: Path) -> Any:
    """Return the parsed contents of a YAML/TOML/JSON file."""

    if not path.exists():
        raise ConfigurationError(f"Config file {path} does not exist.")

    suffix = path.suffix.lower()
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Could not read config file {path}: {exc}") from exc

    try:
        if suffix in {".yaml", ".yml"}:
            return yaml.safe_load(text) or {}
        if suffix == ".toml":
            return tomllib.loads(text)
        if suffix == ".json":
            return json.loads(text)
    except (yaml.YAMLError, tomllib.TOMLDecodeError, json.JSONDecodeError) as exc:
        raise ConfigurationError(f"Could not parse config file {path}: {exc}") from exc

    raise ConfigurationError(f"Unsupported config format for {path}")


__all__ = [
    "ConfigurationError",
    "DEFAULT_CONFIG_CANDIDATES",
    "UrlParseError",
    "build_config",
    "dump_example_config",
    "load_config",
]
