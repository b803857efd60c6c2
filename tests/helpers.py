from __future__ import annotations

from pathlib import Path
from typing import Any

import requests

from adventinput.config import FetcherConfig, build_config
from adventinput.fetcher import CachedFetcher

BASE_URL = "https://adventofcode.com/2020"
SESSION = "53616c7465645f5f"

SAMPLE_INPUT = "1721\n979\n366\n299\n675\n1456\n"

_REASONS = {200: "OK", 400: "Bad Request", 403: "Forbidden", 404: "Not Found", 500: "Internal Server Error"}


class DummyResponse:
    """Stand-in for ``requests.Response`` carrying a fixed body."""

    def __init__(self, content: bytes, status_code: int = 200, headers: dict[str, str] | None = None) -> None:
        self.content = content
        self.status_code = status_code
        self.reason = _REASONS.get(status_code, "")
        self.headers = headers if headers is not None else {"Content-Type": "text/plain"}
        self.encoding: str | None = None

    @property
    def text(self) -> str:
        return self.content.decode(self.encoding or "utf-8", errors="replace")


def no_network(*args: Any, **kwargs: Any) -> None:
    raise AssertionError(f"unexpected network call: {args!r} {kwargs!r}")


def make_config(root: Path, **overrides: Any) -> FetcherConfig:
    settings: dict[str, Any] = {"cache_path": str(root), "url": BASE_URL, "session": SESSION}
    settings.update(overrides)
    return build_config(settings)


def make_fetcher(root: Path, **overrides: Any) -> CachedFetcher:
    return CachedFetcher(make_config(root, **overrides))


def connection_refused(*args: Any, **kwargs: Any) -> None:
    raise requests.ConnectionError("[Errno 111] Connection refused")
