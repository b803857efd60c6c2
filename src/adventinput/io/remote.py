"""Authenticated download of daily puzzle inputs."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from urllib.parse import quote, urlsplit

import requests
from pydantic import AnyUrl

from adventinput import __version__

logger = logging.getLogger(__name__)

DEFAULT_HEADERS: Mapping[str, str] = {
    "User-Agent": f"advent-input/{__version__} (python-requests {requests.__version__})",
    "Accept": "text/plain",
}


class HttpError(RuntimeError):
    """Raised when the remote endpoint cannot be reached or read."""


class RequestRejectedError(RuntimeError):
    """Raised when the remote endpoint answers with a non-success status."""

    def __init__(self, url: str, status_code: int, status: str) -> None:
        super().__init__(f"GET {url} was rejected: {status}")
        self.url = url
        self.status_code = status_code
        self.status = status


def endpoint_for(base_url: AnyUrl | str, key: int) -> str:
    """Return ``<base>/day/<key>/input`` without touching `base_url`."""
    parts = urlsplit(str(base_url))
    segments = ("day", str(key), "input")
    path = parts.path.rstrip("/") + "".join("/" + quote(segment, safe="") for segment in segments)
    return parts._replace(path=path).geturl()


def fetch_text(url: str, *, session: str, headers: Mapping[str, str] | None = None) -> str:
    """Download `url` once with the session cookie and return the body as text.

    There is no retry: a transport failure raises :class:`HttpError` and any
    status outside 2xx raises :class:`RequestRejectedError`.
    """
    merged_headers = dict(DEFAULT_HEADERS)
    if headers:
        merged_headers.update(headers)
    merged_headers["Cookie"] = f"session={session}"

    logger.info("Fetching %s", url)
    try:
        response = requests.get(url, headers=merged_headers)
    except requests.RequestException as exc:
        raise HttpError(f"GET {url} failed: {exc}") from exc

    if not 200 <= response.status_code < 300:
        status = f"{response.status_code} {response.reason or ''}".strip()
        logger.warning("GET %s returned %s", url, status)
        raise RequestRejectedError(url, response.status_code, status)

    if "charset" not in response.headers.get("Content-Type", "").lower():
        response.encoding = "utf-8"
    try:
        return response.text
    except requests.RequestException as exc:
        raise HttpError(f"Reading the body of {url} failed: {exc}") from exc


__all__ = ["DEFAULT_HEADERS", "HttpError", "RequestRejectedError", "endpoint_for", "fetch_text"]
