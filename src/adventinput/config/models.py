"""Pydantic models describing fetcher configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import AnyUrl, BaseModel, ConfigDict, Field

WriteFailurePolicy = Literal["fail_closed", "resilient"]


class FetcherConfig(BaseModel):
    """Immutable settings shared by every fetch of a process run.

    ``cache_path`` is the store root, ``url`` the base endpoint every day path
    is appended to, and ``session`` the opaque cookie value sent upstream.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    cache_path: Path
    url: AnyUrl
    session: str = Field(min_length=1, repr=False)
    write_failure_policy: WriteFailurePolicy = "fail_closed"


__all__ = ["FetcherConfig", "WriteFailurePolicy"]
