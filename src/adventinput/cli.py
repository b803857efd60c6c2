"""Command-line entry points for fetching puzzle inputs."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from adventinput import exit_codes
from adventinput.config import ConfigurationError, UrlParseError, dump_example_config
from adventinput.fetcher import CachedFetcher
from adventinput.io.cache import CacheWriteError
from adventinput.io.remote import HttpError, RequestRejectedError
from adventinput.util.logging import configure_logging

app = typer.Typer(add_completion=False, help="Cached puzzle input fetcher")


def _open_fetcher(config: Optional[Path]) -> CachedFetcher:
    try:
        return CachedFetcher.open(config)
    except (ConfigurationError, UrlParseError) as exc:
        typer.echo(f"Configuration error: {exc}", err=True)
        raise typer.Exit(code=exit_codes.EXIT_CONFIGURATION_ERROR) from exc


@app.command()
def get(
    day: int = typer.Argument(..., min=1, help="Day number"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file (YAML/TOML/JSON)"),
    log_file: Optional[Path] = typer.Option(None, help="Also write logs to this file"),
) -> None:
    """Print the input for DAY, downloading and caching it if needed."""

    configure_logging(log_path=log_file)
    fetcher = _open_fetcher(config)

    try:
        text = fetcher.get(day)
    except RequestRejectedError as exc:
        typer.echo(f"{exc} (is the session cookie still valid?)", err=True)
        raise typer.Exit(code=exit_codes.EXIT_REQUEST_REJECTED) from exc
    except HttpError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=exit_codes.EXIT_HTTP_ERROR) from exc
    except CacheWriteError as exc:
        typer.echo(f"{exc} (check permissions on the cache directory)", err=True)
        raise typer.Exit(code=exit_codes.EXIT_CACHE_WRITE_ERROR) from exc

    typer.echo(text, nl=False)


@app.command()
def path(
    day: int = typer.Argument(..., min=1, help="Day number"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file (YAML/TOML/JSON)"),
) -> None:
    """Print where the input for DAY is cached."""

    typer.echo(str(_open_fetcher(config).path_for(day)))


@app.command()
def init_config(
    dest: Path = typer.Argument(Path("config.yaml"), help="Destination (.yaml, .yml or .json)"),
) -> None:
    """Write an example configuration file."""

    if dest.exists():
        typer.echo(f"{dest} already exists; not overwriting.", err=True)
        raise typer.Exit(code=exit_codes.EXIT_CONFIGURATION_ERROR)
    try:
        dump_example_config(dest)
    except ConfigurationError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=exit_codes.EXIT_CONFIGURATION_ERROR) from exc
    typer.echo(f"Wrote {dest}")


def main() -> None:
    app()


__all__ = ["main", "app"]
