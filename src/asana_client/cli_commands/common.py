"""Shared CLI state, client construction and error reporting."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

import httpx
import typer
from rich.logging import RichHandler

from ..core import console
from ..core.client import Client
from ..core.config import load_config
from ..core.exceptions import AsanaError
from ..core.options import Feature, Options

# The demonstration CLI opts into every response-shape feature
CLI_FEATURES = frozenset(Feature)


@dataclass
class CLIState:
    """Global options collected by the app callback."""

    token: str | None = None
    debug: bool = False
    verbose: int = 0
    http_client: httpx.Client | None = None


def configure_logging(enabled: bool) -> None:
    """Route library logging to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if enabled else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console.err_console, show_path=False)],
        force=True,
    )


def create_client(state: CLIState) -> Client:
    """Build a Client from the CLI state and the environment.

    Raises:
        ConfigurationError: If no token is available.
    """
    config = load_config(
        token=state.token,
        debug=state.debug or None,
        verbose=state.verbose,
        default_options=Options(pretty=state.debug, enabled_features=CLI_FEATURES),
    )
    return Client(config, http_client=state.http_client)


@contextmanager
def api_errors() -> Iterator[None]:
    """Report library errors to the operator and exit with status 1."""
    try:
        yield
    except AsanaError as e:
        console.error(str(e))
        raise typer.Exit(1) from None
