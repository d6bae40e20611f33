"""Shared fixtures for asana_client tests."""

from __future__ import annotations

from typing import Any

import httpx
import pytest

from asana_client.core.client import Client
from asana_client.core.config import ClientConfig
from tests.fixtures.http import BASE_URL, RecordingHandler

# =============================================================================
# Client Fixtures
# =============================================================================


@pytest.fixture
def client_config() -> ClientConfig:
    """Provide a minimal client configuration pointing at a fake host."""
    return ClientConfig(token="test-token", base_url=BASE_URL)


@pytest.fixture
def make_client(client_config):
    """Provide a factory building a Client over a RecordingHandler.

    Usage:
        handler = RecordingHandler({"data": []})
        client = make_client(handler, verbose=1)
    """
    http_clients: list[httpx.Client] = []

    def _make(handler: RecordingHandler, **config_overrides: Any) -> Client:
        config = client_config.model_copy(update=config_overrides)
        http = httpx.Client(transport=httpx.MockTransport(handler))
        http_clients.append(http)
        return Client(config, http_client=http)

    yield _make

    for http in http_clients:
        http.close()


# =============================================================================
# CLI Fixtures
# =============================================================================


@pytest.fixture
def cli_runner():
    """Provide a Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()
