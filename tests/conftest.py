"""Pytest configuration and shared fixtures for nylas-client-core tests."""

import httpx
import pytest

from nylas_client_core import APIClient, ClientConfig
from nylas_client_core.transport import HttpxTransport


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear NYLAS_* environment variables before each test.

    This prevents a developer's real configuration from leaking into tests.
    """
    import os

    for key in list(os.environ.keys()):
        if key.startswith("NYLAS_"):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def config():
    return ClientConfig(api_key="testApiKey", server_url="https://api.us.nylas.com")


@pytest.fixture
def make_client(config):
    """Factory for clients whose network calls are answered by `handler`."""

    def _make(handler):
        transport = HttpxTransport(transport=httpx.MockTransport(handler))
        return APIClient(config, send=transport.send)

    return _make
