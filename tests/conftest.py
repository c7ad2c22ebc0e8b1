"""Pytest configuration and fixtures.

Provides httpx clients backed by ``httpx.MockTransport``
so no test touches the network.
"""

from __future__ import annotations

import logging

import httpx
import pytest

from tests.helpers import Handler

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def mock_client():
    """Return a factory for sync clients backed by a MockTransport handler."""
    clients: list[httpx.Client] = []

    def factory(handler: Handler) -> httpx.Client:
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield factory
    for client in clients:
        client.close()


@pytest.fixture
def mock_async_client():
    """Return a factory for async clients backed by a MockTransport handler.

    Tests close these themselves with ``async with``.
    """

    def factory(handler: Handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return factory


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def quiet_noisy_libraries():
    """Suppress noisy third-party loggers."""
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
