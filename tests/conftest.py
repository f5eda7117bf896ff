# tests/conftest.py
# Shared fixtures: a webhook config and an httpx.MockTransport factory.
from __future__ import annotations

from typing import Callable

import httpx
import pytest

from matrix_webhook_client import WebhookConfig


@pytest.fixture
def mock_transport_factory() -> (
    Callable[[Callable[[httpx.Request], httpx.Response]], httpx.MockTransport]
):
    """
    Factory returning an httpx.MockTransport from a handler function.

    Usage:
        def handler(request: httpx.Request) -> httpx.Response: ...
        transport = mock_transport_factory(handler)
        client = httpx.Client(transport=transport)
    """

    def _factory(
        handler: Callable[[httpx.Request], httpx.Response],
    ) -> httpx.MockTransport:
        return httpx.MockTransport(handler)

    return _factory


@pytest.fixture
def hook_base() -> str:
    return "https://hooks.example.org"


@pytest.fixture
def webhook_config(hook_base: str) -> WebhookConfig:
    return WebhookConfig(hook_base, "s3cret", "!room:example.org")
