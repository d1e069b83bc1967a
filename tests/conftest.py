"""
Pytest configuration and shared fixtures for the HTTP client tests.
"""

from typing import Callable

import httpx
import pytest

from adapters.network_client import NetworkClient
from core.config import AppSettings


@pytest.fixture
def settings():
    """Settings isolated from any local .env file."""
    return AppSettings(_env_file=None)


@pytest.fixture
def make_client(settings) -> Callable[..., NetworkClient]:
    """Build a client whose transport is an httpx.MockTransport around `handler`."""

    def _make(handler, **kwargs) -> NetworkClient:
        return NetworkClient.from_settings(settings, transport=httpx.MockTransport(handler), **kwargs)

    return _make
