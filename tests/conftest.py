"""Shared fixtures: offline settings and a NetworkClient over a mock transport."""
import pytest

from adapters.network_client import NetworkClient
from core.config import AppSettings, build_client_configuration
from support import RecordingTransport, StubReachability


@pytest.fixture
def settings():
    return AppSettings(_env_file=None, api_base_url="https://api.example.test", api_token=None)


@pytest.fixture
def make_client(settings):
    """Build a NetworkClient backed by a handler function."""

    def _make(handler, *, connected: bool = True, logger=None):
        transport = RecordingTransport(handler)
        client = NetworkClient(
            build_client_configuration(settings),
            settings=settings,
            reachability=StubReachability(connected),
            logger=logger,
            transport=transport,
        )
        return client, transport

    return _make
