"""
Pytest configuration and shared fixtures
"""

import pytest

from http_utility import HttpClient
from http_utility.config import Config


@pytest.fixture
def test_config():
    """Minimal test configuration"""
    return Config(
        {
            "transport": {"timeout_seconds": 5, "user_agent": "http-utility-tests/1.0"},
            "client": {"executor": {"max_workers": 2, "thread_name_prefix": "http-utility-test"}},
        }
    )


@pytest.fixture
def make_client(test_config):
    """
    Build HttpClients bound to the test config and close them afterwards.

    Usage:
        def test_something(make_client):
            client = make_client(token="abc", transport=create_mock_transport(...))
    """
    clients = []

    def _make(*args, **kwargs):
        kwargs.setdefault("config_obj", test_config)
        client = HttpClient(*args, **kwargs)
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.close()
