"""
Shared fixtures for the Instagram API client tests.
"""

import httpx
import pytest

from instagram_api import ClientConfig, InstagramClient
from instagram_api.models import ApiResponse
from instagram_api.users import UsersEndpoint

TOKEN = "test-token"


class FakeTransport:
    """Records every GET and answers with queued bodies."""

    def __init__(self, auth_params=None):
        self.auth_params = {"access_token": TOKEN} if auth_params is None else auth_params
        self.calls = []
        self.responses = []

    def queue(self, body):
        self.responses.append(ApiResponse.model_validate(body))

    def get(self, path, params=None):
        self.calls.append((path, dict(params or {})))
        if self.responses:
            return self.responses.pop(0)
        return ApiResponse.model_validate({"meta": {"code": 200}, "data": {}})


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def users(transport):
    return UsersEndpoint(transport)


@pytest.fixture
def make_client():
    """Build an InstagramClient whose requests are answered by `handler`."""
    clients = []

    def _make(handler, **config):
        config.setdefault("access_token", TOKEN)
        http_client = httpx.Client(transport=httpx.MockTransport(handler))
        client = InstagramClient(ClientConfig(**config), http_client=http_client)
        clients.append((client, http_client))
        return client

    yield _make

    for client, http_client in clients:
        client.close()
        http_client.close()
