import json
import pytest
from unittest.mock import MagicMock

from zendesk_api.client import ZendeskClient

TEST_CONFIG = {
    "subdomain": "example",
    "email": "agent@example.com",
    "token": "secret-token"
}

API_URL = "https://example.zendesk.com/api/v2"


def build_response(payload=None, status_code=200, headers=None):
    """Fake requests.Response carrying a JSON (or raw bytes) body"""
    if isinstance(payload, bytes):
        content = payload
    else:
        content = json.dumps(payload if payload is not None else {}).encode()

    response = MagicMock()
    response.status_code = status_code
    response.content = content
    response.text = content.decode()
    response.headers = headers or {}
    return response


@pytest.fixture
def make_response():
    """Fixture exposing the fake response builder"""
    return build_response


@pytest.fixture
def client():
    """ZendeskClient whose session never reaches the network"""
    zendesk_client = ZendeskClient(TEST_CONFIG)
    zendesk_client.session.request = MagicMock()
    return zendesk_client


@pytest.fixture
def respond(client):
    """Queue one JSON response per request, in order"""
    def _respond(*payloads):
        client.session.request.side_effect = [
            payload if isinstance(payload, MagicMock) else build_response(payload)
            for payload in payloads
        ]
        return client.session.request
    return _respond


def requested_url(mock_request, index=-1):
    """URL passed to session.request on a given call"""
    return mock_request.call_args_list[index][0][1]
