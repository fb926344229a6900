"""Shared fixtures for the Pipedrive toolkit tests."""

import json
import pytest
import httpx
from unittest.mock import Mock

from pipedrive_toolkit.core.models import PipedriveConfig
from pipedrive_toolkit.client.pipedrive_client import PipedriveClient


def make_response(status_code=200, data=None, text=None):
    """Build a mock httpx response."""
    response = Mock()
    response.status_code = status_code
    if data is not None:
        body = json.dumps(data)
        response.json.return_value = data
    else:
        body = text or ""
    response.text = body
    response.content = body.encode()
    return response


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep every test away from the real ~/.clawdbot."""
    home = tmp_path / "clawdbot_home"
    monkeypatch.setenv("CLAWDBOT_HOME", str(home))
    monkeypatch.delenv("PIPEDRIVE_API_KEY", raising=False)
    monkeypatch.delenv("PIPEDRIVE_DOMAIN", raising=False)
    return home


@pytest.fixture
def config():
    return PipedriveConfig(api_key="secret-token", domain="acme")


@pytest.fixture
def mock_http_client():
    """Create a mock HTTP client answering 200 {"success": true}."""
    client = Mock(spec=httpx.Client)
    client.request.return_value = make_response(200, {"success": True})
    return client


@pytest.fixture
def client(config, mock_http_client):
    return PipedriveClient(config, http_client=mock_http_client)
