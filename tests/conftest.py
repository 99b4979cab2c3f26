"""Pytest shared fixtures for the Webex connector."""
import json
import pathlib
import sys
from typing import Optional
from unittest.mock import MagicMock

# Add project root to Python path
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
import requests

from webex_connector.config import WebexConfig
from webex_connector.core.webex import StaticTokenAuthenticator, WebexClient, WebexDriver

TEST_BASE_URL = "https://webexapis.com/v1"
TEST_TOKEN = "test-token"


def make_response(
    status_code: int = 200,
    body=None,
    content_type: Optional[str] = "application/json",
    reason: str = "OK",
) -> requests.Response:
    """Build a real requests.Response without touching the network."""
    resp = requests.Response()
    resp.status_code = status_code
    resp.reason = reason
    resp.url = TEST_BASE_URL
    if body is None:
        resp._content = b""
    elif isinstance(body, (dict, list)):
        resp._content = json.dumps(body).encode("utf-8")
    else:
        resp._content = body.encode("utf-8")
    resp.encoding = "utf-8"
    if content_type:
        resp.headers["Content-Type"] = content_type
    return resp


# ─────────────────────────────────────────────────────────────────────────────
# Network Guard Rails
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture(autouse=True)
def _block_module_level_requests(monkeypatch):
    """Fail loudly if a test reaches the network through requests.post/get."""
    def _unexpected(url, *args, **kwargs):
        raise RuntimeError(f"Unexpected HTTP call in unit test: {url}")

    monkeypatch.setattr(requests, "post", _unexpected)
    monkeypatch.setattr(requests, "get", _unexpected)


# ─────────────────────────────────────────────────────────────────────────────
# Webex client fixtures
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture()
def session():
    """Fake requests.Session; set ``session.request.side_effect`` per test."""
    fake = MagicMock(spec=requests.Session)
    fake.request.return_value = make_response(200, {})
    return fake


@pytest.fixture()
def webex_client(session):
    return WebexClient(TEST_BASE_URL, StaticTokenAuthenticator(TEST_TOKEN), timeout=5, session=session)


@pytest.fixture()
def config():
    return WebexConfig(base_url=TEST_BASE_URL, access_token=TEST_TOKEN, request_timeout=5)


@pytest.fixture()
def driver(config, webex_client):
    return WebexDriver(config, authenticator=webex_client.authenticator, client=webex_client)


def requested(session, index: int = 0):
    """Return (method, url, kwargs) of the index-th request sent on the fake session."""
    call = session.request.call_args_list[index]
    method, url = call.args
    return method, url, call.kwargs


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "scenario: end-to-end request/response scenarios against a faked Webex"
    )
