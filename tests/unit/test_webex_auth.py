"""Unit tests for webex_connector/core/webex/auth.py."""
from datetime import datetime, timedelta
from unittest.mock import MagicMock

import pytest
import requests

from webex_connector.config import WebexConfig
from webex_connector.core.webex import auth as auth_module
from webex_connector.core.webex.auth import (
    RefreshTokenAuthenticator,
    StaticTokenAuthenticator,
    build_authenticator,
)
from webex_connector.core.webex.exceptions import ConnectorError

TOKEN_URL = "https://webexapis.com/v1/access_token"


def _token_response(status_code=200, payload=None, text=""):
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = payload or {}
    resp.text = text
    return resp


def test_static_token_authenticator_returns_token():
    assert StaticTokenAuthenticator("abc").get_token() == "abc"


def test_static_token_authenticator_rejects_empty():
    with pytest.raises(ValueError):
        StaticTokenAuthenticator("")


def test_refresh_token_grant_posts_form_and_caches(monkeypatch):
    post = MagicMock(return_value=_token_response(payload={"access_token": "A1", "expires_in": 3600}))
    monkeypatch.setattr(auth_module.requests, "post", post)

    auth = RefreshTokenAuthenticator(TOKEN_URL, "cid", "csecret", "r1")
    assert auth.get_token() == "A1"
    assert auth.get_token() == "A1"

    post.assert_called_once()
    assert post.call_args.args == (TOKEN_URL,)
    assert post.call_args.kwargs["data"] == {
        "grant_type": "refresh_token",
        "client_id": "cid",
        "client_secret": "csecret",
        "refresh_token": "r1",
    }


def test_refresh_token_renews_near_expiry_and_keeps_rotated_refresh_token(monkeypatch):
    post = MagicMock(side_effect=[
        _token_response(payload={"access_token": "A1", "expires_in": 3600, "refresh_token": "r2"}),
        _token_response(payload={"access_token": "A2", "expires_in": 3600}),
    ])
    monkeypatch.setattr(auth_module.requests, "post", post)

    auth = RefreshTokenAuthenticator(TOKEN_URL, "cid", "csecret", "r1")
    assert auth.get_token() == "A1"

    auth._refresh_at = datetime.now() - timedelta(seconds=1)
    assert auth.get_token() == "A2"
    assert post.call_args.kwargs["data"]["refresh_token"] == "r2"


def test_refresh_token_failure_raises_connector_error(monkeypatch):
    post = MagicMock(return_value=_token_response(status_code=401, text="invalid_grant"))
    monkeypatch.setattr(auth_module.requests, "post", post)

    with pytest.raises(ConnectorError) as exc:
        RefreshTokenAuthenticator(TOKEN_URL, "cid", "csecret", "r1").get_token()
    assert exc.value.status_code == 401
    assert "invalid_grant" in str(exc.value)


def test_refresh_token_transport_failure_raises_connector_error(monkeypatch):
    post = MagicMock(side_effect=requests.exceptions.Timeout("slow"))
    monkeypatch.setattr(auth_module.requests, "post", post)

    with pytest.raises(ConnectorError):
        RefreshTokenAuthenticator(TOKEN_URL, "cid", "csecret", "r1").get_token()


def test_refresh_token_response_without_access_token(monkeypatch):
    post = MagicMock(return_value=_token_response(payload={"expires_in": 10}))
    monkeypatch.setattr(auth_module.requests, "post", post)

    with pytest.raises(ConnectorError):
        RefreshTokenAuthenticator(TOKEN_URL, "cid", "csecret", "r1").get_token()


def test_build_authenticator_prefers_refresh_credentials():
    cfg = WebexConfig(access_token="static", client_id="cid", client_secret="s", refresh_token="r")
    auth = build_authenticator(cfg)
    assert isinstance(auth, RefreshTokenAuthenticator)
    assert auth.token_url == "https://webexapis.com/v1/access_token"


def test_build_authenticator_static_token():
    auth = build_authenticator(WebexConfig(access_token="static"))
    assert isinstance(auth, StaticTokenAuthenticator)
    assert auth.get_token() == "static"


@pytest.mark.parametrize("payload", [
    {"access_token": "A1"},
    {"access_token": "A1", "expires_in": None},
    {"access_token": "A1", "expires_in": 0},
    {"access_token": "A1", "expires_in": 30},
])
def test_token_without_usable_lifetime_is_still_cached(monkeypatch, payload):
    post = MagicMock(return_value=_token_response(payload=payload))
    monkeypatch.setattr(auth_module.requests, "post", post)

    auth = RefreshTokenAuthenticator(TOKEN_URL, "cid", "csecret", "r1")
    for _ in range(3):
        assert auth.get_token() == "A1"
    post.assert_called_once()


def test_missing_expires_in_assumes_default_lifetime(monkeypatch):
    post = MagicMock(return_value=_token_response(payload={"access_token": "A1"}))
    monkeypatch.setattr(auth_module.requests, "post", post)

    auth = RefreshTokenAuthenticator(TOKEN_URL, "cid", "csecret", "r1")
    before = datetime.now()
    auth.get_token()
    assert auth._token_expires_at >= before + auth_module.DEFAULT_TOKEN_LIFETIME
    assert auth._refresh_at > before


def test_non_json_token_response_raises_connector_error(monkeypatch):
    resp = _token_response(text="<html>proxy</html>")
    resp.json.side_effect = ValueError("no json")
    monkeypatch.setattr(auth_module.requests, "post", MagicMock(return_value=resp))

    with pytest.raises(ConnectorError) as exc:
        RefreshTokenAuthenticator(TOKEN_URL, "cid", "csecret", "r1").get_token()
    assert exc.value.status_code == 200
    assert isinstance(exc.value.__cause__, ValueError)


def test_non_object_token_response_raises_connector_error(monkeypatch):
    resp = _token_response(text='["A1"]')
    resp.json.return_value = ["A1"]
    monkeypatch.setattr(auth_module.requests, "post", MagicMock(return_value=resp))

    with pytest.raises(ConnectorError):
        RefreshTokenAuthenticator(TOKEN_URL, "cid", "csecret", "r1").get_token()
