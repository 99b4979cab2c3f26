"""Bearer token providers for the Webex client.

An authenticator is any object with ``get_token() -> str``.
"""
from __future__ import annotations
import logging
from datetime import datetime, timedelta
from typing import Optional, Protocol, TYPE_CHECKING

import requests

from .exceptions import ConnectorError

if TYPE_CHECKING:
    from webex_connector.config import WebexConfig

logger = logging.getLogger(__name__)

TOKEN_REQUEST_TIMEOUT = 10
# Refresh this long before the advertised expiry
EXPIRY_MARGIN = timedelta(seconds=60)
# Assumed when the token response carries no usable expires_in
DEFAULT_TOKEN_LIFETIME = timedelta(seconds=60)


class Authenticator(Protocol):
    def get_token(self) -> str:
        ...


class StaticTokenAuthenticator:
    """Returns a pre-issued access token (personal or bot token)."""

    def __init__(self, token: str):
        if not token:
            raise ValueError("Access token must not be empty")
        self._token = token

    def get_token(self) -> str:
        return self._token


class RefreshTokenAuthenticator:
    """OAuth2 refresh-token grant against the Webex token endpoint.

    The access token is cached and refreshed when it is about to expire.
    Webex may rotate the refresh token; the latest one is kept.

    Usage:
        auth = RefreshTokenAuthenticator(token_url, client_id, client_secret, refresh_token)
        headers = {"Authorization": f"Bearer {auth.get_token()}"}
    """

    def __init__(
        self,
        token_url: str,
        client_id: str,
        client_secret: str,
        refresh_token: str,
        timeout: float = TOKEN_REQUEST_TIMEOUT,
    ):
        self.token_url = token_url
        self.client_id = client_id
        self._client_secret = client_secret
        self._refresh_token = refresh_token
        self.timeout = timeout
        self._token: Optional[str] = None
        self._token_expires_at: Optional[datetime] = None
        self._refresh_at: Optional[datetime] = None

    def get_token(self) -> str:
        """Return a valid access token, refreshing if necessary."""
        if not self._token or not self._refresh_at or datetime.now() >= self._refresh_at:
            self._refresh()
        return self._token

    def _refresh(self) -> None:
        data = {
            "grant_type": "refresh_token",
            "client_id": self.client_id,
            "client_secret": self._client_secret,
            "refresh_token": self._refresh_token,
        }
        try:
            resp = requests.post(self.token_url, data=data, timeout=self.timeout)
        except requests.RequestException as exc:
            raise ConnectorError(f"Unable to reach Webex token endpoint {self.token_url}: {exc}") from exc

        if resp.status_code != 200:
            raise ConnectorError(
                f"Webex token refresh failed. Status: {resp.status_code}, {resp.text}",
                status_code=resp.status_code,
            )

        try:
            payload = resp.json()
        except ValueError as exc:
            raise ConnectorError(
                f"Invalid JSON in Webex token response: {resp.text}",
                status_code=resp.status_code,
            ) from exc
        if not isinstance(payload, dict):
            raise ConnectorError(
                f"Unexpected Webex token response: {resp.text}",
                status_code=resp.status_code,
            )

        token = payload.get("access_token")
        if not token:
            raise ConnectorError("Webex token response did not contain an access_token")

        lifetime = _token_lifetime(payload.get("expires_in"))
        # Short-lived tokens are still used for at least half their lifetime
        margin = min(EXPIRY_MARGIN, lifetime / 2)
        self._token = token
        self._token_expires_at = datetime.now() + lifetime
        self._refresh_at = self._token_expires_at - margin
        if payload.get("refresh_token"):
            self._refresh_token = payload["refresh_token"]
        logger.debug("Refreshed Webex access token (expires at %s)", self._token_expires_at.isoformat())


def _token_lifetime(expires_in) -> timedelta:
    """Lifetime advertised by the token endpoint, or the conservative default."""
    try:
        seconds = int(expires_in)
    except (TypeError, ValueError):
        return DEFAULT_TOKEN_LIFETIME
    if seconds <= 0:
        return DEFAULT_TOKEN_LIFETIME
    return timedelta(seconds=seconds)


def build_authenticator(config: "WebexConfig") -> Authenticator:
    """Pick the authenticator matching the loaded configuration."""
    if config.uses_refresh_token:
        return RefreshTokenAuthenticator(
            config.resolved_token_url,
            config.client_id,
            config.client_secret,
            config.refresh_token,
            timeout=config.request_timeout,
        )
    return StaticTokenAuthenticator(config.access_token)
