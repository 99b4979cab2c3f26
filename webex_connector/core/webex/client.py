"""Low-level HTTP client for the Webex REST API.

Handles bearer authentication, JSON bodies and routes every non-2xx
response through the fault processor.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, Optional

import requests

from webex_connector.config.settings import DEFAULT_BASE_URL as WEBEX_BASE_URL
from webex_connector.config.settings import DEFAULT_REQUEST_TIMEOUT as REQUEST_TIMEOUT

from .auth import Authenticator
from .exceptions import ConnectorError
from .faults import process_fault

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


class WebexClient:
    """HTTP client for the Webex v1 API.

    Usage:
        client = WebexClient(authenticator=StaticTokenAuthenticator("token"))
        person = client.get("/people/me")
    """

    def __init__(
        self,
        base_url: str = WEBEX_BASE_URL,
        authenticator: Optional[Authenticator] = None,
        timeout: float = REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        """Initialize Webex client.

        Args:
            base_url: API root, paths are appended verbatim
            authenticator: Token provider for the Authorization header
            timeout: Per-request timeout in seconds
            session: Optional pre-built requests session
        """
        self.base_url = base_url.rstrip("/")
        self.authenticator = authenticator
        self.timeout = timeout
        self.session = session or requests.Session()

    def get(self, path: str, params: Optional[Dict] = None) -> Any:
        return self._request("GET", path, params=params)

    def get_object(self, path: str) -> Any:
        """GET a single entity.

        Raises:
            ConnectorError: If Webex answers 2xx with an empty body
        """
        data = self.get(path)
        if not data:
            raise ConnectorError(f"Empty response from Webex for GET {self.base_url}{path}")
        return data

    def post(self, path: str, json: Optional[Dict] = None) -> Any:
        return self._request("POST", path, json=json)

    def put(self, path: str, json: Optional[Dict] = None) -> Any:
        return self._request("PUT", path, json=json)

    def delete(self, path: str) -> Any:
        return self._request("DELETE", path)

    def close(self) -> None:
        self.session.close()

    def _headers(self, has_body: bool) -> Dict[str, str]:
        if self.authenticator is None:
            raise ConnectorError("No authenticator configured for Webex client")
        headers = {
            "Authorization": f"Bearer {self.authenticator.get_token()}",
            "Accept": "application/json",
        }
        if has_body:
            headers["Content-Type"] = JSON_CONTENT_TYPE
        return headers

    def _request(self, method: str, path: str, json: Optional[Dict] = None, params: Optional[Dict] = None) -> Any:
        """Execute one request and return the decoded JSON body.

        Returns:
            Decoded JSON, or None for an empty body (e.g. 204 on DELETE)

        Raises:
            ConnectorError: On transport failure or any non-2xx status
        """
        url = f"{self.base_url}{path}"
        headers = self._headers(json is not None)
        logger.debug("%s %s", method, url)
        try:
            resp = self.session.request(
                method, url, json=json, params=params, headers=headers, timeout=self.timeout
            )
        except requests.RequestException as exc:
            raise ConnectorError(f"{method} {url} failed: {exc}") from exc

        self._handle_error(resp)

        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as exc:
            raise ConnectorError(f"Invalid JSON in Webex response from {method} {url}: {resp.text}") from exc

    def _handle_error(self, resp: requests.Response) -> None:
        """Hand any non-2xx response to the fault processor."""
        if not 200 <= resp.status_code < 300:
            process_fault(resp)
