"""Settings loader with environment variable and Docker secrets integration."""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://webexapis.com/v1"
DEFAULT_REQUEST_TIMEOUT = 10.0
SECRETS_DIR = "/run/secrets"


def _load_secret_from_file(secret_name: str, env_var: str | None = None) -> str | None:
    """Read a Webex credential (access token, client secret, refresh token).

    A non-empty file ``/run/secrets/<secret_name>`` wins; otherwise ``env_var``
    is consulted. Values are never logged, only where they came from.

    Returns:
        The stripped credential, or None when neither source has one
    """
    secret_file = Path(SECRETS_DIR) / secret_name

    if secret_file.is_file():
        try:
            value = secret_file.read_text().strip()
        except OSError as exc:
            logger.warning("Cannot read Webex secret %s: %s", secret_file, exc)
            value = ""
        if value:
            logger.info("Webex credential %s read from secrets mount", secret_name)
            return value

    value = os.getenv(env_var) if env_var else None
    if value:
        logger.info("Webex credential %s read from environment", env_var)
    return value or None


@dataclass
class WebexConfig:
    """Connector configuration container."""
    base_url: str = DEFAULT_BASE_URL

    # Static bearer token (personal access or bot token)
    access_token: str = ""

    # OAuth2 integration credentials for the refresh-token grant
    client_id: str = ""
    client_secret: str = ""
    refresh_token: str = ""
    token_url: str = ""

    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    @property
    def uses_refresh_token(self) -> bool:
        """True when the OAuth2 refresh-token triple is complete."""
        return bool(self.client_id and self.client_secret and self.refresh_token)

    @property
    def resolved_token_url(self) -> str:
        return self.token_url or f"{self.base_url.rstrip('/')}/access_token"

    def validate(self) -> None:
        """Ensure some form of bearer credential is configured.

        Raises:
            RuntimeError: If neither an access token nor refresh credentials are set
        """
        if not self.access_token and not self.uses_refresh_token:
            raise RuntimeError(
                "Webex credentials missing: set WEBEX_ACCESS_TOKEN, or WEBEX_CLIENT_ID, "
                "WEBEX_CLIENT_SECRET and WEBEX_REFRESH_TOKEN."
            )


REQUIRED_PROPERTY_NAMES = (
    "WEBEX_ACCESS_TOKEN",
    "WEBEX_CLIENT_ID",
    "WEBEX_CLIENT_SECRET",
    "WEBEX_REFRESH_TOKEN",
)


def load_settings() -> WebexConfig:
    """Load connector settings from environment and /run/secrets."""
    base_url = os.environ.get("WEBEX_BASE_URL", DEFAULT_BASE_URL).strip() or DEFAULT_BASE_URL

    timeout_str = os.environ.get("WEBEX_REQUEST_TIMEOUT", "")
    try:
        request_timeout = float(timeout_str) if timeout_str else DEFAULT_REQUEST_TIMEOUT
    except ValueError:
        raise RuntimeError(f"WEBEX_REQUEST_TIMEOUT must be a number, got {timeout_str!r}")

    config = WebexConfig(
        base_url=base_url,
        access_token=_load_secret_from_file("webex_access_token", "WEBEX_ACCESS_TOKEN") or "",
        client_id=os.environ.get("WEBEX_CLIENT_ID", ""),
        client_secret=_load_secret_from_file("webex_client_secret", "WEBEX_CLIENT_SECRET") or "",
        refresh_token=_load_secret_from_file("webex_refresh_token", "WEBEX_REFRESH_TOKEN") or "",
        token_url=os.environ.get("WEBEX_TOKEN_URL", ""),
        request_timeout=request_timeout,
    )
    config.validate()

    auth_label = "refresh-token" if config.uses_refresh_token else "access-token"
    logger.info("Webex settings loaded; base_url=%s; auth=%s", config.base_url, auth_label)
    return config
