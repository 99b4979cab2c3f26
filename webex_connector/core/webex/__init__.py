"""Webex REST API connector library.

Architecture:
- client.py: HTTP client with bearer authentication
- auth.py: Static and refresh-token authenticators
- faults.py: Webex error response -> typed exception translation
- models.py: WebexUser, WebexGroup and response envelopes
- users.py: People lifecycle operations
- groups.py: Read-only role operations
- driver.py: Host-facing CRUD contract
- exceptions.py: Typed exceptions for error handling

Usage:
    from webex_connector.config import load_settings
    from webex_connector.core.webex import WebexDriver, WebexUser

    driver = WebexDriver(load_settings())
    user_id = driver.create_user(WebexUser(emails=["alice@example.com"], display_name="Alice"))
"""
from .auth import (
    StaticTokenAuthenticator,
    RefreshTokenAuthenticator,
    build_authenticator,
)
from .client import WebexClient, WEBEX_BASE_URL, REQUEST_TIMEOUT
from .driver import WebexDriver
from .exceptions import (
    ConnectorError,
    AlreadyExistsError,
    InvalidAttributeValueError,
    PermissionDeniedError,
)
from .faults import process_fault
from .groups import GroupService
from .models import WebexUser, WebexGroup, ListResponse, ErrorResponse
from .users import UserService

__all__ = [
    # Client
    "WebexClient",
    "WEBEX_BASE_URL",
    "REQUEST_TIMEOUT",
    "StaticTokenAuthenticator",
    "RefreshTokenAuthenticator",
    "build_authenticator",

    # Exceptions
    "ConnectorError",
    "AlreadyExistsError",
    "InvalidAttributeValueError",
    "PermissionDeniedError",
    "process_fault",

    # Models
    "WebexUser",
    "WebexGroup",
    "ListResponse",
    "ErrorResponse",

    # Services
    "UserService",
    "GroupService",
    "WebexDriver",
]
