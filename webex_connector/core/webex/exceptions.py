"""Connector exceptions surfaced to the provisioning host."""
from __future__ import annotations
from typing import Optional


class ConnectorError(Exception):
    """Generic connector failure.

    Attributes:
        message: Error message (Webex message + trackingId, or the raw body)
        status_code: HTTP status code when the failure came from a response
        tracking_id: Webex trackingId when the error envelope carried one
    """

    def __init__(self, message: str, status_code: Optional[int] = None, tracking_id: Optional[str] = None):
        self.message = message
        self.status_code = status_code
        self.tracking_id = tracking_id
        super().__init__(message)


class AlreadyExistsError(ConnectorError):
    """Target entity collides with an existing one (Webex 409)."""
    pass


class InvalidAttributeValueError(ConnectorError):
    """Payload rejected as malformed or semantically invalid (Webex 400)."""
    pass


class PermissionDeniedError(ConnectorError):
    """Operation is categorically unsupported by this connector."""
    pass
