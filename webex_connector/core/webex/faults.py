"""Translation of Webex error responses into connector exceptions.

``process_fault()`` is invoked by :class:`WebexClient` for every response
outside the 2xx range. It never returns.

Mapping (JSON body with a non-empty ``message``):
    409 -> AlreadyExistsError
    400 -> InvalidAttributeValueError
    any other status -> ConnectorError

Bodies that are not JSON, cannot be decoded, or lack a message surface as a
ConnectorError carrying the raw body.
"""
from __future__ import annotations
import logging
from typing import NoReturn

import requests

from .exceptions import AlreadyExistsError, ConnectorError, InvalidAttributeValueError
from .models import ErrorResponse

logger = logging.getLogger(__name__)

JSON_MIME_TYPE = "application/json"
NOT_JSON_PREFIX = "Unable to parse Webex response, not valid JSON: "
UNKNOWN_FAULT_PREFIX = "Unknown fault received from Webex. Raw response JSON: "


def process_fault(response: requests.Response) -> NoReturn:
    """Raise the connector exception matching a failed Webex response.

    Args:
        response: Non-2xx response returned by Webex

    Raises:
        AlreadyExistsError: 409 with a decodable error envelope
        InvalidAttributeValueError: 400 with a decodable error envelope
        ConnectorError: Every other case
    """
    status = response.status_code
    try:
        raw_response = response.content.decode("utf-8", errors="replace")
    except (requests.RequestException, OSError) as exc:
        raise ConnectorError(
            "Unable to read fault response from Webex response. "
            f"Status: {status}, {response.reason}",
            status_code=status,
        ) from exc

    logger.info("Raw Fault response %s", raw_response)

    content_type = response.headers.get("Content-Type") or ""
    if JSON_MIME_TYPE not in content_type:
        # Webex answers infrastructure faults with HTML or plain text pages
        logger.info("%s %s", NOT_JSON_PREFIX, raw_response)
        raise ConnectorError(NOT_JSON_PREFIX + raw_response, status_code=status)

    _handle_fault_response(status, raw_response)


def _handle_fault_response(status: int, raw_response: str) -> NoReturn:
    """Decode the error envelope and dispatch on HTTP status."""
    try:
        fault = ErrorResponse.from_json(raw_response)
    except ValueError:
        fault = None

    if fault is None or not fault.message:
        raise ConnectorError(UNKNOWN_FAULT_PREFIX + raw_response, status_code=status)

    tracking_id = fault.tracking_id if fault.tracking_id is not None else "null"
    fault_message = f"Fault received from Webex.  Message: {fault.message}; TrackingId: {tracking_id}"

    if status == 409:
        raise AlreadyExistsError(fault_message, status_code=status, tracking_id=fault.tracking_id)
    if status == 400:
        raise InvalidAttributeValueError(fault_message, status_code=status, tracking_id=fault.tracking_id)
    raise ConnectorError(fault_message, status_code=status, tracking_id=fault.tracking_id)
