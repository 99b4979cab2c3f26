"""Webex entity representations and their JSON wire mapping.

Webex uses camelCase on the wire; the dataclasses below use snake_case and
translate in ``from_dict()`` / ``to_dict()``.

Usage:
    user = WebexUser.from_dict(resp.json())
    user.prepare_for_update(WebexUser(display_name="Bob"))
    payload = user.to_dict()
"""
from __future__ import annotations
import json
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from .exceptions import ConnectorError


def _require_object(data: Any, kind: str) -> None:
    if not isinstance(data, dict):
        raise ConnectorError(f"Expected a Webex {kind} object, got {type(data).__name__}: {data!r}")


# attribute name -> Webex JSON key
USER_FIELD_MAP: Dict[str, str] = {
    "id": "id",
    "emails": "emails",
    "phone_numbers": "phoneNumbers",
    "display_name": "displayName",
    "nick_name": "nickName",
    "first_name": "firstName",
    "last_name": "lastName",
    "avatar": "avatar",
    "org_id": "orgId",
    "roles": "roles",
    "licenses": "licenses",
    "department": "department",
    "title": "title",
    "manager": "manager",
    "manager_id": "managerId",
    "timezone": "timezone",
    "login_enabled": "loginEnabled",
    "location_id": "locationId",
    "extension": "extension",
    "created": "created",
    "last_modified": "lastModified",
    "status": "status",
    "type": "type",
    "invite_pending": "invitePending",
}


@dataclass
class WebexUser:
    """A Webex person.

    ``id`` is assigned by Webex on create and never changes. Wire keys this
    class does not model are kept in ``extra`` and written back by
    ``to_dict()``, so a GET-then-PUT does not clear them.
    """
    id: Optional[str] = None
    emails: Optional[List[str]] = None
    phone_numbers: Optional[List[Dict[str, Any]]] = None
    display_name: Optional[str] = None
    nick_name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    avatar: Optional[str] = None
    org_id: Optional[str] = None
    roles: Optional[List[str]] = None
    licenses: Optional[List[str]] = None
    department: Optional[str] = None
    title: Optional[str] = None
    manager: Optional[str] = None
    manager_id: Optional[str] = None
    timezone: Optional[str] = None
    login_enabled: Optional[bool] = None
    location_id: Optional[str] = None
    extension: Optional[str] = None
    created: Optional[str] = None
    last_modified: Optional[str] = None
    status: Optional[str] = None
    type: Optional[str] = None
    invite_pending: Optional[bool] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WebexUser":
        """Build a user from a Webex JSON object.

        Raises:
            ConnectorError: If ``data`` is not a JSON object
        """
        _require_object(data, "person")
        wire_to_attr = {wire: attr for attr, wire in USER_FIELD_MAP.items()}
        kwargs: Dict[str, Any] = {}
        extra: Dict[str, Any] = {}
        for key, value in data.items():
            if key in wire_to_attr:
                kwargs[wire_to_attr[key]] = value
            else:
                extra[key] = value
        return cls(extra=extra, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a Webex JSON object, omitting absent fields."""
        payload = {key: value for key, value in self.extra.items() if value is not None}
        for attr, wire in USER_FIELD_MAP.items():
            value = getattr(self, attr)
            if value is not None:
                payload[wire] = value
        return payload

    def prepare_for_update(self, other: "WebexUser") -> "WebexUser":
        """Overlay ``other`` onto this user in place and return self.

        Webex PUT replaces the whole person, so an absent field means "clear
        it". Fields of ``other`` that are not None win; None fields keep the
        current value. ``id`` is never taken from ``other``.
        """
        for f in fields(self):
            if f.name in ("id", "extra"):
                continue
            value = getattr(other, f.name)
            if value is not None:
                setattr(self, f.name, value)
        for key, value in other.extra.items():
            if value is not None:
                self.extra[key] = value
        return self


@dataclass
class WebexGroup:
    """A Webex role, exposed to the host as a read-only group."""
    id: Optional[str] = None
    name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WebexGroup":
        _require_object(data, "role")
        return cls(id=data.get("id"), name=data.get("name"))

    def to_dict(self) -> Dict[str, Any]:
        return {key: value for key, value in (("id", self.id), ("name", self.name)) if value is not None}


T = TypeVar("T", WebexUser, WebexGroup)


@dataclass
class ListResponse(Generic[T]):
    """Single page of a Webex list endpoint. Pagination links are ignored."""
    items: List[T] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]], item_type: Type[T]) -> "ListResponse[T]":
        if data is None:
            return cls()
        _require_object(data, "list page")
        raw_items = data.get("items") or []
        if not isinstance(raw_items, list):
            raise ConnectorError(f"Expected a list of Webex items, got {type(raw_items).__name__}: {raw_items!r}")
        return cls(items=[item_type.from_dict(item) for item in raw_items])


@dataclass
class ErrorResponse:
    """Webex error envelope: ``{"message": ..., "trackingId": ...}``."""
    message: Optional[str] = None
    tracking_id: Optional[str] = None

    @classmethod
    def from_json(cls, raw: str) -> Optional["ErrorResponse"]:
        """Decode an error body.

        Returns None when the body is empty or decodes to something other
        than a JSON object.

        Raises:
            ValueError: If the body is not valid JSON
        """
        if not raw or not raw.strip():
            return None
        data = json.loads(raw)
        if not isinstance(data, dict):
            return None
        message = data.get("message")
        tracking_id = data.get("trackingId")
        return cls(
            message=None if message is None else str(message),
            tracking_id=None if tracking_id is None else str(tracking_id),
        )
