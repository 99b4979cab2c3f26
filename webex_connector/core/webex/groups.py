"""Webex role (group) operations.

Roles are read-only through this API surface: creation, modification,
deletion and membership edits are not available.
"""
from __future__ import annotations
from typing import List

from .client import WebexClient
from .exceptions import PermissionDeniedError
from .models import ListResponse, WebexGroup


class GroupService:
    """Service for reading Webex roles under ``/roles``."""

    def __init__(self, client: WebexClient):
        self.client = client

    def get_group(self, group_id: str) -> WebexGroup:
        return WebexGroup.from_dict(self.client.get_object(f"/roles/{group_id}"))

    def get_groups(self) -> List[WebexGroup]:
        return ListResponse.from_dict(self.client.get("/roles"), WebexGroup).items

    def create_group(self, group: WebexGroup) -> str:
        raise PermissionDeniedError("Webex does not allow creation of roles.")

    def update_group(self, group_id: str, group: WebexGroup) -> None:
        raise PermissionDeniedError("Webex does not allow modification of roles.")

    def delete_group(self, group_id: str) -> None:
        raise PermissionDeniedError("Webex does not allow deletion of roles.")

    def add_group_to_user(self, group_id: str, user_id: str) -> None:
        # Role membership is not exposed by the Webex API
        return None

    def remove_group_from_user(self, group_id: str, user_id: str) -> None:
        return None
