"""Webex people (user) operations."""
from __future__ import annotations
import logging
from typing import List

from .client import WebexClient
from .exceptions import ConnectorError
from .models import ListResponse, WebexUser

logger = logging.getLogger(__name__)


class UserService:
    """Service for managing Webex people under ``/people``."""

    def __init__(self, client: WebexClient):
        """Initialize user service.

        Args:
            client: Authenticated Webex client
        """
        self.client = client

    def create_user(self, user: WebexUser) -> str:
        """Create a person and return the id Webex assigned.

        Raises:
            ConnectorError: If the response carries no id
        """
        data = self.client.post("/people", json=user.to_dict())
        new_user = WebexUser.from_dict(data) if isinstance(data, dict) else None
        if new_user is None or new_user.id is None:
            logger.warning("User creation response without id: %s", data)
            raise ConnectorError("Response from user creation was invalid")
        return new_user.id

    def update_user(self, user_id: str, modified_user: WebexUser) -> None:
        """Apply modifications to a person.

        Webex requires all fields be present in update, whether they were
        altered or not, so the current person is read first and the
        modifications are overlaid on it.
        """
        user_to_update = self.get_user(user_id)
        user_to_update.prepare_for_update(modified_user)
        self.client.put(f"/people/{user_id}", json=user_to_update.to_dict())

    def delete_user(self, user_id: str) -> None:
        self.client.delete(f"/people/{user_id}")

    def get_user(self, user_id: str) -> WebexUser:
        return WebexUser.from_dict(self.client.get_object(f"/people/{user_id}"))

    def get_users(self) -> List[WebexUser]:
        """Return the first page of people visible to the token."""
        return ListResponse.from_dict(self.client.get("/people"), WebexUser).items

    def get_me(self) -> WebexUser:
        """Return the person the bearer token belongs to."""
        return WebexUser.from_dict(self.client.get_object("/people/me"))
