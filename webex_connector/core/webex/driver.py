"""Webex driver: the CRUD contract offered to the provisioning host.

Users map to Webex people, groups map to Webex roles. Each operation is a
single HTTP call, except ``update_user`` which reads the current person
first (GET strictly before PUT).
"""
from __future__ import annotations
import logging
from typing import List, Optional, Tuple

from webex_connector.config.settings import REQUIRED_PROPERTY_NAMES, WebexConfig

from .auth import Authenticator, build_authenticator
from .client import WebexClient
from .exceptions import ConnectorError
from .groups import GroupService
from .models import WebexGroup, WebexUser
from .users import UserService

logger = logging.getLogger(__name__)


class WebexDriver:
    """Host-facing adapter over the Webex people and roles endpoints.

    Usage:
        driver = WebexDriver(load_settings())
        user_id = driver.create_user(WebexUser(emails=["a@b"], display_name="A"))
        driver.close()
    """

    def __init__(
        self,
        configuration: WebexConfig,
        authenticator: Optional[Authenticator] = None,
        client: Optional[WebexClient] = None,
    ):
        self.configuration: Optional[WebexConfig] = configuration
        self.authenticator: Optional[Authenticator] = authenticator or build_authenticator(configuration)
        self.client: Optional[WebexClient] = client or WebexClient(
            configuration.base_url,
            self.authenticator,
            timeout=configuration.request_timeout,
        )
        self._users = UserService(self.client)
        self._groups = GroupService(self.client)

    @staticmethod
    def required_property_names() -> Tuple[str, ...]:
        return REQUIRED_PROPERTY_NAMES

    def test(self) -> None:
        """Health probe: resolve the person behind the bearer token.

        Raises:
            ConnectorError: If Webex rejects the token or is unreachable
        """
        me = self._users_service().get_me()
        logger.info("Webex connection test succeeded (person id=%s)", me.id)

    def close(self) -> None:
        """Release configuration, authenticator and HTTP session."""
        if self.client is not None:
            self.client.close()
        self.configuration = None
        self.authenticator = None
        self.client = None

    # ── Users ────────────────────────────────────────────────────────────────

    def create_user(self, user: WebexUser) -> str:
        return self._users_service().create_user(user)

    def update_user(self, user_id: str, modified_user: WebexUser) -> None:
        self._users_service().update_user(user_id, modified_user)

    def delete_user(self, user_id: str) -> None:
        self._users_service().delete_user(user_id)

    def get_user(self, user_id: str) -> WebexUser:
        return self._users_service().get_user(user_id)

    def get_users(self) -> List[WebexUser]:
        return self._users_service().get_users()

    # ── Groups (Webex roles) ─────────────────────────────────────────────────

    def create_group(self, group: WebexGroup) -> str:
        return self._groups.create_group(group)

    def update_group(self, group_id: str, group: WebexGroup) -> None:
        self._groups.update_group(group_id, group)

    def delete_group(self, group_id: str) -> None:
        self._groups.delete_group(group_id)

    def get_group(self, group_id: str) -> WebexGroup:
        return self._groups_service().get_group(group_id)

    def get_groups(self) -> List[WebexGroup]:
        return self._groups_service().get_groups()

    def add_group_to_user(self, group_id: str, user_id: str) -> None:
        self._groups.add_group_to_user(group_id, user_id)

    def remove_group_from_user(self, group_id: str, user_id: str) -> None:
        self._groups.remove_group_from_user(group_id, user_id)

    def _users_service(self) -> UserService:
        self._ensure_open()
        return self._users

    def _groups_service(self) -> GroupService:
        self._ensure_open()
        return self._groups

    def _ensure_open(self) -> None:
        if self.client is None:
            raise ConnectorError("Webex driver is closed")
