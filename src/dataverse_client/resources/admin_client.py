"""Client for the admin API (`api/admin/...`).

The admin API is unversioned and, unless called from localhost, requires the
unblock key, which the admin family's transport adds to every request.
"""

from typing import Any

from ..codec import decode_as
from ..constants import ADMIN_AUTHENTICATED_USERS, ADMIN_SETTINGS
from ..log_config import logger
from ..models import AuthenticatedUser, DataMessage, DatabaseSetting
from ..response import DataverseResponse
from .base_client import BaseResourceClient


class AdminClient(BaseResourceClient):
    """Client for user lookups and database settings."""

    async def get_single_user(
        self, identifier: str
    ) -> DataverseResponse[AuthenticatedUser]:
        """Looks up an authenticated user by identifier (without the leading "@")."""
        return await self._api_client.get(
            f"{ADMIN_AUTHENTICATED_USERS}/{identifier}",
            decoder=decode_as(AuthenticatedUser),
        )

    async def get_database_setting(self, name: str) -> DataverseResponse[str]:
        """Reads a database setting such as ":AllowSignUp".

        The value arrives in `data.message`; the decoded payload is the value itself.
        """
        return await self._api_client.get(
            f"{ADMIN_SETTINGS}/{name}",
            decoder=lambda raw: decode_as(DataMessage)(raw).message,
        )

    async def put_database_setting(
        self, name: str, value: str | bool
    ) -> DataverseResponse[DatabaseSetting]:
        if isinstance(value, bool):
            value = str(value).lower()
        logger.info(f"Setting database setting {name}")
        return await self._api_client.put(
            f"{ADMIN_SETTINGS}/{name}", value, decoder=decode_as(DatabaseSetting)
        )

    async def delete_database_setting(self, name: str) -> DataverseResponse[Any]:
        logger.info(f"Deleting database setting {name}")
        return await self._api_client.delete_path(f"{ADMIN_SETTINGS}/{name}")
