"""Client for creating builtin (username and password) user accounts."""

from typing import Any

from ..constants import BUILTIN_USERS, PARAM_BUILTIN_USER_KEY, PARAM_PASSWORD
from ..exceptions import ConfigurationError
from ..log_config import logger
from ..models import BuiltinUser
from ..response import DataverseResponse
from .base_client import BaseResourceClient


class BuiltinUsersClient(BaseResourceClient):
    """Client for `builtin-users`.

    Requires `builtin_user_key` in the settings: the value of the installation's
    `BuiltinUsers.KEY` setting.
    """

    async def create(self, user: BuiltinUser, password: str) -> DataverseResponse[Any]:
        """Creates the account. The payload holds the new user and its API token.

        Raises:
            ConfigurationError: If no builtin user key is configured.
        """
        key = self._api_client.settings.builtin_user_key
        if not key:
            raise ConfigurationError(
                "Creating builtin users requires 'builtin_user_key' in the settings."
            )
        logger.info(f"Creating builtin user '{user.userName}'")
        return await self._api_client.post_json(
            BUILTIN_USERS,
            user,
            params={PARAM_PASSWORD: password, PARAM_BUILTIN_USER_KEY: key},
        )
