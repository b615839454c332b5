# tests/resources/test_builtin_users_client.py
from unittest.mock import AsyncMock

import pytest

from dataverse_client.client import DataverseHttpClient
from dataverse_client.exceptions import ConfigurationError
from dataverse_client.models import BuiltinUser
from dataverse_client.resources import BuiltinUsersClient

USER = BuiltinUser(
    userName="jdoe", firstName="John", lastName="Doe", email="jdoe@example.org"
)


@pytest.fixture
def api_client(settings):
    client = AsyncMock(spec=DataverseHttpClient)
    client.settings = settings.model_copy(update={"builtin_user_key": "burrito"})
    return client


@pytest.mark.asyncio
async def test_create(api_client):
    await BuiltinUsersClient(api_client).create(USER, "s3cret")

    args, kwargs = api_client.post_json.call_args
    assert args == ("builtin-users", USER)
    assert kwargs["params"] == {"password": "s3cret", "key": "burrito"}


@pytest.mark.asyncio
async def test_create_without_key(api_client, settings):
    api_client.settings = settings

    with pytest.raises(ConfigurationError, match="builtin_user_key"):
        await BuiltinUsersClient(api_client).create(USER, "s3cret")
    api_client.post_json.assert_not_awaited()
