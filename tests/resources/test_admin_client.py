# tests/resources/test_admin_client.py
from unittest.mock import AsyncMock

import pytest

from dataverse_client.client import DataverseHttpClient
from dataverse_client.models import AuthenticatedUser, DatabaseSetting
from dataverse_client.resources import AdminClient


@pytest.fixture
def api_client():
    return AsyncMock(spec=DataverseHttpClient)


@pytest.fixture
def admin_client(api_client) -> AdminClient:
    return AdminClient(api_client)


@pytest.mark.asyncio
async def test_get_single_user(admin_client, api_client):
    await admin_client.get_single_user("dataverseAdmin")
    args, kwargs = api_client.get.call_args
    assert args == ("api/admin/authenticatedUsers/dataverseAdmin",)
    user = kwargs["decoder"]({"id": 1, "identifier": "@dataverseAdmin"})
    assert isinstance(user, AuthenticatedUser)


@pytest.mark.asyncio
async def test_get_database_setting(admin_client, api_client):
    await admin_client.get_database_setting(":AllowSignUp")
    args, kwargs = api_client.get.call_args
    assert args == ("api/admin/settings/:AllowSignUp",)
    assert kwargs["decoder"]({"message": "true"}) == "true"


@pytest.mark.asyncio
@pytest.mark.parametrize(("value", "body"), [("yes", "yes"), (False, "false")])
async def test_put_database_setting(admin_client, api_client, value, body):
    await admin_client.put_database_setting(":SystemEmail", value)
    args, kwargs = api_client.put.call_args
    assert args == ("api/admin/settings/:SystemEmail", body)
    setting = kwargs["decoder"]({"name": ":SystemEmail", "content": body})
    assert setting == DatabaseSetting(name=":SystemEmail", content=body)


@pytest.mark.asyncio
async def test_delete_database_setting(admin_client, api_client):
    await admin_client.delete_database_setting(":SystemEmail")
    assert api_client.delete_path.call_args.args == ("api/admin/settings/:SystemEmail",)
