# tests/resources/test_sword_client.py
from unittest.mock import AsyncMock

import pytest

from dataverse_client.client import DataverseHttpClient
from dataverse_client.resources import SwordClient


@pytest.mark.asyncio
async def test_delete_file():
    api_client = AsyncMock(spec=DataverseHttpClient)

    await SwordClient(api_client).delete_file(42)

    api_client.delete_path.assert_awaited_once_with("swordv2/edit-media/file/42")
