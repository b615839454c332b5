"""Client for the SWORD v2 deposit API.

SWORD reads the API token from basic auth, so this client must be backed by
the SWORD family's transport.
"""

from typing import Any

from ..constants import SWORD_EDIT_MEDIA_FILE
from ..log_config import logger
from ..response import DataverseResponse
from .base_client import BaseResourceClient


class SwordClient(BaseResourceClient):
    async def delete_file(self, database_id: int) -> DataverseResponse[Any]:
        """Deletes a file from the draft of its dataset.

        SWORD answers with an empty body: only the status is meaningful.
        """
        logger.info(f"Deleting file {database_id} through SWORD")
        return await self._api_client.delete_path(
            f"{SWORD_EDIT_MEDIA_FILE}/{database_id}"
        )
