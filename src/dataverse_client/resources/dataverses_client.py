"""Client for the native API endpoints below `dataverses/{alias}`.

A dataverse is a collection that holds datasets and other dataverses. It is
addressed by its alias (or database id as string), the root collection by
"root".
"""

from typing import TYPE_CHECKING, Any

from ..codec import decode_as
from ..constants import DATAVERSES, DefaultRole
from ..log_config import logger
from ..models import (
    DataMessage,
    Dataset,
    DatasetCreationResult,
    Dataverse,
    DataverseItem,
    MetadataBlockSummary,
    Role,
    RoleAssignment,
    RoleAssignmentReadOnly,
)
from ..response import DataverseResponse
from .base_client import BaseResourceClient

if TYPE_CHECKING:
    from ..client import DataverseHttpClient


class DataversesClient(BaseResourceClient):
    """Client for one dataverse collection.

    Attributes:
        alias: Alias or id of the dataverse, e.g. "root".
    """

    def __init__(self, api_client: "DataverseHttpClient", alias: str):
        super().__init__(api_client)
        self.alias = alias
        self._path = f"{DATAVERSES}/{alias}"

    async def view(self) -> DataverseResponse[Dataverse]:
        return await self._api_client.get(self._path, decoder=decode_as(Dataverse))

    async def create(self, dataverse: Dataverse) -> DataverseResponse[Dataverse]:
        """Creates `dataverse` as a child of this dataverse."""
        logger.info(f"Creating dataverse '{dataverse.alias}' in '{self.alias}'")
        return await self._api_client.post_json(
            self._path, dataverse, decoder=decode_as(Dataverse)
        )

    async def delete(self) -> DataverseResponse[DataMessage]:
        logger.info(f"Deleting dataverse '{self.alias}'")
        return await self._api_client.delete_path(
            self._path, decoder=decode_as(DataMessage)
        )

    async def contents(self) -> DataverseResponse[list[DataverseItem]]:
        """Lists the datasets and dataverses directly in this dataverse."""
        return await self._api_client.get(
            f"{self._path}/contents", decoder=decode_as(list[DataverseItem])
        )

    async def list_roles(self) -> DataverseResponse[list[Role]]:
        return await self._api_client.get(
            f"{self._path}/roles", decoder=decode_as(list[Role])
        )

    async def create_role(self, role: Role) -> DataverseResponse[Role]:
        return await self._api_client.post_json(
            f"{self._path}/roles", role, decoder=decode_as(Role)
        )

    async def storage_size(self) -> DataverseResponse[DataMessage]:
        """The total size of the stored files, reported in `data.message`."""
        return await self._api_client.get(
            f"{self._path}/storagesize", decoder=decode_as(DataMessage)
        )

    async def list_facets(self) -> DataverseResponse[list[str]]:
        return await self._api_client.get(
            f"{self._path}/facets", decoder=decode_as(list[str])
        )

    async def set_facets(self, facets: list[str]) -> DataverseResponse[Any]:
        return await self._api_client.post_json(f"{self._path}/facets", facets)

    async def list_role_assignments(
        self,
    ) -> DataverseResponse[list[RoleAssignmentReadOnly]]:
        return await self._api_client.get(
            f"{self._path}/assignments",
            decoder=decode_as(list[RoleAssignmentReadOnly]),
        )

    async def set_default_role(self, role: DefaultRole | str) -> DataverseResponse[Any]:
        """Sets the role granted to users who create a dataset in this dataverse."""
        return await self._api_client.put(
            f"{self._path}/defaultContributorRole/{role}"
        )

    async def assign_role(
        self, role_assignment: RoleAssignment
    ) -> DataverseResponse[RoleAssignmentReadOnly]:
        return await self._api_client.post_json(
            f"{self._path}/assignments",
            role_assignment,
            decoder=decode_as(RoleAssignmentReadOnly),
        )

    async def delete_role_assignment(self, assignment_id: int) -> DataverseResponse[Any]:
        return await self._api_client.delete_path(
            f"{self._path}/assignments/{assignment_id}"
        )

    async def list_metadata_blocks(
        self,
    ) -> DataverseResponse[list[MetadataBlockSummary]]:
        return await self._api_client.get(
            f"{self._path}/metadatablocks",
            decoder=decode_as(list[MetadataBlockSummary]),
        )

    async def set_metadata_blocks(self, block_ids: list[str]) -> DataverseResponse[Any]:
        """Sets the metadata blocks enabled on this dataverse, by name or id."""
        return await self._api_client.post_json(
            f"{self._path}/metadatablocks", block_ids
        )

    async def is_metadata_blocks_root(self) -> DataverseResponse[bool]:
        return await self._api_client.get(
            f"{self._path}/metadatablocks/isRoot", decoder=decode_as(bool)
        )

    async def set_metadata_blocks_root(self, is_root: bool) -> DataverseResponse[Any]:
        return await self._api_client.put(
            f"{self._path}/metadatablocks/isRoot", is_root
        )

    async def create_dataset(
        self, dataset: Dataset
    ) -> DataverseResponse[DatasetCreationResult]:
        """Creates a draft dataset in this dataverse.

        The server mints the persistent identifier; it is returned in
        `data.persistentId`.
        """
        logger.info(f"Creating dataset in dataverse '{self.alias}'")
        return await self._api_client.post_json(
            f"{self._path}/datasets",
            dataset,
            decoder=decode_as(DatasetCreationResult),
        )

    async def import_dataset(
        self,
        dataset: Dataset,
        pid: str | None = None,
        *,
        auto_publish: bool = False,
    ) -> DataverseResponse[DatasetCreationResult]:
        """Imports a dataset that already has a persistent identifier.

        Args:
            dataset: The dataset to import.
            pid: The PID; if None it is composed from the protocol, authority
                and identifier of the dataset version.
            auto_publish: Publish the dataset right after import.

        Raises:
            ValueError: If no PID is given and the dataset does not hold one.
        """
        pid = pid or dataset.pid
        if not pid:
            raise ValueError(
                "PID must be provided either as parameter or in the (protocol, "
                "authority, identifier) fields of the dataset version"
            )
        logger.debug(f"Importing dataset {pid} into dataverse '{self.alias}'")
        return await self._api_client.post_json(
            f"{self._path}/datasets/:import",
            dataset,
            params={"pid": pid, "release": str(auto_publish).lower()},
            decoder=decode_as(DatasetCreationResult),
        )

    async def publish(self) -> DataverseResponse[Dataverse]:
        logger.info(f"Publishing dataverse '{self.alias}'")
        return await self._api_client.post_json(
            f"{self._path}/actions/:publish", decoder=decode_as(Dataverse)
        )
