"""Client for the native API endpoints below `datasets/{id}`.

A dataset is addressed either by database id or by persistent identifier; see
`TargetedResourceClient`. Metadata-changing calls on a dataset that is being
post-processed by the server fail with a lock error; the transport retries
those, and `await_unlock` waits for all locks to clear explicitly.
"""

import asyncio
from pathlib import Path
from typing import Any

from ..codec import decode_as
from ..constants import DATASETS, UpdateType, Version
from ..exceptions import DatasetLockedError
from ..log_config import logger
from ..models import (
    DataMessage,
    DatasetLatestVersion,
    DatasetPublicationResult,
    DatasetVersion,
    FieldList,
    FileInfo,
    FileList,
    Lock,
    MetadataBlocks,
    PrivateUrlData,
    RoleAssignment,
    RoleAssignmentReadOnly,
)
from ..response import DataverseResponse
from ..types import PersistentId
from .base_client import TargetedResourceClient


class DatasetsClient(TargetedResourceClient):
    """Client for one dataset."""

    _target_base: str = DATASETS

    async def view(
        self, version: Version | str = Version.LATEST
    ) -> DataverseResponse[DatasetVersion]:
        """Returns one version of the dataset, the latest by default."""
        return await self._get_versioned("", version, decoder=decode_as(DatasetVersion))

    async def view_latest_version(self) -> DataverseResponse[DatasetLatestVersion]:
        """Returns the dataset level view including its latest version."""
        return await self._get_unversioned(decoder=decode_as(DatasetLatestVersion))

    async def view_all_versions(self) -> DataverseResponse[list[DatasetVersion]]:
        return await self._get_unversioned(
            "versions", decoder=decode_as(list[DatasetVersion])
        )

    async def export_metadata(self, export_format: str) -> DataverseResponse[Any]:
        """Exports the metadata of the latest published version.

        The body is in the requested format, not in an envelope: read it with
        `string` (or `json` for the JSON based formats).

        Args:
            export_format: Exporter name, e.g. `EXPORT_FORMAT_DATACITE`.

        Raises:
            ValueError: If the dataset is not addressed by persistent identifier.
        """
        if not isinstance(self._resource_id, PersistentId):
            raise ValueError("export_metadata only works with persistent identifiers")
        return await self._api_client.get(
            f"{DATASETS}/export",
            params={"exporter": export_format, "persistentId": self._resource_id.value},
        )

    async def list_files(
        self, version: Version | str = Version.LATEST
    ) -> DataverseResponse[list[FileInfo]]:
        return await self._get_versioned(
            "files", version, decoder=decode_as(list[FileInfo])
        )

    async def list_metadata_blocks(
        self, version: Version | str = Version.LATEST
    ) -> DataverseResponse[MetadataBlocks]:
        return await self._get_versioned(
            "metadata", version, decoder=decode_as(MetadataBlocks)
        )

    async def get_metadata_block(
        self, name: str, version: Version | str = Version.LATEST
    ) -> DataverseResponse[dict[str, Any]]:
        return await self._get_versioned(
            f"metadata/{name}", version, decoder=decode_as(dict[str, Any])
        )

    async def update_metadata(
        self, metadata_blocks: MetadataBlocks
    ) -> DataverseResponse[DatasetVersion]:
        """Replaces all metadata of the draft version, creating the draft if needed."""
        return await self._put_to_target(
            f"versions/{Version.DRAFT}",
            {"metadataBlocks": metadata_blocks},
            decoder=decode_as(DatasetVersion),
        )

    async def edit_metadata(
        self, fields: FieldList, *, replace: bool = True
    ) -> DataverseResponse[DatasetVersion]:
        """Adds or replaces metadata fields of the draft version.

        Dataverse reads any value of the `replace` parameter as true, so the
        parameter is left out entirely when `replace` is False.
        """
        params = {"replace": "true"} if replace else {}
        return await self._put_to_target(
            "editMetadata", fields, params=params, decoder=decode_as(DatasetVersion)
        )

    async def delete_metadata(
        self, fields: FieldList
    ) -> DataverseResponse[DatasetVersion]:
        return await self._put_to_target(
            "deleteMetadata", fields, decoder=decode_as(DatasetVersion)
        )

    async def publish(
        self, update_type: UpdateType | str = UpdateType.MAJOR
    ) -> DataverseResponse[DatasetPublicationResult]:
        logger.info(f"Publishing dataset {self._resource_id.value} ({update_type})")
        return await self._post_json_to_target(
            "actions/:publish",
            params={"type": str(update_type)},
            decoder=decode_as(DatasetPublicationResult),
        )

    async def delete_draft(self) -> DataverseResponse[DataMessage]:
        logger.info(f"Deleting draft of dataset {self._resource_id.value}")
        return await self._delete_at_target(
            f"versions/{Version.DRAFT}", decoder=decode_as(DataMessage)
        )

    async def set_citation_date_field(self, field_name: str) -> DataverseResponse[Any]:
        """Uses the date field `field_name` as the citation date."""
        return await self._put_to_target("citationdate", field_name)

    async def revert_citation_date_field(self) -> DataverseResponse[Any]:
        return await self._delete_at_target("citationdate")

    async def list_role_assignments(
        self,
    ) -> DataverseResponse[list[RoleAssignmentReadOnly]]:
        return await self._get_unversioned(
            "assignments", decoder=decode_as(list[RoleAssignmentReadOnly])
        )

    async def assign_role(
        self, role_assignment: RoleAssignment
    ) -> DataverseResponse[RoleAssignmentReadOnly]:
        return await self._post_json_to_target(
            "assignments", role_assignment, decoder=decode_as(RoleAssignmentReadOnly)
        )

    async def delete_role_assignment(self, assignment_id: int) -> DataverseResponse[Any]:
        return await self._delete_at_target(f"assignments/{assignment_id}")

    async def create_private_url(self) -> DataverseResponse[PrivateUrlData]:
        return await self._post_json_to_target(
            "privateUrl", decoder=decode_as(PrivateUrlData)
        )

    async def get_private_url(self) -> DataverseResponse[PrivateUrlData]:
        return await self._get_unversioned(
            "privateUrl", decoder=decode_as(PrivateUrlData)
        )

    async def delete_private_url(self) -> DataverseResponse[Any]:
        return await self._delete_at_target("privateUrl")

    async def add_file(
        self, data_file: Path | str | None, file_metadata: FileInfo | None = None
    ) -> DataverseResponse[FileList]:
        """Uploads a file to the draft version.

        Args:
            data_file: Path of the file. May be None to send metadata only.
            file_metadata: Label, directory, description etc. of the file.
        """
        logger.info(f"Adding file {data_file} to dataset {self._resource_id.value}")
        return await self._post_file_to_target(
            "add", data_file, file_metadata, decoder=decode_as(FileList)
        )

    async def get_locks(self) -> DataverseResponse[list[Lock]]:
        return await self._get_unversioned("locks", decoder=decode_as(list[Lock]))

    async def await_unlock(self, max_tries: int = 30, wait_ms: int = 500) -> None:
        """Polls the locks until there are none.

        Args:
            max_tries: How many times to check the locks.
            wait_ms: Pause between two checks in milliseconds.

        Raises:
            DatasetLockedError: If the dataset is still locked after the last check.
        """
        locks: list[Lock] = []
        for attempt in range(1, max_tries + 1):
            response = await self.get_locks()
            locks = response.data
            if not locks:
                logger.debug(
                    f"Dataset {self._resource_id.value} unlocked after {attempt} check(s)"
                )
                return
            logger.debug(
                f"Dataset {self._resource_id.value} locked "
                f"({', '.join(str(lock) for lock in locks)}), check {attempt}/{max_tries}"
            )
            if attempt < max_tries:
                await asyncio.sleep(wait_ms / 1000)
        raise DatasetLockedError(max_tries, wait_ms, locks)
