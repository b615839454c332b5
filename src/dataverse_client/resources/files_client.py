"""Client for the native API endpoints below `files/{id}`."""

from pathlib import Path
from typing import Any

from ..codec import decode_as
from ..constants import FILES
from ..log_config import logger
from ..models import DataMessage, DetectionResult, FileList, FileMeta
from ..response import DataverseResponse
from .base_client import TargetedResourceClient


class FilesClient(TargetedResourceClient):
    """Client for one data file, addressed by database id or persistent identifier."""

    _target_base: str = FILES

    async def restrict(self, restrict: bool = True) -> DataverseResponse[DataMessage]:
        """Restricts (or with False, unrestricts) access to the file."""
        return await self._put_to_target(
            "restrict", str(restrict).lower(), decoder=decode_as(DataMessage)
        )

    async def uningest(self) -> DataverseResponse[DataMessage]:
        """Reverts a tabular file to its original upload."""
        return await self._post_json_to_target(
            "uningest", decoder=decode_as(DataMessage)
        )

    async def reingest(self) -> DataverseResponse[DataMessage]:
        return await self._post_json_to_target(
            "reingest", decoder=decode_as(DataMessage)
        )

    async def redetect(self, dry_run: bool = False) -> DataverseResponse[DetectionResult]:
        """Re-runs file type detection; with `dry_run` nothing is changed."""
        return await self._post_json_to_target(
            "redetect",
            params={"dryRun": str(dry_run).lower()},
            decoder=decode_as(DetectionResult),
        )

    async def replace(
        self, data_file: Path | str, file_metadata: FileMeta | None = None
    ) -> DataverseResponse[FileList]:
        """Replaces the file with a new upload, keeping its place in the dataset."""
        logger.info(f"Replacing file {self._resource_id.value} with {data_file}")
        return await self._post_file_to_target(
            "replace", data_file, file_metadata, decoder=decode_as(FileList)
        )

    async def update_metadata(self, file_metadata: FileMeta) -> DataverseResponse[Any]:
        """Updates label, description etc. of the file; sent as metadata-only upload."""
        return await self._post_file_to_target("metadata", None, file_metadata)
