"""Models for datasets, their versions, locks and publication results.

Metadata blocks are kept as plain JSON: their field structure is driven by the
block definitions installed on the server.
"""

from typing import Any

from pydantic import Field

from .base import DataverseModel
from .file import FileInfo

MetadataBlocks = dict[str, Any]


class DatasetVersion(DataverseModel):
    id: int | None = None
    datasetId: int | None = None
    datasetPersistentId: str | None = None
    storageIdentifier: str | None = None
    versionNumber: int | None = None
    versionMinorNumber: int | None = None
    versionState: str | None = None
    lastUpdateTime: str | None = None
    createTime: str | None = None
    releaseTime: str | None = None
    fileAccessRequest: bool | None = None
    termsOfUse: str | None = None
    license: Any | None = None
    protocol: str | None = None
    authority: str | None = None
    identifier: str | None = None
    metadataBlocks: MetadataBlocks = Field(default_factory=dict)
    files: list[FileInfo] = Field(default_factory=list)


class Dataset(DataverseModel):
    """The body for creating or importing a dataset."""

    datasetVersion: DatasetVersion

    @property
    def pid(self) -> str | None:
        """The PID composed as "{protocol}:{authority}/{identifier}", if all are set."""
        version = self.datasetVersion
        if not (version.protocol and version.authority and version.identifier):
            return None
        return f"{version.protocol}:{version.authority}/{version.identifier}"


class DatasetLatestVersion(DataverseModel):
    """The dataset level view returned by `datasets/{id}` without a version."""

    id: int
    identifier: str | None = None
    persistentUrl: str | None = None
    protocol: str | None = None
    authority: str | None = None
    publisher: str | None = None
    publicationDate: str | None = None
    storageIdentifier: str | None = None
    latestVersion: DatasetVersion | None = None


class DatasetCreationResult(DataverseModel):
    id: int
    persistentId: str


class DatasetPublicationResult(DataverseModel):
    id: int | None = None
    identifier: str | None = None
    persistentUrl: str | None = None
    protocol: str | None = None
    authority: str | None = None
    publisher: str | None = None
    publicationDate: str | None = None
    storageIdentifier: str | None = None


class Lock(DataverseModel):
    lockType: str
    date: str | None = None
    user: str | None = None
    message: str | None = None

    def __str__(self) -> str:
        return f"{self.lockType} (user: {self.user}, since: {self.date})"


class FieldList(DataverseModel):
    """Body for editMetadata / deleteMetadata: a flat list of metadata fields."""

    fields: list[dict[str, Any]]


class PrivateUrlData(DataverseModel):
    token: str
    link: str
    roleAssignment: dict[str, Any] | None = None
