"""Models for data files and their metadata."""

from pydantic import Field

from .base import DataverseModel


class DataFile(DataverseModel):
    id: int | None = None
    persistentId: str | None = None
    filename: str | None = None
    contentType: str | None = None
    filesize: int | None = None
    storageIdentifier: str | None = None
    description: str | None = None
    md5: str | None = None
    checksum: dict[str, str] | None = None


class FileMeta(DataverseModel):
    """Editable file metadata, sent as the `jsonData` part of uploads."""

    label: str | None = None
    directoryLabel: str | None = None
    description: str | None = None
    categories: list[str] | None = None
    restrict: bool | None = None
    forceReplace: bool | None = None


class FileInfo(FileMeta):
    """A file entry of a dataset version."""

    version: int | None = None
    datasetVersionId: int | None = None
    dataFile: DataFile | None = None


class FileList(DataverseModel):
    files: list[FileInfo] = Field(default_factory=list)


class DetectionResult(DataverseModel):
    dryRun: bool
    oldContentType: str
    newContentType: str
    message: str | None = None
