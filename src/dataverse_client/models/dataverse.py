"""Models for dataverse collections, their contents and roles."""

from pydantic import Field

from .base import DataverseModel


class DataverseContact(DataverseModel):
    contactEmail: str
    displayOrder: int | None = None


class Dataverse(DataverseModel):
    """A dataverse collection as created or returned by `dataverses/{alias}`."""

    name: str
    alias: str
    dataverseContacts: list[DataverseContact] = Field(default_factory=list)
    id: int | None = None
    affiliation: str | None = None
    description: str | None = None
    dataverseType: str | None = None
    permissionRoot: bool | None = None
    ownerId: int | None = None
    creationDate: str | None = None


class DataverseItem(DataverseModel):
    """One entry of `dataverses/{alias}/contents`: either a dataverse or a dataset."""

    type: str
    id: int
    # dataverses only
    title: str | None = None
    # datasets only
    identifier: str | None = None
    persistentUrl: str | None = None
    protocol: str | None = None
    authority: str | None = None
    publisher: str | None = None
    publicationDate: str | None = None
    storageIdentifier: str | None = None


class Role(DataverseModel):
    alias: str
    name: str
    description: str | None = None
    permissions: list[str] = Field(default_factory=list)
    id: int | None = None
    ownerId: int | None = None


class RoleAssignment(DataverseModel):
    """A role assignment to create: who gets which role."""

    assignee: str
    role: str


class RoleAssignmentReadOnly(DataverseModel):
    """A role assignment as listed by the server."""

    id: int
    assignee: str
    roleId: int | None = None
    roleName: str | None = None
    definitionPointId: int | None = None


class MetadataBlockSummary(DataverseModel):
    id: int
    name: str
    displayName: str | None = None
