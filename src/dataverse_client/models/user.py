"""Models for user accounts and installation settings."""

from .base import DataverseModel


class AuthenticatedUser(DataverseModel):
    id: int
    identifier: str
    displayName: str | None = None
    firstName: str | None = None
    lastName: str | None = None
    email: str | None = None
    superuser: bool | None = None
    affiliation: str | None = None
    position: str | None = None
    persistentUserId: str | None = None
    authenticationProviderId: str | None = None


class BuiltinUser(DataverseModel):
    userName: str
    firstName: str
    lastName: str
    email: str
    affiliation: str | None = None
    position: str | None = None


class DatabaseSetting(DataverseModel):
    name: str | None = None
    content: str | None = None
