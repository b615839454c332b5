# dataverse_client/resources/__init__.py
"""Exposes the resource client classes."""

from .admin_client import AdminClient
from .base_client import BaseResourceClient, TargetedResourceClient
from .builtin_users_client import BuiltinUsersClient
from .datasets_client import DatasetsClient
from .dataverses_client import DataversesClient
from .files_client import FilesClient
from .sword_client import SwordClient

__all__ = [
    "AdminClient",
    "BaseResourceClient",
    "BuiltinUsersClient",
    "DatasetsClient",
    "DataversesClient",
    "FilesClient",
    "SwordClient",
    "TargetedResourceClient",
]
