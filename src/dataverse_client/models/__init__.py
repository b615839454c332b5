"""Pydantic models for Dataverse payloads and the response envelope."""

from .base import DataMessage, DataverseEnvelope, DataverseModel
from .dataset import (
    Dataset,
    DatasetCreationResult,
    DatasetLatestVersion,
    DatasetPublicationResult,
    DatasetVersion,
    FieldList,
    Lock,
    MetadataBlocks,
    PrivateUrlData,
)
from .dataverse import (
    Dataverse,
    DataverseContact,
    DataverseItem,
    MetadataBlockSummary,
    Role,
    RoleAssignment,
    RoleAssignmentReadOnly,
)
from .file import DataFile, DetectionResult, FileInfo, FileList, FileMeta
from .user import AuthenticatedUser, BuiltinUser, DatabaseSetting

__all__ = [
    # Envelope
    "DataMessage",
    "DataverseEnvelope",
    "DataverseModel",
    # Dataverses
    "Dataverse",
    "DataverseContact",
    "DataverseItem",
    "MetadataBlockSummary",
    "Role",
    "RoleAssignment",
    "RoleAssignmentReadOnly",
    # Datasets
    "Dataset",
    "DatasetCreationResult",
    "DatasetLatestVersion",
    "DatasetPublicationResult",
    "DatasetVersion",
    "FieldList",
    "Lock",
    "MetadataBlocks",
    "PrivateUrlData",
    # Files
    "DataFile",
    "DetectionResult",
    "FileInfo",
    "FileList",
    "FileMeta",
    # Users and settings
    "AuthenticatedUser",
    "BuiltinUser",
    "DatabaseSetting",
]
