"""dataverse_client: An asynchronous Python client for the Dataverse REST API."""

__version__ = "0.1.0"

from .auth import ApiKeyBasicAuth, ApiKeyHeaderAuth, AuthStrategy, NoAuth
from .client import DataverseHttpClient
from .codec import JsonCodec, decode_as
from .config import DataverseSettings, get_settings
from .constants import DefaultRole, UpdateType, Version
from .exceptions import (
    ConfigurationError,
    DatasetLockedError,
    DataverseError,
    DecodeError,
    MalformedURIError,
    NetworkError,
    NotFoundError,
    PayloadMissingError,
    RequestFailedError,
    TimeoutError,
    TransportError,
)
from .instance import DataverseInstance
from .response import DataverseResponse
from .types import ApiFamily, NumericId, PersistentId, ResourceId

__all__ = [
    # Entry points
    "DataverseInstance",
    "DataverseHttpClient",
    "DataverseResponse",
    "DataverseSettings",
    "get_settings",
    # Auth
    "ApiKeyBasicAuth",
    "ApiKeyHeaderAuth",
    "AuthStrategy",
    "NoAuth",
    # Serialization
    "JsonCodec",
    "decode_as",
    # Addressing
    "ApiFamily",
    "NumericId",
    "PersistentId",
    "ResourceId",
    "DefaultRole",
    "UpdateType",
    "Version",
    # Exceptions
    "DataverseError",
    "ConfigurationError",
    "DatasetLockedError",
    "DecodeError",
    "MalformedURIError",
    "NetworkError",
    "NotFoundError",
    "PayloadMissingError",
    "RequestFailedError",
    "TimeoutError",
    "TransportError",
]
