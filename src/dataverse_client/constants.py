"""Constants used throughout the dataverse_client library.

This module defines the API path prefixes, header and parameter names, media
types and the literal error-body signatures that Dataverse uses to report a
temporarily locked dataset.
"""

from enum import StrEnum

CLIENT_VERSION: str = "0.1.0"
DEFAULT_USER_AGENT: str = f"dataverse-client/{CLIENT_VERSION}"

# --- API families ---
NATIVE_API_PREFIX = "api"
ADMIN_API_PREFIX = ""  # admin paths are given in full as "api/admin/..."
SWORD_API_PREFIX = "dvn/api/data-deposit"
SWORD_API_VERSION = "1.1"

# --- Wire names ---
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_DATAVERSE_KEY = "X-Dataverse-key"
PARAM_UNBLOCK_KEY = "unblock-key"
PARAM_PERSISTENT_ID = "persistentId"
PARAM_PASSWORD = "password"
PARAM_BUILTIN_USER_KEY = "key"
PERSISTENT_ID_TOKEN = ":persistentId"

MEDIA_TYPE_JSON = "application/json"
MEDIA_TYPE_OCTET_STREAM = "application/octet-stream"
MEDIA_TYPE_TEXT = "text/plain"

MULTIPART_FILE_PART = "file"
MULTIPART_METADATA_PART = "jsonData"

# --- Lock signatures (matched literally, case-sensitive) ---
LOCKED_FORBIDDEN_SIGNATURES: tuple[str, ...] = (
    "This dataset is locked",
    "Dataset cannot be edited due to dataset lock",
)
LOCKED_BAD_REQUEST_SIGNATURES: tuple[str, ...] = ("Failed to add file to dataset",)

STATUS_OK = "OK"
STATUS_ERROR = "ERROR"


class Version(StrEnum):
    """Symbolic dataset versions understood by the native API."""

    LATEST = ":latest"
    LATEST_PUBLISHED = ":latest-published"
    DRAFT = ":draft"


class UpdateType(StrEnum):
    MAJOR = "major"
    MINOR = "minor"


class DefaultRole(StrEnum):
    """Roles that can be set as default contributor role on a dataverse."""

    CURATOR = "curator"
    CONTRIBUTOR = "contributor"
    NONE = "none"


# Export formats for DatasetsClient.export_metadata
EXPORT_FORMAT_DDI = "ddi"
EXPORT_FORMAT_OAI_DDI = "oai_ddi"
EXPORT_FORMAT_DCTERMS = "dcterms"
EXPORT_FORMAT_OAI_DC = "oai_dc"
EXPORT_FORMAT_SCHEMA_ORG = "schema.org"
EXPORT_FORMAT_OAI_ORE = "OAI_ORE"
EXPORT_FORMAT_DATACITE = "Datacite"
EXPORT_FORMAT_OAI_DATACITE = "oai_datacite"
EXPORT_FORMAT_DATAVERSE_JSON = "dataverse_json"

# --- Endpoint paths ---
DATAVERSES = "dataverses"
DATASETS = "datasets"
FILES = "files"
BUILTIN_USERS = "builtin-users"
ADMIN_AUTHENTICATED_USERS = "api/admin/authenticatedUsers"
ADMIN_SETTINGS = "api/admin/settings"
SWORD_EDIT_MEDIA_FILE = "swordv2/edit-media/file"
ROOT_DATAVERSE = "root"

# --- Redaction ---
# Query parameters carrying credentials; masked in logs and error messages.
SENSITIVE_QUERY_PARAMS: tuple[str, ...] = (
    PARAM_UNBLOCK_KEY,
    PARAM_PASSWORD,
    PARAM_BUILTIN_USER_KEY,
)
REDACTED = "REDACTED"
