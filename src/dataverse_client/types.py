# dataverse_client/types.py
"""Core type definitions and data structures for dataverse_client.

This module defines the request descriptor that the transport builds once per
call, the description of an API family (prefix, version and how the API key
travels), and the identifier variant used to address datasets and files.
"""

from collections.abc import Callable, Iterator, Mapping
from contextlib import ExitStack, contextmanager
from pathlib import Path
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .constants import (
    MEDIA_TYPE_JSON,
    MEDIA_TYPE_OCTET_STREAM,
    MULTIPART_FILE_PART,
    MULTIPART_METADATA_PART,
    PARAM_PERSISTENT_ID,
    PERSISTENT_ID_TOKEN,
)

D = TypeVar("D")

Decoder = Callable[[Any], D]
"""Type alias for a payload decoder.

A decoder turns the raw JSON value found in the envelope's `data` field into
the payload type a caller expects. It is supplied explicitly per call.
"""


class ApiFamily(BaseModel):
    """How one family of Dataverse endpoints is addressed and authenticated.

    Attributes:
        prefix: Path prefix below the base URL, e.g. "api". May be empty.
        version: Version inserted as "v{version}/" after the prefix, or None
            for unversioned endpoints (the admin API).
        auth_via_basic: Send the API token as basic-auth user name instead of
            the X-Dataverse-key header.
        send_unblock_key: Append the configured unblock key as query parameter.
    """

    model_config = ConfigDict(frozen=True)

    prefix: str = "api"
    version: str | None = None
    auth_via_basic: bool = False
    send_unblock_key: bool = False


class MultipartPayload(BaseModel):
    """The parts of a file upload: a file, a JSON metadata document, or both."""

    model_config = ConfigDict(frozen=True)

    file: Path | None = None
    json_metadata: str | None = None

    @model_validator(mode="after")
    def _require_a_part(self) -> "MultipartPayload":
        if self.file is None and self.json_metadata is None:
            raise ValueError("A multipart upload needs a file, metadata, or both")
        return self


class RequestData(BaseModel):
    """Describes one logical request. Retries reuse it to build identical attempts."""

    model_config = ConfigDict(frozen=True)

    method: str
    sub_path: str
    url: str
    params: Mapping[str, str] = Field(default_factory=dict)
    headers: Mapping[str, str] = Field(default_factory=dict)
    content: str | bytes | None = None
    multipart: MultipartPayload | None = None

    @contextmanager
    def open_request(
        self, http_client: httpx.AsyncClient, timeout: httpx.Timeout
    ) -> Iterator[httpx.Request]:
        """Builds a fresh httpx.Request for a single attempt.

        The upload file, if any, is opened here and streamed into the
        multipart body; it is closed when the context exits, so every retry
        reads it from the start again.
        """
        with ExitStack() as stack:
            files: dict[str, tuple[str, Any, str]] | None = None
            if self.multipart is not None:
                files = {}
                if self.multipart.file is not None:
                    handle = stack.enter_context(self.multipart.file.open("rb"))
                    files[MULTIPART_FILE_PART] = (
                        self.multipart.file.name,
                        handle,
                        MEDIA_TYPE_OCTET_STREAM,
                    )
                if self.multipart.json_metadata is not None:
                    files[MULTIPART_METADATA_PART] = (
                        MULTIPART_METADATA_PART,
                        self.multipart.json_metadata.encode("utf-8"),
                        MEDIA_TYPE_JSON,
                    )
            yield http_client.build_request(
                method=self.method,
                url=self.url,
                params=dict(self.params),
                headers=dict(self.headers),
                content=self.content,
                files=files,
                timeout=timeout,
            )


class NumericId(BaseModel):
    """A database id: addressed inline as `{base}/{id}/...`."""

    model_config = ConfigDict(frozen=True)

    value: int


class PersistentId(BaseModel):
    """A persistent identifier (e.g. a DOI): addressed as `{base}/:persistentId/...`."""

    model_config = ConfigDict(frozen=True)

    value: str


ResourceId = NumericId | PersistentId


def resource_id(identifier: "int | str | ResourceId") -> ResourceId:
    """Wraps a bare int as NumericId and a bare str as PersistentId."""
    if isinstance(identifier, NumericId | PersistentId):
        return identifier
    if isinstance(identifier, bool):
        raise TypeError("A boolean is not a resource identifier")
    if isinstance(identifier, int):
        return NumericId(value=identifier)
    if isinstance(identifier, str):
        return PersistentId(value=identifier)
    raise TypeError(f"Unsupported resource identifier: {identifier!r}")


def target_path(
    base: str, rid: ResourceId, endpoint: str = ""
) -> tuple[str, dict[str, str]]:
    """Builds the sub-path and query parameters for a resource-scoped call.

    Args:
        base: The resource family path, e.g. "datasets".
        rid: How the resource is addressed.
        endpoint: The action below the resource, e.g. "versions/:draft".

    Returns:
        tuple[str, dict[str, str]]: The sub-path and the parameters to merge in.
    """
    tail = f"/{endpoint}" if endpoint else ""
    if isinstance(rid, PersistentId):
        return (
            f"{base}/{PERSISTENT_ID_TOKEN}{tail}",
            {PARAM_PERSISTENT_ID: rid.value},
        )
    return f"{base}/{rid.value}{tail}", {}
