"""Typed access to a successful Dataverse response.

A `DataverseResponse` gives access to the body at increasing levels of
abstraction: the raw bytes (`content`), the UTF-8 text (`string`), the parsed
JSON (`json`), the status envelope (`envelope`) and finally the decoded
payload (`data`) or the informational `message`. Each level is computed once,
on first access.

Use `string` for non-JSON bodies such as metadata exports, `json` for JSON
that has no model, and `data` for modelled payloads.
"""

from functools import cached_property
from typing import Any, Generic, TypeVar

import httpx
from pydantic import ValidationError

from .codec import DEFAULT_CODEC, JsonCodec, identity
from .exceptions import DecodeError, PayloadMissingError
from .models.base import DataverseEnvelope
from .types import Decoder

D = TypeVar("D")


class DataverseResponse(Generic[D]):
    """Wraps a 2xx httpx.Response together with the decoder for its payload.

    Attributes:
        http_response: The underlying httpx.Response.
    """

    def __init__(
        self,
        http_response: httpx.Response,
        decoder: Decoder[D] | None = None,
        codec: JsonCodec | None = None,
    ):
        self.http_response = http_response
        self._decoder: Decoder[Any] = decoder or identity
        self._codec = codec or DEFAULT_CODEC

    def __repr__(self) -> str:
        return f"<DataverseResponse [{self.status_code}]>"

    @property
    def status_code(self) -> int:
        return self.http_response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self.http_response.headers

    @property
    def content(self) -> bytes:
        return self.http_response.content

    @cached_property
    def string(self) -> str:
        """The body decoded as UTF-8.

        Raises:
            DecodeError: If the body is not valid UTF-8.
        """
        try:
            return self.content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"Response body is not valid UTF-8: {e}") from e

    @cached_property
    def json(self) -> Any:
        """The body parsed as JSON."""
        return self._codec.loads(self.string)

    @cached_property
    def envelope(self) -> DataverseEnvelope:
        """The body as status envelope, with `data` still undecoded.

        An ERROR envelope is not an error here: it parses to an envelope with
        its message and, usually, no data.

        Raises:
            DecodeError: If the body is not JSON or not shaped like an envelope.
        """
        try:
            return DataverseEnvelope.model_validate(self.json)
        except ValidationError as e:
            raise DecodeError(f"Response body is not a Dataverse envelope: {e}") from e

    @cached_property
    def data(self) -> D:
        """The `data` field of the envelope, decoded with this call's decoder.

        Raises:
            PayloadMissingError: If the envelope has no `data` field.
            DecodeError: If the payload does not decode.
        """
        envelope = self.envelope
        if envelope.data is None:
            raise PayloadMissingError(
                f"Response envelope (status {envelope.status}) has no data",
                field="data",
                envelope=envelope,
            )
        try:
            return self._decoder(envelope.data)
        except (ValidationError, ValueError, TypeError, KeyError) as e:
            raise DecodeError(f"Response payload could not be decoded: {e}") from e

    @cached_property
    def message(self) -> str:
        """The top-level `message` field of the envelope.

        Raises:
            PayloadMissingError: If the envelope has no `message` field.
        """
        envelope = self.envelope
        if envelope.message is None:
            raise PayloadMissingError(
                f"Response envelope (status {envelope.status}) has no message",
                field="message",
                envelope=envelope,
            )
        return envelope.message
