"""Explicit JSON serialization for request bodies and response envelopes.

Clients receive a `JsonCodec` instance instead of relying on process-wide
formatting settings, so two clients can serialize differently side by side.
"""

import json
from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError

from .exceptions import DecodeError
from .types import Decoder


class JsonCodec:
    """Serializes request bodies and parses response bodies.

    Pydantic models are dumped by alias with None fields left out, which is
    how the Dataverse JSON formats treat optional fields.
    """

    def __init__(self, *, pretty: bool = False, exclude_none: bool = True):
        self._pretty = pretty
        self._exclude_none = exclude_none

    def to_jsonable(self, obj: Any) -> Any:
        """Converts models (also nested in lists and dicts) into plain JSON values."""
        if isinstance(obj, BaseModel):
            return obj.model_dump(
                mode="json", by_alias=True, exclude_none=self._exclude_none
            )
        if isinstance(obj, dict):
            return {key: self.to_jsonable(value) for key, value in obj.items()}
        if isinstance(obj, list | tuple):
            return [self.to_jsonable(item) for item in obj]
        return obj

    def dumps(self, obj: Any) -> str:
        return json.dumps(
            self.to_jsonable(obj),
            indent=2 if self._pretty else None,
            ensure_ascii=False,
        )

    def loads(self, text: str) -> Any:
        """Parses JSON text.

        Raises:
            DecodeError: If the text is not valid JSON.
        """
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise DecodeError(f"Response body is not valid JSON: {e}") from e


def decode_as(tp: Any) -> Decoder[Any]:
    """Returns a decoder that validates a raw JSON value against `tp`.

    `tp` may be anything pydantic can build a TypeAdapter for: a model, a
    primitive, or a generic alias such as `list[Lock]`.
    """
    adapter = TypeAdapter(tp)

    def _decode(raw: Any) -> Any:
        try:
            return adapter.validate_python(raw)
        except ValidationError as e:
            raise DecodeError(f"Payload does not match expected type {tp!r}: {e}") from e

    return _decode


def identity(raw: Any) -> Any:
    """The default decoder: hands back the raw JSON value."""
    return raw


DEFAULT_CODEC = JsonCodec()
