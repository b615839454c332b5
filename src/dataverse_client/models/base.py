"""Base Pydantic models for Dataverse responses.

Every JSON reply of the native API is wrapped in the same envelope:

```json
{"status": "OK", "data": {...}, "message": "..."}
```

`data` carries the payload and `message` an informational or error text.
Which of the two a given endpoint fills is not consistent across the API:
some endpoints wrap their informational message in `data` as
`{"message": "..."}` (see `DataMessage`), others use the top-level `message`.
Both are therefore kept on the envelope as they are.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict

from ..constants import STATUS_OK


class DataverseModel(BaseModel):
    """Base for payload models: unknown fields are kept, names map 1:1 to JSON."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class DataverseEnvelope(BaseModel):
    """The status envelope around every native API reply.

    Attributes:
        status: "OK" or "ERROR".
        data: The raw payload, undecoded. Absent on many errors.
        message: Informational or error text, if any.
    """

    model_config = ConfigDict(extra="allow")

    status: str
    data: Any | None = None
    message: str | None = None

    @property
    def is_ok(self) -> bool:
        return self.status == STATUS_OK

    @property
    def has_data(self) -> bool:
        return self.data is not None


class DataMessage(DataverseModel):
    """A payload that only carries a message, e.g. `{"message": "File deleted"}`."""

    message: str
