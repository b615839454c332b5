"""Custom exception classes for the dataverse_client library.

The hierarchy separates four kinds of failure so callers can react to each:

- the request could not be built (`MalformedURIError`, `ConfigurationError`),
- the server answered with a non-2xx status (`RequestFailedError`),
- the server answered 2xx but the body was not understood (`DecodeError`),
- no answer arrived at all (`TransportError`).
"""

from typing import Any

import httpx

from .redaction import redact_url


class DataverseError(Exception):
    """Base exception class for all dataverse_client errors."""

    def __init__(
        self,
        message: str,
        *,
        response: httpx.Response | None = None,
        request: httpx.Request | None = None,
    ):
        """Initializes the base exception.

        Args:
            message: The error message.
            response: Optional httpx.Response object associated with the error.
            request: Optional httpx.Request object associated with the error.
        """
        super().__init__(message)
        self.message = message
        self.response = response
        self.request = request

    def __str__(self) -> str:
        if self.response is not None:
            request = getattr(self.response, "_request", None) or self.request
            url_info = redact_url(request.url) if request is not None else "N/A"
            return (
                f"{self.message} (Status: {self.response.status_code}, URL: {url_info})"
            )
        if isinstance(self.request, httpx.Request):
            return f"{self.message} (URL: {redact_url(self.request.url)})"
        return self.message


class ConfigurationError(DataverseError):
    """Represents an error in the library's configuration."""

    def __init__(self, message: str):
        super().__init__(message, response=None)


class MalformedURIError(DataverseError):
    """Raised when the base URL and sub-path do not compose into a valid URI.

    Never retried.
    """

    def __init__(self, message: str, *, uri: str | None = None):
        super().__init__(message)
        self.uri = uri


class RequestFailedError(DataverseError):
    """Represents a non-2xx answer from Dataverse.

    Raised after the lock retry policy gave up or decided the failure was not
    a lock. The decoded body is kept verbatim; callers inspect it to tell the
    different failure causes apart.

    Attributes:
        status_code: The HTTP status code.
        status_line: e.g. "HTTP/1.1 403 Forbidden".
        body: The response body decoded as UTF-8.
        attempts: How many times the request was sent before giving up.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        status_line: str,
        body: str,
        response: httpx.Response | None = None,
        request: httpx.Request | None = None,
    ):
        super().__init__(message, response=response, request=request)
        self.status_code = status_code
        self.status_line = status_line
        self.body = body
        self.attempts = 1

    @classmethod
    def from_response(
        cls, response: httpx.Response, request: httpx.Request | None = None
    ) -> "RequestFailedError":
        """Builds the error (or the NotFoundError subclass) from a response."""
        body = response.content.decode("utf-8", errors="replace")
        status_line = (
            f"{response.http_version} {response.status_code} {response.reason_phrase}"
        )
        error_cls = NotFoundError if response.status_code == 404 else cls
        return error_cls(
            f"Dataverse request failed with status {response.status_code}: {body}",
            status_code=response.status_code,
            status_line=status_line,
            body=body,
            response=response,
            request=request,
        )


class NotFoundError(RequestFailedError):
    """Represents a resource not found error (404 Not Found)."""


class DecodeError(DataverseError):
    """The server accepted the request but its reply could not be understood.

    Covers invalid UTF-8, malformed JSON, a body that is not a status envelope,
    and a payload that does not validate against the expected type.
    """


class PayloadMissingError(DecodeError):
    """The envelope parsed fine but lacks the requested field (data or message)."""

    def __init__(self, message: str, *, field: str, envelope: Any = None):
        super().__init__(message)
        self.field = field
        self.envelope = envelope


class TransportError(DataverseError):
    """Represents an I/O-level failure: nothing usable came back from the server.

    Not retried by this library.
    """

    def __init__(self, message: str, *, request: httpx.Request | None = None):
        super().__init__(message, request=request, response=None)


class TimeoutError(TransportError):
    """Represents a connect or read timeout."""


class NetworkError(TransportError):
    """Represents a network connection error (DNS failure, connection refused, TLS)."""


class DatasetLockedError(DataverseError):
    """Raised by `DatasetsClient.await_unlock` if the dataset is still locked.

    Attributes:
        tries: How many times the locks were checked.
        wait_ms: Pause between checks in milliseconds.
        locks: The locks found on the last check.
    """

    def __init__(self, tries: int, wait_ms: int, locks: list[Any]):
        super().__init__(
            f"Still locked after {tries} times with {wait_ms} millisecond pauses. "
            f"Locks: {', '.join(str(lock) for lock in locks)}"
        )
        self.tries = tries
        self.wait_ms = wait_ms
        self.locks = locks
