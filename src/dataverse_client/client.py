"""Asynchronous transport for one family of Dataverse endpoints.

`DataverseHttpClient` composes the URI, applies the authentication strategy
and the per-call timeouts, sends the request and classifies the answer: a 2xx
becomes a `DataverseResponse`, anything else a `RequestFailedError`. Every
call runs under the lock retry policy.
"""

import ssl
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Self

import certifi
import httpx

from .auth import AuthStrategy, create_auth_strategy
from .codec import DEFAULT_CODEC, JsonCodec
from .config import DataverseSettings
from .constants import HEADER_CONTENT_TYPE, MEDIA_TYPE_JSON, MEDIA_TYPE_TEXT
from .exceptions import (
    NetworkError,
    RequestFailedError,
    TimeoutError,
    TransportError,
)
from .log_config import logger
from .redaction import redact_url
from .response import DataverseResponse
from .retry import LockedRetryPolicy
from .types import ApiFamily, Decoder, MultipartPayload, RequestData
from .uri import build_uri


def create_http_client(settings: DataverseSettings) -> httpx.AsyncClient:
    """Create a default httpx.AsyncClient with configured settings.

    Returns:
        httpx.AsyncClient: HTTP client with certifi SSL verification, the
            configured timeouts and the user agent header.
    """
    try:
        ssl_context = ssl.create_default_context(cafile=certifi.where())
        verify_ssl: ssl.SSLContext | bool = ssl_context
        logger.debug("Using certifi SSL context.")
    except (OSError, ssl.SSLError):
        verify_ssl = True
        logger.warning(
            "certifi bundle failed to load. Using default SSL verification."
        )

    return httpx.AsyncClient(
        timeout=timeout_from_settings(settings),
        verify=verify_ssl,
        headers={"User-Agent": settings.user_agent},
    )


def timeout_from_settings(settings: DataverseSettings) -> httpx.Timeout:
    """Converts the millisecond settings into an httpx.Timeout.

    The read timeout also bounds writes and pool waits; the connect timeout
    only the connection set-up.
    """
    return httpx.Timeout(
        settings.read_timeout / 1000, connect=settings.connection_timeout / 1000
    )


class DataverseHttpClient:
    """Sends requests to one API family of a Dataverse installation.

    Attributes:
        _settings: The shared, read-only settings.
        _family: Prefix, version and auth delivery of the endpoint family.
        _codec: Serializer for request bodies and response envelopes.
        _auth_strategy: Applies the API token (and unblock key) per request.
        _retry_policy: Reissues requests that fail on a dataset lock.
        _http_client: The underlying httpx.AsyncClient.
        _should_close_client: Flag indicating if this instance owns the _http_client.
    """

    def __init__(
        self,
        settings: DataverseSettings,
        family: ApiFamily,
        *,
        http_client: httpx.AsyncClient | None = None,
        codec: JsonCodec | None = None,
        auth_strategy: AuthStrategy | None = None,
    ):
        """Initialize the client.

        Args:
            settings: Connection settings.
            family: The endpoint family this client addresses.
            http_client: Optional pre-configured httpx.AsyncClient, typically
                shared between the clients of one DataverseInstance.
            codec: Optional JSON codec; the compact default is used otherwise.
            auth_strategy: Optional authentication strategy. If None, one is
                derived from the settings and the family.
        """
        self._settings = settings
        self._family = family
        self._codec = codec or DEFAULT_CODEC
        self._timeout = timeout_from_settings(settings)

        self._auth_strategy: AuthStrategy = auth_strategy or create_auth_strategy(
            settings.api_token,
            via_basic_auth=family.auth_via_basic,
            unblock_key=settings.unblock_key if family.send_unblock_key else None,
        )
        logger.debug(
            f"Using authentication strategy: {type(self._auth_strategy).__name__}"
        )

        self._retry_policy = LockedRetryPolicy(
            settings.locked_retry_times, settings.locked_retry_interval
        )

        self._should_close_client = http_client is None  # Close only if we created it
        self._http_client = http_client or create_http_client(settings)

        logger.debug(
            f"DataverseHttpClient initialized for {settings.base_url} "
            f"(prefix '{family.prefix}', version {family.version})"
        )

    @property
    def settings(self) -> DataverseSettings:
        return self._settings

    @property
    def codec(self) -> JsonCodec:
        return self._codec

    def build_uri(self, sub_path: str) -> str:
        """Resolves a sub-path of this family against the base URL."""
        return build_uri(
            self._settings.base_url,
            self._family.prefix,
            self._family.version,
            sub_path,
        )

    async def get(
        self,
        sub_path: str,
        *,
        params: Mapping[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
        decoder: Decoder[Any] | None = None,
    ) -> DataverseResponse[Any]:
        return await self.request(
            "GET", sub_path, params=params, headers=headers, decoder=decoder
        )

    async def post_json(
        self,
        sub_path: str,
        body: Any = None,
        *,
        params: Mapping[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
        decoder: Decoder[Any] | None = None,
    ) -> DataverseResponse[Any]:
        """POSTs a JSON body.

        Args:
            body: A JSON string (sent as is), a pydantic model, or plain JSON
                data serialized with the client's codec. None sends no body.
        """
        return await self.request(
            "POST",
            sub_path,
            content=self._serialize(body),
            params=params,
            headers={HEADER_CONTENT_TYPE: MEDIA_TYPE_JSON, **(headers or {})},
            decoder=decoder,
        )

    async def post_text(
        self,
        sub_path: str,
        body: str,
        *,
        params: Mapping[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
        decoder: Decoder[Any] | None = None,
    ) -> DataverseResponse[Any]:
        return await self.request(
            "POST",
            sub_path,
            content=body,
            params=params,
            headers={HEADER_CONTENT_TYPE: MEDIA_TYPE_TEXT, **(headers or {})},
            decoder=decoder,
        )

    async def put(
        self,
        sub_path: str,
        body: Any = None,
        *,
        params: Mapping[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
        decoder: Decoder[Any] | None = None,
    ) -> DataverseResponse[Any]:
        """PUTs a body. Plain strings are sent verbatim, anything else as JSON."""
        extra_headers = dict(headers or {})
        if body is not None and not isinstance(body, str | bytes):
            extra_headers.setdefault(HEADER_CONTENT_TYPE, MEDIA_TYPE_JSON)
        return await self.request(
            "PUT",
            sub_path,
            content=self._serialize(body),
            params=params,
            headers=extra_headers,
            decoder=decoder,
        )

    async def delete_path(
        self,
        sub_path: str,
        *,
        params: Mapping[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
        decoder: Decoder[Any] | None = None,
    ) -> DataverseResponse[Any]:
        return await self.request(
            "DELETE", sub_path, params=params, headers=headers, decoder=decoder
        )

    async def post_file(
        self,
        sub_path: str,
        file: Path | str | None = None,
        json_metadata: Any = None,
        *,
        params: Mapping[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
        decoder: Decoder[Any] | None = None,
    ) -> DataverseResponse[Any]:
        """POSTs a multipart upload.

        Only the parts supplied are sent: part "file" carries the file,
        streamed from disk; part "jsonData" the metadata as UTF-8 JSON.

        Args:
            file: Path of the file to upload.
            json_metadata: Metadata as JSON string, model or plain JSON data.

        Raises:
            ValueError: If neither a file nor metadata is given.
        """
        multipart = MultipartPayload(
            file=Path(file) if file is not None else None,
            json_metadata=self._serialize(json_metadata),
        )
        return await self.request(
            "POST",
            sub_path,
            multipart=multipart,
            params=params,
            headers=headers,
            decoder=decoder,
        )

    async def request(
        self,
        method: str,
        sub_path: str,
        *,
        content: str | bytes | None = None,
        multipart: MultipartPayload | None = None,
        params: Mapping[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
        decoder: Decoder[Any] | None = None,
    ) -> DataverseResponse[Any]:
        """Makes a request, retrying it while the dataset is locked.

        Returns:
            DataverseResponse: The successful response, decoded lazily with
                `decoder`.

        Raises:
            MalformedURIError: If the URI cannot be composed.
            RequestFailedError: On a non-2xx answer (NotFoundError for 404),
                after the lock retries if it was a lock failure.
            TransportError: If no answer arrived (TimeoutError, NetworkError).
        """
        request_data = RequestData(
            method=method,
            sub_path=sub_path,
            url=self.build_uri(sub_path),
            params=dict(params or {}),
            headers=dict(headers or {}),
            content=content,
            multipart=multipart,
        )
        response = await self._retry_policy.call(
            self._execute_single_request, request_data
        )
        return DataverseResponse(response, decoder=decoder, codec=self._codec)

    def _serialize(self, body: Any) -> str | bytes | None:
        if body is None or isinstance(body, str | bytes):
            return body
        return self._codec.dumps(body)

    async def _execute_single_request(
        self, request_data: RequestData
    ) -> httpx.Response:
        """Execute a single HTTP request attempt.

        Returns:
            httpx.Response: The response, if its status is 2xx.

        Raises:
            RequestFailedError: For non-2xx responses.
            TimeoutError: If the request times out.
            NetworkError: For network-related errors.
            TransportError: For other request errors raised by httpx.
        """
        with request_data.open_request(self._http_client, self._timeout) as request:
            await self._auth_strategy.async_authenticate(request)
            log_url = redact_url(request.url)

            logger.debug(f"Sending request: {request.method} {log_url}")
            logger.trace(f"Request content type: {request.headers.get('Content-Type')}")
            if request_data.content:
                logger.trace(f"Request Body: {request_data.content!r}")

            try:
                response = await self._http_client.send(request)
            except httpx.TimeoutException as e:
                logger.error(f"Request timed out: {request.method} {log_url}")
                raise TimeoutError(
                    f"Request timed out: {e}", request=request
                ) from e
            except httpx.NetworkError as e:
                logger.error(f"Network error for {request.method} {log_url}: {e}")
                raise NetworkError(f"Network error: {e}", request=request) from e
            except httpx.RequestError as e:
                logger.error(f"Request error for {request.method} {log_url}: {e}")
                raise TransportError(f"Request error: {e}", request=request) from e

        logger.debug(f"Received response: {response.status_code} for {log_url}")
        logger.trace(f"Response Headers: {response.headers}")

        if not response.is_success:
            error = RequestFailedError.from_response(response, request=request)
            logger.debug(f"Request failed: {error.status_line}")
            raise error
        return response

    async def aclose(self) -> None:
        """Closes the underlying HTTP client if it was created by this instance."""
        await self._auth_strategy.async_close()
        if self._should_close_client and not self._http_client.is_closed:
            await self._http_client.aclose()
            logger.debug("DataverseHttpClient's internal HTTP client closed.")

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
