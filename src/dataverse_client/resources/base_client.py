# dataverse_client/resources/base_client.py
"""Base classes for the Dataverse endpoint wrappers.

`BaseResourceClient` only holds the transport. `TargetedResourceClient` is the
base for wrappers scoped to one dataset or file: it fixes the addressing mode
(database id or persistent identifier) at construction, and every helper
routes its endpoint through `target_path`, so a wrapper instance never mixes
the two URL forms.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

from ..constants import Version
from ..log_config import logger
from ..response import DataverseResponse
from ..types import Decoder, ResourceId, target_path

if TYPE_CHECKING:
    from ..client import DataverseHttpClient


class BaseResourceClient:
    """
    Base class for all resource clients.

    Attributes:
        _api_client: The transport of the API family the resource belongs to.
    """

    def __init__(self, api_client: "DataverseHttpClient"):
        """
        Initialize the base resource client.

        Args:
            api_client: An instance of DataverseHttpClient.
        """
        self._api_client = api_client
        logger.debug(f"{self.__class__.__name__} initialized")


class TargetedResourceClient(BaseResourceClient):
    """Base for clients addressing one resource below `_target_base`.

    Attributes:
        _target_base: The resource family path, e.g. "datasets". Defined by
            subclasses.
        _resource_id: The id the resource is addressed by.
    """

    _target_base: str

    def __init__(self, api_client: "DataverseHttpClient", resource_id: ResourceId):
        super().__init__(api_client)
        self._resource_id = resource_id

    @property
    def resource_id(self) -> ResourceId:
        return self._resource_id

    def _target(
        self, endpoint: str = "", params: Mapping[str, str] | None = None
    ) -> tuple[str, dict[str, str]]:
        sub_path, target_params = target_path(
            self._target_base, self._resource_id, endpoint
        )
        return sub_path, {**target_params, **(params or {})}

    async def _get_unversioned(
        self,
        endpoint: str = "",
        *,
        params: Mapping[str, str] | None = None,
        decoder: Decoder[Any] | None = None,
    ) -> DataverseResponse[Any]:
        sub_path, all_params = self._target(endpoint, params)
        return await self._api_client.get(sub_path, params=all_params, decoder=decoder)

    async def _get_versioned(
        self,
        endpoint: str = "",
        version: Version | str = Version.LATEST,
        *,
        decoder: Decoder[Any] | None = None,
    ) -> DataverseResponse[Any]:
        """GETs `{target}/versions/{version}/{endpoint}`."""
        versioned = f"versions/{version}"
        if endpoint:
            versioned = f"{versioned}/{endpoint}"
        return await self._get_unversioned(versioned, decoder=decoder)

    async def _post_json_to_target(
        self,
        endpoint: str,
        body: Any = None,
        *,
        params: Mapping[str, str] | None = None,
        decoder: Decoder[Any] | None = None,
    ) -> DataverseResponse[Any]:
        sub_path, all_params = self._target(endpoint, params)
        return await self._api_client.post_json(
            sub_path, body, params=all_params, decoder=decoder
        )

    async def _post_file_to_target(
        self,
        endpoint: str,
        file: Path | str | None = None,
        json_metadata: Any = None,
        *,
        params: Mapping[str, str] | None = None,
        decoder: Decoder[Any] | None = None,
    ) -> DataverseResponse[Any]:
        sub_path, all_params = self._target(endpoint, params)
        return await self._api_client.post_file(
            sub_path, file, json_metadata, params=all_params, decoder=decoder
        )

    async def _put_to_target(
        self,
        endpoint: str,
        body: Any = None,
        *,
        params: Mapping[str, str] | None = None,
        decoder: Decoder[Any] | None = None,
    ) -> DataverseResponse[Any]:
        sub_path, all_params = self._target(endpoint, params)
        return await self._api_client.put(
            sub_path, body, params=all_params, decoder=decoder
        )

    async def _delete_at_target(
        self,
        endpoint: str,
        *,
        decoder: Decoder[Any] | None = None,
    ) -> DataverseResponse[Any]:
        sub_path, all_params = self._target(endpoint)
        return await self._api_client.delete_path(
            sub_path, params=all_params, decoder=decoder
        )
