"""Main user-facing entry point for talking to one Dataverse installation."""

from typing import Self

import httpx

from .client import DataverseHttpClient, create_http_client
from .codec import JsonCodec
from .config import DataverseSettings, get_settings
from .constants import (
    ADMIN_API_PREFIX,
    NATIVE_API_PREFIX,
    ROOT_DATAVERSE,
    SWORD_API_PREFIX,
    SWORD_API_VERSION,
)
from .log_config import configure_logging, logger
from .resources import (
    AdminClient,
    BuiltinUsersClient,
    DatasetsClient,
    DataversesClient,
    FilesClient,
    SwordClient,
)
from .types import ApiFamily, ResourceId, resource_id

configure_logging()


class DataverseInstance:
    """High-level access to the APIs of one Dataverse installation.

    The instance owns one httpx.AsyncClient shared by three transports, one
    per API family: the native API (`api/v{version}`), the admin API
    (unversioned, with unblock key) and the SWORD deposit API (basic auth).
    Endpoint wrappers are cheap to create; make one per resource you work on.

    Example:
    ```python
    async with DataverseInstance() as dataverse:
        response = await dataverse.dataset("doi:10.5072/FK2/ABCDEF").view()
        print(response.data.versionState)
    ```
    """

    def __init__(
        self,
        settings: DataverseSettings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        codec: JsonCodec | None = None,
    ):
        """Initializes the instance and its transports.

        Args:
            settings: Connection settings; loaded from the environment if None.
            http_client: Optional pre-configured httpx.AsyncClient. It is not
                closed by this instance.
            codec: Optional JSON codec used by all transports.
        """
        self._settings = settings or get_settings()
        self._should_close_client = http_client is None
        self._http_client = http_client or create_http_client(self._settings)

        self._native = DataverseHttpClient(
            self._settings,
            ApiFamily(prefix=NATIVE_API_PREFIX, version=self._settings.api_version),
            http_client=self._http_client,
            codec=codec,
        )
        self._admin = DataverseHttpClient(
            self._settings,
            ApiFamily(prefix=ADMIN_API_PREFIX, send_unblock_key=True),
            http_client=self._http_client,
            codec=codec,
        )
        self._sword = DataverseHttpClient(
            self._settings,
            ApiFamily(
                prefix=SWORD_API_PREFIX, version=SWORD_API_VERSION, auth_via_basic=True
            ),
            http_client=self._http_client,
            codec=codec,
        )
        logger.info(f"DataverseInstance initialized for {self._settings.base_url}")

    @property
    def settings(self) -> DataverseSettings:
        return self._settings

    def dataverse(self, alias: str) -> DataversesClient:
        return DataversesClient(self._native, alias)

    def dataset(self, identifier: int | str | ResourceId) -> DatasetsClient:
        """A client for one dataset: an int is a database id, a str a PID."""
        return DatasetsClient(self._native, resource_id(identifier))

    def file(self, identifier: int | str | ResourceId) -> FilesClient:
        """A client for one file: an int is a database id, a str a PID."""
        return FilesClient(self._native, resource_id(identifier))

    def admin(self) -> AdminClient:
        return AdminClient(self._admin)

    def builtin_user(self) -> BuiltinUsersClient:
        return BuiltinUsersClient(self._native)

    def sword(self) -> SwordClient:
        return SwordClient(self._sword)

    async def check_connection(self) -> None:
        """Checks that the root dataverse can be reached.

        Raises:
            DataverseError: The failure of viewing the root dataverse.
        """
        logger.info("Checking if root dataverse can be reached...")
        await self.dataverse(ROOT_DATAVERSE).view()
        logger.info("OK: root dataverse is reachable.")

    async def close(self) -> None:
        """Closes the shared HTTP client if this instance created it."""
        for api_client in (self._native, self._admin, self._sword):
            await api_client.aclose()
        if self._should_close_client and not self._http_client.is_closed:
            await self._http_client.aclose()
            logger.debug("DataverseInstance's HTTP client closed.")

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
