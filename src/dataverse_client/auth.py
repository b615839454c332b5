"""Authentication strategies for Dataverse requests.

Dataverse accepts the API token in one of two ways: in the `X-Dataverse-key`
header (the native API) or as the user name of HTTP basic auth with an empty
password (the SWORD deposit API). A strategy applies exactly one of them, so
the token is never submitted twice. Independently, admin endpoints called
from outside localhost need the `unblock-key` query parameter.
"""

from enum import Enum
from typing import Protocol

import httpx

from .constants import HEADER_DATAVERSE_KEY, PARAM_UNBLOCK_KEY
from .exceptions import ConfigurationError
from .log_config import logger


class AuthStrategyType(Enum):
    """Enumeration of the ways the API token can be delivered."""

    NONE = "none"
    HEADER = "header"
    BASIC = "basic"


class AuthStrategy(Protocol):
    """Protocol defining the interface for authentication strategies.

    Concrete implementations add authentication information (headers, basic
    credentials, query parameters) to an outgoing httpx.Request.
    """

    async def async_authenticate(self, request: httpx.Request) -> None:
        """
        Modifies the request in place to add authentication information.

        Args:
            request: The httpx.Request object to modify.
        """
        ...

    async def async_close(self) -> None:
        """Releases resources held by the strategy. Idempotent."""
        ...


def _add_unblock_key(request: httpx.Request, unblock_key: str | None) -> None:
    if unblock_key:
        request.url = request.url.copy_set_param(PARAM_UNBLOCK_KEY, unblock_key)


class NoAuth:
    """Implements the AuthStrategy protocol for anonymous requests.

    An unblock key is still added when given, since it is not tied to a user.
    """

    def __init__(self, unblock_key: str | None = None):
        self._unblock_key = unblock_key

    async def async_authenticate(self, request: httpx.Request) -> None:
        logger.trace("Using NoAuth strategy, no API token applied.")
        _add_unblock_key(request, self._unblock_key)

    async def async_close(self) -> None:
        """No resources to close for NoAuth, this method is a no-op."""


class ApiKeyHeaderAuth:
    """Sends the API token in the `X-Dataverse-key` header.

    Other headers on the request, including a caller's Authorization header,
    are left as they are.

    Attributes:
        _token: The API token.
        _unblock_key: Optional unblock key appended as query parameter.
    """

    def __init__(self, token: str | None, unblock_key: str | None = None):
        """Initializes the strategy.

        Raises:
            ConfigurationError: If the token is None or empty.
        """
        if not token:
            raise ConfigurationError("ApiKeyHeaderAuth requires a non-empty 'token'.")
        self._token: str = token
        self._unblock_key = unblock_key
        logger.debug("ApiKeyHeaderAuth initialized.")

    async def async_authenticate(self, request: httpx.Request) -> None:
        logger.trace("Authenticating request using ApiKeyHeaderAuth.")
        request.headers[HEADER_DATAVERSE_KEY] = self._token
        _add_unblock_key(request, self._unblock_key)

    async def async_close(self) -> None:
        """No resources to close for ApiKeyHeaderAuth, this method is a no-op."""


class ApiKeyBasicAuth:
    """Sends the API token as basic-auth user name with an empty password.

    Used by the SWORD deposit API, which does not read the `X-Dataverse-key`
    header.
    """

    def __init__(self, token: str | None, unblock_key: str | None = None):
        if not token:
            raise ConfigurationError("ApiKeyBasicAuth requires a non-empty 'token'.")
        self._basic_auth = httpx.BasicAuth(username=token, password="")
        self._unblock_key = unblock_key
        logger.debug("ApiKeyBasicAuth initialized.")

    async def async_authenticate(self, request: httpx.Request) -> None:
        logger.trace("Authenticating request using ApiKeyBasicAuth.")
        request.headers.pop(HEADER_DATAVERSE_KEY, None)
        # BasicAuth's flow sets the Authorization header on its first step.
        next(self._basic_auth.auth_flow(request))
        _add_unblock_key(request, self._unblock_key)

    async def async_close(self) -> None:
        """No resources to close for ApiKeyBasicAuth, this method is a no-op."""


def create_auth_strategy(
    token: str | None,
    *,
    via_basic_auth: bool = False,
    unblock_key: str | None = None,
) -> AuthStrategy:
    """Picks the strategy matching the token and the API family's delivery mode.

    Args:
        token: The API token; None or empty selects NoAuth.
        via_basic_auth: Deliver the token through basic auth instead of the header.
        unblock_key: Optional unblock key to add to every request.

    Returns:
        AuthStrategy: The strategy instance.
    """
    strategy_type = (
        AuthStrategyType.NONE
        if not token
        else AuthStrategyType.BASIC
        if via_basic_auth
        else AuthStrategyType.HEADER
    )
    logger.debug(f"Selected auth strategy type: {strategy_type.value}")
    if strategy_type is AuthStrategyType.BASIC:
        return ApiKeyBasicAuth(token, unblock_key)
    if strategy_type is AuthStrategyType.HEADER:
        return ApiKeyHeaderAuth(token, unblock_key)
    return NoAuth(unblock_key)
