"""Tests for the authentication strategies."""

import base64

import httpx
import pytest

from dataverse_client.auth import (
    ApiKeyBasicAuth,
    ApiKeyHeaderAuth,
    NoAuth,
    create_auth_strategy,
)
from dataverse_client.exceptions import ConfigurationError


def _basic_credentials(request: httpx.Request) -> tuple[str, str]:
    scheme, encoded = request.headers["Authorization"].split(" ", 1)
    assert scheme == "Basic"
    user, _, password = base64.b64decode(encoded).decode().partition(":")
    return user, password


@pytest.mark.asyncio
async def test_no_auth_authenticate():
    """Test NoAuth strategy does not modify the request."""
    request = httpx.Request("GET", "http://example.com/api/v1/info/version")
    original_headers = dict(request.headers)
    await NoAuth().async_authenticate(request)
    assert dict(request.headers) == original_headers
    assert "unblock-key" not in request.url.params


@pytest.mark.asyncio
async def test_no_auth_adds_unblock_key():
    request = httpx.Request("GET", "http://example.com/api/admin/settings")
    await NoAuth(unblock_key="s3cret").async_authenticate(request)
    assert request.url.params["unblock-key"] == "s3cret"


def test_header_auth_init_no_token():
    """Test ApiKeyHeaderAuth raises ConfigurationError if no token is provided."""
    with pytest.raises(
        ConfigurationError, match="ApiKeyHeaderAuth requires a non-empty 'token'."
    ):
        ApiKeyHeaderAuth(token="")
    with pytest.raises(ConfigurationError):
        ApiKeyHeaderAuth(token=None)


@pytest.mark.asyncio
async def test_header_auth_sets_key_and_no_basic_credentials():
    request = httpx.Request("GET", "http://example.com/api/v1/dataverses/root")
    await ApiKeyHeaderAuth(token="test-token").async_authenticate(request)
    assert request.headers["X-Dataverse-key"] == "test-token"
    assert "Authorization" not in request.headers


@pytest.mark.asyncio
async def test_header_auth_keeps_caller_authorization_header():
    request = httpx.Request(
        "GET",
        "http://example.com/api/v1/dataverses/root",
        headers={"Authorization": "Bearer proxy-token"},
    )
    await ApiKeyHeaderAuth(token="test-token").async_authenticate(request)
    assert request.headers["Authorization"] == "Bearer proxy-token"
    assert request.headers["X-Dataverse-key"] == "test-token"


@pytest.mark.asyncio
async def test_header_auth_keeps_existing_params():
    request = httpx.Request(
        "GET",
        "http://example.com/api/v1/datasets/:persistentId",
        params={"persistentId": "doi:10.5072/FK2/ABC"},
    )
    await ApiKeyHeaderAuth(token="t", unblock_key="ub").async_authenticate(request)
    assert request.url.params["persistentId"] == "doi:10.5072/FK2/ABC"
    assert request.url.params["unblock-key"] == "ub"


@pytest.mark.asyncio
async def test_basic_auth_sets_credentials_and_no_key_header():
    request = httpx.Request("DELETE", "http://example.com/dvn/api/data-deposit/v1.1/x")
    await ApiKeyBasicAuth(token="test-token").async_authenticate(request)
    assert "X-Dataverse-key" not in request.headers
    assert _basic_credentials(request) == ("test-token", "")


def test_basic_auth_init_no_token():
    with pytest.raises(ConfigurationError):
        ApiKeyBasicAuth(token="")


@pytest.mark.parametrize(
    ("token", "via_basic_auth", "expected"),
    [
        (None, False, NoAuth),
        ("", True, NoAuth),
        ("abc", False, ApiKeyHeaderAuth),
        ("abc", True, ApiKeyBasicAuth),
    ],
)
def test_create_auth_strategy(token, via_basic_auth, expected):
    strategy = create_auth_strategy(token, via_basic_auth=via_basic_auth)
    assert isinstance(strategy, expected)


@pytest.mark.asyncio
@pytest.mark.parametrize("via_basic_auth", [True, False])
async def test_key_is_delivered_exactly_one_way(via_basic_auth):
    request = httpx.Request("GET", "http://example.com/some/path")
    strategy = create_auth_strategy("abc", via_basic_auth=via_basic_auth)
    await strategy.async_authenticate(request)
    assert ("X-Dataverse-key" in request.headers) is not via_basic_auth
    assert ("Authorization" in request.headers) is via_basic_auth


@pytest.mark.asyncio
async def test_strategies_close():
    for strategy in (NoAuth(), ApiKeyHeaderAuth("a"), ApiKeyBasicAuth("b")):
        await strategy.async_close()
