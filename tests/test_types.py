"""Tests for resource addressing and the request descriptor."""

import httpx
import pytest
from pydantic import ValidationError

from dataverse_client.types import (
    MultipartPayload,
    NumericId,
    PersistentId,
    RequestData,
    resource_id,
    target_path,
)


def test_resource_id_from_int_and_str():
    assert resource_id(5) == NumericId(value=5)
    assert resource_id("doi:10.5072/FK2/ABC") == PersistentId(
        value="doi:10.5072/FK2/ABC"
    )
    pid = PersistentId(value="hdl:1902.1/111")
    assert resource_id(pid) is pid


def test_resource_id_rejects_bool():
    with pytest.raises(TypeError):
        resource_id(True)


def test_target_path_numeric():
    assert target_path("datasets", NumericId(value=5), "locks") == (
        "datasets/5/locks",
        {},
    )


def test_target_path_persistent():
    assert target_path("files", PersistentId(value="doi:10.5072/FK2/F1"), "restrict") == (
        "files/:persistentId/restrict",
        {"persistentId": "doi:10.5072/FK2/F1"},
    )


def test_target_path_without_endpoint():
    assert target_path("datasets", NumericId(value=5)) == ("datasets/5", {})


def test_multipart_requires_a_part():
    with pytest.raises(ValidationError):
        MultipartPayload()


def test_request_data_is_immutable():
    data = RequestData(method="GET", sub_path="x", url="https://example.org/x")
    with pytest.raises(ValidationError):
        data.method = "POST"


@pytest.mark.asyncio
async def test_open_request_builds_fresh_requests(tmp_path):
    data_file = tmp_path / "f.bin"
    data_file.write_bytes(b"payload")
    data = RequestData(
        method="POST",
        sub_path="datasets/1/add",
        url="https://example.org/api/v1/datasets/1/add",
        params={"a": "b"},
        multipart=MultipartPayload(file=data_file),
    )
    async with httpx.AsyncClient() as client:
        with data.open_request(client, httpx.Timeout(3)) as first:
            first_body = b"".join([chunk async for chunk in first.stream])
        with data.open_request(client, httpx.Timeout(3)) as second:
            second_body = b"".join([chunk async for chunk in second.stream])

    assert first is not second
    assert first.url.params["a"] == "b"
    assert b"payload" in first_body
    assert first_body.count(b"payload") == second_body.count(b"payload") == 1
