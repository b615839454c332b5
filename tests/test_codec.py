"""Tests for the JSON codec."""

import json

import pytest

from dataverse_client.codec import JsonCodec, decode_as
from dataverse_client.exceptions import DecodeError
from dataverse_client.models import FileMeta, RoleAssignment


def test_dumps_model_without_none_fields():
    text = JsonCodec().dumps(FileMeta(label="data.csv", restrict=False))
    assert json.loads(text) == {"label": "data.csv", "restrict": False}


def test_dumps_nested_models():
    payload = {"assignments": [RoleAssignment(assignee="@user", role="curator")]}
    text = JsonCodec().dumps(payload)
    assert json.loads(text) == {
        "assignments": [{"assignee": "@user", "role": "curator"}]
    }


def test_pretty_and_compact_codecs_are_independent():
    data = {"a": 1}
    assert "\n" in JsonCodec(pretty=True).dumps(data)
    assert "\n" not in JsonCodec().dumps(data)


def test_dumps_keeps_non_ascii():
    assert JsonCodec().dumps("Zürich") == '"Zürich"'


def test_loads_invalid_json():
    with pytest.raises(DecodeError):
        JsonCodec().loads("{")


def test_decode_as_primitives():
    assert decode_as(bool)(True) is True
    with pytest.raises(DecodeError):
        decode_as(list[int])({"not": "a list"})
