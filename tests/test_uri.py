"""Tests for composing request URIs."""

import pytest

from dataverse_client.exceptions import MalformedURIError
from dataverse_client.uri import build_uri, resolve

BASE = "https://dataverse.example.org"


def test_build_uri_versioned_native_path():
    uri = build_uri(BASE, "api", "1", "dataverses/root")
    assert uri == "https://dataverse.example.org/api/v1/dataverses/root"


def test_build_uri_unversioned_without_prefix():
    uri = build_uri(BASE, "", None, "api/admin/settings/:AllowSignUp")
    assert uri == "https://dataverse.example.org/api/admin/settings/:AllowSignUp"


def test_build_uri_sword_prefix():
    uri = build_uri(BASE, "dvn/api/data-deposit", "1.1", "swordv2/edit-media/file/42")
    assert uri == (
        "https://dataverse.example.org/dvn/api/data-deposit/v1.1/"
        "swordv2/edit-media/file/42"
    )


def test_build_uri_keeps_base_path():
    uri = build_uri("https://host.example.org/dataverse", "api", "1", "info/version")
    assert uri == "https://host.example.org/dataverse/api/v1/info/version"


def test_build_uri_ignores_surrounding_slashes():
    uri = build_uri(f"{BASE}/", "/api/", "1", "/datasets/5")
    assert uri == "https://dataverse.example.org/api/v1/datasets/5"


def test_build_uri_does_not_double_encode():
    uri = build_uri(BASE, "api", "1", "access/datafile/doi:10.5072%2FFK2")
    assert "%2F" in uri
    assert "%252F" not in uri


def test_resolve_is_idempotent():
    once = build_uri(BASE, "api", "1", "datasets/:persistentId/versions/:draft")
    assert resolve(BASE, once) == once


@pytest.mark.parametrize("base_url", ["dataverse.example.org", "ftp://host/", "https://"])
def test_invalid_base_url(base_url):
    with pytest.raises(MalformedURIError):
        build_uri(base_url, "api", "1", "dataverses/root")


def test_absolute_sub_path_is_rejected():
    with pytest.raises(MalformedURIError):
        build_uri(BASE, "", None, "https://elsewhere.example.org/api")
