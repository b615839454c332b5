"""Builds absolute request URIs from the base URL, API prefix, version and sub-path."""

import httpx

from .exceptions import MalformedURIError


def resolve(base_url: str, reference: str) -> str:
    """Resolves a reference against the base URL (RFC 3986).

    The base URL is treated as a directory, so a base such as
    "https://host/dataverse" keeps its path. Absolute references come back
    unchanged, which makes resolving an already-built URI a no-op.

    Raises:
        MalformedURIError: If the base URL is not an absolute http(s) URL or
            the result is not a valid URL.
    """
    try:
        base = httpx.URL(base_url if base_url.endswith("/") else f"{base_url}/")
        if base.scheme not in ("http", "https") or not base.host:
            raise MalformedURIError(
                f"Base URL must be an absolute http(s) URL, got '{base_url}'",
                uri=base_url,
            )
        return str(base.join(reference))
    except httpx.InvalidURL as e:
        raise MalformedURIError(
            f"Cannot resolve '{reference}' against '{base_url}': {e}",
            uri=f"{base_url}|{reference}",
        ) from e


def build_uri(
    base_url: str, api_prefix: str, api_version: str | None, sub_path: str
) -> str:
    """Composes `{prefix}/v{version}/{sub_path}` and resolves it against the base URL.

    Empty segments are skipped: an empty prefix or a None version leaves no
    trace in the path. Percent-escapes already present in `sub_path` are kept
    as they are.

    Args:
        base_url: Root URL of the installation.
        api_prefix: e.g. "api"; may be empty.
        api_version: e.g. "1"; None for unversioned endpoints.
        sub_path: Endpoint path below the version segment.

    Returns:
        str: The absolute URI.

    Raises:
        MalformedURIError: If the composed string is not a valid URI.
    """
    segments = [
        api_prefix.strip("/"),
        f"v{api_version}" if api_version is not None else "",
        sub_path.lstrip("/"),
    ]
    relative = "/".join(segment for segment in segments if segment)
    if "://" in relative.split("?", 1)[0]:
        raise MalformedURIError(
            f"Sub-path must be relative, got '{sub_path}'", uri=sub_path
        )
    return resolve(base_url, relative)
