"""Masks credentials in URLs before they reach logs or error messages.

The API token travels in a header or in basic auth and never shows up in a
URL, but the admin unblock key and the builtin-user password and key are query
parameters. Never mutates its input.
"""

import httpx

from .constants import REDACTED, SENSITIVE_QUERY_PARAMS


def redact_url(url: httpx.URL | str) -> httpx.URL:
    """Returns a copy of `url` with every sensitive query value replaced."""
    redacted = httpx.URL(url)
    for name in SENSITIVE_QUERY_PARAMS:
        if name in redacted.params:
            redacted = redacted.copy_set_param(name, REDACTED)
    return redacted
