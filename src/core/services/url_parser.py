"""Target URL parsing.

The grammar is deliberately loose: everything after the first `//` up to
the next `/` is the host, the rest is the path. No scheme validation, no
port extraction, no query handling. The path is always slash-terminated.
"""

from __future__ import annotations

from core.domain.errors import MalformedTargetUrl
from core.domain.models import ParsedUrl

SCHEME_SEPARATOR = "//"


def parse_url(uri: str) -> ParsedUrl | None:
    """Split `uri` into host and path, or return None when it has no `//`."""

    if not uri:
        return None

    # The appended slash only serves to find the end of the host; it also
    # guarantees the resulting path is slash-terminated.
    if not uri.endswith("/"):
        uri = uri + "/"

    separator_pos = uri.find(SCHEME_SEPARATOR)
    if separator_pos == -1:
        return None
    host_start = separator_pos + len(SCHEME_SEPARATOR)

    path_start = uri.find("/", host_start)
    if path_start == -1:
        return None

    return ParsedUrl(host=uri[host_start:path_start], path=uri[path_start:])


def parse_target_url(uri: str) -> ParsedUrl:
    """Like `parse_url` but raises `MalformedTargetUrl` instead of returning None."""

    parsed = parse_url(uri)
    if parsed is None:
        raise MalformedTargetUrl(uri)
    return parsed
