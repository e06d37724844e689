"""Proxy URL parsing.

Accepted shape (every part but the host is optional)::

    [http://][username:password@]host[:port][/ignored]

Rules:
- Scanning is strictly left to right; the first violation raises.
- Credentials come as a pair or not at all.
- The port defaults to "80" and may never be "0".
"""

from __future__ import annotations

from core.domain.errors import (
    InvalidPort,
    MalformedLoginInfo,
    MissingPassword,
    MissingPort,
    MissingUsername,
)
from core.domain.models import DEFAULT_HTTP_PORT, ParsedProxyUrl

HTTP_SCHEME = "http://"


def _strip_scheme(uri: str) -> str:
    scheme_pos = uri.find(HTTP_SCHEME)
    if scheme_pos == -1:
        return uri
    return uri[scheme_pos + len(HTTP_SCHEME):]


def _split_login_info(login_info: str) -> tuple[str, str]:
    colon_pos = login_info.find(":")
    if colon_pos == -1:
        raise MalformedLoginInfo(login_info)
    if colon_pos == 0:
        raise MissingUsername(login_info)
    if colon_pos == len(login_info) - 1:
        raise MissingPassword(login_info)
    return login_info[:colon_pos], login_info[colon_pos + 1:]


def _split_host_port(address: str) -> tuple[str, str]:
    colon_pos = address.find(":")
    if colon_pos == -1:
        return address, DEFAULT_HTTP_PORT

    port = address[colon_pos + 1:]
    if not port:
        raise MissingPort(address)
    if port == "0":
        raise InvalidPort(address)
    if not (port.isascii() and port.isdigit()):
        raise InvalidPort(address)
    return address[:colon_pos], port


def parse_proxy_url(uri: str) -> ParsedProxyUrl:
    """Parse a proxy URL into host, port and optional credentials.

    Raises a `core.domain.errors.ProxyUrlError` subclass on the first
    grammar violation found.
    """

    rest = _strip_scheme(uri)

    username: str | None = None
    password: str | None = None
    at_pos = rest.find("@")
    if at_pos != -1:
        username, password = _split_login_info(rest[:at_pos])
        rest = rest[at_pos + 1:]

    # Proxies carry no meaningful path.
    slash_pos = rest.find("/")
    if slash_pos != -1:
        rest = rest[:slash_pos]

    host, port = _split_host_port(rest)
    return ParsedProxyUrl(host=host, port=port, username=username, password=password)
