"""Client fetch orchestration.

Parses the inputs, picks the address to connect to (proxy or target),
opens the transport and runs the GET exchange. Printing is left to the
caller through `FetchHooks` so the same flow serves the CLI and tests.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from adapters.tcp_transport import open_connection, resolve_ipv4
from core.config import AppSettings
from core.domain.models import ParsedProxyUrl, ParsedUrl
from core.services.proxy_url_parser import parse_proxy_url
from core.services.request_builder import build_get_request, send_get
from core.services.url_parser import parse_target_url

logger = logging.getLogger(__name__)


@dataclass
class FetchRequest:
    """Raw command-line inputs for one fetch."""

    target_url: str
    proxy_url: str | None = None


@dataclass
class FetchHooks:
    """Optional callbacks for UI layers (progress lines, request echo)."""

    info: Callable[[str], None] | None = None
    request_built: Callable[[str], None] | None = None


@dataclass
class FetchResult:
    target: ParsedUrl
    proxy: ParsedProxyUrl | None
    address: tuple[str, int]
    request: str
    response: str


def split_host_port(host: str, default_port: int) -> tuple[str, int]:
    """Split an explicit `:port` off a target host, if there is a numeric one."""

    name, sep, port = host.rpartition(":")
    if sep and name and port.isascii() and port.isdigit():
        return name, int(port)
    return host, default_port


def connect_endpoint(
    target: ParsedUrl,
    proxy: ParsedProxyUrl | None,
    settings: AppSettings,
) -> tuple[str, int]:
    """Host and port the socket should reach: the proxy when present, else the target."""

    if proxy is not None:
        return proxy.host, int(proxy.port)
    return split_host_port(target.host, settings.http_port)


def fetch(
    *,
    settings: AppSettings,
    request: FetchRequest,
    hooks: FetchHooks | None = None,
) -> FetchResult:
    """Run one GET exchange end to end.

    Both URLs are parsed before any network I/O so malformed input fails
    fast. Raises `core.domain.errors.MiniSslError` subclasses.
    """

    hooks = hooks or FetchHooks()

    def info(message: str) -> None:
        logger.debug(message)
        if hooks.info:
            hooks.info(message)

    proxy = parse_proxy_url(request.proxy_url) if request.proxy_url is not None else None
    target = parse_target_url(request.target_url)

    info(f"Connecting to host {target.host}")
    if proxy is not None:
        info(f"Using proxy {proxy.display()}")

    host, port = connect_endpoint(target, proxy, settings)
    address = resolve_ipv4(host, port)
    info(f"Resolved IP: {address[0]}:{address[1]}")

    request_text = build_get_request(target, proxy)
    with open_connection(address, settings) as transport:
        info(f"Retrieving document: '{target.path}'")
        info("GET request sending...")
        if hooks.request_built:
            hooks.request_built(request_text)
        response = send_get(transport, target, proxy, encoding=settings.response_encoding)

    return FetchResult(
        target=target,
        proxy=proxy,
        address=address,
        request=request_text,
        response=response,
    )
