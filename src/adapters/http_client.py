"""httpx wrapper used for diagnostics.

The client itself speaks HTTP over raw sockets; this builder gives `doctor`
an independent reference path (same proxy, same settings) to compare with.
"""

from __future__ import annotations

from urllib.parse import quote

import httpx

from core.config import AppSettings
from core.domain.models import ParsedProxyUrl


def proxy_to_httpx_url(proxy: ParsedProxyUrl) -> str:
    """Render a parsed proxy as a URL httpx accepts (credentials percent-encoded)."""

    login = ""
    if proxy.has_credentials:
        login = f"{quote(proxy.username or '', safe='')}:{quote(proxy.password or '', safe='')}@"
    return f"http://{login}{proxy.host}:{proxy.port}"


def build_async_client(
    settings: AppSettings | None = None,
    *,
    proxy: ParsedProxyUrl | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the application defaults.

    `transport` replaces the network layer (tests pass an
    `httpx.MockTransport`); when it is given the proxy is not used.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "*/*",
    }
    kwargs: dict[str, object] = {}
    if transport is not None:
        kwargs["transport"] = transport
    elif proxy is not None:
        kwargs["proxy"] = proxy_to_httpx_url(proxy)

    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.doctor_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        **kwargs,
    )
