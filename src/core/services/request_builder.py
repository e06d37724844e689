"""HTTP/1.1 GET request formatting and exchange.

The request is a bare header block: no body, `Connection: close` so that the
response ends when the server closes the stream. The response is returned as
text, unparsed.
"""

from __future__ import annotations

import base64
import logging

from core.domain.models import ParsedProxyUrl, ParsedUrl
from core.interfaces.transport import Transport

CRLF = "\r\n"

logger = logging.getLogger(__name__)


def basic_credentials(proxy: ParsedProxyUrl) -> str:
    """Base64 of `username:password` for a Basic authorization header."""

    raw = f"{proxy.username}:{proxy.password}".encode("utf-8")
    return base64.b64encode(raw).decode("ascii")


def build_get_request(target: ParsedUrl, proxy: ParsedProxyUrl | None = None) -> str:
    """Format the request header block for `target`.

    Through a proxy the request line uses the absolute form so that the
    proxy can see the origin. Proxy credentials are sent twice, as
    `Proxy-Authorization` and as `Authorization`, with the same payload.
    """

    if proxy is None:
        header = f"GET {target.path} HTTP/1.1{CRLF}"
    else:
        header = f"GET {target.absolute_form()} HTTP/1.1{CRLF}"
        if proxy.has_credentials:
            token = basic_credentials(proxy)
            header += f"Proxy-Authorization: Basic {token}{CRLF}"
            # FIXME: this repeats the proxy credentials to the origin server;
            # kept until there is a way to pass origin credentials separately.
            header += f"Authorization: Basic {token}{CRLF}"

    header += f"HOST: {target.host}{CRLF}Connection: close{CRLF}{CRLF}"
    return header


def send_get(
    transport: Transport,
    target: ParsedUrl,
    proxy: ParsedProxyUrl | None = None,
    *,
    encoding: str = "utf-8",
) -> str:
    """Write the GET request to `transport` and read the response to EOF.

    Transport errors propagate unchanged. Bytes that do not decode with
    `encoding` are replaced.
    """

    request = build_get_request(target, proxy)
    payload = request.encode("utf-8")
    transport.write(payload)
    logger.debug("Sent %d bytes for %s%s", len(payload), target.host, target.path)

    raw = transport.read_all()
    logger.debug("Received %d bytes", len(raw))
    return raw.decode(encoding, errors="replace")
