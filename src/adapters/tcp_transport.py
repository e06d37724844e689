"""Plain TCP transport (IPv4 only).

Resolution and connection are separate steps so the caller can report the
resolved address before connecting. The connection is handed out through a
context manager that always closes the socket.
"""

from __future__ import annotations

import logging
import socket
from collections.abc import Iterator
from contextlib import contextmanager

from core.config import AppSettings
from core.domain.errors import (
    ConnectFailure,
    NameResolutionFailure,
    NoIPv4Address,
    StreamFailure,
)

logger = logging.getLogger(__name__)


def resolve_ipv4(host: str, port: int | str) -> tuple[str, int]:
    """Resolve `host:port` and return the first IPv4 socket address."""

    if not host:
        raise NameResolutionFailure(host, port, "empty host name")
    if not 0 < int(port) <= 65535:
        raise NameResolutionFailure(host, port, "port out of range")

    try:
        infos = socket.getaddrinfo(host, int(port), type=socket.SOCK_STREAM)
    except (OSError, UnicodeError) as exc:
        raise NameResolutionFailure(host, port, str(exc)) from exc

    logger.debug("Resolved %s:%s to %s", host, port, [info[4] for info in infos])

    for family, _type, _proto, _canonname, sockaddr in infos:
        if family == socket.AF_INET:
            return sockaddr[0], sockaddr[1]
    raise NoIPv4Address(host, port)


class TcpTransport:
    """`core.interfaces.transport.Transport` over a connected socket."""

    def __init__(self, sock: socket.socket, *, chunk_size: int = 4096) -> None:
        self._sock = sock
        self._chunk_size = chunk_size

    def write(self, data: bytes) -> None:
        try:
            self._sock.sendall(data)
        except OSError as exc:
            raise StreamFailure(f"Failed to send message to tcp stream: {exc}") from exc

    def read_all(self) -> bytes:
        chunks: list[bytes] = []
        try:
            while True:
                chunk = self._sock.recv(self._chunk_size)
                if not chunk:
                    break
                chunks.append(chunk)
        except OSError as exc:
            raise StreamFailure(f"Failed to read from tcp stream: {exc}") from exc
        return b"".join(chunks)


@contextmanager
def open_connection(
    address: tuple[str, int],
    settings: AppSettings | None = None,
) -> Iterator[TcpTransport]:
    """Connect to an IPv4 `address` and yield a transport for it."""

    settings = settings or AppSettings()
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.settimeout(settings.connect_timeout_seconds)
        try:
            sock.connect(address)
        except OSError as exc:
            raise ConnectFailure(address, str(exc)) from exc
        logger.debug("Connected to %s:%s", *address)
        yield TcpTransport(sock, chunk_size=settings.read_chunk_size)
    finally:
        sock.close()
