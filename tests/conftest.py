from __future__ import annotations

import os
import socket
import threading
from dataclasses import dataclass, field

import pytest

from core.config import AppSettings

CANNED_RESPONSE = b"HTTP/1.1 200 OK\r\nContent-Length: 2\r\nConnection: close\r\n\r\nOK"


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Keep .env files (local and per-user) and MINI_SSL_* variables out of the tests.

    Returns the path that stands in for the user config .env.
    """

    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.upper().startswith("MINI_SSL_"):
            monkeypatch.delenv(key, raising=False)

    user_env = tmp_path / "user-config.env"
    monkeypatch.setitem(AppSettings.model_config, "env_file", (str(user_env), ".env"))
    return user_env


@dataclass
class LoopbackServer:
    address: tuple[str, int]
    response: bytes
    received: list[bytes] = field(default_factory=list)

    @property
    def request(self) -> bytes:
        return self.received[0]


class FakeTransport:
    def __init__(self, response: bytes = CANNED_RESPONSE) -> None:
        self.response = response
        self.written: list[bytes] = []
        self.read_calls = 0

    def write(self, data: bytes) -> None:
        self.written.append(data)

    def read_all(self) -> bytes:
        self.read_calls += 1
        return self.response


@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def http_server():
    """One-shot HTTP server on 127.0.0.1 that records the request it gets."""

    srv = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    srv.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    srv.bind(("127.0.0.1", 0))
    srv.listen(1)
    srv.settimeout(5.0)
    server = LoopbackServer(address=srv.getsockname(), response=CANNED_RESPONSE)

    def serve() -> None:
        try:
            conn, _addr = srv.accept()
        except OSError:
            return
        with conn:
            data = b""
            while b"\r\n\r\n" not in data:
                chunk = conn.recv(4096)
                if not chunk:
                    break
                data += chunk
            server.received.append(data)
            try:
                conn.sendall(server.response)
            except OSError:
                pass

    thread = threading.Thread(target=serve, daemon=True)
    thread.start()
    yield server
    thread.join(timeout=5.0)
    srv.close()
