from __future__ import annotations

import base64

from core.domain.models import ParsedProxyUrl, ParsedUrl
from core.interfaces.transport import Transport
from core.services.request_builder import basic_credentials, build_get_request, send_get

TARGET = ParsedUrl(host="h", path="/p/")


def test_request_without_proxy():
    assert build_get_request(TARGET) == "GET /p/ HTTP/1.1\r\nHOST: h\r\nConnection: close\r\n\r\n"


def test_request_through_proxy_without_credentials_uses_absolute_form():
    proxy = ParsedProxyUrl(host="proxy.local", port="3128")
    assert build_get_request(TARGET, proxy) == (
        "GET http://h/p/ HTTP/1.1\r\nHOST: h\r\nConnection: close\r\n\r\n"
    )


def test_request_through_proxy_with_credentials_sends_both_auth_headers():
    proxy = ParsedProxyUrl(host="proxy.local", port="3128", username="username", password="password")
    token = base64.b64encode(b"username:password").decode("ascii")

    request = build_get_request(TARGET, proxy)

    assert request == (
        "GET http://h/p/ HTTP/1.1\r\n"
        f"Proxy-Authorization: Basic {token}\r\n"
        f"Authorization: Basic {token}\r\n"
        "HOST: h\r\n"
        "Connection: close\r\n"
        "\r\n"
    )


def test_basic_credentials():
    proxy = ParsedProxyUrl(host="p", username="Aladdin", password="open sesame")
    assert basic_credentials(proxy) == "QWxhZGRpbjpvcGVuIHNlc2FtZQ=="


def test_send_get_writes_request_then_reads_to_eof(fake_transport):
    assert isinstance(fake_transport, Transport)

    response = send_get(fake_transport, TARGET)

    assert fake_transport.written == [b"GET /p/ HTTP/1.1\r\nHOST: h\r\nConnection: close\r\n\r\n"]
    assert fake_transport.read_calls == 1
    assert response == fake_transport.response.decode("utf-8")


def test_send_get_replaces_undecodable_bytes(fake_transport):
    fake_transport.response = b"HTTP/1.1 200 OK\r\n\r\n\xff"

    response = send_get(fake_transport, TARGET)

    assert response.endswith("�")


def test_send_get_honours_encoding(fake_transport):
    fake_transport.response = "café".encode("latin-1")

    assert send_get(fake_transport, TARGET, encoding="latin-1") == "café"
