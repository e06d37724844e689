"""Error hierarchy shared by parsers, transport adapters and the CLI.

All errors are fatal for the current run: the CLI catches `MiniSslError`,
prints `str(exc)` and exits non-zero.
"""

from __future__ import annotations


class MiniSslError(Exception):
    """Base class for every error the client reports to the user."""


class UrlError(MiniSslError):
    """The target URL could not be parsed."""


class MalformedTargetUrl(UrlError):
    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"Error - malformed URL '{url}'")


class ProxyUrlError(MiniSslError):
    """A proxy URL grammar violation.

    `fragment` is the piece of input the parser was looking at when it gave
    up, kept for diagnostics.
    """

    reason = "invalid proxy URL"

    def __init__(self, fragment: str) -> None:
        self.fragment = fragment
        super().__init__(f"{self.reason}: '{fragment}'")


class MalformedLoginInfo(ProxyUrlError):
    reason = "login info must look like 'username:password'"


class MissingUsername(ProxyUrlError):
    reason = "username is missing in proxy login info"


class MissingPassword(ProxyUrlError):
    reason = "password is missing in proxy login info"


class MissingPort(ProxyUrlError):
    reason = "port is missing after ':' in proxy address"


class InvalidPort(ProxyUrlError):
    reason = "port 0 is not a valid proxy port"


class TransportError(MiniSslError):
    """Anything that goes wrong once we leave the parsers and touch the network."""


class NameResolutionFailure(TransportError):
    def __init__(self, host: str, port: int | str, detail: str = "") -> None:
        self.host = host
        self.port = port
        message = f"Error in name resolution for {host}:{port}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class NoIPv4Address(TransportError):
    def __init__(self, host: str, port: int | str) -> None:
        self.host = host
        self.port = port
        super().__init__(f"Invalid Host:Port combination ({host}:{port} has no IPv4 address).")


class ConnectFailure(TransportError):
    def __init__(self, address: tuple[str, int], detail: str) -> None:
        self.address = address
        super().__init__(f"Unable to connect to host {address[0]}:{address[1]}: {detail}")


class StreamFailure(TransportError):
    """Read or write on an established connection failed (includes timeouts)."""
