"""Byte-stream transport contract.

Rules:
- `write` sends the whole buffer or raises.
- `read_all` blocks until the peer closes the stream and returns everything
  received.
- Failures surface as `core.domain.errors.TransportError`.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Transport(Protocol):
    """Minimal contract the request builder needs from a connection."""

    def write(self, data: bytes) -> None:
        ...

    def read_all(self) -> bytes:
        ...
