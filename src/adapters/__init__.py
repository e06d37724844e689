"""Adapters: concrete I/O (TCP sockets, httpx)."""
