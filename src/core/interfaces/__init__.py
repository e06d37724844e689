"""Core abstractions (Protocol) implemented by adapters.

The core depends on these contracts, never on sockets directly.
"""
