"""Domain models and errors.

The domain knows nothing about sockets, the CLI or configuration: only
parsed URLs and the ways parsing or transport can fail.
"""
