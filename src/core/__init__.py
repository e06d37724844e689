"""Core: domain models, configuration and services.

The core knows how to parse URLs and format requests; sockets live in
`adapters`.
"""
