"""Rich UI components for the CLI.

Keeps visual details out of the command functions so `client` and `doctor`
can share them.
"""

from __future__ import annotations

import logging

from rich.align import Align
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.config import AppSettings


def configure_logging(level: str, console: Console) -> None:
    """Route stdlib logging through a RichHandler on `console`."""

    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False, markup=False)],
        force=True,
    )


def print_banner(console: Console) -> None:
    """Print the welcome banner (skipped in non-interactive use)."""

    title = Text("mini-ssl", style="bold cyan")
    subtitle = Text("Plaintext HTTP/1.1 GET • forward proxies • Basic auth", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_request_panel(request: str) -> Panel:
    """Panel showing the outgoing header block, one header per line."""

    body = Text(request.replace("\r\n", "\n").rstrip("\n"))
    return Panel(body, title="-- Request --", title_align="left", border_style="blue")


def build_settings_table(settings: AppSettings) -> Table:
    table = Table(title="Settings")
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")

    timeout = settings.connect_timeout_seconds
    table.add_row("http_port", str(settings.http_port))
    table.add_row("connect_timeout_seconds", "none (blocking)" if timeout is None else f"{timeout:g}")
    table.add_row("read_chunk_size", str(settings.read_chunk_size))
    table.add_row("response_encoding", settings.response_encoding)
    table.add_row("log_level", settings.log_level.upper())
    return table
