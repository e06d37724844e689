"""Core configuration.

Centralises environment variables (pydantic-settings) so that the CLI,
the transport adapter and the doctor read the same values.
"""

from __future__ import annotations

import codecs
import os
import sys
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "mini-ssl"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "mini-ssl"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "mini-ssl"
    return Path.home() / ".config" / "mini-ssl"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str]) -> Path:
    """Write or update variables in the user's global .env file."""

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# mini-ssl user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Application settings.

    Every field can be set with a `MINI_SSL_` prefixed environment variable,
    in `./.env` or in the user config `.env`; the later file in `env_file`
    wins, so the project `.env` overrides the user one.
    """

    model_config = SettingsConfigDict(
        env_prefix="MINI_SSL_",
        extra="ignore",
        case_sensitive=False,
        env_file=(str(get_user_env_file()), ".env"),
        env_file_encoding="utf-8",
    )

    http_port: int = Field(
        default=80,
        ge=1,
        le=65535,
        description="Port used when connecting to the target directly.",
    )
    proxy_url: str | None = Field(
        default=None,
        description="Default forward proxy for `client` when -p is not given.",
    )
    connect_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Socket timeout in seconds. Unset means block until the peer answers.",
    )
    read_chunk_size: int = Field(
        default=4096,
        ge=1,
        le=1 << 20,
        description="Bytes requested per recv() while draining the response.",
    )
    response_encoding: str = Field(
        default="utf-8",
        min_length=1,
        description="Encoding used to turn the response bytes into text.",
    )
    show_request: bool = Field(
        default=True,
        description="Print the outgoing request header block before sending it.",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Level for the rich logging handler.",
    )
    user_agent: str = Field(
        default="mini-ssl/0.1",
        min_length=1,
        description="User-Agent for the httpx client used by `doctor`.",
    )
    doctor_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout for the doctor HTTP probe (seconds).",
    )
    doctor_probe_url: str = Field(
        default="http://example.com/",
        min_length=8,
        description="URL fetched by `doctor run` to check connectivity.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("response_encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"unknown encoding: {value}") from exc
        return value
