"""Domain models (Pydantic v2).

These records describe *what* a parsed URL is, not *how* it was obtained.
The parsers in `core.services` are the only producers; everything else
(request builder, CLI, doctor) only reads them.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.config import ConfigDict

DEFAULT_HTTP_PORT = "80"


class ParsedUrl(BaseModel):
    """A target URL split into host and path.

    Invariants:
    - `host` carries no scheme prefix and no path.
    - `path` starts with `/` and ends with `/`.
    """

    model_config = ConfigDict(frozen=True)

    host: str = Field(
        ...,
        description="Host as written in the URL (may include an explicit :port).",
    )
    path: str = Field(
        ...,
        description="Request path, always slash-terminated.",
    )

    @field_validator("path")
    @classmethod
    def _check_path(cls, value: str) -> str:
        if not value.startswith("/") or not value.endswith("/"):
            raise ValueError("path must start and end with '/'")
        return value

    def absolute_form(self) -> str:
        """`http://host/path`, used in the request line sent to a proxy."""

        return f"http://{self.host}{self.path}"


class ParsedProxyUrl(BaseModel):
    """A forward-proxy address with optional Basic credentials."""

    model_config = ConfigDict(frozen=True)

    host: str = Field(..., description="Proxy host name or address.")
    port: str = Field(
        default=DEFAULT_HTTP_PORT,
        pattern=r"^\d+$",
        description="Proxy port as numeric text.",
    )
    username: str | None = Field(default=None, min_length=1)
    password: str | None = Field(default=None, min_length=1)

    @model_validator(mode="after")
    def _check_credentials(self) -> "ParsedProxyUrl":
        if (self.username is None) != (self.password is None):
            raise ValueError("username and password must be set together")
        if self.port == "0":
            raise ValueError("port 0 is not a usable port")
        return self

    @property
    def has_credentials(self) -> bool:
        return self.username is not None

    def display(self) -> str:
        """Printable form with the password redacted."""

        login = f"{self.username}:***@" if self.has_credentials else ""
        return f"http://{login}{self.host}:{self.port}"
