"""Configuration: frozen ClientConfig for clients the library creates itself."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

import httpx

from detailed_http.errors import ConfigurationError

# Header values that never appear in str()/repr() output.
_REDACTED_HEADERS: frozenset[str] = frozenset({"authorization", "cookie"})


def validate_headers(headers: object) -> None:
    """Raise ``ConfigurationError`` unless *headers* maps str names to str values."""
    if not isinstance(headers, Mapping):
        raise ConfigurationError(
            "headers must be a mapping of header name to value",
            hint="Pass headers={'Accept': 'application/json'}.",
        )
    for name, value in headers.items():
        if not isinstance(name, str) or not isinstance(value, str):
            raise ConfigurationError(
                f"header {name!r} must have a string name and value",
                hint="Convert header values with str() before passing them.",
            )


@dataclass(frozen=True)
class ClientConfig:
    """Immutable settings for the httpx client built by ``send``/``asend``.

    Only used when no client is passed in. A caller-owned client keeps its
    own settings.

    Example:
        config = ClientConfig(timeout_s=5.0, headers={"Accept": "application/json"})
        result = send(RequestSpec("GET", url, expect=expect_string()), config=config)
    """

    #: Seconds before a request counts as ``Timeout``; *None* disables the deadline.
    timeout_s: float | None = 30.0
    headers: Mapping[str, str] = field(default_factory=dict)
    #: Passed straight to httpx.
    follow_redirects: bool = False

    def __post_init__(self) -> None:
        """Validate settings early for clear errors."""
        if self.timeout_s is not None and (
            isinstance(self.timeout_s, bool)
            or not isinstance(self.timeout_s, int | float)
            or self.timeout_s <= 0
        ):
            raise ConfigurationError(
                f"timeout_s must be a positive number or None, got {self.timeout_s!r}",
                hint="Pass timeout_s=10.0, or timeout_s=None to wait indefinitely.",
            )
        validate_headers(self.headers)

    def build_client(self) -> httpx.Client:
        return httpx.Client(
            headers=dict(self.headers),
            timeout=self.timeout_s,
            follow_redirects=self.follow_redirects,
        )

    def build_async_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            headers=dict(self.headers),
            timeout=self.timeout_s,
            follow_redirects=self.follow_redirects,
        )

    def __str__(self) -> str:
        """Return a redacted, developer-friendly representation."""
        shown = {
            name: "[REDACTED]" if name.lower() in _REDACTED_HEADERS else value
            for name, value in self.headers.items()
        }
        return (
            f"ClientConfig(timeout_s={self.timeout_s!r}, headers={shown!r}, "
            f"follow_redirects={self.follow_redirects!r})"
        )

    __repr__ = __str__
