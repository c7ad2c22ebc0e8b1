"""Test helpers (small, reusable doubles).

Keep this file tiny and purpose-built: metadata builders and MockTransport
handlers shared by the resolver and request suites.
"""

from __future__ import annotations

from collections.abc import Callable

import httpx

from detailed_http.transport import Metadata

Handler = Callable[[httpx.Request], httpx.Response]


def make_metadata(
    status_code: int = 200,
    status_text: str = "OK",
    *,
    url: str = "https://api.example.test/items",
    headers: dict[str, str] | None = None,
) -> Metadata:
    """Build Metadata with sensible defaults for resolver tests."""
    return Metadata(
        url=url,
        status_code=status_code,
        status_text=status_text,
        headers=headers if headers is not None else {"content-type": "application/json"},
    )


def respond_with(
    status_code: int,
    body: str | bytes = "",
    *,
    headers: dict[str, str] | None = None,
) -> Handler:
    """MockTransport handler that always answers with the given response."""

    def handler(request: httpx.Request) -> httpx.Response:
        del request
        content = body.encode("utf-8") if isinstance(body, str) else body
        return httpx.Response(status_code, content=content, headers=headers)

    return handler


def raise_with(exc_type: type[httpx.RequestError], message: str = "boom") -> Handler:
    """MockTransport handler that fails the way a broken transport would."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise exc_type(message, request=request)

    return handler
