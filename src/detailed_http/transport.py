"""Raw transport outcomes and their classification from httpx.

httpx owns the transport. This module only describes how a request attempt
concluded, as one of five mutually exclusive outcomes:

- ``BadUrlResponse``: the URL was rejected before any network attempt.
- ``TimeoutResponse``: no response within the deadline.
- ``NetworkErrorResponse``: the transport failed without a response.
- ``BadStatusResponse``: a response arrived with a status outside 200..299.
- ``GoodStatusResponse``: a response arrived with a status within 200..299.

Resolvers in ``detailed_http.resolve`` consume these values.
"""

from __future__ import annotations

from collections.abc import Mapping
import dataclasses
import logging
from typing import Literal

import httpx

from detailed_http._http import is_success_status

log = logging.getLogger(__name__)

BodyKind = Literal["text", "bytes"]


@dataclasses.dataclass(frozen=True, slots=True)
class Metadata:
    """Status line and headers of a received response."""

    url: str
    status_code: int
    status_text: str
    #: Lower-cased header names; repeated headers are joined with ``", "``.
    headers: Mapping[str, str] = dataclasses.field(default_factory=dict, hash=False)

    @classmethod
    def from_response(cls, response: httpx.Response) -> Metadata:
        return cls(
            url=str(response.url),
            status_code=response.status_code,
            status_text=response.reason_phrase,
            headers=dict(response.headers.items()),
        )


@dataclasses.dataclass(frozen=True, slots=True)
class BadUrlResponse:
    url: str


@dataclasses.dataclass(frozen=True, slots=True)
class TimeoutResponse:
    pass


@dataclasses.dataclass(frozen=True, slots=True)
class NetworkErrorResponse:
    pass


@dataclasses.dataclass(frozen=True, slots=True)
class BadStatusResponse[B]:
    metadata: Metadata
    body: B


@dataclasses.dataclass(frozen=True, slots=True)
class GoodStatusResponse[B]:
    metadata: Metadata
    body: B


type RawResponse[B] = (
    BadUrlResponse
    | TimeoutResponse
    | NetworkErrorResponse
    | BadStatusResponse[B]
    | GoodStatusResponse[B]
)


def to_outcome(
    response: httpx.Response, body_kind: BodyKind = "text"
) -> BadStatusResponse[str | bytes] | GoodStatusResponse[str | bytes]:
    """Classify a fully read httpx response by its status code.

    Args:
        response: A response whose body has already been read.
        body_kind: ``"text"`` keeps the decoded text, ``"bytes"`` the raw content.

    Returns:
        ``GoodStatusResponse`` for 200..299, ``BadStatusResponse`` otherwise.
    """
    metadata = Metadata.from_response(response)
    body: str | bytes = response.text if body_kind == "text" else response.content
    if is_success_status(response.status_code):
        log.debug("Classified %s as good status %d", metadata.url, metadata.status_code)
        return GoodStatusResponse(metadata, body)
    log.debug("Classified %s as bad status %d", metadata.url, metadata.status_code)
    return BadStatusResponse(metadata, body)


def outcome_from_exception(
    exc: BaseException, url: str
) -> BadUrlResponse | TimeoutResponse | NetworkErrorResponse | None:
    """Map an httpx failure to a transport outcome.

    Returns *None* when *exc* is not an httpx request failure, so the caller can
    re-raise it.
    """
    # UnsupportedProtocol and the timeouts are RequestErrors too: test them first.
    if isinstance(exc, (httpx.InvalidURL, httpx.UnsupportedProtocol)):
        log.debug("Rejected URL %r: %s", url, exc)
        return BadUrlResponse(url)
    if isinstance(exc, httpx.TimeoutException):
        log.debug("Timed out requesting %s: %s", url, exc)
        return TimeoutResponse()
    if isinstance(exc, httpx.RequestError):
        log.debug("Network error requesting %s: %s", url, exc)
        return NetworkErrorResponse()
    return None
