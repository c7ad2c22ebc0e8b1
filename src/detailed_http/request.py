"""Request records and sending them through httpx.

httpx performs the request; this module only turns what it produces
(a response or a transport exception) into a raw outcome and hands that to
the request's ``Expect`` resolver.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
import logging
from typing import TYPE_CHECKING

import httpx

from detailed_http.config import ClientConfig, validate_headers
from detailed_http.errors import ConfigurationError
from detailed_http.transport import outcome_from_exception, to_outcome

if TYPE_CHECKING:
    from detailed_http.resolve import Expect
    from detailed_http.transport import RawResponse

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestSpec[R]:
    """Everything needed to make one request and resolve its outcome."""

    method: str
    url: str
    expect: Expect[R]
    headers: Mapping[str, str] = field(default_factory=dict)
    body: str | bytes | None = None
    #: Overrides the client's timeout for this request only.
    timeout_s: float | None = None

    def __post_init__(self) -> None:
        """Validate the record so httpx never sees an obviously broken request."""
        if not isinstance(self.method, str) or not self.method.strip():
            raise ConfigurationError(
                "method must be a non-empty string",
                hint="Pass method='GET', 'POST', ...",
            )
        if not isinstance(self.url, str):
            raise ConfigurationError(
                f"url must be a string, got {type(self.url).__name__}",
                hint="Pass the full URL, e.g. 'https://example.com/items'.",
            )
        validate_headers(self.headers)
        if self.body is not None and not isinstance(self.body, str | bytes):
            raise ConfigurationError(
                f"body must be str, bytes or None, got {type(self.body).__name__}",
                hint="Serialize structured payloads (e.g. json.dumps) before sending.",
            )
        if self.timeout_s is not None and (
            isinstance(self.timeout_s, bool)
            or not isinstance(self.timeout_s, int | float)
            or self.timeout_s <= 0
        ):
            raise ConfigurationError(
                f"timeout_s must be a positive number or None, got {self.timeout_s!r}",
                hint="Leave timeout_s=None to use the client's timeout.",
            )


def _build_request(
    client: httpx.Client | httpx.AsyncClient, spec: RequestSpec
) -> httpx.Request:
    return client.build_request(
        spec.method.upper(),
        spec.url,
        headers=dict(spec.headers),
        content=spec.body,
        timeout=httpx.USE_CLIENT_DEFAULT if spec.timeout_s is None else spec.timeout_s,
    )


def _outcome_or_raise(exc: Exception, url: str) -> RawResponse[str | bytes]:
    outcome = outcome_from_exception(exc, url)
    if outcome is None:
        raise exc
    return outcome


def send[R](
    spec: RequestSpec[R],
    *,
    client: httpx.Client | None = None,
    config: ClientConfig | None = None,
) -> R:
    """Send *spec* with a blocking httpx client and resolve the outcome.

    Args:
        spec: The request record.
        client: Optional caller-owned client; it is never closed here.
        config: Settings for the client created when *client* is omitted.

    Returns:
        Whatever ``spec.expect`` resolves to, typically an ``Ok``/``Err`` result.
    """
    owns_client = client is None
    http = client if client is not None else (config or ClientConfig()).build_client()
    log.debug("Sending %s %s", spec.method, spec.url)
    try:
        try:
            response = http.send(_build_request(http, spec))
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            outcome = _outcome_or_raise(exc, spec.url)
        else:
            outcome = to_outcome(response, spec.expect.body_kind)
    finally:
        if owns_client:
            try:
                http.close()
            except Exception as exc:
                # Cleanup should never mask the primary failure.
                log.warning("Client cleanup failed: %s", exc)
    return spec.expect.resolve(outcome)


async def asend[R](
    spec: RequestSpec[R],
    *,
    client: httpx.AsyncClient | None = None,
    config: ClientConfig | None = None,
) -> R:
    """Async counterpart of ``send`` built on ``httpx.AsyncClient``."""
    owns_client = client is None
    if client is None:
        http = (config or ClientConfig()).build_async_client()
    else:
        http = client
    log.debug("Sending %s %s", spec.method, spec.url)
    try:
        try:
            response = await http.send(_build_request(http, spec))
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            outcome = _outcome_or_raise(exc, spec.url)
        else:
            outcome = to_outcome(response, spec.expect.body_kind)
    finally:
        if owns_client:
            try:
                await http.aclose()
            except Exception as exc:
                log.warning("Client cleanup failed: %s", exc)
    return spec.expect.resolve(outcome)
