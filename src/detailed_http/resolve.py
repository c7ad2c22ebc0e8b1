"""Resolvers: turn a raw transport outcome into a ``Result``.

Both resolvers are total. Every outcome maps to exactly one ``Ok`` or ``Err``
and no outcome raises. Decoding is attempted only for success statuses; a
success status with an undecodable body is ``BadJson``, never ``BadStatus``.
"""

from __future__ import annotations

from collections.abc import Callable
import dataclasses
import logging
from typing import Any, assert_never

from pydantic import TypeAdapter, ValidationError

from detailed_http.failures import (
    BadJson,
    BadStatus,
    BadUrl,
    DecodeError,
    Error,
    NetworkError,
    Timeout,
)
from detailed_http.result import Err, Ok, ResolvedData, Result
from detailed_http.transport import (
    BadStatusResponse,
    BadUrlResponse,
    BodyKind,
    GoodStatusResponse,
    NetworkErrorResponse,
    RawResponse,
    TimeoutResponse,
)

log = logging.getLogger(__name__)

#: A type ``pydantic.TypeAdapter`` accepts, or a prebuilt adapter.
type Decoder[T] = type[T] | TypeAdapter[T]


def _failure[B](
    raw: BadUrlResponse | TimeoutResponse | NetworkErrorResponse | BadStatusResponse[B],
) -> Err[Error[B]]:
    """Classification shared by both resolvers for everything but a success status."""
    match raw:
        case BadUrlResponse(url=url):
            return Err(BadUrl(url))
        case TimeoutResponse():
            return Err(Timeout())
        case NetworkErrorResponse():
            return Err(NetworkError())
        case BadStatusResponse(metadata=meta, body=body):
            return Err(BadStatus(meta, body))
        case _:
            assert_never(raw)


def resolve_json[T](
    decoder: Decoder[T], raw: RawResponse[str]
) -> Result[ResolvedData[T], Error[str]]:
    """Decode a success-status body as JSON into *decoder*'s type.

    Validation is strict: a JSON string is never coerced into a number or a
    bool, so a schema mismatch is always ``BadJson``.

    Args:
        decoder: A type understood by pydantic (model, dataclass, ``list[int]``...)
            or a ``TypeAdapter``.
        raw: The transport outcome to resolve.

    Returns:
        ``Ok(ResolvedData)`` with the decoded value, or ``Err`` with
        ``BadUrl``/``Timeout``/``NetworkError``/``BadStatus``/``BadJson``.
    """
    if not isinstance(raw, GoodStatusResponse):
        return _failure(raw)

    meta, body = raw.metadata, raw.body
    adapter = decoder if isinstance(decoder, TypeAdapter) else TypeAdapter(decoder)
    try:
        value = adapter.validate_json(body, strict=True)
    except ValidationError as exc:
        log.debug(
            "Body from %s failed to decode (%d issues)", meta.url, exc.error_count()
        )
        return Err(BadJson(meta, body, DecodeError.from_validation_error(exc)))
    return Ok(ResolvedData(meta, value))


def resolve_identity[B](raw: RawResponse[B]) -> Result[ResolvedData[B], Error[B]]:
    """Pass a success-status body through untouched, whatever its type."""
    match raw:
        case GoodStatusResponse(metadata=meta, body=body):
            return Ok(ResolvedData(meta, body))
        case _:
            return _failure(raw)


@dataclasses.dataclass(frozen=True, slots=True)
class Expect[R]:
    """How to read a response body and which resolver to apply to it."""

    body_kind: BodyKind
    resolver: Callable[[RawResponse[Any]], R]

    def resolve(self, raw: RawResponse[Any]) -> R:
        return self.resolver(raw)


def expect_json[T](
    decoder: Decoder[T],
) -> Expect[Result[ResolvedData[T], Error[str]]]:
    """Read the body as text and decode it as JSON."""
    adapter = decoder if isinstance(decoder, TypeAdapter) else TypeAdapter(decoder)
    return Expect("text", lambda raw: resolve_json(adapter, raw))


def expect_string() -> Expect[Result[ResolvedData[str], Error[str]]]:
    """Read the body as text and pass it through."""
    return Expect("text", resolve_identity)


def expect_bytes() -> Expect[Result[ResolvedData[bytes], Error[bytes]]]:
    """Read the body as raw bytes and pass it through."""
    return Expect("bytes", resolve_identity)


def expect_whatever() -> Expect[Result[ResolvedData[None], Error[str]]]:
    """Keep only the metadata of a success response; failures keep the text body."""

    def _resolve(raw: RawResponse[str]) -> Result[ResolvedData[None], Error[str]]:
        match resolve_identity(raw):
            case Ok(ResolvedData(metadata=meta)):
                return Ok(ResolvedData(meta, None))
            case Err() as err:
                return err
            case unreachable:
                assert_never(unreachable)

    return Expect("text", _resolve)

