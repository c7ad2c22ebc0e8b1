"""Failure taxonomy for resolved HTTP requests.

Every variant that implies a response was received (``BadStatus``,
``BadJson``) carries the response ``Metadata`` and the raw, undecoded body.

Example:
    match result:
        case Ok(ResolvedData(data=user)):
            ...
        case Err(BadStatus(metadata=meta, body=body)) if meta.status_code == 404:
            ...
        case Err(error):
            log.warning("request failed: %s", error_string(error))
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any, assert_never

if TYPE_CHECKING:
    from pydantic import ValidationError

    from detailed_http.transport import Metadata


@dataclasses.dataclass(frozen=True, slots=True)
class DecodeIssue:
    """One reason a body did not decode into the expected type."""

    #: Path into the document; empty for the document root.
    location: tuple[str | int, ...]
    #: Machine-readable error type, e.g. ``json_invalid`` or ``missing``.
    kind: str
    #: What was expected versus what was found.
    message: str
    found: Any = None


@dataclasses.dataclass(frozen=True, slots=True)
class DecodeError:
    """Structured decode failure attached to ``BadJson``."""

    issues: tuple[DecodeIssue, ...]

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> DecodeError:
        return cls(
            issues=tuple(
                DecodeIssue(
                    location=tuple(item["loc"]),
                    kind=item["type"],
                    message=item["msg"],
                    found=item.get("input"),
                )
                for item in exc.errors(include_url=False)
            )
        )

    def describe(self) -> str:
        """Render all issues on a single line."""
        return "; ".join(
            f"{_render_location(issue.location)}: {issue.message}"
            for issue in self.issues
        )


def _render_location(location: tuple[str | int, ...]) -> str:
    path = "$"
    for part in location:
        path += f"[{part}]" if isinstance(part, int) else f".{part}"
    return path


@dataclasses.dataclass(frozen=True, slots=True)
class BadUrl:
    """The request URL was malformed; no network attempt was made."""

    url: str


@dataclasses.dataclass(frozen=True, slots=True)
class Timeout:
    """No response arrived within the configured deadline."""


@dataclasses.dataclass(frozen=True, slots=True)
class NetworkError:
    """The transport failed before any response was received."""


@dataclasses.dataclass(frozen=True, slots=True)
class BadStatus[B]:
    """A response arrived with a non-success status code."""

    metadata: Metadata
    body: B


@dataclasses.dataclass(frozen=True, slots=True)
class BadJson[B]:
    """A success response whose body failed to decode."""

    metadata: Metadata
    body: B
    error: DecodeError


type Error[B] = BadUrl | Timeout | NetworkError | BadStatus[B] | BadJson[B]


def error_string(error: Error[str]) -> str:
    """Render a text-bodied error as a single line for logs and tests.

    The body is included verbatim: no truncation and no escaping.
    """
    match error:
        case BadUrl(url=url):
            return f"BadUrl {url}"
        case Timeout():
            return "Timeout"
        case NetworkError():
            return "NetworkError"
        case BadStatus(metadata=meta, body=body):
            return f"BadStatus {meta.status_code} {meta.status_text}: {body}"
        case BadJson(metadata=meta, body=body, error=decode_error):
            return (
                f"BadJson {meta.status_code} {meta.status_text}: {body} "
                f"{decode_error.describe()}"
            )
        case _:
            assert_never(error)
