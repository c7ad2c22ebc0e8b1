"""Result values for request resolution.

Resolution never raises for an HTTP outcome: it returns ``Ok`` with the
decoded (or passed-through) data, or ``Err`` with a ``detailed_http.failures``
variant. Metadata rides along on the success path via ``ResolvedData``.
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Never

from detailed_http.errors import ResolutionError
from detailed_http.failures import (
    BadJson,
    BadStatus,
    BadUrl,
    NetworkError,
    Timeout,
    error_string,
)

if TYPE_CHECKING:
    from detailed_http.transport import Metadata


@dataclasses.dataclass(frozen=True, slots=True)
class ResolvedData[T]:
    """A resolved value paired with the metadata of the response it came from."""

    metadata: Metadata
    data: T


@dataclasses.dataclass(frozen=True, slots=True)
class Ok[T]:
    """A successful resolution."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or[D](self, default: D) -> T | D:
        return self.value


@dataclasses.dataclass(frozen=True, slots=True)
class Err[E]:
    """A failed resolution, containing the Error value."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> Never:
        """Raise ``ResolutionError`` carrying the Error value."""
        raise ResolutionError(
            _summarize(self.error),
            error=self.error,  # type: ignore[arg-type]
            hint="Match on Ok/Err instead of unwrapping when failures are expected.",
        )

    def unwrap_or[D](self, default: D) -> D:
        return default


type Result[T, E] = Ok[T] | Err[E]


def _summarize(error: object) -> str:
    if isinstance(error, BadUrl | Timeout | NetworkError):
        return error_string(error)
    if isinstance(error, BadStatus | BadJson):
        if isinstance(error.body, str):
            return error_string(error)
        meta = error.metadata
        return f"{type(error).__name__} {meta.status_code} {meta.status_text}"
    return repr(error)
