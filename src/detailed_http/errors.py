"""Exception hierarchy for detailed-http.

HTTP outcomes are returned as values (see ``detailed_http.failures``). The
exceptions here are reserved for programmer errors and explicit unwrapping.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from detailed_http.failures import Error


class DetailedHttpError(Exception):
    """Base exception for all detailed-http errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(DetailedHttpError):
    """Configuration or request record validation failed."""


class ResolutionError(DetailedHttpError):
    """An ``Err`` result was unwrapped.

    The original Error value is kept on ``error`` so nothing the transport
    exposed is lost by raising.
    """

    def __init__(
        self,
        message: str,
        *,
        error: Error[object],
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.error = error

