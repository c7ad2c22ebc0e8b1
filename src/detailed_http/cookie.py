"""Cookie header strings: build ``Set-Cookie`` values and read ``Cookie`` values.

Neither direction validates or escapes names, values or attribute values;
RFC 6265 character restrictions are the caller's responsibility.

Example:
    header = response_string(
        CookieInput("id", "42", [SameSite("Lax"), Path("/"), Secure(), HttpOnly()])
    )
    # "id=42; SameSite=Lax; Path=/; Secure; HttpOnly"

    get("id", "theme=dark; id=42")  # "42"
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import assert_never

from detailed_http.errors import ConfigurationError

# Separator between cookie segments in both header directions.
SEPARATOR = "; "


@dataclass(frozen=True, slots=True)
class SameSite:
    value: str


@dataclass(frozen=True, slots=True)
class Path:
    value: str


@dataclass(frozen=True, slots=True)
class Domain:
    value: str


@dataclass(frozen=True, slots=True)
class MaxAge:
    seconds: int


@dataclass(frozen=True, slots=True)
class Expires:
    #: Passed through verbatim, e.g. ``"Wed, 21 Oct 2015 07:28:00 GMT"``.
    date: str


@dataclass(frozen=True, slots=True)
class Secure:
    pass


@dataclass(frozen=True, slots=True)
class HttpOnly:
    pass


type CookieAttribute = SameSite | Path | Domain | MaxAge | Expires | Secure | HttpOnly

_ATTRIBUTE_TYPES = (SameSite, Path, Domain, MaxAge, Expires, Secure, HttpOnly)


@dataclass(frozen=True)
class CookieInput:
    """A cookie to serialize; attribute order is kept in the output."""

    name: str
    value: str
    attributes: Sequence[CookieAttribute] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        attributes = tuple(self.attributes)
        for attribute in attributes:
            if not isinstance(attribute, _ATTRIBUTE_TYPES):
                raise ConfigurationError(
                    f"Unknown cookie attribute: {attribute!r}",
                    hint=(
                        "Use SameSite, Path, Domain, MaxAge, Expires, Secure or HttpOnly."
                    ),
                )
        object.__setattr__(self, "attributes", attributes)


def attribute_string(attribute: CookieAttribute) -> str:
    match attribute:
        case SameSite(value=value):
            return f"SameSite={value}"
        case Path(value=value):
            return f"Path={value}"
        case Domain(value=value):
            return f"Domain={value}"
        case MaxAge(seconds=seconds):
            return f"Max-Age={seconds:d}"
        case Expires(date=date):
            return f"Expires={date}"
        case Secure():
            return "Secure"
        case HttpOnly():
            return "HttpOnly"
        case _:
            assert_never(attribute)


def response_string(cookie: CookieInput) -> str:
    """Serialize *cookie* as a ``Set-Cookie`` header value."""
    segments = [f"{cookie.name}={cookie.value}"]
    segments.extend(attribute_string(attribute) for attribute in cookie.attributes)
    return SEPARATOR.join(segments)


def get(name: str, cookie_header: str) -> str | None:
    """Return the value of the first ``name=...`` segment of a ``Cookie`` header.

    Later segments with the same name are ignored. The ``name=`` text is
    removed with a substring replace, so every occurrence inside the matched
    segment goes, not just the leading one: ``get("a", "a=xa=y")`` is ``"xy"``.
    """
    prefix = f"{name}="
    for segment in cookie_header.split(SEPARATOR):
        if segment.startswith(prefix):
            return segment.replace(prefix, "")
    return None
