"""detailed-http: HTTP error and response handling that keeps its diagnostics.

Public API:
    - resolve_json() / resolve_identity(): Turn a transport outcome into a Result
    - expect_json() / expect_string() / expect_bytes() / expect_whatever()
    - RequestSpec, send(), asend(): Run a request through httpx and resolve it
    - BadUrl, Timeout, NetworkError, BadStatus, BadJson and error_string()
    - cookie: Set-Cookie serialization and Cookie value lookup
"""

from __future__ import annotations

import logging

from detailed_http import cookie
from detailed_http.config import ClientConfig
from detailed_http.errors import (
    ConfigurationError,
    DetailedHttpError,
    ResolutionError,
)
from detailed_http.failures import (
    BadJson,
    BadStatus,
    BadUrl,
    DecodeError,
    DecodeIssue,
    Error,
    NetworkError,
    Timeout,
    error_string,
)
from detailed_http.request import RequestSpec, asend, send
from detailed_http.resolve import (
    Expect,
    expect_bytes,
    expect_json,
    expect_string,
    expect_whatever,
    resolve_identity,
    resolve_json,
)
from detailed_http.result import Err, Ok, ResolvedData, Result
from detailed_http.transport import (
    BadStatusResponse,
    BadUrlResponse,
    GoodStatusResponse,
    Metadata,
    NetworkErrorResponse,
    RawResponse,
    TimeoutResponse,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("detailed-http")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("detailed_http").addHandler(logging.NullHandler())

__all__ = [
    "BadJson",
    "BadStatus",
    "BadStatusResponse",
    "BadUrl",
    "BadUrlResponse",
    "ClientConfig",
    "ConfigurationError",
    "DecodeError",
    "DecodeIssue",
    "DetailedHttpError",
    "Err",
    "Error",
    "Expect",
    "GoodStatusResponse",
    "Metadata",
    "NetworkError",
    "NetworkErrorResponse",
    "Ok",
    "RawResponse",
    "RequestSpec",
    "ResolutionError",
    "ResolvedData",
    "Result",
    "Timeout",
    "TimeoutResponse",
    "asend",
    "cookie",
    "error_string",
    "expect_bytes",
    "expect_json",
    "expect_string",
    "expect_whatever",
    "resolve_identity",
    "resolve_json",
    "send",
]
