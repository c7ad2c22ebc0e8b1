"""Small HTTP-related constants shared across detailed-http."""

from __future__ import annotations

# Status codes in [SUCCESS_STATUS_MIN, SUCCESS_STATUS_MAX] count as success.
SUCCESS_STATUS_MIN: int = 200
SUCCESS_STATUS_MAX: int = 299


def is_success_status(status_code: int) -> bool:
    return SUCCESS_STATUS_MIN <= status_code <= SUCCESS_STATUS_MAX
