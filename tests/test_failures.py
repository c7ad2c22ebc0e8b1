"""Failure taxonomy: rendering, structured decode errors and value semantics."""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st
from pydantic import BaseModel, TypeAdapter, ValidationError
import pytest

from detailed_http.failures import (
    BadJson,
    BadStatus,
    BadUrl,
    DecodeError,
    DecodeIssue,
    NetworkError,
    Timeout,
    error_string,
)
from tests.helpers import make_metadata

pytestmark = pytest.mark.unit


class _Item(BaseModel):
    id: int
    name: str


def _validation_error(adapter: TypeAdapter, raw: str) -> ValidationError:
    with pytest.raises(ValidationError) as exc:
        adapter.validate_json(raw)
    return exc.value


# =============================================================================
# error_string
# =============================================================================


@pytest.mark.contract
@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (BadUrl("not a url"), "BadUrl not a url"),
        (Timeout(), "Timeout"),
        (NetworkError(), "NetworkError"),
        (
            BadStatus(make_metadata(404, "Not Found"), '{"detail": "missing"}'),
            'BadStatus 404 Not Found: {"detail": "missing"}',
        ),
    ],
)
def test_error_string_renders_each_variant(error, expected: str) -> None:
    assert error_string(error) == expected


@pytest.mark.contract
def test_error_string_appends_decode_description_for_bad_json() -> None:
    decode_error = DecodeError(
        (DecodeIssue(location=("id",), kind="missing", message="Field required"),)
    )
    error = BadJson(make_metadata(200, "OK"), "{}", decode_error)

    assert error_string(error) == "BadJson 200 OK: {} $.id: Field required"


def test_error_string_does_not_escape_or_truncate_body() -> None:
    body = "line one\nline two\t" + "x" * 5000
    error = BadStatus(make_metadata(500, "Internal Server Error"), body)

    assert error_string(error).endswith(body)


@given(
    status_code=st.integers(min_value=100, max_value=599),
    status_text=st.text(max_size=20),
    body=st.text(max_size=200),
)
@settings(max_examples=25, deadline=None, derandomize=True)
def test_error_string_is_stable_and_mentions_status(
    status_code: int, status_text: str, body: str
) -> None:
    """Property: identical input renders identically and keeps the status line."""
    meta = make_metadata(status_code, status_text)
    decode_error = DecodeError((DecodeIssue((), "json_invalid", "Invalid JSON"),))

    for error in (BadStatus(meta, body), BadJson(meta, body, decode_error)):
        first = error_string(error)
        assert first == error_string(error)
        assert f" {status_code} {status_text}: " in first


# =============================================================================
# DecodeError
# =============================================================================


def test_decode_error_keeps_location_kind_and_found_value() -> None:
    exc = _validation_error(TypeAdapter(_Item), '{"id": "abc"}')

    decode_error = DecodeError.from_validation_error(exc)

    by_location = {issue.location: issue for issue in decode_error.issues}
    assert by_location[("id",)].kind == "int_parsing"
    assert by_location[("id",)].found == "abc"
    assert by_location[("name",)].kind == "missing"


def test_decode_error_for_malformed_json_points_at_root() -> None:
    exc = _validation_error(TypeAdapter(_Item), "{not json")

    decode_error = DecodeError.from_validation_error(exc)

    assert [issue.kind for issue in decode_error.issues] == ["json_invalid"]
    assert decode_error.issues[0].location == ()
    assert decode_error.describe().startswith("$: ")


def test_describe_renders_list_indexes_in_brackets() -> None:
    exc = _validation_error(TypeAdapter(list[int]), '[1, "x"]')

    described = DecodeError.from_validation_error(exc).describe()

    assert described.startswith("$[1]: ")


def test_describe_joins_multiple_issues_on_one_line() -> None:
    decode_error = DecodeError(
        (
            DecodeIssue(("items", 0, "id"), "missing", "Field required"),
            DecodeIssue(("total",), "int_type", "Input should be a valid integer"),
        )
    )

    assert decode_error.describe() == (
        "$.items[0].id: Field required; $.total: Input should be a valid integer"
    )


# =============================================================================
# Value semantics
# =============================================================================


def test_variants_are_immutable_and_compare_by_value() -> None:
    meta = make_metadata(500, "Internal Server Error")
    error = BadStatus(meta, "oops")

    assert error == BadStatus(make_metadata(500, "Internal Server Error"), "oops")
    assert Timeout() == Timeout()
    assert Timeout() != NetworkError()
    with pytest.raises(AttributeError):
        error.body = "changed"  # type: ignore[misc]
