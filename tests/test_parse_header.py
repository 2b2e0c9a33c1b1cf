import pytest
from starlette.datastructures import Headers

from pkg_token_auth.application.use_cases.parse_header import parse_header
from pkg_token_auth.domain.exceptions import (
    AuthError,
    InvalidHeaderError,
    InvalidSchemaTypeError,
    NoAuthorizationHeaderError,
    NoJwtTokenFoundError,
)


def test_returns_bearer_token():
    assert parse_header({"Authorization": "Bearer abc.def.ghi"}) == "abc.def.ghi"


def test_header_name_is_case_insensitive():
    assert parse_header({"authorization": "Bearer abc.def.ghi"}) == "abc.def.ghi"
    assert parse_header({"AUTHORIZATION": "Bearer abc.def.ghi"}) == "abc.def.ghi"


def test_extra_whitespace_and_trailing_parts_are_ignored():
    assert parse_header({"Authorization": "  Bearer\tabc.def.ghi  extra stuff"}) == "abc.def.ghi"


def test_accepts_bytes_values():
    assert parse_header({b"authorization": b"Bearer abc.def.ghi"}) == "abc.def.ghi"


def test_accepts_starlette_headers():
    headers = Headers(raw=[(b"authorization", b"Bearer abc.def.ghi")])
    assert parse_header(headers) == "abc.def.ghi"


def test_starlette_headers_with_non_utf8_value():
    headers = Headers(raw=[(b"authorization", b"Bearer \xff\xfe")])
    with pytest.raises(InvalidHeaderError):
        parse_header(headers)


def test_missing_header():
    with pytest.raises(NoAuthorizationHeaderError):
        parse_header({"Content-Type": "application/json"})
    with pytest.raises(NoAuthorizationHeaderError):
        parse_header({})


def test_wrong_scheme():
    with pytest.raises(InvalidSchemaTypeError):
        parse_header({"Authorization": "Basic xyz"})


def test_scheme_is_case_sensitive():
    with pytest.raises(InvalidSchemaTypeError):
        parse_header({"Authorization": "bearer abc.def.ghi"})


@pytest.mark.parametrize("value", ["", "   "])
def test_empty_header_is_a_schema_error(value):
    with pytest.raises(InvalidSchemaTypeError):
        parse_header({"Authorization": value})


def test_bearer_without_token():
    with pytest.raises(NoJwtTokenFoundError):
        parse_header({"Authorization": "Bearer"})
    with pytest.raises(NoJwtTokenFoundError):
        parse_header({"Authorization": "Bearer   "})


@pytest.mark.parametrize(
    "value",
    [
        b"Bearer \xff\xfe",
        "Bearer \udcff",
        12345,
    ],
)
def test_non_text_header(value):
    with pytest.raises(InvalidHeaderError):
        parse_header({"Authorization": value})


def test_all_failures_are_auth_errors():
    for headers in ({}, {"Authorization": "Basic x"}, {"Authorization": "Bearer"}):
        with pytest.raises(AuthError):
            parse_header(headers)
