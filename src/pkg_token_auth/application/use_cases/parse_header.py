from __future__ import annotations

from typing import Any, Mapping

from ...domain.constants import AUTHORIZATION_HEADER, BEARER_SCHEME
from ...domain.exceptions import (
    InvalidHeaderError,
    InvalidSchemaTypeError,
    NoAuthorizationHeaderError,
    NoJwtTokenFoundError,
)


def _find_header(headers: Mapping[Any, Any], name: str) -> Any | None:
    """Case-insensitive header lookup over any mapping of name -> value."""
    wanted = name.lower()
    # Starlette `Headers` decode values as latin-1; check the raw bytes instead
    raw = getattr(headers, "raw", None)
    items = raw if isinstance(raw, list) else headers.items()
    for key, value in items:
        if isinstance(key, bytes):
            key = key.decode("latin-1")
        if isinstance(key, str) and key.lower() == wanted:
            return value
    return None


def _as_text(value: Any) -> str:
    if isinstance(value, bytes):
        try:
            return value.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidHeaderError("Authorization header is not valid UTF-8") from exc

    if isinstance(value, str):
        try:
            # lone surrogates cannot be represented as UTF-8
            value.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise InvalidHeaderError("Authorization header is not valid UTF-8") from exc
        return value

    raise InvalidHeaderError(
        f"Authorization header must be text, got {type(value).__name__}"
    )


def parse_header(headers: Mapping[Any, Any]) -> str:
    """
    Extract the bearer token from a request's headers.

    Expects `Authorization: Bearer <token>`; anything after the token is
    ignored.

    Raises:
        NoAuthorizationHeaderError
        InvalidHeaderError
        InvalidSchemaTypeError  (wrong scheme or empty value)
        NoJwtTokenFoundError
    """
    raw = _find_header(headers, AUTHORIZATION_HEADER)
    if raw is None:
        raise NoAuthorizationHeaderError("Missing Authorization header")

    parts = _as_text(raw).split()

    if not parts or parts[0] != BEARER_SCHEME:
        raise InvalidSchemaTypeError(
            f"Authorization scheme must be {BEARER_SCHEME!r}"
        )

    if len(parts) < 2:
        raise NoJwtTokenFoundError("No token after Bearer scheme")

    return parts[1]
