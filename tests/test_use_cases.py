import time

import jwt
import pytest

from pkg_token_auth.application.use_cases.authenticate import AuthenticateRequestUseCase
from pkg_token_auth.application.use_cases.issue import IssueTokenUseCase
from pkg_token_auth.domain.exceptions import (
    InvalidSchemaTypeError,
    NoAuthorizationHeaderError,
    NoJwtTokenFoundError,
    TokenExpiredError,
    VerificationError,
)
from pkg_token_auth.domain.value_objects import TimeToLive


class _ExplodingCodec:
    def encode(self, claims):
        raise AssertionError("not used")

    def decode(self, token):
        raise RuntimeError("codec blew up")


def test_issue_then_authenticate(codec, user):
    token = IssueTokenUseCase(token_codec=codec).execute(user)

    data = AuthenticateRequestUseCase(token_codec=codec).execute(
        {"Authorization": f"Bearer {token}"}
    )

    assert data.claims.user_name == "alice"
    assert data.claims.ttl_seconds == 604800


def test_issue_uses_configured_ttl_and_clock(codec, user):
    issue = IssueTokenUseCase(token_codec=codec, ttl=TimeToLive(120), clock=lambda: 2_000_000_000)
    token = issue.execute(user)

    # iat is in the future, so read the claims without validating them
    payload = jwt.decode(token, options={"verify_signature": False})
    assert payload["iat"] == 2_000_000_000
    assert payload["exp"] == 2_000_000_120


def test_expired_token_is_rejected(codec, user):
    issue = IssueTokenUseCase(
        token_codec=codec,
        ttl=TimeToLive(60),
        clock=lambda: time.time() - 3600,
    )
    token = issue.execute(user)

    with pytest.raises(TokenExpiredError):
        AuthenticateRequestUseCase(token_codec=codec).execute(
            {"Authorization": f"Bearer {token}"}
        )


@pytest.mark.parametrize(
    "headers, error",
    [
        ({}, NoAuthorizationHeaderError),
        ({"Authorization": "Basic xyz"}, InvalidSchemaTypeError),
        ({"Authorization": "Bearer"}, NoJwtTokenFoundError),
    ],
)
def test_header_errors_propagate(codec, headers, error):
    with pytest.raises(error):
        AuthenticateRequestUseCase(token_codec=codec).execute(headers)


def test_unexpected_codec_errors_are_wrapped():
    use_case = AuthenticateRequestUseCase(token_codec=_ExplodingCodec())

    with pytest.raises(VerificationError) as exc_info:
        use_case.execute({"Authorization": "Bearer abc.def.ghi"})

    assert isinstance(exc_info.value.cause, RuntimeError)
