from dataclasses import dataclass

import pytest

from pkg_token_auth.adapters.pyjwt.codec import JWTTokenCodec
from pkg_token_auth.config.settings import TokenSettings
from pkg_token_auth.domain.value_objects import SigningKey

SECRET = "test-secret-key-that-is-long-enough-for-hs256"
OTHER_SECRET = "another-secret-key-that-is-long-enough-for-hs256"


@dataclass
class User:
    name: str


@pytest.fixture
def user() -> User:
    return User(name="alice")


@pytest.fixture
def codec() -> JWTTokenCodec:
    return JWTTokenCodec(SigningKey(SECRET))


@pytest.fixture
def foreign_codec() -> JWTTokenCodec:
    return JWTTokenCodec(SigningKey(OTHER_SECRET))


@pytest.fixture
def settings() -> TokenSettings:
    return TokenSettings(secret_key=SECRET)
