"""
pkg_token_auth

Stateless bearer-token authentication core: issues HS256-signed JWTs for
users and verifies the tokens presented in `Authorization` headers.
Framework integrations (FastAPI) live under `integrations`.
"""

__version__ = "0.1.0"

from .domain.entities import Claims, TokenData, generate_claims
from .domain.constants import AuthErrorKind
from .domain.exceptions import (
    AuthError,
    InvalidHeaderError,
    NoAuthorizationHeaderError,
    InvalidSchemaTypeError,
    NoJwtTokenFoundError,
    VerificationError,
    TokenExpiredError,
    InvalidTokenError,
    SigningError,
)
from .domain.value_objects import SigningKey, TimeToLive
from .domain.ports import TokenCodec, UserRecord

from .application.use_cases.parse_header import parse_header
from .application.use_cases.issue import IssueTokenUseCase
from .application.use_cases.authenticate import AuthenticateRequestUseCase

from .config import TokenSettings, settings_from_env

# PyJWT-backed adapter
from .adapters.pyjwt.codec import JWTTokenCodec

__all__ = [
    "__version__",
    # domain core
    "Claims",
    "TokenData",
    "generate_claims",
    "AuthErrorKind",
    "SigningKey",
    "TimeToLive",
    "TokenCodec",
    "UserRecord",
    # exceptions
    "AuthError",
    "InvalidHeaderError",
    "NoAuthorizationHeaderError",
    "InvalidSchemaTypeError",
    "NoJwtTokenFoundError",
    "VerificationError",
    "TokenExpiredError",
    "InvalidTokenError",
    "SigningError",
    # use cases
    "parse_header",
    "IssueTokenUseCase",
    "AuthenticateRequestUseCase",
    # config
    "TokenSettings",
    "settings_from_env",
    # adapters
    "JWTTokenCodec",
]
