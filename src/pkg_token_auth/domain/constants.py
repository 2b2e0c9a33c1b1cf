from enum import Enum

AUTHORIZATION_HEADER = "Authorization"
BEARER_SCHEME = "Bearer"

TOKEN_TYPE = "JWT"
ALGORITHM = "HS256"

# `sub` claim; identifies the token's purpose, never caller input
SUBJECT = "auth"

DEFAULT_TTL_SECONDS = 60 * 60 * 24 * 7


class AuthErrorKind(Enum):
    INVALID_HEADER = "invalid_header"
    NO_AUTHORIZATION_HEADER = "no_authorization_header"
    INVALID_SCHEMA_TYPE = "invalid_schema_type"
    NO_JWT_TOKEN_FOUND = "no_jwt_token_found"
    VERIFICATION = "verification"
