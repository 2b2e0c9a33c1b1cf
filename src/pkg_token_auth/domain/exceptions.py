from __future__ import annotations

from .constants import AuthErrorKind


class AuthError(Exception):
    """Raised when a request cannot be authenticated."""
    kind: AuthErrorKind


class InvalidHeaderError(AuthError):
    """Raised when the Authorization header value is not valid text."""
    kind = AuthErrorKind.INVALID_HEADER


class NoAuthorizationHeaderError(AuthError):
    """Raised when the request carries no Authorization header."""
    kind = AuthErrorKind.NO_AUTHORIZATION_HEADER


class InvalidSchemaTypeError(AuthError):
    """Raised when the Authorization scheme is not `Bearer`."""
    kind = AuthErrorKind.INVALID_SCHEMA_TYPE


class NoJwtTokenFoundError(AuthError):
    """Raised when the Bearer scheme is not followed by a token."""
    kind = AuthErrorKind.NO_JWT_TOKEN_FOUND


class VerificationError(AuthError):
    """Raised when a token fails signature, structure or claim checks."""
    kind = AuthErrorKind.VERIFICATION

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class TokenExpiredError(VerificationError):
    """Raised when token has expired."""
    pass


class InvalidTokenError(VerificationError):
    """Raised when token is malformed or invalid."""
    pass


class SigningError(Exception):
    """Raised when a token cannot be signed. Never caused by the client."""
    pass
