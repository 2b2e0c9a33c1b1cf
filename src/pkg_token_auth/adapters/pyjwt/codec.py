from typing import Any, Mapping

import jwt
from jwt.exceptions import ExpiredSignatureError, PyJWTError

from ...domain.constants import ALGORITHM, TOKEN_TYPE
from ...domain.entities import Claims, TokenData
from ...domain.exceptions import InvalidTokenError, SigningError, TokenExpiredError
from ...domain.ports import TokenCodec
from ...domain.value_objects import SigningKey

_REQUIRED_CLAIMS = ["exp", "iat", "sub"]


class JWTTokenCodec(TokenCodec):
    """
    Adapter implementing TokenCodec port using PyJWT with a shared secret.

    Infrastructure layer:
    - Knows about JWT structure, HS256 signing and verification.
    - Holds nothing but the read-only key and validation policy.
    """

    def __init__(self, signing_key: SigningKey, leeway_seconds: int = 0) -> None:
        self._key = signing_key
        self._leeway = leeway_seconds

    # ------------------------------------------------------------------ #
    # Port implementation
    # ------------------------------------------------------------------ #

    def encode(self, claims: Claims | Mapping[str, Any]) -> str:
        """
        Sign claims into a compact `header.payload.signature` token.

        Raises:
            SigningError
        """
        try:
            payload = claims.to_payload() if isinstance(claims, Claims) else dict(claims)
            return jwt.encode(
                payload,
                self._key.value,
                algorithm=ALGORITHM,
                headers={"typ": TOKEN_TYPE},
            )
        except (PyJWTError, TypeError, ValueError) as exc:
            raise SigningError(f"Unable to sign token: {exc}") from exc

    def decode(self, token: str) -> TokenData:
        """
        Decode and validate JWT token.

        Returns:
            TokenData with the verified claims and the token header.

        Raises:
            TokenExpiredError
            InvalidTokenError
        """
        try:
            decoded = jwt.decode_complete(
                token,
                self._key.value,
                algorithms=[ALGORITHM],
                options={"require": _REQUIRED_CLAIMS},
                leeway=self._leeway,
            )
        except ExpiredSignatureError as exc:
            raise TokenExpiredError("Token has expired", cause=exc) from exc
        except PyJWTError as exc:
            raise InvalidTokenError(f"Invalid token: {exc}", cause=exc) from exc

        try:
            claims = Claims.from_payload(decoded["payload"])
        except ValueError as exc:
            raise InvalidTokenError(f"Invalid token payload: {exc}", cause=exc) from exc

        return TokenData(claims=claims, header=dict(decoded["header"]))
