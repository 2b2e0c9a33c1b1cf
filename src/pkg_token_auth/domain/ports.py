from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Protocol

if TYPE_CHECKING:
    from .entities import Claims, TokenData


class UserRecord(Protocol):
    """
    Minimal view of a user that tokens are issued for.

    Host applications pass their own user objects; only `name` is read.
    """

    name: str


class TokenCodec(Protocol):
    """
    Port for signing claims into a token and verifying tokens back.

    Implementations live in the adapters layer (e.g. PyJWT codec).
    """

    def encode(self, claims: Claims | Mapping[str, Any]) -> str:
        """
        Sign claims into a compact token string.

        Raises:
          - SigningError
        """
        ...

    def decode(self, token: str) -> TokenData:
        """
        Decode and verify the given token.

        Should:
          - verify signature
          - check expiry and required claims
        Raises:
          - TokenExpiredError
          - InvalidTokenError
          - or another VerificationError
        """
        ...
