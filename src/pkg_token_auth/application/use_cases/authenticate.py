from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ...domain.entities import TokenData
from ...domain.exceptions import AuthError, VerificationError
from ...domain.ports import TokenCodec
from .parse_header import parse_header


@dataclass(slots=True)
class AuthenticateRequestUseCase:
    """
    Application use case run on every authenticated request:
    - Pull the bearer token out of the request headers
    - Decode and verify it via TokenCodec port

    Framework-agnostic: `headers` is any mapping of header name to value.
    """

    token_codec: TokenCodec

    def execute(self, headers: Mapping[Any, Any]) -> TokenData:
        """
        Authenticate a request and return the verified token data.

        Raises:
            AuthError (any subclass)
        """
        token = parse_header(headers)
        return self.verify(token)

    def verify(self, token: str) -> TokenData:
        try:
            return self.token_codec.decode(token)
        except AuthError:
            # let callers distinguish these explicitly
            raise
        except Exception as exc:
            # Wrap unexpected codec errors so callers only see AuthError
            raise VerificationError(f"Token validation failed: {exc}", cause=exc) from exc
