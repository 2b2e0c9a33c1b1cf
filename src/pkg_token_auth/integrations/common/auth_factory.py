from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ...adapters.pyjwt.codec import JWTTokenCodec
from ...application.use_cases.authenticate import AuthenticateRequestUseCase
from ...application.use_cases.issue import IssueTokenUseCase
from ...application.use_cases.parse_header import parse_header
from ...config.settings import TokenSettings
from ...domain.entities import TokenData
from ...domain.ports import TokenCodec, UserRecord


@dataclass(slots=True)
class AuthDependencies:
    """
    Framework-agnostic auth facade.

    Integrations (FastAPI, etc.) adapt this to their own dependency /
    decorator systems.
    """

    issue_use_case: IssueTokenUseCase
    auth_use_case: AuthenticateRequestUseCase

    # --- Core operations --------------------------------------------------

    def issue_token(self, user: UserRecord) -> str:
        """User -> signed bearer token (or raise SigningError)."""
        return self.issue_use_case.execute(user)

    def authenticate(self, headers: Mapping[Any, Any]) -> TokenData:
        """Request headers -> TokenData (or raise AuthError)."""
        return self.auth_use_case.execute(headers)

    # --- Lower-level steps, for callers that already hold a token ---------

    @staticmethod
    def parse_header(headers: Mapping[Any, Any]) -> str:
        return parse_header(headers)

    def decode(self, token: str) -> TokenData:
        return self.auth_use_case.verify(token)


def create_auth_dependencies(settings: TokenSettings) -> AuthDependencies:
    """
    High-level factory: TokenSettings -> AuthDependencies.

    - builds a JWTTokenCodec from the injected key
    - wires IssueTokenUseCase + AuthenticateRequestUseCase
    - returns an AuthDependencies facade.
    """
    codec: TokenCodec = JWTTokenCodec(
        signing_key=settings.signing_key,
        leeway_seconds=settings.leeway_seconds,
    )

    issue_uc = IssueTokenUseCase(token_codec=codec, ttl=settings.ttl)
    auth_uc = AuthenticateRequestUseCase(token_codec=codec)

    return AuthDependencies(
        issue_use_case=issue_uc,
        auth_use_case=auth_uc,
    )
