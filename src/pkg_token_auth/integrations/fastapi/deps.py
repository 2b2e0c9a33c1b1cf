from __future__ import annotations

from dataclasses import dataclass

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials

from .decorators import FastAPIDecorators
from .security import bearer_scheme, signing_failed, unauthorized
from ..common.auth_factory import AuthDependencies
from ...domain.entities import TokenData
from ...domain.exceptions import AuthError, SigningError
from ...domain.ports import UserRecord


@dataclass(slots=True)
class FastAPIAuthorization:
    """
    FastAPI integration for pkg_token_auth.

    Built on top of the framework-agnostic AuthDependencies facade.
    """

    auth: AuthDependencies

    # ------------------------------------------------------------------ #
    # Base dependencies
    # ------------------------------------------------------------------ #

    async def get_current_user(
            self,
            request: Request,
            # Declared for OpenAPI only; the raw header is parsed below
            credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    ) -> TokenData:
        """Dependency: Require authentication."""
        try:
            return self.auth.authenticate(request.headers)
        except AuthError as exc:
            raise unauthorized(exc) from exc

    async def get_optional_user(
            self,
            request: Request,
            credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    ) -> TokenData | None:
        """Dependency: Optional authentication."""
        try:
            return self.auth.authenticate(request.headers)
        except AuthError:
            # missing or bad token -> anonymous
            return None

    # ------------------------------------------------------------------ #
    # Login helper
    # ------------------------------------------------------------------ #

    def issue_token(self, user: UserRecord) -> str:
        """Sign a token for a user that the host app has already verified."""
        try:
            return self.auth.issue_token(user)
        except SigningError as exc:
            raise signing_failed(exc) from exc

    def decorators(self) -> FastAPIDecorators:
        return FastAPIDecorators(auth=self.auth)
