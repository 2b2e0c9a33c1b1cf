"""

from pkg_token_auth.config import settings_from_env
from pkg_token_auth.integrations.fastapi import create_fastapi_auth

fastapi_auth = create_fastapi_auth(settings=settings_from_env())

get_current_user = fastapi_auth.get_current_user
get_optional_user = fastapi_auth.get_optional_user

@router.post("/login")
def login(body: LoginBody):
    user = users.verify(body.name, body.password)  # your own user store
    return {"access_token": fastapi_auth.issue_token(user)}

"""
from __future__ import annotations

from .decorators import FastAPIDecorators
from .deps import FastAPIAuthorization
from .security import bearer_scheme, extract_token_from_request
from ..common.auth_factory import create_auth_dependencies, AuthDependencies
from ...config.settings import TokenSettings


def create_fastapi_auth(*, settings: TokenSettings) -> FastAPIAuthorization:
    """
    High-level helper for FastAPI apps:

    - Creates AuthDependencies from TokenSettings
    - Wraps them in FastAPIAuthorization, exposing:

        fastapi_auth.get_current_user
        fastapi_auth.get_optional_user
        fastapi_auth.issue_token(user)
        fastapi_auth.decorators()
    """
    auth: AuthDependencies = create_auth_dependencies(settings)
    return FastAPIAuthorization(auth=auth)


__all__ = [
    "FastAPIAuthorization",
    "FastAPIDecorators",
    "bearer_scheme",
    "create_fastapi_auth",
    "extract_token_from_request",
]
