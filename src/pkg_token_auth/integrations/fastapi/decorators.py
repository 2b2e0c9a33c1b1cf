from __future__ import annotations

import inspect
from dataclasses import dataclass
from functools import wraps
from typing import Any, Callable, TypeVar, ParamSpec

from starlette.requests import Request

from ...domain.entities import TokenData
from ...domain.exceptions import AuthError
from ..common.auth_factory import AuthDependencies
from .security import unauthorized

P = ParamSpec("P")
R = TypeVar("R")

INJECTED_PARAM = "current_user"


def _route_signature(func: Callable[..., Any]) -> inspect.Signature:
    """
    Signature FastAPI should see: the handler's own, minus the injected
    `current_user`, which would otherwise be read as a request body.
    """
    signature = inspect.signature(func, eval_str=True)
    params = [p for name, p in signature.parameters.items() if name != INJECTED_PARAM]
    return signature.replace(parameters=params)


@dataclass(slots=True)
class FastAPIDecorators:
    """
    Decorator-based auth helpers for FastAPI route handlers.

    Built on top of the framework-agnostic `AuthDependencies` facade.
    The token is always taken from `Authorization: Bearer <token>`.

    Usage example in your FastAPI app:

        # app/auth.py
        from pkg_token_auth.config import settings_from_env
        from pkg_token_auth.integrations.fastapi import create_fastapi_auth

        fastapi_auth = create_fastapi_auth(settings=settings_from_env())
        auth_decorators = fastapi_auth.decorators()

        # app/routes.py
        @auth_decorators.authenticated
        async def me(request: Request, current_user: TokenData):
            return {"user_name": current_user.user_name}

    All decorators will:
      - Parse the Authorization header and verify the token
      - Inject `current_user` (TokenData) into kwargs
      - Translate AuthError into a 401 HTTPException
    """

    auth: AuthDependencies

    # ------------------------------------------------------------------ #
    # helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _extract_request(args: tuple[Any, ...], kwargs: dict[str, Any]) -> Request:
        """Extract Request object from function arguments."""
        if "request" in kwargs and isinstance(kwargs["request"], Request):
            return kwargs["request"]

        for arg in args:
            if isinstance(arg, Request):
                return arg

        raise ValueError(
            "Request object not found. "
            "Ensure your route has a 'request: Request' parameter."
        )

    def _authenticate(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> TokenData:
        request = self._extract_request(args, kwargs)
        try:
            return self.auth.authenticate(request.headers)
        except AuthError as exc:
            raise unauthorized(exc) from exc

    def _try_authenticate(
        self,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> TokenData | None:
        request = self._extract_request(args, kwargs)
        try:
            return self.auth.authenticate(request.headers)
        except AuthError:
            return None

    # ------------------------------------------------------------------ #
    # decorators
    # ------------------------------------------------------------------ #

    def authenticated(self, func: Callable[P, R]) -> Callable[P, Any]:
        """
        Decorator: require authentication.

        Injects `current_user: TokenData` into kwargs.
        """

        @wraps(func)
        async def async_impl(*args: P.args, **kwargs: P.kwargs) -> Any:
            kwargs.setdefault(INJECTED_PARAM, self._authenticate(args, kwargs))
            return await func(*args, **kwargs)  # type: ignore[misc]

        @wraps(func)
        def sync_impl(*args: P.args, **kwargs: P.kwargs) -> Any:
            kwargs.setdefault(INJECTED_PARAM, self._authenticate(args, kwargs))
            return func(*args, **kwargs)

        wrapper = async_impl if inspect.iscoroutinefunction(func) else sync_impl
        wrapper.__signature__ = _route_signature(func)  # type: ignore[attr-defined]
        return wrapper

    def optional_auth(self, func: Callable[P, R]) -> Callable[P, Any]:
        """
        Decorator: optional authentication.

        Injects `current_user: TokenData | None` into kwargs.
        """

        @wraps(func)
        async def async_impl(*args: P.args, **kwargs: P.kwargs) -> Any:
            kwargs.setdefault(INJECTED_PARAM, self._try_authenticate(args, kwargs))
            return await func(*args, **kwargs)  # type: ignore[misc]

        @wraps(func)
        def sync_impl(*args: P.args, **kwargs: P.kwargs) -> Any:
            kwargs.setdefault(INJECTED_PARAM, self._try_authenticate(args, kwargs))
            return func(*args, **kwargs)

        wrapper = async_impl if inspect.iscoroutinefunction(func) else sync_impl
        wrapper.__signature__ = _route_signature(func)  # type: ignore[attr-defined]
        return wrapper
