from __future__ import annotations

import logging

from fastapi import HTTPException, status
from fastapi.security import HTTPBearer
from starlette.requests import Request

from ...application.use_cases.parse_header import parse_header
from ...domain.exceptions import AuthError, SigningError, VerificationError

logger = logging.getLogger(__name__)

# Expose this so apps can plug it into dependencies if they want OpenAPI security
bearer_scheme = HTTPBearer(auto_error=False)

UNAUTHENTICATED_DETAIL = "Not authenticated"


def extract_token_from_request(request: Request) -> str:
    """
    Extract the bearer token from the request's `Authorization` header.

    Raises the same AuthError subclasses as `parse_header`.
    """
    return parse_header(request.headers)


def unauthorized(exc: AuthError) -> HTTPException:
    """
    Map any AuthError to a uniform 401.

    The cause is logged but never sent to the client.
    """
    if isinstance(exc, VerificationError) and exc.cause is not None:
        logger.info("Rejected bearer token (%s): %s", exc.kind.value, exc.cause)
    else:
        logger.debug("Rejected request (%s): %s", exc.kind.value, exc)

    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=UNAUTHENTICATED_DETAIL,
        headers={"WWW-Authenticate": "Bearer"},
    )


def signing_failed(exc: SigningError) -> HTTPException:
    logger.error("Token signing failed", exc_info=exc)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Unable to issue token",
    )
