from __future__ import annotations

from dataclasses import dataclass

from ..domain.constants import DEFAULT_TTL_SECONDS
from ..domain.value_objects import SigningKey, TimeToLive


@dataclass(slots=True)
class TokenSettings:
    """
    Token signing + validation settings.

    Host code decides how to construct this (env, secret store, config
    file, etc.) and builds it once at process start.
    """
    secret_key: str
    ttl_seconds: int = DEFAULT_TTL_SECONDS
    leeway_seconds: int = 0

    def __repr__(self) -> str:
        return (
            f"TokenSettings(secret_key='***', ttl_seconds={self.ttl_seconds}, "
            f"leeway_seconds={self.leeway_seconds})"
        )

    @property
    def signing_key(self) -> SigningKey:
        return SigningKey(self.secret_key)

    @property
    def ttl(self) -> TimeToLive:
        return TimeToLive(self.ttl_seconds)
