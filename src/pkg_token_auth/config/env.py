from __future__ import annotations

import os

from ..domain.constants import DEFAULT_TTL_SECONDS
from .settings import TokenSettings

DEFAULT_ENV_PREFIX = "TOKEN_AUTH_"


def settings_from_env(prefix: str = DEFAULT_ENV_PREFIX) -> TokenSettings:
    def _int(key: str, default: int) -> int:
        raw = os.getenv(key)
        if raw is None or not raw.strip():
            return default
        try:
            return int(raw.strip())
        except ValueError as exc:
            raise RuntimeError(f"{key} must be an integer, got {raw!r}") from exc

    secret_key_name = f"{prefix}SECRET_KEY"
    secret_key = os.getenv(secret_key_name)
    if not secret_key:
        raise RuntimeError(f"Missing token auth settings: {secret_key_name}")

    return TokenSettings(
        secret_key=secret_key,
        ttl_seconds=_int(f"{prefix}TTL_SECONDS", DEFAULT_TTL_SECONDS),
        leeway_seconds=_int(f"{prefix}LEEWAY_SECONDS", 0),
    )
