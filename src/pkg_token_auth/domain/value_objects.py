# src/pkg_token_auth/domain/value_objects.py

from __future__ import annotations

from dataclasses import dataclass

from .constants import DEFAULT_TTL_SECONDS


@dataclass(frozen=True, slots=True)
class SigningKey:
    """
    Symmetric secret used to sign and verify tokens.

    The repr is masked so the secret does not leak through logs or
    tracebacks.
    """
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise ValueError("Signing key must be a non-empty string")

    def __repr__(self) -> str:
        return "SigningKey(value='***')"

    def __str__(self) -> str:
        return "***"


@dataclass(frozen=True, slots=True)
class TimeToLive:
    """
    How long an issued token stays valid, in seconds.
    """
    seconds: int = DEFAULT_TTL_SECONDS

    def __post_init__(self) -> None:
        if isinstance(self.seconds, bool) or not isinstance(self.seconds, int):
            raise ValueError(f"TTL must be an integer, got {self.seconds!r}")
        if self.seconds <= 0:
            raise ValueError(f"TTL must be positive, got {self.seconds}")
