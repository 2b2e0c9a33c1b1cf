from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional

from .constants import SUBJECT
from .ports import UserRecord
from .value_objects import TimeToLive


def _require_int(payload: Mapping[str, Any], key: str) -> int:
    value = payload.get(key)
    # bool is an int subclass but never a valid timestamp
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Claim {key!r} must be an integer, got {value!r}")
    return value


def _require_str(payload: Mapping[str, Any], key: str) -> str:
    value = payload.get(key)
    if not isinstance(value, str):
        raise ValueError(f"Claim {key!r} must be a string, got {value!r}")
    return value


@dataclass(frozen=True, slots=True)
class Claims:
    """
    Signed payload of a session token.

    Serialized into the token at issuance and rebuilt from it on every
    verification; nothing about an issued token is kept server-side.
    """
    issued_at: int
    expires_at: int
    user_name: str
    subject: str = SUBJECT

    def __post_init__(self) -> None:
        if self.expires_at <= self.issued_at:
            raise ValueError(
                f"expires_at ({self.expires_at}) must be after issued_at ({self.issued_at})"
            )

    def to_payload(self) -> Dict[str, Any]:
        """Wire representation (JWT registered claim names)."""
        return {
            "iat": self.issued_at,
            "exp": self.expires_at,
            "sub": self.subject,
            "user_name": self.user_name,
        }

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Claims":
        """
        Rebuild claims from a decoded payload.

        Raises:
            ValueError if a claim is missing or has the wrong type.
        """
        return cls(
            issued_at=_require_int(payload, "iat"),
            expires_at=_require_int(payload, "exp"),
            subject=_require_str(payload, "sub"),
            user_name=_require_str(payload, "user_name"),
        )

    @property
    def ttl_seconds(self) -> int:
        return self.expires_at - self.issued_at


@dataclass(frozen=True, slots=True)
class TokenData:
    """
    Result of a successful decode: verified claims plus the token header.
    """
    claims: Claims
    header: Mapping[str, Any] = field(default_factory=dict)

    # --- Read-only shortcuts ----------------------------------------------

    @property
    def algorithm(self) -> Optional[str]:
        return self.header.get("alg")

    @property
    def token_type(self) -> Optional[str]:
        return self.header.get("typ")

    @property
    def user_name(self) -> str:
        return self.claims.user_name


def generate_claims(
    user: UserRecord,
    *,
    ttl: TimeToLive = TimeToLive(),
    now: Callable[[], float] = time.time,
) -> Claims:
    """
    Build the claims for a freshly authenticated user.

    `issued_at` is taken from `now()`, `expires_at` is `issued_at + ttl`.
    Only `user.name` is read.
    """
    issued_at = int(now())
    return Claims(
        issued_at=issued_at,
        expires_at=issued_at + ttl.seconds,
        subject=SUBJECT,
        user_name=user.name,
    )
