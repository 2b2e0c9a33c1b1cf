from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable

from ...domain.entities import generate_claims
from ...domain.ports import TokenCodec, UserRecord
from ...domain.value_objects import TimeToLive


@dataclass(slots=True)
class IssueTokenUseCase:
    """
    Application use case run at login:
    - Build Claims for the user
    - Sign them into a bearer token via TokenCodec port
    """

    token_codec: TokenCodec
    ttl: TimeToLive = field(default_factory=TimeToLive)
    clock: Callable[[], float] = time.time

    def execute(self, user: UserRecord) -> str:
        """
        Raises:
            SigningError
        """
        claims = generate_claims(user, ttl=self.ttl, now=self.clock)
        return self.token_codec.encode(claims)
