"""Secret-bound wrapper around ``sign`` and ``verify``."""

from __future__ import annotations

import os
from typing import Any, Mapping

from .config import TokenConfig
from .token import sign, verify
from .token.types import NEVER_EXPIRES, Secret
from .utils.time import Clock, now_ms


class TokenCodec:
    """Sign and verify tokens with one secret and a shared set of defaults."""

    def __init__(self, secret: Secret | None, *, config: TokenConfig | None = None, clock: Clock | None = None) -> None:
        self._secret = secret
        self.config = config or TokenConfig()
        self._clock = clock or now_ms

    @classmethod
    def from_env(cls, prefix: str = "HMAC_TOKEN_", environ: Mapping[str, str] | None = None, clock: Clock | None = None) -> "TokenCodec":
        """Read ``<prefix>SECRET`` and the ``TokenConfig`` variables.

        There is no default secret; an unset one fails on first use.
        """
        env = os.environ if environ is None else environ
        return cls(env.get(f"{prefix}SECRET"), config=TokenConfig.from_env(prefix, env), clock=clock)

    def __repr__(self) -> str:
        return f"TokenCodec(config={self.config!r})"

    def sign(self, payload: Any, *, expire_date: int | None = None) -> str:
        if expire_date is None:
            ttl = self.config.ttl_ms
            expire_date = NEVER_EXPIRES if ttl is None else self._clock() + ttl
        return sign(payload, self._secret, alg=self.config.algorithm, expire_date=expire_date)

    def verify(self, token: Any, *, complete: bool = False) -> Any:
        return verify(
            token,
            self._secret,
            max_age=self.config.max_age_ms,
            ignore_expiration=self.config.ignore_expiration,
            complete=complete,
            clock=self._clock,
        )
