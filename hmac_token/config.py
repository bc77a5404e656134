"""Default options for ``TokenCodec``."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from .algorithms import DEFAULT_ALGORITHM, Algorithm, resolve_algorithm

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {value!r}") from exc


@dataclass(frozen=True)
class TokenConfig:
    """Signing and verification defaults.

    ``ttl_ms`` of ``None`` issues tokens that never expire. ``max_age_ms`` is
    the grace period applied when verifying.
    """

    algorithm: Algorithm = DEFAULT_ALGORITHM
    ttl_ms: int | None = None
    max_age_ms: int = 0
    ignore_expiration: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "algorithm", resolve_algorithm(self.algorithm))
        if self.ttl_ms is not None and self.ttl_ms < 0:
            raise ValueError("ttl_ms must be non-negative")
        if self.max_age_ms < 0:
            raise ValueError("max_age_ms must be non-negative")

    @classmethod
    def from_env(cls, prefix: str = "HMAC_TOKEN_", environ: Mapping[str, str] | None = None) -> "TokenConfig":
        """Build a config from ``<prefix>ALGORITHM``, ``TTL_MS``, ``MAX_AGE_MS``
        and ``IGNORE_EXPIRATION``; unset variables keep their defaults."""
        env = os.environ if environ is None else environ
        kwargs = {}
        if f"{prefix}ALGORITHM" in env:
            kwargs["algorithm"] = resolve_algorithm(env[f"{prefix}ALGORITHM"].strip())
        if f"{prefix}TTL_MS" in env:
            kwargs["ttl_ms"] = _parse_int(f"{prefix}TTL_MS", env[f"{prefix}TTL_MS"])
        if f"{prefix}MAX_AGE_MS" in env:
            kwargs["max_age_ms"] = _parse_int(f"{prefix}MAX_AGE_MS", env[f"{prefix}MAX_AGE_MS"])
        if f"{prefix}IGNORE_EXPIRATION" in env:
            kwargs["ignore_expiration"] = _parse_bool(
                f"{prefix}IGNORE_EXPIRATION", env[f"{prefix}IGNORE_EXPIRATION"]
            )
        return cls(**kwargs)
