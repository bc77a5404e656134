"""Supported MAC algorithms and their hash primitives."""

from __future__ import annotations

import hashlib
from enum import Enum
from typing import Any, Callable, Dict


class Algorithm(str, Enum):
    """HMAC algorithm identifiers accepted in the token header."""

    HS256 = "HS256"
    HS384 = "HS384"
    HS512 = "HS512"


HashFactory = Callable[..., Any]

HASH_FUNCTIONS: Dict[Algorithm, HashFactory] = {
    Algorithm.HS256: hashlib.sha256,
    Algorithm.HS384: hashlib.sha384,
    Algorithm.HS512: hashlib.sha512,
}

assert set(HASH_FUNCTIONS) == set(Algorithm), "every Algorithm needs a hash function"

DEFAULT_ALGORITHM = Algorithm.HS256


class UnsupportedAlgorithm(ValueError):
    """Raised when an algorithm name is outside the supported set."""


def resolve_algorithm(value: Any) -> Algorithm:
    """Map an algorithm name (or member) to ``Algorithm``.

    Matching is exact and case-sensitive; there is no fallback.
    """
    if isinstance(value, Algorithm):
        return value
    if not isinstance(value, str):
        raise UnsupportedAlgorithm(f"unsupported algorithm {value!r}")
    try:
        return Algorithm(value)
    except ValueError as exc:
        raise UnsupportedAlgorithm(f"unsupported algorithm {value!r}") from exc


def hash_function(algorithm: Algorithm) -> HashFactory:
    return HASH_FUNCTIONS[algorithm]
