"""Token datatypes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping

from ..algorithms import DEFAULT_ALGORITHM, Algorithm, resolve_algorithm

TOKEN_TYPE = "JWT"
NEVER_EXPIRES = -1

Secret = str | bytes | bytearray


@dataclass(frozen=True)
class Header:
    """Token metadata segment."""

    alg: Algorithm = DEFAULT_ALGORITHM
    typ: str | None = TOKEN_TYPE
    expire_date: int | float | None = NEVER_EXPIRES

    @property
    def never_expires(self) -> bool:
        return self.expire_date == NEVER_EXPIRES

    def to_dict(self) -> Dict[str, Any]:
        """Return the wire form; key order is part of the encoding."""
        return {"alg": self.alg.value, "typ": self.typ, "expireDate": self.expire_date}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Header":
        """Rebuild a header from a decoded segment.

        A missing ``alg`` means HS256. An unknown one raises
        ``UnsupportedAlgorithm``.
        """
        alg = data.get("alg")
        return cls(
            alg=DEFAULT_ALGORITHM if alg is None else resolve_algorithm(alg),
            typ=data.get("typ"),
            expire_date=data.get("expireDate"),
        )


@dataclass(frozen=True)
class DecodedToken:
    """Header and payload of a verified token."""

    header: Header
    payload: Any

    def to_dict(self) -> Dict[str, Any]:
        return {"header": self.header.to_dict(), "payload": self.payload}
