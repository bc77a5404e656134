"""Error taxonomy for token signing and verification.

Two error kinds exist: ``SignError`` for the encoder and ``TokenError`` for the
decoder. Each carries a reason drawn from its own closed enum and is turned into
the ``{"name": ..., "message": ...}`` wire object only at the boundary.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import ClassVar, Dict, Type


class SignErrorReason(str, Enum):
    """Why ``sign`` refused to produce a token."""

    INVALID_ALGORITHM = "invalid algorithm"
    MISSING_PAYLOAD = "payload is required"
    MISSING_SECRET = "secret is required"
    INVALID_PAYLOAD = "payload is not JSON serializable"


class TokenErrorReason(str, Enum):
    """Why ``verify`` rejected a token."""

    INCORRECT_FORMAT = "incorrect token format"
    MISSING_SECRET = "secret is required"
    INVALID_ALGORITHM = "invalid algorithm"
    INVALID_SIGNATURE = "invalid token signature"
    EXPIRED = "token expired"


class HmacTokenError(Exception):
    """Base class for every failure raised by this package."""

    name: ClassVar[str] = "HmacTokenError"
    reason_type: ClassVar[Type[Enum]] = Enum

    def __init__(self, reason: Enum) -> None:
        if not isinstance(reason, self.reason_type):
            raise TypeError(f"{type(self).__name__} does not accept reason {reason!r}")
        super().__init__(reason.value)
        self.reason = reason

    @property
    def message(self) -> str:
        return str(self.reason.value)

    def to_dict(self) -> Dict[str, str]:
        """Return the wire representation ``{"name", "message"}``."""
        return {"name": self.name, "message": self.message}

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.reason.name})"


class SignError(HmacTokenError):
    """Raised by the encoder."""

    name = "SignError"
    reason_type = SignErrorReason


class TokenError(HmacTokenError):
    """Raised by the decoder."""

    name = "TokenError"
    reason_type = TokenErrorReason
