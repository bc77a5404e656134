"""hmac-token package.

Compact HMAC-signed tokens: ``sign`` a JSON-serializable payload with a shared
secret and ``verify`` it later, with optional expiry.
"""

from .algorithms import Algorithm
from .codec import TokenCodec
from .config import TokenConfig
from .errors import HmacTokenError, SignError, SignErrorReason, TokenError, TokenErrorReason
from .token import NEVER_EXPIRES, DecodedToken, Header, sign, verify

__all__ = [
    "sign",
    "verify",
    "Algorithm",
    "Header",
    "DecodedToken",
    "NEVER_EXPIRES",
    "HmacTokenError",
    "SignError",
    "SignErrorReason",
    "TokenError",
    "TokenErrorReason",
    "TokenCodec",
    "TokenConfig",
]
