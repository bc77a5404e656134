"""Signed token encoding and verification."""

from .signer import sign
from .types import NEVER_EXPIRES, TOKEN_TYPE, DecodedToken, Header
from .verifier import verify

__all__ = ["sign", "verify", "Header", "DecodedToken", "NEVER_EXPIRES", "TOKEN_TYPE"]
