"""Segment encoding and MAC computation shared by signer and verifier."""

from __future__ import annotations

import base64
import hmac
import json
import re
from typing import Any

from ..algorithms import Algorithm, hash_function
from .types import Secret

_LONE_SURROGATE_RE = re.compile(r"[\ud800-\udfff]")


class SegmentEncodeError(ValueError):
    """Raised when a value cannot be rendered as a token segment."""


class SegmentDecodeError(ValueError):
    """Raised when a token segment is not base64-encoded JSON."""


def secret_bytes(secret: Secret) -> bytes:
    """Return the key material as bytes; text secrets are UTF-8 encoded."""
    if isinstance(secret, str):
        return secret.encode("utf-8")
    if isinstance(secret, (bytes, bytearray)):
        return bytes(secret)
    raise TypeError(f"secret must be str or bytes, not {type(secret).__name__}")


def _escape_lone_surrogates(text: str) -> str:
    # Adjacent high/low halves become one code point; unpaired halves are
    # written as lowercase \uXXXX escapes.
    text = text.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")
    return _LONE_SURROGATE_RE.sub(lambda m: f"\\u{ord(m.group()):04x}", text)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def encode_json(value: Any) -> str:
    """Compact JSON text with non-ASCII characters left unescaped."""
    return _escape_lone_surrogates(
        json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    )


def encode_segment(value: Any) -> str:
    """JSON-encode ``value`` and wrap it in standard padded base64."""
    try:
        raw = encode_json(value).encode("utf-8")
    except (TypeError, ValueError, RecursionError) as exc:
        raise SegmentEncodeError(str(exc)) from exc
    return base64.b64encode(raw).decode("ascii")


def decode_segment(segment: str) -> Any:
    """Inverse of ``encode_segment``. Decoding is strict: ``NaN`` and
    ``Infinity`` literals are refused."""
    try:
        raw = base64.b64decode(segment, validate=True)
        return json.loads(raw.decode("utf-8"), parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        raise SegmentDecodeError(str(exc)) from exc


def signing_input(header_segment: str, payload_segment: str) -> str:
    return f"{header_segment}.{payload_segment}"


def compute_mac(algorithm: Algorithm, key: bytes, message: str) -> str:
    """Return the base64-encoded HMAC of ``message`` under ``algorithm``."""
    digest = hmac.new(key, message.encode("utf-8"), hash_function(algorithm)).digest()
    return base64.b64encode(digest).decode("ascii")


def macs_equal(expected: str, supplied: str) -> bool:
    """Compare two MAC strings in constant time."""
    return hmac.compare_digest(expected.encode("utf-8"), supplied.encode("utf-8", "surrogatepass"))
