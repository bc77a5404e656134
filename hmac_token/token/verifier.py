"""HMAC token decoder with expiry enforcement."""

from __future__ import annotations

import logging
from typing import Any

from ..algorithms import UnsupportedAlgorithm
from ..errors import TokenError, TokenErrorReason
from ..utils.time import Clock, now_ms
from .encoding import SegmentDecodeError, compute_mac, decode_segment, macs_equal, secret_bytes, signing_input
from .types import NEVER_EXPIRES, DecodedToken, Header, Secret

logger = logging.getLogger(__name__)


def _reject(reason: TokenErrorReason) -> TokenError:
    logger.debug("token rejected: %s", reason.name)
    return TokenError(reason)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _not_expired(header: Header, max_age: int | float, clock: Clock) -> bool:
    expire_date = header.expire_date
    if expire_date == NEVER_EXPIRES:
        return True
    if not _is_number(expire_date):
        return False
    return expire_date + max_age >= clock()


def verify(
    token: Any,
    secret: Secret | None,
    *,
    max_age: int | float = 0,
    ignore_expiration: bool = False,
    complete: bool = False,
    clock: Clock | None = None,
) -> Any:
    """Verify ``token`` and return its payload.

    ``max_age`` is a grace period in milliseconds added to the token's expiry.
    With ``complete=True`` a ``DecodedToken`` carrying the header is returned
    instead. ``clock`` returns the current time in epoch milliseconds and
    defaults to the system clock.

    Raises ``TokenError`` on a malformed token, a missing secret, an unknown
    algorithm, a signature mismatch or an expired token.
    """
    if not isinstance(token, str):
        raise _reject(TokenErrorReason.INCORRECT_FORMAT)
    segments = token.split(".")
    if len(segments) != 3:
        raise _reject(TokenErrorReason.INCORRECT_FORMAT)
    if not secret:
        raise _reject(TokenErrorReason.MISSING_SECRET)

    header_segment, payload_segment, mac = segments
    try:
        raw_header = decode_segment(header_segment)
    except SegmentDecodeError as exc:
        raise _reject(TokenErrorReason.INCORRECT_FORMAT) from exc
    if not isinstance(raw_header, dict):
        raise _reject(TokenErrorReason.INCORRECT_FORMAT)

    try:
        header = Header.from_dict(raw_header)
    except UnsupportedAlgorithm as exc:
        raise _reject(TokenErrorReason.INVALID_ALGORITHM) from exc

    expected = compute_mac(header.alg, secret_bytes(secret), signing_input(header_segment, payload_segment))
    if not macs_equal(expected, mac):
        raise _reject(TokenErrorReason.INVALID_SIGNATURE)

    try:
        payload = decode_segment(payload_segment)
    except SegmentDecodeError as exc:
        raise _reject(TokenErrorReason.INCORRECT_FORMAT) from exc

    if not (ignore_expiration or _not_expired(header, max_age, clock or now_ms)):
        raise _reject(TokenErrorReason.EXPIRED)

    if complete:
        return DecodedToken(header=header, payload=payload)
    return payload
