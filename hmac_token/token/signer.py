"""HMAC token encoder."""

from __future__ import annotations

import logging
from typing import Any

from ..algorithms import DEFAULT_ALGORITHM, Algorithm, UnsupportedAlgorithm, resolve_algorithm
from ..errors import SignError, SignErrorReason
from .encoding import SegmentEncodeError, compute_mac, encode_segment, secret_bytes, signing_input
from .types import NEVER_EXPIRES, TOKEN_TYPE, Header, Secret

logger = logging.getLogger(__name__)


def _payload_missing(payload: Any) -> bool:
    if payload is None:
        return True
    if isinstance(payload, (dict, list)):
        return False
    return not payload


def sign(
    payload: Any,
    secret: Secret | None,
    *,
    alg: Algorithm | str = DEFAULT_ALGORITHM,
    expire_date: int = NEVER_EXPIRES,
) -> str:
    """Sign ``payload`` and return a ``header.payload.mac`` token.

    ``expire_date`` is a Unix timestamp in milliseconds, or ``-1`` for a token
    that never expires. Raises ``SignError`` on an unknown algorithm, a missing
    payload or secret, or a payload that is not JSON serializable.
    """
    try:
        algorithm = resolve_algorithm(alg)
    except UnsupportedAlgorithm as exc:
        logger.debug("sign rejected: %s", SignErrorReason.INVALID_ALGORITHM.name)
        raise SignError(SignErrorReason.INVALID_ALGORITHM) from exc

    if _payload_missing(payload):
        logger.debug("sign rejected: %s", SignErrorReason.MISSING_PAYLOAD.name)
        raise SignError(SignErrorReason.MISSING_PAYLOAD)
    if not secret:
        logger.debug("sign rejected: %s", SignErrorReason.MISSING_SECRET.name)
        raise SignError(SignErrorReason.MISSING_SECRET)
    if isinstance(expire_date, bool) or not isinstance(expire_date, int):
        raise TypeError(f"expire_date must be an int, not {type(expire_date).__name__}")

    key = secret_bytes(secret)
    header = Header(alg=algorithm, typ=TOKEN_TYPE, expire_date=expire_date)
    header_segment = encode_segment(header.to_dict())
    try:
        payload_segment = encode_segment(payload)
    except SegmentEncodeError as exc:
        logger.debug("sign rejected: %s", SignErrorReason.INVALID_PAYLOAD.name)
        raise SignError(SignErrorReason.INVALID_PAYLOAD) from exc

    message = signing_input(header_segment, payload_segment)
    return f"{message}.{compute_mac(algorithm, key, message)}"
