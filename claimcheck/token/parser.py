"""Structural parsing of compact tokens."""

import base64
import binascii
import json

from pydantic import ValidationError

from claimcheck.core.errors import MalformedTokenError
from claimcheck.crypto.types import TokenHeader

MIN_SEGMENTS = 2


def _b64decode_segment(segment: str) -> bytes:
    """Decode a base64url segment, tolerating standard alphabet and no padding."""
    normalized = segment.replace("+", "-").replace("/", "_")
    padded = normalized + "=" * (-len(normalized) % 4)
    return base64.urlsafe_b64decode(padded.encode("ascii"))


def split_token(token: str) -> list[str]:
    """Split a compact token, requiring at least header and payload."""
    segments = (token or "").split(".")
    if len(segments) < MIN_SEGMENTS:
        raise MalformedTokenError(
            "requested token is invalid",
            details={"segments": len(segments)},
        )
    return segments


def parse_header(token: str) -> TokenHeader:
    """Decode the header segment to learn the signing kid and algorithm."""
    segments = split_token(token)
    try:
        raw = json.loads(_b64decode_segment(segments[0]))
    except (binascii.Error, UnicodeError, ValueError) as exc:
        raise MalformedTokenError("token header is not base64url JSON") from exc
    if not isinstance(raw, dict):
        raise MalformedTokenError("token header is not a JSON object")
    try:
        return TokenHeader.model_validate(raw)
    except ValidationError as exc:
        raise MalformedTokenError("token header lacks kid or alg") from exc
