# echotext/codec/base64url.py
# Base64 with a table-driven fallback, plus the URL-safe token layer

from __future__ import annotations

import base64
import binascii
import logging

logger = logging.getLogger(__name__)

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
PAD = "="

# 256-entry reverse table, -1 marks characters outside the alphabet
_LOOKUP: list[int] = [-1] * 256
for _i, _c in enumerate(ALPHABET):
    _LOOKUP[ord(_c)] = _i
del _i, _c


class Base64DecodeError(ValueError):
    """Raised when a string is not valid base64."""


def _manual_encode(data: bytes) -> str:
    out: list[str] = []
    for i in range(0, len(data), 3):
        group = data[i:i + 3]
        chunk = group[0] << 16
        if len(group) > 1:
            chunk |= group[1] << 8
        if len(group) > 2:
            chunk |= group[2]
        out.append(ALPHABET[(chunk >> 18) & 63])
        out.append(ALPHABET[(chunk >> 12) & 63])
        out.append(ALPHABET[(chunk >> 6) & 63] if len(group) > 1 else PAD)
        out.append(ALPHABET[chunk & 63] if len(group) > 2 else PAD)
    return "".join(out)


def _sextet(char: str) -> int:
    code = ord(char)
    value = _LOOKUP[code] if code < 256 else -1
    if value < 0:
        raise Base64DecodeError(f"invalid base64 character {char!r}")
    return value


def _manual_decode(text: str) -> bytes:
    if len(text) % 4:
        raise Base64DecodeError("base64 length must be a multiple of 4")
    padding = len(text) - len(text.rstrip(PAD))
    if padding > 2 or PAD in text.rstrip(PAD):
        raise Base64DecodeError("misplaced base64 padding")

    out = bytearray()
    last = len(text) - 4
    for i in range(0, len(text), 4):
        quad = text[i:i + 4]
        pad_here = padding if i == last else 0
        s1 = _sextet(quad[0])
        s2 = _sextet(quad[1])
        s3 = _sextet(quad[2]) if pad_here < 2 else 0
        s4 = _sextet(quad[3]) if pad_here < 1 else 0
        out.append(((s1 << 2) | (s2 >> 4)) & 0xFF)
        if pad_here < 2:
            out.append(((s2 & 15) << 4 | (s3 >> 2)) & 0xFF)
        if pad_here < 1:
            out.append(((s3 & 3) << 6 | s4) & 0xFF)
    return bytes(out)


def encode_bytes(data: bytes, native: bool = True) -> str:
    """Standard base64 with '=' padding. Falls back to the table encoder."""
    if native:
        try:
            return base64.b64encode(data).decode("ascii")
        except (binascii.Error, TypeError, ValueError) as e:
            logger.debug("native base64 encode failed, using table encoder: %s", e)
    return _manual_encode(bytes(data))


def decode_bytes(text: str, native: bool = True) -> bytes:
    """Strict standard base64 decode. Falls back to the table decoder."""
    if native:
        try:
            return base64.b64decode(text, validate=True)
        except (binascii.Error, TypeError, ValueError) as e:
            logger.debug("native base64 decode failed, using table decoder: %s", e)
    if not isinstance(text, str):
        raise Base64DecodeError("base64 input must be text")
    return _manual_decode(text)


def to_urlsafe(b64: str) -> str:
    return b64.replace("+", "-").replace("/", "_").replace(PAD, "")


def from_urlsafe(token: str) -> str:
    standard = token.replace("-", "+").replace("_", "/")
    pad = (4 - len(standard) % 4) % 4
    return standard + PAD * pad


def urlsafe_encode(data: bytes) -> str:
    """Bytes -> token alphabet [A-Za-z0-9_-], no padding."""
    return to_urlsafe(encode_bytes(data))


def urlsafe_decode(token: str) -> bytes:
    """Token -> bytes. Raises Base64DecodeError on invalid input."""
    if not isinstance(token, str):
        raise Base64DecodeError("token must be text")
    if PAD in token or "+" in token or "/" in token:
        raise Base64DecodeError("token contains characters outside the URL-safe alphabet")
    return decode_bytes(from_urlsafe(token))
