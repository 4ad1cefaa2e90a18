# echotext/codec/compression.py
# zlib deflate/inflate adapter (same wire format as pako.deflate/inflate)

from __future__ import annotations

import zlib

from echotext.constants import MAX_INFLATED_BYTES


class DecompressionError(ValueError):
    """Input is not one complete, sane deflate stream."""


def compress(text: str) -> bytes:
    return zlib.compress(text.encode("utf-8"))


def decompress(data: bytes, max_size: int = MAX_INFLATED_BYTES) -> str:
    """
    Inflate a zlib stream back into text.

    Truncated streams, trailing garbage, oversized payloads and
    non-UTF-8 content all raise DecompressionError.
    """
    if not data:
        raise DecompressionError("empty input")
    inflater = zlib.decompressobj()
    try:
        raw = inflater.decompress(data, max_size)
    except zlib.error as e:
        raise DecompressionError(f"invalid deflate stream: {e}") from e
    if not inflater.eof:
        if inflater.unconsumed_tail or len(raw) >= max_size:
            raise DecompressionError(f"inflated payload exceeds {max_size} bytes")
        raise DecompressionError("truncated deflate stream")
    if inflater.unused_data:
        raise DecompressionError("trailing data after deflate stream")
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecompressionError("inflated payload is not UTF-8") from e
