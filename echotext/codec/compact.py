# echotext/codec/compact.py
# Compact share token: positional JSON tuple of the varying fields only
#
#   [text, effect_index, color_int, flags(, repeat)]
#
# Optional tail fields are dropped while they equal their default, so the
# tuple length fixes what each trailing position means.

from __future__ import annotations

import json
import logging
from typing import Any, Callable, NamedTuple, Optional

from echotext.codec import base64url, compression
from echotext.codec.colors import color_to_int, int_to_color
from echotext.codec.result import DecodeStage, Ok, Result, attempt, fail
from echotext.codec.schema import JSON_ERRORS, parse_json, rebuild_config
from echotext.constants import (
    COMPACT_MIN_FIELDS,
    DEFAULT_REPEAT,
    FLAG_BOLD,
    FLAG_ITALIC,
    FLAG_STRIKETHROUGH,
)
from echotext.models.effects import Effect, effect_to_index, index_to_effect
from echotext.models.share_config import ShareConfig

logger = logging.getLogger(__name__)

UNDEFINED_SENTINEL = "undefined"


class TailField(NamedTuple):
    name: str
    default: Any
    read: Callable[[ShareConfig], Any]


# Order is part of the wire format; append only
TAIL_FIELDS: list[TailField] = [
    TailField("repeat", DEFAULT_REPEAT, lambda c: c.repeat),
]


def _pack(config: ShareConfig) -> list[Any]:
    parts: list[Any] = [
        config.text,
        effect_to_index(config.effect),
        color_to_int(config.color),
        config.flags,
    ]
    tail = [field.read(config) for field in TAIL_FIELDS]
    while tail and tail[-1] == TAIL_FIELDS[len(tail) - 1].default:
        tail.pop()
    return parts + tail


def encode_compact(config: ShareConfig) -> str:
    """Encode a config as a compact token. Returns '' if anything goes wrong."""
    try:
        payload = json.dumps(_pack(config), separators=(",", ":"), ensure_ascii=False)
        return base64url.urlsafe_encode(compression.compress(payload))
    except Exception:
        logger.exception("Failed to encode config compactly")
        return ""


def _inflate_payload(data: bytes) -> Result[str]:
    return attempt(DecodeStage.DECOMPRESSION, compression.decompress, data).bind(_check_payload)


def _check_payload(text: str) -> Result[str]:
    if not text.strip() or text == UNDEFINED_SENTINEL:
        return fail(DecodeStage.DECOMPRESSION, "empty or undefined payload")
    return Ok(text)


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool) or value is None:
        return ""
    if isinstance(value, (int, float)):
        return str(value)
    return ""


def _as_int(value: Any, default: int = 0) -> int:
    if isinstance(value, bool):
        return default
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, int):
        return value
    return default


def _decode_effect(value: Any) -> Optional[Effect]:
    effect = index_to_effect(value)
    return None if effect is Effect.NONE else effect


def _unpack(parts: Any) -> Result[ShareConfig]:
    if not isinstance(parts, list) or len(parts) < COMPACT_MIN_FIELDS:
        return fail(DecodeStage.STRUCTURE, "compact payload must be a list of at least 4 entries")

    flags = _as_int(parts[3])
    raw: dict[str, Any] = {
        "text": _as_text(parts[0]),
        "effect": _decode_effect(parts[1]),
        "color": int_to_color(parts[2]),
        "is_bold": bool(flags & FLAG_BOLD),
        "is_italic": bool(flags & FLAG_ITALIC),
        "is_strikethrough": bool(flags & FLAG_STRIKETHROUGH),
    }
    # font_size, font_family and spacing are never carried; the schema
    # fills in their defaults
    for offset, field in enumerate(TAIL_FIELDS):
        position = COMPACT_MIN_FIELDS + offset
        if position < len(parts):
            raw[field.name] = parts[position]
    return rebuild_config(raw)


def decode_compact_result(token: str) -> Result[ShareConfig]:
    """Decode a compact token, reporting the stage that failed."""
    if not token:
        return fail(DecodeStage.BASE64, "empty token")
    return (
        attempt(DecodeStage.BASE64, base64url.urlsafe_decode, token)
        .bind(_inflate_payload)
        .bind(lambda text: attempt(DecodeStage.JSON, parse_json, text, errors=JSON_ERRORS))
        .bind(_unpack)
    )


def decode_compact(token: str) -> Optional[ShareConfig]:
    """Decode a compact token. Returns None on any failure."""
    result = decode_compact_result(token)
    if not result.ok:
        logger.debug("Compact decode failed at %s: %s", result.error.stage.name, result.error.detail)
        return None
    return result.value
