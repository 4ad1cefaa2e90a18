# echotext/codec/legacy.py
# Legacy share token: the whole config as a JSON object, deflated and base64url'd
# Longer than the compact token but keeps fontSize/fontFamily/spacing.

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from echotext.codec import base64url, compression
from echotext.codec.result import DecodeStage, Result, attempt, fail
from echotext.codec.schema import JSON_ERRORS, parse_json, rebuild_config
from echotext.models.share_config import ShareConfig

logger = logging.getLogger(__name__)

REQUIRED_KEY = "text"


def encode(config: ShareConfig) -> str:
    """Encode every field of a config. Returns '' if anything goes wrong."""
    try:
        payload = json.dumps(config.to_wire(), separators=(",", ":"), ensure_ascii=False)
        return base64url.urlsafe_encode(compression.compress(payload))
    except Exception:
        logger.exception("Failed to encode config")
        return ""


def _inflate(data: bytes) -> Result[str]:
    result = attempt(DecodeStage.DECOMPRESSION, compression.decompress, data)
    if result.ok and (not result.value.strip() or result.value == "undefined"):
        return fail(DecodeStage.DECOMPRESSION, "empty or undefined payload")
    return result


def _validate(payload: Any) -> Result[ShareConfig]:
    if not isinstance(payload, dict):
        return fail(DecodeStage.STRUCTURE, f"payload is {type(payload).__name__}, not an object")
    if REQUIRED_KEY not in payload:
        return fail(DecodeStage.STRUCTURE, "payload has no 'text' key")
    return rebuild_config(payload, by_alias=True)


def decode_result(token: str) -> Result[ShareConfig]:
    """Decode a legacy token, reporting the stage that failed."""
    if not token:
        return fail(DecodeStage.BASE64, "empty token")
    return (
        attempt(DecodeStage.BASE64, base64url.urlsafe_decode, token)
        .bind(_inflate)
        .bind(lambda text: attempt(DecodeStage.JSON, parse_json, text, errors=JSON_ERRORS))
        .bind(_validate)
    )


def decode(token: str) -> Optional[ShareConfig]:
    """Decode a legacy token. Returns None on any failure."""
    result = decode_result(token)
    if not result.ok:
        logger.warning("Legacy decode failed at %s: %s", result.error.stage.name, result.error.detail)
        return None
    return result.value
