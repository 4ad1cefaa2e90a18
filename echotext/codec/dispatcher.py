# echotext/codec/dispatcher.py
# Single entry point for consuming shared links: compact first, then legacy

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from echotext.codec import compact, legacy
from echotext.codec.result import DecodeStage, Err
from echotext.models.share_config import ShareConfig

logger = logging.getLogger(__name__)


class FailureReason(str, Enum):
    MISSING_PARAMETER = "missing_parameter"
    CORRUPTED = "corrupted"
    MALFORMED = "malformed"
    DECODE_ERROR = "decode_error"


FAILURE_MESSAGES: dict[FailureReason, str] = {
    FailureReason.MISSING_PARAMETER: "Invalid URL. The share link parameter is missing.",
    FailureReason.CORRUPTED: "Invalid URL. This EchoText link might be corrupted or malformed.",
    FailureReason.MALFORMED: "Invalid URL. This EchoText link might be corrupted or malformed.",
    FailureReason.DECODE_ERROR: "Invalid URL. This EchoText link cannot be decoded properly.",
}


@dataclass(frozen=True)
class DecodeFailure:
    reason: FailureReason
    detail: str = ""

    @property
    def message(self) -> str:
        return FAILURE_MESSAGES[self.reason]


def _reason_for(*errors: Err) -> FailureReason:
    # The codec that got furthest through the pipeline describes the token best
    furthest = max(err.error.stage for err in errors)
    if furthest >= DecodeStage.JSON:
        return FailureReason.MALFORMED
    return FailureReason.CORRUPTED


def resolve_shared_config(token: Optional[str]) -> Union[ShareConfig, DecodeFailure]:
    """
    Turn a token taken from a share URL into a config or a categorized failure.

    Never raises. Configs whose text is empty or whitespace-only are
    reported as malformed.
    """
    if not token:
        return DecodeFailure(FailureReason.MISSING_PARAMETER, "no token")

    try:
        compact_result = compact.decode_compact_result(token)
        if compact_result.ok:
            config, source = compact_result.value, "compact"
        else:
            legacy_result = legacy.decode_result(token)
            if not legacy_result.ok:
                reason = _reason_for(compact_result, legacy_result)
                logger.info(
                    "Share token rejected (%s): compact=%s legacy=%s",
                    reason.value,
                    compact_result.error.detail,
                    legacy_result.error.detail,
                )
                return DecodeFailure(reason, legacy_result.error.detail)
            config, source = legacy_result.value, "legacy"
    except Exception as e:
        logger.exception("Unexpected error while decoding share token")
        return DecodeFailure(FailureReason.DECODE_ERROR, type(e).__name__)

    if not config.has_visible_text():
        logger.info("Share token decoded (%s) but text is empty", source)
        return DecodeFailure(FailureReason.MALFORMED, "empty text")

    logger.debug("Share token decoded with %s codec", source)
    return config
