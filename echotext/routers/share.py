# echotext/routers/share.py
# FastAPI router for share links: encode a config, resolve a token

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from echotext.codec import compact, legacy
from echotext.codec.dispatcher import DecodeFailure, FailureReason, resolve_shared_config
from echotext.codec.links import build_share_url
from echotext.config import Settings, get_settings
from echotext.middleware.error_handler import InvalidLinkError, LinkGenerationError
from echotext.schemas.share import (
    ShareCreateRequest,
    ShareLinkResponse,
    ShareResolveResponse,
    TokenFormat,
)
from echotext.utils.logger import log_info


router = APIRouter(tags=["Share"])

_ENCODERS = {
    TokenFormat.COMPACT: compact.encode_compact,
    TokenFormat.LEGACY: legacy.encode,
}


# Codec calls are CPU-bound and synchronous; plain def routes run in the threadpool
@router.post("/share", response_model=ShareLinkResponse, status_code=status.HTTP_201_CREATED)
def create_share_link(
    payload: ShareCreateRequest,
    settings: Settings = Depends(get_settings),
) -> ShareLinkResponse:
    """Encode a config into a token and share URL."""
    token = _ENCODERS[payload.format](payload.config)
    if not token:
        raise LinkGenerationError()
    log_info(f"share link created format={payload.format.value} length={len(token)}")
    return ShareLinkResponse(
        token=token,
        url=build_share_url(token, settings.PUBLIC_ORIGIN),
        format=payload.format,
        length=len(token),
    )


@router.get("/share/{token}", response_model=ShareResolveResponse, response_model_by_alias=True)
def resolve_share_link(
    token: str,
    settings: Settings = Depends(get_settings),
) -> ShareResolveResponse:
    """Resolve a token taken from a share URL back into its config."""
    if len(token) > settings.MAX_TOKEN_LENGTH:
        raise InvalidLinkError(DecodeFailure(FailureReason.MALFORMED, "token too long"))

    result = resolve_shared_config(token)
    if isinstance(result, DecodeFailure):
        log_info(f"share link rejected reason={result.reason.value}")
        raise InvalidLinkError(result)
    return ShareResolveResponse(config=result)
