from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from echotext.models.share_config import ShareConfig


class TokenFormat(str, Enum):
    COMPACT = "compact"
    LEGACY = "legacy"


class ShareCreateRequest(BaseModel):
    config: ShareConfig
    format: TokenFormat = TokenFormat.COMPACT


class ShareLinkResponse(BaseModel):
    token: str
    url: str
    format: TokenFormat
    length: int = Field(description="Token length in characters")


class ShareResolveResponse(BaseModel):
    config: ShareConfig
