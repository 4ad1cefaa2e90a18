# echotext/models/share_config.py
# The shareable text configuration record

from __future__ import annotations

import math
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from echotext.codec.colors import normalize_color
from echotext.constants import (
    DEFAULT_COLOR,
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE,
    DEFAULT_REPEAT,
    DEFAULT_SPACING,
    DEFAULT_TEXT,
    FLAG_BOLD,
    FLAG_ITALIC,
    FLAG_STRIKETHROUGH,
)
from echotext.models.effects import Effect, parse_effect


def is_finite_number(v: Any) -> bool:
    """True for a real number that also fits in a float (JSON numbers are doubles)."""
    try:
        return math.isfinite(v)
    except OverflowError:
        return False


class ShareConfig(BaseModel):
    """Immutable text configuration. JSON names are the camelCase aliases."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    text: str = DEFAULT_TEXT
    effect: Optional[Effect] = None
    color: str = DEFAULT_COLOR
    is_bold: bool = Field(default=False, alias="isBold")
    is_italic: bool = Field(default=False, alias="isItalic")
    is_strikethrough: bool = Field(default=False, alias="isStrikethrough")
    font_size: Union[int, float] = Field(default=DEFAULT_FONT_SIZE, alias="fontSize")
    font_family: str = Field(default=DEFAULT_FONT_FAMILY, alias="fontFamily", min_length=1)
    spacing: Union[int, float] = DEFAULT_SPACING
    repeat: int = Field(default=DEFAULT_REPEAT, ge=1)

    @field_validator("effect", mode="before")
    @classmethod
    def coerce_effect(cls, v: Any) -> Optional[Effect]:
        # Effect.NONE and None both mean "no effect"; keep a single spelling
        effect = parse_effect(v)
        if effect is Effect.NONE:
            return None
        return effect

    @field_validator("color", mode="before")
    @classmethod
    def coerce_color(cls, v: Any) -> str:
        return normalize_color(v)

    @field_validator("font_size", "spacing")
    @classmethod
    def check_finite(cls, v: Union[int, float], info) -> Union[int, float]:
        if not is_finite_number(v):
            raise ValueError(f"{info.field_name} must be a finite number")
        if info.field_name == "font_size" and v <= 0:
            raise ValueError("fontSize must be positive")
        return v

    @property
    def flags(self) -> int:
        value = 0
        if self.is_bold:
            value |= FLAG_BOLD
        if self.is_italic:
            value |= FLAG_ITALIC
        if self.is_strikethrough:
            value |= FLAG_STRIKETHROUGH
        return value

    def has_visible_text(self) -> bool:
        return bool(self.text and self.text.strip())

    def to_wire(self) -> dict[str, Any]:
        """Full JSON-ready dict keyed by alias, as the legacy format stores it."""
        return self.model_dump(mode="json", by_alias=True)
