# echotext/models/effects.py
# Closed set of text effects and their compact-token indexes

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class Effect(str, Enum):
    NONE = "none"
    SHAKE = "shake"
    RIPPLE = "ripple"
    JITTER = "jitter"
    PULSE = "pulse"
    WAVE = "wave"


# Position is the wire index; index 0 is reserved for "no effect".
EFFECT_ORDER: list[Effect] = [
    Effect.NONE,
    Effect.SHAKE,
    Effect.RIPPLE,
    Effect.JITTER,
    Effect.PULSE,
    Effect.WAVE,
]

_EFFECT_INDEX: dict[Effect, int] = {effect: i for i, effect in enumerate(EFFECT_ORDER)}

AVAILABLE_EFFECTS: list[Effect] = list(EFFECT_ORDER)

_DISPLAY_NAMES: dict[Effect, str] = {
    Effect.NONE: "None",
    Effect.SHAKE: "Shake",
    Effect.RIPPLE: "Ripple",
    Effect.JITTER: "Jitter",
    Effect.PULSE: "Pulse",
    Effect.WAVE: "Wave",
}


def effect_to_index(effect: Optional[Effect]) -> int:
    """Return the wire index of an effect. None and unknown values map to 0."""
    if effect is None:
        return 0
    return _EFFECT_INDEX.get(parse_effect(effect) or Effect.NONE, 0)


def index_to_effect(index: Any) -> Effect:
    """
    Map a wire index back to an Effect.

    Anything that is not an in-range integer decodes to Effect.NONE,
    an unrecognized effect never rejects a token.
    """
    if isinstance(index, bool):
        return Effect.NONE
    if isinstance(index, float) and index.is_integer():
        index = int(index)
    if not isinstance(index, int):
        return Effect.NONE
    if 0 <= index < len(EFFECT_ORDER):
        return EFFECT_ORDER[index]
    return Effect.NONE


def parse_effect(value: Any) -> Optional[Effect]:
    """Validate a raw effect against the closed set. Unknown values give None."""
    if value is None:
        return None
    if isinstance(value, Effect):
        return value
    if isinstance(value, str):
        try:
            return Effect(value.strip().lower())
        except ValueError:
            return None
    return None


def effect_display_name(effect: Optional[Effect]) -> str:
    if effect is None:
        return _DISPLAY_NAMES[Effect.NONE]
    return _DISPLAY_NAMES.get(effect, "Unknown")


def effect_css_class(effect: Optional[Effect]) -> str:
    """Animation class the viewer applies; '' when there is no effect."""
    effect = parse_effect(effect)
    if effect is None or effect is Effect.NONE:
        return ""
    return f"effect-{effect.value}"
