# echotext/codec/schema.py
# Explicit field schema applied by every decoder when rebuilding a ShareConfig

from __future__ import annotations

import json
import re
from typing import Any, Callable, Mapping, NamedTuple, Optional

from pydantic import ValidationError

from echotext.constants import (
    DEFAULT_COLOR,
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE,
    DEFAULT_REPEAT,
    DEFAULT_SPACING,
    DEFAULT_TEXT,
)
from echotext.codec.result import DecodeStage, Ok, Result, fail
from echotext.models.effects import Effect, parse_effect
from echotext.models.share_config import ShareConfig, is_finite_number

STRICT_HEX_COLOR = re.compile(r"^#[0-9A-Fa-f]{6}$")

# Deeply nested arrays exhaust the parser before they fail validation
JSON_ERRORS = (ValueError, RecursionError)


class FieldSpec(NamedTuple):
    """One ShareConfig field: where it lives on the wire and what is acceptable."""
    name: str
    alias: str
    types: tuple[type, ...]
    default: Any
    validator: Optional[Callable[[Any], bool]] = None
    coerce: Optional[Callable[[Any], Any]] = None


def _reject_constants(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def parse_json(text: str) -> Any:
    """json.loads restricted to standard JSON (no NaN/Infinity)."""
    return json.loads(text, parse_constant=_reject_constants)


def _positive(v: Any) -> bool:
    return is_finite_number(v) and v > 0


def _integral(v: Any) -> Any:
    # JSON has one number type; 2.0 and 2 are the same repeat count
    if isinstance(v, float) and v.is_integer():
        return int(v)
    return v


FIELDS: list[FieldSpec] = [
    FieldSpec("text", "text", (str,), DEFAULT_TEXT),
    FieldSpec("effect", "effect", (Effect, type(None)), None, coerce=parse_effect),
    FieldSpec("color", "color", (str,), DEFAULT_COLOR,
              validator=lambda v: bool(STRICT_HEX_COLOR.match(v))),
    FieldSpec("is_bold", "isBold", (bool,), False),
    FieldSpec("is_italic", "isItalic", (bool,), False),
    FieldSpec("is_strikethrough", "isStrikethrough", (bool,), False),
    FieldSpec("font_size", "fontSize", (int, float), DEFAULT_FONT_SIZE, validator=_positive),
    FieldSpec("font_family", "fontFamily", (str,), DEFAULT_FONT_FAMILY, validator=lambda v: len(v) > 0),
    FieldSpec("spacing", "spacing", (int, float), DEFAULT_SPACING, validator=is_finite_number),
    FieldSpec("repeat", "repeat", (int,), DEFAULT_REPEAT, validator=lambda v: v >= 1, coerce=_integral),
]

FIELDS_BY_NAME: dict[str, FieldSpec] = {spec.name: spec for spec in FIELDS}


def _matches_type(value: Any, types: tuple[type, ...]) -> bool:
    # bool is an int subclass; only boolean fields may accept it
    if isinstance(value, bool) and bool not in types:
        return False
    return isinstance(value, types)


def resolve_field(spec: FieldSpec, raw: Mapping[str, Any], key: str) -> Any:
    """Return the validated value for one field, or its default."""
    if key not in raw:
        return spec.default
    value = raw[key]
    if spec.coerce is not None:
        value = spec.coerce(value)
    if not _matches_type(value, spec.types):
        return spec.default
    if spec.validator is not None and value is not None and not spec.validator(value):
        return spec.default
    return value


def rebuild_config(raw: Mapping[str, Any], by_alias: bool = False) -> Result[ShareConfig]:
    """
    Apply the schema to a raw mapping and build a ShareConfig.

    Keys are attribute names, or wire aliases when by_alias is set.
    Bad values fall back to their defaults; only a model-level
    rejection fails the STRUCTURE stage.
    """
    values = {
        spec.name: resolve_field(spec, raw, spec.alias if by_alias else spec.name)
        for spec in FIELDS
    }
    try:
        return Ok(ShareConfig(**values))
    except ValidationError as e:
        return fail(DecodeStage.STRUCTURE, f"config rejected: {e.error_count()} invalid field(s)")
