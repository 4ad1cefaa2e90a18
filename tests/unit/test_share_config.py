# tests/unit/test_share_config.py

import pytest
from pydantic import ValidationError

from echotext.constants import DEFAULT_FONT_FAMILY, DEFAULT_FONT_SIZE, DEFAULT_REPEAT, DEFAULT_SPACING
from echotext.models.effects import Effect
from echotext.models.share_config import ShareConfig


class TestShareConfig:

    def test_defaults(self):
        config = ShareConfig(text="hi")
        assert config.effect is None
        assert config.color == "#000000"
        assert config.font_size == DEFAULT_FONT_SIZE
        assert config.font_family == DEFAULT_FONT_FAMILY
        assert config.spacing == DEFAULT_SPACING
        assert config.repeat == DEFAULT_REPEAT
        assert config.flags == 0

    def test_no_effect_has_one_spelling(self):
        assert ShareConfig(text="hi", effect=Effect.NONE).effect is None
        assert ShareConfig(text="hi", effect="none").effect is None
        assert ShareConfig(text="hi", effect="sparkle").effect is None
        assert ShareConfig(text="hi", effect="wave").effect is Effect.WAVE

    def test_color_is_canonical(self):
        assert ShareConfig(text="hi", color="#F0A").color == "#ff00aa"
        assert ShareConfig(text="hi", color="ABCDEF").color == "#abcdef"
        assert ShareConfig(text="hi", color="blue").color == "#000000"

    def test_accepts_wire_aliases(self):
        config = ShareConfig(**{"text": "hi", "isBold": True, "isStrikethrough": True, "fontSize": 20})
        assert config.is_bold and config.is_strikethrough and not config.is_italic
        assert config.font_size == 20
        assert config.flags == 5

    @pytest.mark.parametrize("field,value", [
        ("repeat", 0),
        ("font_size", 0),
        ("font_size", -3),
        ("font_size", float("inf")),
        ("spacing", float("nan")),
        ("font_size", 10 ** 400),
        ("spacing", -(10 ** 400)),
        ("font_family", ""),
    ])
    def test_rejects_out_of_range(self, field, value):
        with pytest.raises(ValidationError):
            ShareConfig(text="hi", **{field: value})

    def test_is_immutable(self):
        config = ShareConfig(text="hi")
        with pytest.raises(ValidationError):
            config.text = "changed"

    def test_visible_text(self):
        assert ShareConfig(text="hi").has_visible_text()
        assert not ShareConfig(text="").has_visible_text()
        assert not ShareConfig(text=" \t\n").has_visible_text()

    def test_wire_form_order_and_names(self):
        wire = ShareConfig(text="hi", effect=Effect.SHAKE).to_wire()
        assert list(wire) == [
            "text", "effect", "color", "isBold", "isItalic", "isStrikethrough",
            "fontSize", "fontFamily", "spacing", "repeat",
        ]
        assert wire["effect"] == "shake"
