# tests/unit/conftest.py

import zlib

import pytest

from echotext.codec.base64url import urlsafe_encode
from echotext.models.effects import Effect
from echotext.models.share_config import ShareConfig


def token_for_payload(payload: str) -> str:
    """Wrap an arbitrary payload string the way both codecs do."""
    return urlsafe_encode(zlib.compress(payload.encode("utf-8")))


@pytest.fixture
def make_token():
    return token_for_payload


@pytest.fixture
def sample_config():
    return ShareConfig(
        text="Hello, EchoText!",
        effect=Effect.RIPPLE,
        color="#3366cc",
        is_bold=True,
        is_italic=False,
        is_strikethrough=True,
    )


@pytest.fixture
def styled_config():
    """ Config with every non-compact field customised. """
    return ShareConfig(
        text="Styled",
        effect=Effect.PULSE,
        color="#abcdef",
        is_italic=True,
        font_size=48,
        font_family="Georgia, serif",
        spacing=2.5,
        repeat=4,
    )
