# tests/unit/test_dispatcher.py
# The dispatcher is the only entry point the application uses for shared links

import pytest

from echotext.codec import compact
from echotext.codec.compact import encode_compact
from echotext.codec.dispatcher import DecodeFailure, FailureReason, resolve_shared_config
from echotext.codec.legacy import encode
from echotext.models.share_config import ShareConfig


class TestResolveSuccess:

    def test_compact_token(self, sample_config):
        assert resolve_shared_config(encode_compact(sample_config)) == sample_config

    def test_legacy_token_falls_back(self, styled_config):
        # Compact attempt fails silently, legacy keeps the font customisation
        assert resolve_shared_config(encode(styled_config)) == styled_config


class TestResolveFailure:

    @pytest.mark.parametrize("token", ["", None])
    def test_missing_token(self, token):
        result = resolve_shared_config(token)
        assert isinstance(result, DecodeFailure)
        assert result.reason is FailureReason.MISSING_PARAMETER
        assert result.message == "Invalid URL. The share link parameter is missing."

    @pytest.mark.parametrize("token", ["not-a-real-token", "!!!!", "AAAA", "abcde"])
    def test_corrupted_token(self, token):
        result = resolve_shared_config(token)
        assert isinstance(result, DecodeFailure)
        assert result.reason is FailureReason.CORRUPTED

    @pytest.mark.parametrize("payload", ["42", "[1,2]", '{"color":"#fff"}', "{oops"])
    def test_malformed_payload(self, make_token, payload):
        result = resolve_shared_config(make_token(payload))
        assert isinstance(result, DecodeFailure)
        assert result.reason is FailureReason.MALFORMED

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_empty_text_is_rejected(self, text):
        for token in (encode_compact(ShareConfig(text=text)), encode(ShareConfig(text=text))):
            result = resolve_shared_config(token)
            assert isinstance(result, DecodeFailure)
            assert result.reason is FailureReason.MALFORMED

    def test_unexpected_error_is_contained(self, sample_config, monkeypatch):
        def boom(_token):
            raise RuntimeError("unexpected")

        monkeypatch.setattr(compact, "decode_compact_result", boom)
        result = resolve_shared_config(encode_compact(sample_config))
        assert isinstance(result, DecodeFailure)
        assert result.reason is FailureReason.DECODE_ERROR
        assert "cannot be decoded" in result.message

    def test_never_raises(self, sample_config):
        token = encode_compact(sample_config)
        candidates = [token[:n] for n in range(len(token))] + [token + "A", token.upper(), "-_" * 30]
        for candidate in candidates:
            result = resolve_shared_config(candidate)
            assert isinstance(result, (ShareConfig, DecodeFailure))
