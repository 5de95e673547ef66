"""Tests for DecoderConfig defaults and builder methods."""

from ndef_codec.config import MAX_LONG_PAYLOAD, DecoderConfig


class TestDecoderConfig:
    """Test DecoderConfig defaults and builder methods."""

    def test_defaults(self):
        cfg = DecoderConfig()
        assert cfg.max_payload_length == MAX_LONG_PAYLOAD == 2**32 - 1
        assert cfg.require_message_begin is False

    def test_builder_chain(self):
        cfg = DecoderConfig().with_max_payload_length(1024).with_require_message_begin(True)
        assert cfg.max_payload_length == 1024
        assert cfg.require_message_begin is True

    def test_strict(self):
        assert DecoderConfig().strict().require_message_begin is True
