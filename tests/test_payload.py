"""Tests for structured payloads and record reinterpretation."""

import pytest

from ndef_codec.errors import PayloadMismatchError
from ndef_codec.message import Message
from ndef_codec.payload import (
    HTTPS_WWW,
    NONE_ABBRE,
    ExternalPayload,
    Payload,
    SmartPosterPayload,
    TextPayload,
    UriPayload,
)
from ndef_codec.record import TNF, Record


class TestUriPayload:
    """Test URI abbreviation and parsing."""

    def test_from_uri_picks_longest_prefix(self):
        payload = UriPayload.from_uri("https://www.example.com")
        assert payload.abbreviation == HTTPS_WWW
        assert payload.uri == "example.com"

    def test_from_uri_without_known_prefix(self):
        payload = UriPayload.from_uri("weixin://dl/business")
        assert payload.abbreviation == NONE_ABBRE
        assert payload.full_uri == "weixin://dl/business"

    def test_to_bytes(self):
        assert UriPayload.from_uri("tel:+123").to_bytes() == b"\x05+123"

    def test_unknown_code_rejected(self):
        with pytest.raises(ValueError):
            UriPayload(0x24, "x")

    def test_from_record_roundtrip(self):
        rec = UriPayload.from_uri("mailto:a@b.c").to_record()
        assert UriPayload.from_record(rec).full_uri == "mailto:a@b.c"

    def test_from_record_wrong_tnf(self):
        rec = Record(tnf=TNF.EXTERNAL, record_type=b"U", payload=b"\x00x")
        with pytest.raises(PayloadMismatchError, match="WELL_KNOWN"):
            UriPayload.from_record(rec)

    def test_from_record_wrong_type(self):
        rec = Record(tnf=TNF.WELL_KNOWN, record_type=b"T", payload=b"\x00x")
        with pytest.raises(PayloadMismatchError):
            UriPayload.from_record(rec)

    def test_from_record_unknown_code(self):
        rec = Record(tnf=TNF.WELL_KNOWN, record_type=b"U", payload=b"\xfex")
        with pytest.raises(PayloadMismatchError):
            UriPayload.from_record(rec)

    def test_from_record_empty_payload(self):
        rec = Record(tnf=TNF.WELL_KNOWN, record_type=b"U")
        with pytest.raises(PayloadMismatchError):
            UriPayload.from_record(rec)


class TestExternalPayload:
    """Test external type payloads."""

    def test_android_application(self):
        payload = ExternalPayload.android_application("com.tencent.mm")
        assert payload.record_type() == b"android.com:pkg"
        assert payload.type_name_format() == TNF.EXTERNAL
        assert payload.to_bytes() == b"com.tencent.mm"
        assert payload.domain == "android.com"

    def test_from_record(self):
        rec = Record(tnf=TNF.EXTERNAL, record_type=b"example.com:t", payload=b"data")
        payload = ExternalPayload.from_record(rec)
        assert payload == ExternalPayload(b"example.com:t", b"data")

    def test_from_record_wrong_tnf(self):
        rec = Record(tnf=TNF.MEDIA_TYPE, record_type=b"text/plain", payload=b"x")
        with pytest.raises(PayloadMismatchError):
            ExternalPayload.from_record(rec)


class TestTextPayload:
    """Test text record status byte and encodings."""

    def test_utf8(self):
        payload = TextPayload("hello", "en")
        assert payload.to_bytes() == b"\x02enhello"

    def test_utf16_flag(self):
        data = TextPayload("hi", "de", utf16=True).to_bytes()
        assert data[0] == 0x82
        assert data[1:3] == b"de"

    @pytest.mark.parametrize("utf16", [False, True])
    def test_from_record(self, utf16):
        rec = TextPayload("grüße", "de-DE", utf16=utf16).to_record()
        payload = TextPayload.from_record(rec)
        assert payload.text == "grüße"
        assert payload.language == "de-DE"
        assert payload.utf16 is utf16

    def test_utf16_written_big_endian_without_bom(self):
        data = TextPayload("hi", "de", utf16=True).to_bytes()
        assert data[3:] == b"\x00h\x00i"

    def test_utf16_without_bom_is_big_endian(self):
        rec = Record(tnf=TNF.WELL_KNOWN, record_type=b"T", payload=b"\x82de" + "hi".encode("utf-16-be"))
        assert TextPayload.from_record(rec).text == "hi"

    @pytest.mark.parametrize("bom, codec", [(b"\xff\xfe", "utf-16-le"), (b"\xfe\xff", "utf-16-be")])
    def test_utf16_with_bom(self, bom, codec):
        rec = Record(tnf=TNF.WELL_KNOWN, record_type=b"T", payload=b"\x82de" + bom + "hi".encode(codec))
        assert TextPayload.from_record(rec).text == "hi"

    def test_language_overruns_payload(self):
        rec = Record(tnf=TNF.WELL_KNOWN, record_type=b"T", payload=b"\x05en")
        with pytest.raises(PayloadMismatchError):
            TextPayload.from_record(rec)


class TestSmartPosterPayload:
    """Test smart posters wrapping nested messages."""

    def test_nested_message(self):
        inner = Message(
            [
                UriPayload.from_uri("https://example.com").to_record(),
                TextPayload("Example").to_record(),
            ]
        )
        poster = SmartPosterPayload.from_message(inner)
        rec = poster.to_record()
        assert rec.tnf == TNF.WELL_KNOWN
        assert rec.record_type == b"Sp"

        outer = Message.decode(Message(rec).to_buffer())
        nested = SmartPosterPayload.from_record(outer[0]).message()
        assert nested == inner
        assert UriPayload.from_record(nested[0]).full_uri == "https://example.com"
        assert TextPayload.from_record(nested[1]).text == "Example"

    def test_mismatch_is_recoverable(self):
        rec = Record(tnf=TNF.WELL_KNOWN, record_type=b"U", payload=b"\x00x")
        with pytest.raises(PayloadMismatchError) as excinfo:
            SmartPosterPayload.from_record(rec)
        assert excinfo.value.is_recoverable()
        # A different interpretation of the same record still works
        assert UriPayload.from_record(rec).uri == "x"


class TestPayloadContract:
    """Test the abstract payload interface."""

    def test_from_record_required(self):
        class NoReverse(Payload):
            def record_type(self):
                return b"x"

            def type_name_format(self):
                return TNF.EXTERNAL

            def to_bytes(self):
                return b""

        with pytest.raises(TypeError):
            NoReverse()
