"""Text record payload (NFC Forum well-known type ``T``).

Payload layout:
    Size  Field
    1     Status: bit 7 = UTF-16, bits 5..0 = language code length
    L     Language code (ASCII, e.g. "en")
    N     Text
"""

from __future__ import annotations

from dataclasses import dataclass

from ndef_codec.errors import PayloadMismatchError
from ndef_codec.payload.base import Payload, expect_record
from ndef_codec.record import TNF, Record

RTD_TEXT = b"T"

_UTF16_FLAG = 0x80
_LANG_MASK = 0x3F
_BOMS = (b"\xff\xfe", b"\xfe\xff")


def _decode_text(data: bytes, utf16: bool) -> str:
    if not utf16:
        return data.decode("utf-8")
    # Without a byte order mark UTF-16 text is big-endian
    if data[:2] in _BOMS:
        return data.decode("utf-16")
    return data.decode("utf-16-be")


@dataclass(frozen=True, slots=True)
class TextPayload(Payload):
    text: str
    language: str = "en"
    utf16: bool = False

    def __post_init__(self) -> None:
        if len(self.language.encode("ascii")) > _LANG_MASK:
            raise ValueError(f"Language code too long: {self.language!r}")

    @property
    def encoding(self) -> str:
        return "utf-16-be" if self.utf16 else "utf-8"

    def record_type(self) -> bytes:
        return RTD_TEXT

    def type_name_format(self) -> TNF:
        return TNF.WELL_KNOWN

    def to_bytes(self) -> bytes:
        lang = self.language.encode("ascii")
        status = len(lang) | (_UTF16_FLAG if self.utf16 else 0)
        return bytes((status,)) + lang + self.text.encode(self.encoding)

    @classmethod
    def from_record(cls, record: Record) -> TextPayload:
        expect_record(record, TNF.WELL_KNOWN, RTD_TEXT)
        if not record.payload:
            raise PayloadMismatchError("text status byte", "empty payload")
        status = record.payload[0]
        lang_len = status & _LANG_MASK
        if len(record.payload) < 1 + lang_len:
            raise PayloadMismatchError(
                f"{lang_len}-byte language code", f"{len(record.payload) - 1} bytes"
            )
        utf16 = bool(status & _UTF16_FLAG)
        try:
            language = record.payload[1 : 1 + lang_len].decode("ascii")
            text = _decode_text(record.payload[1 + lang_len :], utf16)
        except UnicodeDecodeError as e:
            raise PayloadMismatchError("decodable text", str(e)) from e
        return cls(text, language, utf16)
