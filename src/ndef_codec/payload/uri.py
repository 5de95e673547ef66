"""URI record payload (NFC Forum well-known type ``U``).

The first payload byte is an identifier code standing for a URI prefix;
the rest is the UTF-8 remainder of the URI.
"""

from __future__ import annotations

from dataclasses import dataclass

from ndef_codec.errors import PayloadMismatchError
from ndef_codec.payload.base import Payload, expect_record
from ndef_codec.record import TNF, Record

RTD_URI = b"U"

NONE_ABBRE = 0x00
HTTP_WWW = 0x01
HTTPS_WWW = 0x02
HTTP = 0x03
HTTPS = 0x04

URI_PREFIXES: dict[int, str] = {
    0x00: "",
    0x01: "http://www.",
    0x02: "https://www.",
    0x03: "http://",
    0x04: "https://",
    0x05: "tel:",
    0x06: "mailto:",
    0x07: "ftp://anonymous:anonymous@",
    0x08: "ftp://ftp.",
    0x09: "ftps://",
    0x0A: "sftp://",
    0x0B: "smb://",
    0x0C: "nfs://",
    0x0D: "ftp://",
    0x0E: "dav://",
    0x0F: "news:",
    0x10: "telnet://",
    0x11: "imap:",
    0x12: "rtsp://",
    0x13: "urn:",
    0x14: "pop:",
    0x15: "sip:",
    0x16: "sips:",
    0x17: "tftp:",
    0x18: "btspp://",
    0x19: "btl2cap://",
    0x1A: "btgoep://",
    0x1B: "tcpobex://",
    0x1C: "irdaobex://",
    0x1D: "file://",
    0x1E: "urn:epc:id:",
    0x1F: "urn:epc:tag:",
    0x20: "urn:epc:pat:",
    0x21: "urn:epc:raw:",
    0x22: "urn:epc:",
    0x23: "urn:nfc:",
}


@dataclass(frozen=True, slots=True)
class UriPayload(Payload):
    """A URI split into an abbreviation code and the remaining text."""

    abbreviation: int
    uri: str

    def __post_init__(self) -> None:
        if self.abbreviation not in URI_PREFIXES:
            raise ValueError(f"Unknown URI abbreviation code: {self.abbreviation:#04x}")

    @classmethod
    def from_uri(cls, full_uri: str) -> UriPayload:
        """Abbreviate ``full_uri`` with the longest matching prefix."""
        best = NONE_ABBRE
        for code, prefix in URI_PREFIXES.items():
            if prefix and full_uri.startswith(prefix):
                if len(prefix) > len(URI_PREFIXES[best]):
                    best = code
        return cls(best, full_uri[len(URI_PREFIXES[best]) :])

    @property
    def full_uri(self) -> str:
        return URI_PREFIXES[self.abbreviation] + self.uri

    def record_type(self) -> bytes:
        return RTD_URI

    def type_name_format(self) -> TNF:
        return TNF.WELL_KNOWN

    def to_bytes(self) -> bytes:
        return bytes((self.abbreviation,)) + self.uri.encode("utf-8")

    @classmethod
    def from_record(cls, record: Record) -> UriPayload:
        expect_record(record, TNF.WELL_KNOWN, RTD_URI)
        if not record.payload:
            raise PayloadMismatchError("URI identifier code", "empty payload")
        code = record.payload[0]
        if code not in URI_PREFIXES:
            raise PayloadMismatchError("known URI identifier code", f"{code:#04x}")
        try:
            uri = record.payload[1:].decode("utf-8")
        except UnicodeDecodeError as e:
            raise PayloadMismatchError("UTF-8 URI", str(e)) from e
        return cls(code, uri)
