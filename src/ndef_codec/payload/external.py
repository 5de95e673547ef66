"""NFC Forum external type payloads (``domain:type`` record types)."""

from __future__ import annotations

from dataclasses import dataclass

from ndef_codec.errors import PayloadMismatchError
from ndef_codec.payload.base import Payload, expect_record
from ndef_codec.record import TNF, Record

ANDROID_APP_TYPE = b"android.com:pkg"


@dataclass(frozen=True, slots=True)
class ExternalPayload(Payload):
    """Opaque data under an external record type."""

    external_type: bytes
    data: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "external_type", bytes(self.external_type))
        object.__setattr__(self, "data", bytes(self.data))

    @classmethod
    def android_application(cls, package: str) -> ExternalPayload:
        """Android Application Record naming the app to launch."""
        return cls(ANDROID_APP_TYPE, package.encode("utf-8"))

    @property
    def domain(self) -> str:
        """The part of the type before the last ``:``."""
        return self.external_type.rpartition(b":")[0].decode("utf-8", errors="replace")

    def record_type(self) -> bytes:
        return self.external_type

    def type_name_format(self) -> TNF:
        return TNF.EXTERNAL

    def to_bytes(self) -> bytes:
        return self.data

    @classmethod
    def from_record(cls, record: Record) -> ExternalPayload:
        expect_record(record, TNF.EXTERNAL)
        if not record.record_type:
            raise PayloadMismatchError("external type name", "empty type")
        return cls(record.record_type, record.payload)
