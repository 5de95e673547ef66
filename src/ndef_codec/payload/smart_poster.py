"""Smart Poster payload (NFC Forum well-known type ``Sp``).

The payload of a smart poster is itself an NDEF message, typically a URI
record plus optional title text records.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ndef_codec.payload.base import Payload, expect_record
from ndef_codec.record import TNF, Record

if TYPE_CHECKING:
    from ndef_codec.config import DecoderConfig
    from ndef_codec.message import Message

RTD_SMART_POSTER = b"Sp"


@dataclass(frozen=True, slots=True)
class SmartPosterPayload(Payload):
    """Smart poster holding the encoded bytes of its nested message."""

    data: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))

    @classmethod
    def from_message(cls, message: Message) -> SmartPosterPayload:
        return cls(message.to_buffer())

    def message(self, config: DecoderConfig | None = None) -> Message:
        """Decode the nested message.

        Raises:
            ndef_codec.errors.DecodingError: if the data is not a valid
                NDEF message.
        """
        from ndef_codec.message import Message

        return Message.decode(self.data, config)

    def record_type(self) -> bytes:
        return RTD_SMART_POSTER

    def type_name_format(self) -> TNF:
        return TNF.WELL_KNOWN

    def to_bytes(self) -> bytes:
        return self.data

    @classmethod
    def from_record(cls, record: Record) -> SmartPosterPayload:
        expect_record(record, TNF.WELL_KNOWN, RTD_SMART_POSTER)
        return cls(record.payload)
