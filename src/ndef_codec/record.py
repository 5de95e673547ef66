"""NDEF record encoding and decoding.

Each record is encoded as (multi-byte fields big-endian):
    Size  Field
    1     Header: MB(7) ME(6) CF(5) SR(4) IL(3) TNF(2..0)
    1     Type length
    1|4   Payload length (1 byte when SR is set, else 4)
    0|1   ID length (present only when IL is set)
    T     Type
    I     ID (present only when IL is set)
    P     Payload

SR and IL are never taken from the caller: they are derived from the
payload size and the presence of an id each time a record is encoded.
The record codec does not interpret type or payload bytes.
"""

from __future__ import annotations

import io
import struct
from dataclasses import dataclass, field
from enum import IntEnum, IntFlag
from typing import TYPE_CHECKING, BinaryIO

from ndef_codec.config import MAX_LONG_PAYLOAD, DecoderConfig
from ndef_codec.errors import DecodingError, EncodingError

if TYPE_CHECKING:
    from ndef_codec.payload.base import Payload

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

MAX_TYPE_LENGTH = 0xFF
MAX_ID_LENGTH = 0xFF
MAX_SHORT_PAYLOAD = 0xFF

_TNF_MASK = 0x07
_FLAG_MASK = 0xF8

# header(B) type_length(B) payload_length(B|I)
_SHORT_PREFIX = struct.Struct(">BBB")
_LONG_PREFIX = struct.Struct(">BBI")
_LONG_LENGTH = struct.Struct(">I")


# ---------------------------------------------------------------------------
# Header fields
# ---------------------------------------------------------------------------


class TNF(IntEnum):
    """Type Name Format: how the record type bytes are to be read."""

    EMPTY = 0x00
    WELL_KNOWN = 0x01
    MEDIA_TYPE = 0x02
    ABSOLUTE_URI = 0x03
    EXTERNAL = 0x04
    UNKNOWN = 0x05
    UNCHANGED = 0x06
    RESERVED = 0x07


class RecordFlag(IntFlag):
    """Header flag bits above the TNF field."""

    MB = 0x80  # message begin
    ME = 0x40  # message end
    CF = 0x20  # chunk flag
    SR = 0x10  # short record
    IL = 0x08  # id length present


# Bits a caller may request; SR and IL always come from the data.
_POSITION_FLAGS = int(RecordFlag.MB | RecordFlag.ME | RecordFlag.CF)


def _read_exact(stream: BinaryIO, n: int, what: str) -> bytes:
    data = stream.read(n)
    if len(data) < n:
        raise DecodingError(
            f"Truncated record: {what} needs {n} bytes, {len(data)} available"
        )
    return data


# ---------------------------------------------------------------------------
# Record
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Record:
    """A single NDEF record.

    ``flags`` holds the header bits seen when the record was decoded. They
    describe the record's position in a message, so they take no part in
    equality and are ignored (apart from MB/ME/CF passed explicitly) when
    the record is encoded again.
    """

    tnf: TNF
    record_type: bytes = b""
    record_id: bytes | None = None
    payload: bytes = b""
    flags: RecordFlag = field(default=RecordFlag(0), compare=False)

    def __post_init__(self) -> None:
        try:
            tnf = TNF(self.tnf)
        except ValueError:
            raise EncodingError(f"TNF does not fit in 3 bits: {self.tnf!r}") from None
        # Copy caller buffers so later mutation cannot leak into the record
        object.__setattr__(self, "tnf", tnf)
        object.__setattr__(self, "record_type", bytes(self.record_type))
        object.__setattr__(self, "payload", bytes(self.payload))
        if self.record_id is not None:
            object.__setattr__(self, "record_id", bytes(self.record_id))
        object.__setattr__(self, "flags", RecordFlag(int(self.flags) & _FLAG_MASK))

    # ----- properties -----

    @property
    def message_begin(self) -> bool:
        return bool(self.flags & RecordFlag.MB)

    @property
    def message_end(self) -> bool:
        return bool(self.flags & RecordFlag.ME)

    @property
    def chunked(self) -> bool:
        return bool(self.flags & RecordFlag.CF)

    @property
    def short_record(self) -> bool:
        """Whether this record encodes with a 1-byte payload length."""
        return len(self.payload) <= MAX_SHORT_PAYLOAD

    @property
    def encoded_size(self) -> int:
        size = 2 + (1 if self.short_record else 4)
        size += len(self.record_type) + len(self.payload)
        if self.record_id is not None:
            size += 1 + len(self.record_id)
        return size

    # ----- construction -----

    @staticmethod
    def builder() -> RecordBuilder:
        return RecordBuilder()

    @classmethod
    def from_payload(
        cls,
        payload: Payload,
        tnf: TNF | None = None,
        record_id: bytes | None = None,
    ) -> Record:
        """Build a record around a payload, optionally overriding its TNF."""
        builder = RecordBuilder().with_payload(payload)
        if tnf is not None:
            builder.with_tnf(tnf)
        if record_id is not None:
            builder.with_id(record_id)
        return builder.build()

    def check_lengths(self) -> None:
        """Raise EncodingError if a field does not fit its length field."""
        if len(self.record_type) > MAX_TYPE_LENGTH:
            raise EncodingError(
                f"Record type too long: {len(self.record_type)} > {MAX_TYPE_LENGTH}"
            )
        if self.record_id is not None and len(self.record_id) > MAX_ID_LENGTH:
            raise EncodingError(
                f"Record id too long: {len(self.record_id)} > {MAX_ID_LENGTH}"
            )
        if len(self.payload) > MAX_LONG_PAYLOAD:
            raise EncodingError(
                f"Payload too long: {len(self.payload)} > {MAX_LONG_PAYLOAD}"
            )

    # ----- serialization -----

    def to_buffer(self, flags: RecordFlag | int = RecordFlag(0)) -> bytes:
        """Encode this record with the given MB/ME/CF flags.

        Raises:
            ndef_codec.errors.EncodingError: if type, id or payload is too
                long for its length field.
        """
        self.check_lengths()

        header = (int(flags) & _POSITION_FLAGS) | int(self.tnf)
        if self.short_record:
            header |= int(RecordFlag.SR)
        if self.record_id is not None:
            header |= int(RecordFlag.IL)

        prefix = _SHORT_PREFIX if self.short_record else _LONG_PREFIX
        parts = [prefix.pack(header, len(self.record_type), len(self.payload))]
        if self.record_id is not None:
            parts.append(bytes((len(self.record_id),)))
        parts.append(self.record_type)
        if self.record_id is not None:
            parts.append(self.record_id)
        parts.append(self.payload)
        return b"".join(parts)

    @classmethod
    def decode(cls, stream: BinaryIO, config: DecoderConfig | None = None) -> Record:
        """Read exactly one record from ``stream``.

        The stream is left positioned on the first byte after the record.
        Any 3-bit TNF value is accepted.

        Raises:
            ndef_codec.errors.DecodingError: if the stream ends before a
                declared field, or the payload length exceeds the limit in
                ``config``.
        """
        cfg = config or DecoderConfig()

        octet0, type_length = _read_exact(stream, 2, "header")
        flags = RecordFlag(octet0 & _FLAG_MASK)

        if flags & RecordFlag.SR:
            payload_length = _read_exact(stream, 1, "payload length")[0]
        else:
            (payload_length,) = _LONG_LENGTH.unpack(
                _read_exact(stream, 4, "payload length")
            )

        id_length = None
        if flags & RecordFlag.IL:
            id_length = _read_exact(stream, 1, "id length")[0]

        if payload_length > cfg.max_payload_length:
            raise DecodingError(
                f"Payload length {payload_length} exceeds limit {cfg.max_payload_length}"
            )

        record_type = _read_exact(stream, type_length, "type")
        record_id = None
        if id_length is not None:
            record_id = _read_exact(stream, id_length, "id")
        payload = _read_exact(stream, payload_length, "payload")

        return cls(
            tnf=TNF(octet0 & _TNF_MASK),
            record_type=record_type,
            record_id=record_id,
            payload=payload,
            flags=flags,
        )

    @classmethod
    def from_bytes(
        cls,
        data: bytes | bytearray | memoryview,
        config: DecoderConfig | None = None,
    ) -> Record:
        """Decode the first record in ``data``; trailing bytes are ignored."""
        return cls.decode(io.BytesIO(bytes(data)), config)


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------


@dataclass(slots=True)
class RecordBuilder:
    """Collects record settings; ``build()`` validates them once.

    The payload may be a :class:`~ndef_codec.payload.base.Payload` (which
    supplies the TNF and type unless overridden) or raw bytes (which need
    an explicit TNF).
    """

    tnf: TNF | None = None
    payload: Payload | bytes | None = None
    record_type: bytes | None = None
    record_id: bytes | None = None

    def with_tnf(self, tnf: TNF | int) -> RecordBuilder:
        try:
            self.tnf = TNF(tnf)
        except ValueError:
            raise EncodingError(f"TNF does not fit in 3 bits: {tnf!r}") from None
        return self

    def with_payload(self, payload: Payload | bytes) -> RecordBuilder:
        self.payload = payload
        return self

    def with_record_type(self, record_type: bytes) -> RecordBuilder:
        self.record_type = bytes(record_type)
        return self

    def with_id(self, record_id: bytes) -> RecordBuilder:
        self.record_id = bytes(record_id)
        return self

    def build(self) -> Record:
        """Return a new Record.

        Raises:
            ValueError: if no payload was given, or raw bytes were given
                without a TNF.
            ndef_codec.errors.EncodingError: if a field is too long.
        """
        if self.payload is None:
            raise ValueError("payload is required")

        if isinstance(self.payload, (bytes, bytearray, memoryview)):
            if self.tnf is None:
                raise ValueError("tnf is required for a raw payload")
            tnf = self.tnf
            record_type = self.record_type if self.record_type is not None else b""
            data = bytes(self.payload)
        else:
            tnf = self.tnf if self.tnf is not None else self.payload.type_name_format()
            record_type = (
                self.record_type
                if self.record_type is not None
                else self.payload.record_type()
            )
            data = self.payload.to_bytes()

        record = Record(
            tnf=tnf,
            record_type=record_type,
            record_id=self.record_id,
            payload=data,
        )
        record.check_lengths()
        return record
