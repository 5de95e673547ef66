"""NDEF message encoding and decoding.

A message is a plain concatenation of records with no separators and no
record count. Position is carried only by the header flags:

    records   first   middle   last
    1         MB|ME
    n > 1     MB      -        ME

Decoding stops when the records consumed cover the whole input, then
checks that no record after the first carries MB and that the last one
carries ME. The first record is not required to carry MB unless the
decoder is configured to require it.

Example::

    from ndef_codec import Message, Record, TNF
    from ndef_codec.payload import UriPayload

    msg = Message(Record.from_payload(UriPayload.from_uri("https://example.com")))
    buf = msg.to_buffer()
    assert Message.decode(buf) == msg
"""

from __future__ import annotations

import io
import logging
from collections.abc import Iterable, Iterator

from ndef_codec.config import DecoderConfig
from ndef_codec.errors import DecodingError, FramingError
from ndef_codec.record import Record, RecordFlag

log = logging.getLogger("ndef_codec.message")


def message_flags(index: int, count: int) -> RecordFlag:
    """Return the MB/ME flags for the record at ``index`` of ``count``."""
    if count == 1:
        return RecordFlag.MB | RecordFlag.ME
    if index == 0:
        return RecordFlag.MB
    if index == count - 1:
        return RecordFlag.ME
    return RecordFlag(0)


class Message:
    """An ordered sequence of NDEF records."""

    def __init__(self, records: Record | Iterable[Record] | None = None) -> None:
        if records is None:
            self._records: list[Record] = []
        elif isinstance(records, Record):
            self._records = [records]
        else:
            self._records = list(records)

    def add_record(self, record: Record) -> None:
        self._records.append(record)

    @property
    def records(self) -> tuple[Record, ...]:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __getitem__(self, index: int) -> Record:
        return self._records[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Message):
            return NotImplemented
        return self._records == other._records

    def __repr__(self) -> str:
        return f"Message({self._records!r})"

    # ----- serialization -----

    def to_buffer(self) -> bytes:
        """Encode all records, flagging the first with MB and the last with ME.

        An empty message encodes to an empty buffer.

        Raises:
            ndef_codec.errors.EncodingError: if any record cannot be encoded.
        """
        count = len(self._records)
        parts = [
            record.to_buffer(message_flags(index, count))
            for index, record in enumerate(self._records)
        ]
        buf = b"".join(parts)
        log.debug("Encoded %d records into %d bytes", count, len(buf))
        return buf

    @classmethod
    def decode(
        cls,
        data: bytes | bytearray | memoryview,
        config: DecoderConfig | None = None,
    ) -> Message:
        """Decode every record in ``data``.

        Raises:
            ndef_codec.errors.DecodingError: on a truncated or malformed record.
            ndef_codec.errors.FramingError: if MB appears after the first
                record, or the last record lacks ME (or, when the config
                requires it, the first record lacks MB).
        """
        cfg = config or DecoderConfig()
        buf = bytes(data)
        total = len(buf)
        if total == 0:
            raise DecodingError("Empty buffer holds no NDEF record")

        stream = io.BytesIO(buf)
        records: list[Record] = []
        while True:
            record = Record.decode(stream, cfg)
            if record.message_begin and records:
                raise FramingError(
                    f"MB set on non-first record (index {len(records)})"
                )
            if not records and cfg.require_message_begin and not record.message_begin:
                raise FramingError("first record does not carry MB")
            records.append(record)
            if stream.tell() >= total:
                if not record.message_end:
                    raise FramingError("message does not terminate with ME")
                break

        log.debug("Decoded %d records from %d bytes", len(records), total)
        return cls(records)
