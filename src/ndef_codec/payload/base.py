"""Payload capability contract.

The record and message codecs only ever call the three methods below; they
never import a concrete payload type.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ndef_codec.errors import PayloadMismatchError
from ndef_codec.record import TNF, Record


class Payload(ABC):
    """Abstract base for structured record payloads."""

    @abstractmethod
    def record_type(self) -> bytes:
        """Bytes to place in the record's type field."""

    @abstractmethod
    def type_name_format(self) -> TNF:
        """TNF the record must carry."""

    @abstractmethod
    def to_bytes(self) -> bytes:
        """Raw payload bytes."""

    @classmethod
    @abstractmethod
    def from_record(cls, record: Record) -> Payload:
        """Reinterpret a decoded record as this payload type.

        Raises:
            ndef_codec.errors.PayloadMismatchError: if the record's tnf or
                type is not the one this payload expects.
        """

    def to_record(self, record_id: bytes | None = None) -> Record:
        return Record.from_payload(self, record_id=record_id)


def expect_record(record: Record, tnf: TNF, record_type: bytes | None = None) -> None:
    """Raise PayloadMismatchError unless ``record`` has this tnf and type."""
    if record.tnf != tnf:
        raise PayloadMismatchError(f"TNF {tnf.name}", f"TNF {record.tnf.name}")
    if record_type is not None and record.record_type != record_type:
        raise PayloadMismatchError(
            f"type {record_type!r}", f"type {record.record_type!r}"
        )
