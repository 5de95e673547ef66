"""ndef-codec — encoder and decoder for NFC Data Exchange Format messages.

Turns a sequence of typed payloads into the single byte buffer written to
an NFC tag, and turns such a buffer back into records, checking the
message begin/end framing on the way.

Example usage::

    from ndef_codec import Message, Record, TNF
    from ndef_codec.payload import ExternalPayload, UriPayload

    msg = Message()
    msg.add_record(Record.from_payload(UriPayload.from_uri("https://example.com")))
    msg.add_record(
        Record.builder()
        .with_payload(ExternalPayload.android_application("com.example.app"))
        .build()
    )
    buf = msg.to_buffer()

    decoded = Message.decode(buf)
    uri = UriPayload.from_record(decoded[0])
    print(uri.full_uri)
"""

from ndef_codec.config import DecoderConfig
from ndef_codec.errors import (
    DecodingError,
    EncodingError,
    FramingError,
    NdefError,
    PayloadMismatchError,
)
from ndef_codec.message import Message, message_flags
from ndef_codec.record import (
    MAX_ID_LENGTH,
    MAX_SHORT_PAYLOAD,
    MAX_TYPE_LENGTH,
    TNF,
    Record,
    RecordBuilder,
    RecordFlag,
)

__version__ = "0.1.0"

__all__ = [
    # Record
    "TNF",
    "RecordFlag",
    "Record",
    "RecordBuilder",
    "MAX_TYPE_LENGTH",
    "MAX_ID_LENGTH",
    "MAX_SHORT_PAYLOAD",
    # Message
    "Message",
    "message_flags",
    # Errors
    "NdefError",
    "EncodingError",
    "DecodingError",
    "FramingError",
    "PayloadMismatchError",
    # Config
    "DecoderConfig",
]
