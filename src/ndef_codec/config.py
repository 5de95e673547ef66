"""Configuration for NDEF decoding."""

from __future__ import annotations

from dataclasses import dataclass

MAX_LONG_PAYLOAD = 0xFFFFFFFF


@dataclass(slots=True)
class DecoderConfig:
    """Limits and strictness applied while decoding a buffer.

    The defaults accept everything the wire format can express, and do not
    require the first record of a message to carry MB.
    """

    max_payload_length: int = MAX_LONG_PAYLOAD
    require_message_begin: bool = False

    def with_max_payload_length(self, n: int) -> DecoderConfig:
        self.max_payload_length = n
        return self

    def with_require_message_begin(self, enabled: bool) -> DecoderConfig:
        self.require_message_begin = enabled
        return self

    def strict(self) -> DecoderConfig:
        """Require MB on the first record as well as ME on the last."""
        self.require_message_begin = True
        return self
