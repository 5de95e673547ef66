"""NDEF codec error types."""

from __future__ import annotations


class NdefError(Exception):
    """Base exception for all NDEF codec errors."""

    def is_recoverable(self) -> bool:
        """Whether the caller can recover within the same decode.

        Recoverable errors: PayloadMismatchError (try another payload
        interpretation of the same record).
        """
        return False


class EncodingError(NdefError):
    """A length field cannot represent the size of type, id or payload."""


class DecodingError(NdefError):
    """Malformed or truncated header or length fields."""


class FramingError(DecodingError):
    """Records decoded fine but their MB/ME flags break message framing."""


class PayloadMismatchError(NdefError):
    """A record does not carry the tnf/type a payload interpretation expects."""

    def __init__(self, expected: str, actual: str | None = None) -> None:
        msg = f"Payload mismatch: expected {expected}"
        if actual:
            msg += f", got {actual}"
        super().__init__(msg)
        self.expected = expected
        self.actual = actual

    def is_recoverable(self) -> bool:
        return True
