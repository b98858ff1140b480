"""Exceptions raised by the PDU codecs."""

from __future__ import annotations


class ParseError(ValueError):
    """Raised when a PDU violates the wire format."""


class MalformedHex(ParseError):
    """Raised when a character pair is not a hex octet."""


class InvalidAddressType(ParseError):
    """Raised for a type-of-address octet other than 145 or 201."""


class InvalidAddress(ParseError):
    """Raised when an address field carries non-decimal semi-octets."""


class UnsupportedEncoding(ParseError):
    """Raised for a data coding scheme other than GSM 7-bit or UTF-16."""


class UnsupportedMessageType(ParseError):
    """Raised when the message type indicator cannot be decoded."""


class MalformedTimestamp(ParseError):
    """Raised when the service centre time stamp is not a valid date."""


class MalformedHeader(ParseError):
    """Raised when the user data header framing is inconsistent."""


class InvalidText(ParseError):
    """Raised when a UTF-16 body is not valid UTF-16."""


class IncompleteInput(ValueError):
    """Raised when a field needs more characters than the PDU holds.

    Kept apart from :class:`ParseError` so a caller reading from a stream
    can wait for more data instead of discarding the buffer.
    """

    def __init__(self, needed: int, message: str | None = None) -> None:
        self.needed = needed
        super().__init__(message or f"Need {needed} more hex characters")


class UnsupportedFeature(ValueError):
    """Raised when a submission asks for options the encoder cannot produce."""


__all__ = [
    "ParseError",
    "MalformedHex",
    "InvalidAddressType",
    "InvalidAddress",
    "UnsupportedEncoding",
    "UnsupportedMessageType",
    "MalformedTimestamp",
    "MalformedHeader",
    "InvalidText",
    "IncompleteInput",
    "UnsupportedFeature",
]
