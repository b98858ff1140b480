"""Alphabet codecs for SMS user data."""

from __future__ import annotations

from .gsm7 import GSM7_CHARS, GSM7_MASKS, decode_gsm7, packed_length
from .utf16 import MAX_USER_DATA_OCTETS, decode_utf16, encode_utf16, utf16_octets

__all__ = [
    "GSM7_CHARS",
    "GSM7_MASKS",
    "MAX_USER_DATA_OCTETS",
    "decode_gsm7",
    "decode_utf16",
    "encode_utf16",
    "packed_length",
    "utf16_octets",
]
