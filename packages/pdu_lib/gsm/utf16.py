"""UTF-16 (UCS2) user data text."""

from __future__ import annotations

from ..errors import InvalidText
from ..utils.hex import HexReader, encode_octet, encode_octets

MAX_USER_DATA_OCTETS = 140


def decode_utf16(reader: HexReader, octet_count: int) -> str:
    """Read *octet_count* octets of big-endian 16-bit units as text."""

    if octet_count % 2:
        raise InvalidText(f"UTF-16 body has odd octet count {octet_count}")
    payload = reader.octets(octet_count)
    try:
        return payload.decode("utf-16-be")
    except UnicodeDecodeError as exc:
        raise InvalidText(f"Invalid UTF-16 text: {exc}") from exc


def utf16_octets(text: str) -> bytes:
    try:
        return text.encode("utf-16-be")
    except UnicodeEncodeError as exc:
        raise ValueError(f"Text is not representable in UTF-16: {exc}") from exc


def encode_utf16(text: str) -> str:
    """Return the length octet (in bytes) followed by the hex code units."""

    payload = utf16_octets(text)
    if len(payload) > MAX_USER_DATA_OCTETS:
        raise ValueError("UTF-16 payload exceeds 140 octets")
    return encode_octet(len(payload)) + encode_octets(payload)


__all__ = [
    "MAX_USER_DATA_OCTETS",
    "decode_utf16",
    "encode_utf16",
    "utf16_octets",
]
