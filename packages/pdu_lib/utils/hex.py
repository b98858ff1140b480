"""ASCII-hex octet helpers shared by every PDU field."""

from __future__ import annotations

from ..errors import IncompleteInput, MalformedHex

_HEX_VALUES = {ch: int(ch, 16) for ch in "0123456789abcdefABCDEF"}
_HEX_DIGITS = "0123456789ABCDEF"


def decode_octet(pair: str) -> int:
    """Return the byte encoded by the two hex characters in *pair*."""

    if len(pair) != 2:
        raise MalformedHex(f"Octet must be two hex characters, got {pair!r}")
    high = _HEX_VALUES.get(pair[0])
    low = _HEX_VALUES.get(pair[1])
    if high is None or low is None:
        raise MalformedHex(f"Invalid hex octet {pair!r}")
    return (high << 4) | low


def encode_octet(value: int) -> str:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"Octet value {value} out of range")
    return _HEX_DIGITS[value >> 4] + _HEX_DIGITS[value & 0x0F]


def encode_octets(data: bytes) -> str:
    return "".join(encode_octet(byte) for byte in data)


class HexReader:
    """Cursor over one ASCII-hex PDU string.

    Every read advances the cursor; reading past the end raises
    :class:`IncompleteInput` with the number of missing characters.
    """

    def __init__(self, text: str, *, start: int = 0, end: int | None = None):
        self._text = text
        self._pos = start
        self._end = len(text) if end is None else end

    @property
    def position(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return self._end - self._pos

    @property
    def at_end(self) -> bool:
        return self._pos >= self._end

    def take(self, count: int) -> str:
        """Consume *count* raw characters."""
        if count > self.remaining:
            raise IncompleteInput(count - self.remaining)
        chunk = self._text[self._pos : self._pos + count]
        self._pos += count
        return chunk

    def octet(self) -> int:
        return decode_octet(self.take(2))

    def octets(self, count: int) -> bytes:
        raw = self.take(count * 2)
        return bytes(decode_octet(raw[i : i + 2]) for i in range(0, len(raw), 2))

    def slice(self, octet_count: int) -> "HexReader":
        """Consume *octet_count* octets and return a reader bounded to them."""
        start = self._pos
        self.take(octet_count * 2)
        return HexReader(self._text, start=start, end=self._pos)

    def fork(self) -> "HexReader":
        """Return an independent reader positioned where this one is."""
        return HexReader(self._text, start=self._pos, end=self._end)

    def rest(self) -> str:
        return self.take(self.remaining)


__all__ = [
    "HexReader",
    "decode_octet",
    "encode_octet",
    "encode_octets",
]
