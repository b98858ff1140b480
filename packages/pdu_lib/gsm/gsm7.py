"""GSM 03.38 7-bit default alphabet decoding."""

from __future__ import annotations

from typing import List, Tuple

from ..utils.hex import HexReader

# Septet value -> character. 0x1B is the escape to the extension table,
# which is not interpreted and decodes as "?".
GSM7_CHARS: Tuple[str, ...] = tuple(
    "@£$¥èéùìòÇ\nØø\rÅå"
    "Δ_ΦΓΛΩΠΨΣΘΞ?ÆæßÉ"
    " !\"#¤%&'()*+,-./"
    "0123456789:;<=>?"
    "¡ABCDEFGHIJKLMNO"
    "PQRSTUVWXYZÄÖÑÜ§"
    "¿abcdefghijklmno"
    "pqrstuvwxyzäöñüà"
)

# Low bits of the current octet that belong to the character at each step.
GSM7_MASKS: Tuple[int, ...] = (
    0b01111111,
    0b00111111,
    0b00011111,
    0b00001111,
    0b00000111,
    0b00000011,
    0b00000001,
    0b11111111,
)


def packed_length(septets: int) -> int:
    """Number of octets occupied by *septets* packed characters."""
    return (septets * 7 + 7) // 8


def decode_gsm7(reader: HexReader, count: int) -> str:
    """Unpack *count* septets from *reader* into text.

    Eight characters share seven octets: at steps 0-6 the low bits of the
    next octet complete a character together with the carry left by the
    previous octet, and step 7 emits the carry alone without reading.
    """

    chars: List[str] = []
    carry = 0
    for position in range(count):
        step = position % 8
        if step == 7:
            chars.append(GSM7_CHARS[carry])
            carry = 0
            continue
        octet = reader.octet()
        mask = GSM7_MASKS[step]
        chars.append(GSM7_CHARS[((octet & mask) << step) | carry])
        carry = (octet & ~mask & 0xFF) >> (7 - step)
    return "".join(chars)


__all__ = ["GSM7_CHARS", "GSM7_MASKS", "decode_gsm7", "packed_length"]
