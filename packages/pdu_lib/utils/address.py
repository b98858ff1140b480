"""Address handling helpers for SMS PDUs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional
import logging
import math

from ..errors import InvalidAddress, InvalidAddressType
from .hex import HexReader, decode_octet, encode_octet

logger = logging.getLogger(__name__)

MAX_ADDRESS_DIGITS = 20
FILLER = "F"
FILLER_NIBBLE = 0xF


class AddressFormat(IntEnum):
    INTERNATIONAL = 145  # international number, ISDN plan
    SHORT_CODE = 201  # subscriber number, private plan


@dataclass(frozen=True)
class Address:
    number: str
    format: AddressFormat = AddressFormat.INTERNATIONAL

    def __post_init__(self) -> None:
        if not self.number or len(self.number) > MAX_ADDRESS_DIGITS:
            raise ValueError(
                f"Address must have 1..{MAX_ADDRESS_DIGITS} digits, got {self.number!r}"
            )
        if not (self.number.isascii() and self.number.isdigit()):
            raise ValueError(f"Address may only contain digits, got {self.number!r}")

    @staticmethod
    def from_string(number: str) -> "Address":
        digits = number.replace(" ", "").lstrip("+")
        return Address(number=digits, format=AddressFormat.INTERNATIONAL)

    @staticmethod
    def new_international(number: str) -> "Address":
        return Address(number=number, format=AddressFormat.INTERNATIONAL)

    def __str__(self) -> str:
        if self.format is AddressFormat.INTERNATIONAL:
            return "+" + self.number
        return self.number


def to_address_format(value: int) -> AddressFormat:
    try:
        return AddressFormat(value)
    except ValueError:
        logger.debug("Unexpected type-of-address octet %d", value)
        raise InvalidAddressType(f"Unsupported type of address {value}") from None


def encode_semi_octets(number: str) -> str:
    """Return *number* as nibble-swapped hex pairs, padded with ``F``."""

    out = []
    for i in range(0, len(number), 2):
        pair = number[i : i + 2]
        if len(pair) == 1:
            out.append(FILLER + pair)
        else:
            out.append(pair[1] + pair[0])
    return "".join(out)


def decode_semi_octets(reader: HexReader, digit_count: int) -> str:
    """Read ``ceil(digit_count / 2)`` octets of nibble-swapped digits.

    The high nibble of the final octet is dropped when it is filler: always
    for an odd *digit_count*, and when it reads ``F`` for an even one.
    """

    octet_count = math.ceil(digit_count / 2)
    raw = reader.take(octet_count * 2)
    digits = []
    for i in range(0, len(raw), 2):
        octet = decode_octet(raw[i : i + 2])
        low, high = octet & 0x0F, octet >> 4
        last = i + 2 == len(raw)
        digits.append(low)
        if last and (digit_count % 2 or high == FILLER_NIBBLE):
            continue
        digits.append(high)
    if any(digit > 9 for digit in digits):
        raise InvalidAddress(f"Address field {raw!r} is not decimal")
    return "".join(str(digit) for digit in digits)


def _make_address(number: str, address_format: AddressFormat) -> Address:
    try:
        return Address(number=number, format=address_format)
    except ValueError as exc:
        raise InvalidAddress(str(exc)) from exc


def decode_address(reader: HexReader) -> Address:
    """Decode an originating/destination address; the length is a digit count."""

    digit_count = reader.octet()
    address_format = to_address_format(reader.octet())
    return _make_address(decode_semi_octets(reader, digit_count), address_format)


def decode_service_center(reader: HexReader) -> Optional[Address]:
    """Decode the SMSC prefix; its length counts octets, type octet included.

    A zero length means the modem omitted the SMSC and yields ``None``.
    """

    length = reader.octet()
    if length == 0:
        return None
    address_format = to_address_format(reader.octet())
    number = decode_semi_octets(reader, (length - 1) * 2)
    return _make_address(number, address_format)


def encode_address(address: Address) -> str:
    return (
        encode_octet(len(address.number))
        + encode_octet(int(address.format))
        + encode_semi_octets(address.number)
    )


__all__ = [
    "Address",
    "AddressFormat",
    "MAX_ADDRESS_DIGITS",
    "decode_address",
    "decode_semi_octets",
    "decode_service_center",
    "encode_address",
    "encode_semi_octets",
    "to_address_format",
]
