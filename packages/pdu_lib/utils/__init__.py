"""Field-level helpers shared by the SMS codecs."""

from __future__ import annotations

from .address import (
    Address,
    AddressFormat,
    decode_address,
    decode_semi_octets,
    decode_service_center,
    encode_address,
    encode_semi_octets,
)
from .hex import HexReader, decode_octet, encode_octet, encode_octets
from .timestamp import TIME_ZONE_DIGITS, decode_timestamp, parse_time_zone
from .validity import (
    MAXIMUM_VALIDITY,
    RELATIVE_FORMAT,
    ValidityPeriod,
    decode_relative_validity,
    encode_validity_period,
)

__all__ = [
    "Address",
    "AddressFormat",
    "HexReader",
    "MAXIMUM_VALIDITY",
    "RELATIVE_FORMAT",
    "TIME_ZONE_DIGITS",
    "ValidityPeriod",
    "decode_address",
    "decode_octet",
    "decode_relative_validity",
    "decode_semi_octets",
    "decode_service_center",
    "decode_timestamp",
    "encode_address",
    "encode_octet",
    "encode_octets",
    "encode_semi_octets",
    "encode_validity_period",
    "parse_time_zone",
]
