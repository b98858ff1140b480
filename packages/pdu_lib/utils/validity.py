"""Validity period helpers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from .hex import encode_octet

# TP-VPF value for a one-octet relative validity period.
RELATIVE_FORMAT = 0b10


@dataclass(frozen=True)
class ValidityPeriod:
    """Relative validity period; *value* is the raw TP-VP octet."""

    value: int

    @classmethod
    def relative(cls, value: int) -> "ValidityPeriod":
        if not 0 <= value <= 0xFF:
            raise ValueError(f"Relative validity {value} out of range")
        return cls(value)

    @property
    def duration(self) -> timedelta:
        return decode_relative_validity(self.value)


MAXIMUM_VALIDITY = ValidityPeriod.relative(255)


def encode_validity_period(period: ValidityPeriod) -> str:
    return encode_octet(period.value)


def decode_relative_validity(value: int) -> timedelta:
    if value <= 143:
        minutes = (value + 1) * 5
    elif value <= 167:
        minutes = 12 * 60 + (value - 143) * 30
    elif value <= 196:
        minutes = (value - 166) * 24 * 60
    else:
        minutes = (value - 192) * 7 * 24 * 60
    return timedelta(minutes=minutes)


__all__ = [
    "MAXIMUM_VALIDITY",
    "RELATIVE_FORMAT",
    "ValidityPeriod",
    "decode_relative_validity",
    "encode_validity_period",
]
