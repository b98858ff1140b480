"""Service centre time stamp decoding for SMS PDUs."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Tuple
import logging

from ..errors import MalformedTimestamp
from .hex import HexReader

logger = logging.getLogger(__name__)

TIMESTAMP_FIELDS = 6
SIGN_BIT = 0b1000

# Hex digit values for the time-zone characters; anything else reads as 0.
TIME_ZONE_DIGITS = {
    **{ch: int(ch) for ch in "0123456789"},
    **{ch: 10 + i for i, ch in enumerate("ABCDEF")},
    **{ch: 10 + i for i, ch in enumerate("abcdef")},
}


def parse_time_zone(ones: int, tens_and_sign: int) -> int:
    """Return the signed quarter-hour offset from the two time-zone digits."""

    sign = 1
    if tens_and_sign & SIGN_BIT:
        tens_and_sign &= 0b0111
        sign = -1
    return sign * (10 * tens_and_sign + ones)


def _decimal_pair(pair: str) -> int:
    swapped = pair[1] + pair[0]
    if not (swapped.isascii() and swapped.isdigit()):
        raise MalformedTimestamp(f"Time stamp field {pair!r} is not decimal")
    return int(swapped)


def decode_timestamp(reader: HexReader) -> Tuple[datetime, int]:
    """Read a 7-octet time stamp.

    Returns the instant converted to UTC and the originating offset in
    quarter hours.
    """

    raw = reader.take(TIMESTAMP_FIELDS * 2)
    tz = reader.take(2)
    year, month, day, hour, minute, second = (
        _decimal_pair(raw[i : i + 2]) for i in range(0, len(raw), 2)
    )
    offset = parse_time_zone(
        TIME_ZONE_DIGITS.get(tz[0], 0), TIME_ZONE_DIGITS.get(tz[1], 0)
    )
    try:
        local = datetime(
            year=2000 + year,
            month=month,
            day=day,
            hour=hour,
            minute=minute,
            second=second,
            tzinfo=timezone(timedelta(minutes=offset * 15)),
        )
    except ValueError as exc:
        logger.debug("Rejected time stamp %s%s: %s", raw, tz, exc)
        raise MalformedTimestamp(f"Invalid time stamp {raw!r}: {exc}") from exc
    return local.astimezone(timezone.utc), offset


__all__ = [
    "TIME_ZONE_DIGITS",
    "decode_timestamp",
    "parse_time_zone",
]
