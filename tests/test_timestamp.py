"""Tests for service centre time stamp decoding."""

from datetime import datetime, timedelta, timezone

import pytest

from pdu_lib.errors import IncompleteInput, MalformedTimestamp
from pdu_lib.utils.hex import HexReader
from pdu_lib.utils.timestamp import TIME_ZONE_DIGITS, decode_timestamp, parse_time_zone

# 2021-03-15 12:34:56
LOCAL_FIELDS = "123051214365"


class TestTimeZone:
    def test_sign_bit_makes_offset_negative(self):
        assert parse_time_zone(0, 0b1010) == -20

    def test_sign_bit_clear(self):
        assert parse_time_zone(0, 0b0010) == 20

    def test_ones_and_tens(self):
        assert parse_time_zone(5, 0b1001) == -15

    def test_digit_table(self):
        assert TIME_ZONE_DIGITS["9"] == 9
        assert TIME_ZONE_DIGITS["A"] == TIME_ZONE_DIGITS["a"] == 10
        assert TIME_ZONE_DIGITS["f"] == 15
        assert "G" not in TIME_ZONE_DIGITS


class TestDecodeTimestamp:
    def test_positive_offset(self):
        reader = HexReader(LOCAL_FIELDS + "40")
        stamp, offset = decode_timestamp(reader)
        assert offset == 4
        assert stamp == datetime(2021, 3, 15, 11, 34, 56, tzinfo=timezone.utc)
        assert stamp.utcoffset() == timedelta(0)
        assert reader.at_end

    def test_minus_five_hours(self):
        stamp, offset = decode_timestamp(HexReader(LOCAL_FIELDS + "0A"))
        assert offset == -20
        assert stamp == datetime(2021, 3, 15, 17, 34, 56, tzinfo=timezone.utc)

    def test_plus_five_hours(self):
        stamp, offset = decode_timestamp(HexReader(LOCAL_FIELDS + "02"))
        assert offset == 20
        assert stamp == datetime(2021, 3, 15, 7, 34, 56, tzinfo=timezone.utc)

    def test_lowercase_time_zone(self):
        assert decode_timestamp(HexReader(LOCAL_FIELDS + "0a"))[1] == -20

    def test_unknown_time_zone_characters_read_as_zero(self):
        stamp, offset = decode_timestamp(HexReader(LOCAL_FIELDS + "ZZ"))
        assert offset == 0
        assert stamp.hour == 12

    def test_invalid_month(self):
        with pytest.raises(MalformedTimestamp):
            decode_timestamp(HexReader("123151214365" + "40"))

    def test_invalid_day(self):
        # 2021-02-30
        with pytest.raises(MalformedTimestamp):
            decode_timestamp(HexReader("122003214365" + "00"))

    def test_non_decimal_field(self):
        with pytest.raises(MalformedTimestamp):
            decode_timestamp(HexReader("1A3051214365" + "40"))

    def test_truncated(self):
        with pytest.raises(IncompleteInput):
            decode_timestamp(HexReader(LOCAL_FIELDS))
