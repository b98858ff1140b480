"""Tests for the relative validity period."""

from datetime import timedelta

import pytest

from pdu_lib.utils.validity import (
    MAXIMUM_VALIDITY,
    ValidityPeriod,
    decode_relative_validity,
    encode_validity_period,
)


def test_maximum_is_relative_255():
    assert MAXIMUM_VALIDITY == ValidityPeriod.relative(255)
    assert encode_validity_period(MAXIMUM_VALIDITY) == "FF"
    assert MAXIMUM_VALIDITY.duration == timedelta(weeks=63)


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, timedelta(minutes=5)),
        (143, timedelta(hours=12)),
        (167, timedelta(hours=24)),
        (168, timedelta(days=2)),
        (196, timedelta(days=30)),
        (197, timedelta(weeks=5)),
    ],
)
def test_relative_durations(value, expected):
    assert decode_relative_validity(value) == expected


def test_out_of_range():
    with pytest.raises(ValueError):
        ValidityPeriod.relative(256)
