"""Tests for address (semi-octet) encoding and decoding."""

import pytest

from pdu_lib.errors import (
    IncompleteInput,
    InvalidAddress,
    InvalidAddressType,
    MalformedHex,
)
from pdu_lib.utils.address import (
    Address,
    AddressFormat,
    decode_address,
    decode_semi_octets,
    decode_service_center,
    encode_address,
    encode_semi_octets,
)
from pdu_lib.utils.hex import HexReader


class TestSemiOctets:
    def test_encode_swaps_nibbles(self):
        assert encode_semi_octets("1234") == "2143"
        assert encode_semi_octets("15125551234") == "5121551532F4"

    def test_encode_pads_odd_length_with_filler(self):
        assert encode_semi_octets("123") == "21F3"

    def test_decode_drops_filler_for_odd_count(self):
        assert decode_semi_octets(HexReader("21F3"), 3) == "123"

    def test_decode_ignores_filler_value_for_odd_count(self):
        assert decode_semi_octets(HexReader("2143"), 3) == "123"

    def test_decode_drops_trailing_filler_for_even_count(self):
        assert decode_semi_octets(HexReader("21F3"), 4) == "123"

    def test_decode_rejects_non_decimal_digits(self):
        with pytest.raises(InvalidAddress):
            decode_semi_octets(HexReader("A143"), 4)

    @pytest.mark.parametrize("raw, count", [("2G43", 4), ("G1", 1)])
    def test_decode_rejects_non_hex_characters(self, raw, count):
        # The filler slot of an odd count must still be a hex digit.
        with pytest.raises(MalformedHex):
            decode_semi_octets(HexReader(raw), count)


class TestAddress:
    def test_even_round_trip(self):
        encoded = encode_address(Address("1234"))
        assert encoded == "04912143"
        assert decode_address(HexReader(encoded)) == Address("1234")

    def test_odd_round_trip(self):
        encoded = encode_address(Address("123"))
        # The length octet carries the real digit count, not a rounded one.
        assert encoded == "039121F3"
        decoded = decode_address(HexReader(encoded))
        assert decoded.number == "123"
        assert decoded.format is AddressFormat.INTERNATIONAL

    def test_rounded_length_octet_still_decodes(self):
        assert decode_address(HexReader("049121F3")).number == "123"

    def test_short_code_round_trip(self):
        address = Address("12345", AddressFormat.SHORT_CODE)
        encoded = encode_address(address)
        assert encoded == "05C92143F5"
        assert decode_address(HexReader(encoded)) == address

    def test_unknown_type_of_address(self):
        with pytest.raises(InvalidAddressType):
            decode_address(HexReader("04812143"))

    def test_truncated_digits_are_incomplete(self):
        with pytest.raises(IncompleteInput):
            decode_address(HexReader("049121"))

    def test_validation(self):
        with pytest.raises(ValueError):
            Address("")
        with pytest.raises(ValueError):
            Address("12a")
        with pytest.raises(ValueError):
            Address("1" * 21)

    def test_from_string_strips_plus_and_spaces(self):
        address = Address.from_string("+31 6 12")
        assert address.number == "31612"
        assert str(address) == "+31612"

    def test_new_international(self):
        address = Address.new_international("1234")
        assert address.format is AddressFormat.INTERNATIONAL
        assert encode_address(address).startswith("0491")

    def test_short_code_has_no_plus(self):
        assert str(Address("8080", AddressFormat.SHORT_CODE)) == "8080"


class TestServiceCenter:
    def test_length_counts_octets(self):
        reader = HexReader("07911326040000F0")
        address = decode_service_center(reader)
        assert address == Address("31624000000")
        assert reader.at_end

    def test_zero_length_means_default(self):
        reader = HexReader("00")
        assert decode_service_center(reader) is None
        assert reader.at_end

    def test_type_octet_without_digits(self):
        with pytest.raises(InvalidAddress):
            decode_service_center(HexReader("0191"))
