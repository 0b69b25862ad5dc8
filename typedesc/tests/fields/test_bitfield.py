"""Tests for bitfield marker detection."""

import pytest

from typedesc.fields import BitfieldWidthError, smallest_integer_type_for_bit_width
from typedesc.fields.bitfield import bitfield_storage_type, parse_bitfield_width


def describe_parse_bitfield_width():
    def ignores_regular_types(expect):
        expect(parse_bitfield_width("int32")) == None
        expect(parse_bitfield_width("CUtlVector<bitfield:3>")) == None

    def ignores_strings_shorter_than_prefix(expect):
        expect(parse_bitfield_width("bitfi")) == None
        expect(parse_bitfield_width("")) == None

    def parses_width(expect):
        expect(parse_bitfield_width("bitfield:1")) == 1
        expect(parse_bitfield_width("bitfield:12")) == 12

    def accepts_literal_zero(expect):
        expect(parse_bitfield_width("bitfield:0")) == 0

    def rejects_non_digits(expect):
        with pytest.raises(BitfieldWidthError) as exc:
            parse_bitfield_width("bitfield:abc")
        expect(exc.value.type_name) == "bitfield:abc"

    def rejects_trailing_garbage(expect):
        with pytest.raises(BitfieldWidthError):
            parse_bitfield_width("bitfield:3x")

    def rejects_negative_width(expect):
        with pytest.raises(BitfieldWidthError):
            parse_bitfield_width("bitfield:-1")

    def rejects_missing_width(expect):
        with pytest.raises(BitfieldWidthError):
            parse_bitfield_width("bitfield:")


def describe_smallest_integer_type_for_bit_width():
    def picks_smallest_unsigned_type(expect):
        expect(smallest_integer_type_for_bit_width(1)) == "uint8_t"
        expect(smallest_integer_type_for_bit_width(8)) == "uint8_t"
        expect(smallest_integer_type_for_bit_width(9)) == "uint16_t"
        expect(smallest_integer_type_for_bit_width(16)) == "uint16_t"
        expect(smallest_integer_type_for_bit_width(17)) == "uint32_t"
        expect(smallest_integer_type_for_bit_width(33)) == "uint64_t"
        expect(smallest_integer_type_for_bit_width(64)) == "uint64_t"

    def rejects_widths_over_64(expect):
        with pytest.raises(ValueError):
            smallest_integer_type_for_bit_width(65)

    def reports_storage_failures_as_bitfield_errors(expect):
        with pytest.raises(BitfieldWidthError) as exc:
            bitfield_storage_type(128, "bitfield:128")
        expect(exc.value.type_name) == "bitfield:128"
