"""Tests for wire encoders: quantities, calldata and variant tags."""

import pytest
from hexbytes import HexBytes

from walletrpc.encoding import bytes_to_hex, normalize_tag, number_to_hex


class TestNumberToHex:
    def test_one_ether(self):
        assert number_to_hex(10**18) == "0xde0b6b3a7640000"

    def test_zero(self):
        assert number_to_hex(0) == "0x0"

    def test_chain_id(self):
        assert number_to_hex(1) == "0x1"
        assert number_to_hex(8453) == "0x2105"

    @pytest.mark.parametrize("n", [0, 1, 255, 256, 2**64 - 1, 2**256 - 1])
    def test_parses_back_to_same_integer(self, n):
        assert int(number_to_hex(n), 16) == n

    def test_decimal_string(self):
        assert number_to_hex("1000") == "0x3e8"

    def test_hex_string_is_minimized(self):
        assert number_to_hex("0x0001") == "0x1"

    def test_negative_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            number_to_hex(-1)

    def test_bool_rejected(self):
        with pytest.raises(ValueError, match="boolean"):
            number_to_hex(True)

    def test_float_rejected(self):
        with pytest.raises(ValueError):
            number_to_hex(1.5)

    def test_garbage_string_rejected(self):
        with pytest.raises(ValueError):
            number_to_hex("1e18")


class TestBytesToHex:
    def test_empty_calldata(self):
        assert bytes_to_hex("0x") == "0x"
        assert bytes_to_hex(b"") == "0x"

    def test_bytes(self):
        assert bytes_to_hex(b"\x12\x34") == "0x1234"

    def test_hexbytes(self):
        assert bytes_to_hex(HexBytes("0xdeadbeef")) == "0xdeadbeef"

    def test_invalid(self):
        with pytest.raises(ValueError):
            bytes_to_hex("0xzz")


class TestNormalizeTag:
    def test_string_unchanged(self):
        assert normalize_tag("token-allowance") == "token-allowance"

    def test_custom_marker(self):
        assert normalize_tag({"custom": "foo"}) == "foo"

    def test_invalid(self):
        with pytest.raises(ValueError):
            normalize_tag({"other": "foo"})
