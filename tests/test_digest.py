"""
Tests for the digest (output encoding) stage.
"""

import pytest

from passto.digest import encode_digest, encode_custom_alphabet, sorted_alphabet
from passto.settings import Hex, Base64, Base64Url, CustomAlphabet
from passto.errors import CustomAlphabetTooShortError, DigestError, InvalidSettingsError


HEX_DIGITS = "0123456789abcdef"
DIGEST = bytes.fromhex("f83d136c4a39e9cd4a923e0d2182f89abe0bd466ef978f09a3e74642afcb2d9b")


class TestStandardEncodings:
    """Test hex and base64 encodings."""
    
    def test_hex_lowercase(self):
        """Test lowercase hex with two characters per byte."""
        assert encode_digest(Hex(), b"\x00\xab\xff") == "00abff"
    
    def test_base64_padded(self):
        """Test standard base64 with padding."""
        assert encode_digest(Base64(), b"\xfb\xff") == "+/8="
        assert encode_digest(Base64(), DIGEST) == "+D0TbEo56c1Kkj4NIYL4mr4L1Gbvl48Jo+dGQq/LLZs="
    
    def test_base64_url_unpadded(self):
        """Test URL-safe base64 without padding."""
        assert encode_digest(Base64Url(), b"\xfb\xff") == "-_8"
        assert encode_digest(Base64Url(), DIGEST) == "-D0TbEo56c1Kkj4NIYL4mr4L1Gbvl48Jo-dGQq_LLZs"
    
    def test_no_line_wrapping(self):
        """Test that long inputs are not wrapped."""
        encoded = encode_digest(Base64(), bytes(64))
        assert "\n" not in encoded
        assert len(encoded) == 88


class TestCustomAlphabet:
    """Test arbitrary-base encoding."""
    
    def test_single_digit(self):
        """Test a value below the base."""
        assert encode_custom_alphabet(b"\x01", HEX_DIGITS) == "1"
        assert encode_custom_alphabet(b"\x0f", HEX_DIGITS) == "f"
    
    def test_least_significant_digit_first(self):
        """Test that digits are not reversed."""
        # 16 = 0x10 -> digits 0, 1
        assert encode_custom_alphabet(b"\x10", HEX_DIGITS) == "01"
    
    def test_little_endian_bytes(self):
        """Test that the first byte is the least significant."""
        # 256 -> digits 0, 0, 1
        assert encode_custom_alphabet(b"\x00\x01", HEX_DIGITS) == "001"
        # trailing zero bytes add no digits
        assert encode_custom_alphabet(b"\x01\x00", HEX_DIGITS) == "1"
    
    def test_non_power_of_two_base(self):
        """Test a base-20 alphabet."""
        # 42 = 2 + 2 * 20
        assert encode_custom_alphabet(b"\x2a", "ABCDEFGHIJKLMNOPQRST") == "CC"
    
    def test_alphabet_order_irrelevant(self):
        """Test that only the sorted alphabet defines the digits."""
        shuffled = "fedcba9876543210"
        
        assert encode_custom_alphabet(DIGEST, shuffled) == encode_custom_alphabet(DIGEST, HEX_DIGITS)
        assert sorted_alphabet(shuffled) == list(HEX_DIGITS)
    
    def test_matches_reversed_hex_of_integer(self):
        """Test a full digest against Python's own base-16 rendering."""
        value = int.from_bytes(DIGEST, "little")
        expected = format(value, "x")[::-1]
        
        assert encode_custom_alphabet(DIGEST, HEX_DIGITS) == expected
    
    def test_all_zero_input_is_empty(self):
        """Test that a zero value produces the empty string."""
        assert encode_digest(CustomAlphabet(HEX_DIGITS), bytes([0, 0, 0])) == ""
    
    def test_output_uses_only_alphabet(self):
        """Test that every output character belongs to the alphabet."""
        alphabet = "!#$%&()*+,-./:;<=>?@[]^_{|}~"
        encoded = encode_digest(CustomAlphabet(alphabet), DIGEST)
        
        assert encoded
        assert set(encoded) <= set(alphabet)
    
    def test_non_ascii_alphabet(self):
        """Test that alphabets may contain any characters."""
        alphabet = "αβγδεζηθικλμνξοπ"
        encoded = encode_digest(CustomAlphabet(alphabet), b"\x10")
        
        assert encoded == "αβ"


class TestAlphabetPrecondition:
    """Test the minimum alphabet length."""
    
    def test_short_alphabet_rejected(self):
        """Test that a five-character alphabet is rejected."""
        with pytest.raises(CustomAlphabetTooShortError) as exc_info:
            encode_digest(CustomAlphabet("short"), DIGEST)
        
        assert exc_info.value.length == 5
        assert exc_info.value.minimum == 16
        assert isinstance(exc_info.value, DigestError)
    
    def test_fifteen_characters_rejected(self):
        """Test the boundary just below the minimum."""
        with pytest.raises(CustomAlphabetTooShortError):
            encode_digest(CustomAlphabet(HEX_DIGITS[:15]), DIGEST)
    
    def test_sixteen_characters_accepted(self):
        """Test that exactly sixteen distinct characters succeed."""
        assert encode_digest(CustomAlphabet(HEX_DIGITS), DIGEST)
    
    def test_short_alphabet_rejected_for_zero_input(self):
        """Test that the precondition holds even when no digit is emitted."""
        with pytest.raises(CustomAlphabetTooShortError):
            encode_digest(CustomAlphabet("abc"), bytes(4))


class TestUnknownVariant:
    """Test dispatch on unknown digest variants."""
    
    def test_unknown_algorithm_rejected(self):
        """Test that an unknown digest object is rejected."""
        with pytest.raises(InvalidSettingsError):
            encode_digest("hex", b"data")
