"""
Validation tests for georgian_text.

This module contains tests to verify that malformed input is rejected
before it reaches the converters.
"""

import pytest

from georgian_text.exceptions import (
    CodeUnitOutOfRangeError,
    GeorgianTextError,
    InputTooLongError,
    InvalidInputLengthError,
    InvalidInputTypeError,
)
from georgian_text.legacy import codepoint_to_legacy_byte, legacy_byte_to_codepoint
from georgian_text.validation import (
    validate_code_unit,
    validate_code_unit_buffer,
    validate_text_input,
)


class TestTextInputValidation:
    """Test validate_text_input."""

    def test_validate_text_input_valid(self):  # type: ignore[no-untyped-def]
        """Test valid text input validation."""
        text = "გამარჯობა"
        assert validate_text_input(text) == text

    def test_validate_text_input_no_default_limit(self):  # type: ignore[no-untyped-def]
        """Test that long text is accepted when no limit is given."""
        long_text = "ა" * 10001
        assert validate_text_input(long_text) == long_text

    def test_validate_text_input_custom_max_length(self):  # type: ignore[no-untyped-def]
        """Test custom maximum length."""
        assert validate_text_input("abc", max_length=3) == "abc"
        with pytest.raises(InputTooLongError, match="exceeds maximum"):
            validate_text_input("abcd", max_length=3)

    def test_validate_text_input_control_chars_kept(self):  # type: ignore[no-untyped-def]
        """Test that control characters are left in place."""
        text = "ა\x00ბ\x1bგ\n"
        assert validate_text_input(text) == text

    def test_validate_text_input_empty(self):  # type: ignore[no-untyped-def]
        """Test empty text input."""
        assert validate_text_input("") == ""

    def test_validate_text_input_none(self):  # type: ignore[no-untyped-def]
        """Test None text input."""
        with pytest.raises(InvalidInputTypeError, match="must be a string"):
            validate_text_input(None)


class TestBufferValidation:
    """Test validate_code_unit_buffer."""

    def test_even_buffer(self):  # type: ignore[no-untyped-def]
        """Test even-length buffers are accepted and returned as bytes."""
        assert validate_code_unit_buffer(bytearray(b"\xd0\x10")) == b"\xd0\x10"
        assert validate_code_unit_buffer(b"") == b""

    def test_odd_buffer(self):  # type: ignore[no-untyped-def]
        """Test odd-length buffers are rejected."""
        with pytest.raises(InvalidInputLengthError, match="got 3 bytes"):
            validate_code_unit_buffer(b"\xd0\x10\x00")

    def test_error_hierarchy(self):  # type: ignore[no-untyped-def]
        """Test the length error can be caught generically."""
        with pytest.raises(GeorgianTextError):
            validate_code_unit_buffer(b"\x00")
        with pytest.raises(ValueError):
            validate_code_unit_buffer(b"\x00")


class TestCodeUnitValidation:
    """Test validate_code_unit."""

    def test_valid_bounds(self):  # type: ignore[no-untyped-def]
        """Test boundary values."""
        assert validate_code_unit(0) == 0
        assert validate_code_unit(0xFFFF) == 0xFFFF

    def test_out_of_bounds(self):  # type: ignore[no-untyped-def]
        """Test values outside 16 bits."""
        with pytest.raises(CodeUnitOutOfRangeError, match="between"):
            validate_code_unit(-1)
        with pytest.raises(CodeUnitOutOfRangeError, match="between"):
            validate_code_unit(0x10000)

    def test_out_of_bounds_in_error_family(self):  # type: ignore[no-untyped-def]
        """Test range errors from the per-unit mappers are package errors."""
        with pytest.raises(GeorgianTextError):
            codepoint_to_legacy_byte(0x10000)
        with pytest.raises(GeorgianTextError):
            legacy_byte_to_codepoint(-1)
        with pytest.raises(ValueError):
            codepoint_to_legacy_byte(0x10000)

    def test_wrong_type(self):  # type: ignore[no-untyped-def]
        """Test non-integer values."""
        with pytest.raises(InvalidInputTypeError, match="byte must be an integer"):
            validate_code_unit("0xC0", field_name="byte")
        with pytest.raises(InvalidInputTypeError):
            validate_code_unit(1.0)
        with pytest.raises(InvalidInputTypeError):
            validate_code_unit(False)
