"""
Input validation for georgian_text.

This module provides the checks used by the transcoding functions to reject
malformed buffers, out-of-range code units, and unsupported input types.
Text content itself is never altered here.
"""

from __future__ import annotations

from typing import Any

from .const import MAX_CODE_UNIT
from .exceptions import (
    CodeUnitOutOfRangeError,
    InputTooLongError,
    InvalidInputLengthError,
    InvalidInputTypeError,
)


def validate_text_input(text: Any, max_length: int | None = None) -> str:
    """Check that text is a string within an optional length limit.

    Raises:
        InvalidInputTypeError: If text is not a string
        InputTooLongError: If max_length is given and text is longer
    """
    if not isinstance(text, str):
        raise InvalidInputTypeError("Text input must be a string")

    if max_length is not None and len(text) > max_length:
        raise InputTooLongError(f"Text length exceeds maximum of {max_length} characters")

    return text


def validate_code_unit_buffer(buffer: bytes | bytearray | memoryview) -> bytes:
    """Validate a raw UTF-16 little endian buffer.

    Args:
        buffer: Raw bytes holding low/high byte pairs

    Returns:
        The buffer as immutable bytes

    Raises:
        InvalidInputLengthError: If the buffer has an odd number of bytes
    """
    data = bytes(buffer)
    if len(data) % 2:
        raise InvalidInputLengthError(
            f"Buffer length must be even (low/high byte pairs), got {len(data)} bytes"
        )
    return data


def validate_code_unit(value: Any, field_name: str = "code") -> int:
    """Validate a single 16-bit code unit.

    Raises:
        InvalidInputTypeError: If value is not an integer
        CodeUnitOutOfRangeError: If value is outside 0..0xFFFF
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputTypeError(f"{field_name} must be an integer")

    if not (0 <= value <= MAX_CODE_UNIT):
        raise CodeUnitOutOfRangeError(f"{field_name} must be between 0 and {MAX_CODE_UNIT:#06x}")

    return value
