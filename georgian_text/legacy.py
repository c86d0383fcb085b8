"""Conversion between Unicode Georgian and the legacy single-byte codepage.

Legacy Georgian fonts reuse the upper half of an 8-bit codepage: the letters
occupy bytes 0xC0..0xE5. Text typed with such a font is stored as ordinary
Latin-1 looking characters (U+00C0..U+00E5), which is the form produced by
to_legacy_byte_encoding() and consumed by to_unicode().

Layout of the legacy range:
---------------------------
The 33 modern letters U+10D0..U+10F0 are laid out in order, but five byte
slots (0xC7, 0xCE, 0xD5, 0xE2, 0xE5) are taken by the additional letters
U+10F1..U+10F5. Every run of modern letters between two of those slots forms
a band with its own constant offset, so the mapping is plain arithmetic
except for the five additional letters, which go through a lookup table.

Values are handled as 16-bit code units. Both string functions also accept a
raw UTF-16 little endian buffer and then return bytes.
"""

from __future__ import annotations

from collections.abc import Callable
import logging
from typing import Union

from .const import (
    DECODE_BANDS,
    ENCODE_BANDS,
    GEORGIAN_FIRST,
    GEORGIAN_LAST,
    IRREGULAR_TO_LEGACY,
    LEGACY_DELTA,
    LEGACY_FIRST,
    LEGACY_LAST,
    LEGACY_TO_IRREGULAR,
    NUMERO_SIGN,
    NUMERO_SIGN_REPLACEMENT,
)
from .exceptions import InvalidInputTypeError
from .validation import validate_code_unit, validate_code_unit_buffer

_LOGGER = logging.getLogger(__name__)

_Buffer = Union[bytes, bytearray, memoryview]
_Input = Union[str, _Buffer, None]
_Output = Union[str, bytes, memoryview, None]


def _encode_unit(code: int) -> int:
    if code == NUMERO_SIGN:
        return NUMERO_SIGN_REPLACEMENT

    if code < GEORGIAN_FIRST or code > GEORGIAN_LAST:
        return code

    # Additional letters never reach the bands below
    irregular = IRREGULAR_TO_LEGACY.get(code)
    if irregular is not None:
        return irregular

    for first, last, offset in ENCODE_BANDS:
        if first <= code <= last:
            return code - offset

    return code


def _decode_unit(code: int) -> int:
    # High byte set or low byte outside the letter range
    if code > 0xFF or code < LEGACY_FIRST or code > LEGACY_LAST:
        return code

    irregular = LEGACY_TO_IRREGULAR.get(code)
    if irregular is not None:
        return irregular

    for first, last, skipped in DECODE_BANDS:
        if first <= code <= last:
            return LEGACY_DELTA + code - skipped

    # No band matched, keep the original byte
    return code


def codepoint_to_legacy_byte(code: int) -> int:
    """Map one Unicode code unit to its legacy codepage value.

    Georgian letters U+10D0..U+10F5 map to a byte in 0xC0..0xE5 and the
    NUMERO SIGN maps to 0x23. Any other code unit is returned unchanged.

    Raises:
        InvalidInputTypeError: If code is not an integer
        CodeUnitOutOfRangeError: If code does not fit in 16 bits
    """
    return _encode_unit(validate_code_unit(code))


def legacy_byte_to_codepoint(code: int) -> int:
    """Map one legacy codepage value back to its Unicode code unit.

    Values 0xC0..0xE5 become Georgian letters. Any other value, including
    0x23, is returned unchanged.

    Raises:
        InvalidInputTypeError: If code is not an integer
        CodeUnitOutOfRangeError: If code does not fit in 16 bits
    """
    return _decode_unit(validate_code_unit(code))


def _map_buffer(buffer: _Buffer, mapper: Callable[[int], int]) -> bytes:
    data = validate_code_unit_buffer(buffer)
    out = bytearray(len(data))
    for i in range(0, len(data), 2):
        code = mapper(data[i] | (data[i + 1] << 8))
        out[i] = code & 0xFF
        out[i + 1] = code >> 8
    return bytes(out)


def _map_text(value: str, mapper: Callable[[int], int]) -> str:
    # Characters beyond the BMP are never remapped
    return "".join(
        chr(mapper(ord(char))) if ord(char) <= 0xFFFF else char for char in value
    )


def to_legacy_byte_encoding(value: _Input) -> _Output:
    """Convert Unicode Georgian text to the legacy single-byte form.

    Args:
        value: Text, or a raw UTF-16 little endian buffer.

    Returns:
        Converted text of the same length (bytes for buffer input). None and
        empty input are returned as given.

    Raises:
        InvalidInputLengthError: If a buffer has an odd number of bytes.
        InvalidInputTypeError: If value has an unsupported type.
    """
    if value is None:
        return value

    if isinstance(value, str):
        if not value:
            return value
        return _map_text(value, _encode_unit)

    if isinstance(value, (bytes, bytearray, memoryview)):
        if not len(value):
            return value
        _LOGGER.debug("Encoding UTF-16 buffer of %d bytes", len(value))
        return _map_buffer(value, _encode_unit)

    raise InvalidInputTypeError("Input must be a string or a UTF-16 buffer")


def to_unicode(value: _Input) -> _Output:
    """Convert legacy single-byte Georgian text back to Unicode.

    Args:
        value: Text, or a raw UTF-16 little endian buffer.

    Returns:
        Converted text of the same length (bytes for buffer input). None,
        empty and whitespace-only text are returned as given.

    Raises:
        InvalidInputLengthError: If a buffer has an odd number of bytes.
        InvalidInputTypeError: If value has an unsupported type.
    """
    if value is None:
        return value

    if isinstance(value, str):
        if not value or value.isspace():
            return value
        return _map_text(value, _decode_unit)

    if isinstance(value, (bytes, bytearray, memoryview)):
        if not len(value):
            return value
        _LOGGER.debug("Decoding UTF-16 buffer of %d bytes", len(value))
        return _map_buffer(value, _decode_unit)

    raise InvalidInputTypeError("Input must be a string or a UTF-16 buffer")
