"""Conversion between Unicode Georgian, the legacy single-byte codepage and Latin."""

from __future__ import annotations

from .codec import register_codec
from .const import CODEC_NAME, GEORGIAN_FIRST, GEORGIAN_LAST
from .convert import convert, validate_options
from .exceptions import (
    CodeUnitOutOfRangeError,
    GeorgianTextError,
    InputTooLongError,
    InvalidInputLengthError,
    InvalidInputTypeError,
    InvalidOptionsError,
)
from .legacy import (
    codepoint_to_legacy_byte,
    legacy_byte_to_codepoint,
    to_legacy_byte_encoding,
    to_unicode,
)
from .transliteration import (
    GEORGIAN_TO_LATIN,
    contains_georgian,
    get_untransliterable_chars,
    transliterate_to_latin,
    upper_first,
)

__all__ = [
    "CODEC_NAME",
    "CodeUnitOutOfRangeError",
    "GEORGIAN_FIRST",
    "GEORGIAN_LAST",
    "GEORGIAN_TO_LATIN",
    "GeorgianTextError",
    "InputTooLongError",
    "InvalidInputLengthError",
    "InvalidInputTypeError",
    "InvalidOptionsError",
    "codepoint_to_legacy_byte",
    "contains_georgian",
    "convert",
    "get_untransliterable_chars",
    "legacy_byte_to_codepoint",
    "register_codec",
    "to_legacy_byte_encoding",
    "to_unicode",
    "transliterate_to_latin",
    "upper_first",
    "validate_options",
]

register_codec()
