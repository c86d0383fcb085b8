"""Georgian to Latin transliteration.

Each Mkhedruli letter is replaced by a fixed Latin spelling. Several letters
share a spelling (aspirated and ejective consonants collapse together), so
the result cannot be turned back into Georgian unambiguously.

Only the 33 modern letters are transliterated. The additional letters
U+10F1..U+10F5 and every non-Georgian character are copied through.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping

from .const import DEFAULT_CAPITALIZE_FIRST, GEORGIAN_BLOCK_FIRST, GEORGIAN_BLOCK_LAST
from .exceptions import InvalidInputTypeError

_LOGGER = logging.getLogger(__name__)

GEORGIAN_TO_LATIN: Mapping[str, str] = MappingProxyType(
    {
        "\u10d0": "a",  # GEORGIAN LETTER AN
        "\u10d1": "b",  # GEORGIAN LETTER BAN
        "\u10d2": "g",  # GEORGIAN LETTER GAN
        "\u10d3": "d",  # GEORGIAN LETTER DON
        "\u10d4": "e",  # GEORGIAN LETTER EN
        "\u10d5": "v",  # GEORGIAN LETTER VIN
        "\u10d6": "z",  # GEORGIAN LETTER ZEN
        "\u10d7": "t",  # GEORGIAN LETTER TAN
        "\u10d8": "i",  # GEORGIAN LETTER IN
        "\u10d9": "k",  # GEORGIAN LETTER KAN
        "\u10da": "l",  # GEORGIAN LETTER LAS
        "\u10db": "m",  # GEORGIAN LETTER MAN
        "\u10dc": "n",  # GEORGIAN LETTER NAR
        "\u10dd": "o",  # GEORGIAN LETTER ON
        "\u10de": "p",  # GEORGIAN LETTER PAR
        "\u10df": "zh",  # GEORGIAN LETTER ZHAR
        "\u10e0": "r",  # GEORGIAN LETTER RAE
        "\u10e1": "s",  # GEORGIAN LETTER SAN
        "\u10e2": "t",  # GEORGIAN LETTER TAR
        "\u10e3": "u",  # GEORGIAN LETTER UN
        "\u10e4": "p",  # GEORGIAN LETTER PHAR
        "\u10e5": "k",  # GEORGIAN LETTER KHAR
        "\u10e6": "g",  # GEORGIAN LETTER GHAN
        "\u10e7": "k",  # GEORGIAN LETTER QAR
        "\u10e8": "sh",  # GEORGIAN LETTER SHIN
        "\u10e9": "ch",  # GEORGIAN LETTER CHIN
        "\u10ea": "ts",  # GEORGIAN LETTER CAN
        "\u10eb": "dz",  # GEORGIAN LETTER JIL
        "\u10ec": "ts",  # GEORGIAN LETTER CIL
        "\u10ed": "tch",  # GEORGIAN LETTER CHAR
        "\u10ee": "kh",  # GEORGIAN LETTER XAN
        "\u10ef": "j",  # GEORGIAN LETTER JHAN
        "\u10f0": "h",  # GEORGIAN LETTER HAE
    }
)


def upper_first(value: str | None) -> str | None:
    """Upper-case the first character of a string and keep the rest as is.

    Leading whitespace is skipped, so " abc" becomes " Abc". A character
    without a single-character upper-case form is left unchanged. None,
    empty and whitespace-only strings are returned as given.
    """
    if not value or value.isspace():
        return value

    index = len(value) - len(value.lstrip())
    first = value[index].upper()
    if len(first) != 1:
        return value
    return value[:index] + first + value[index + 1 :]


def transliterate_to_latin(
    value: str | None,
    capitalize_first: bool = DEFAULT_CAPITALIZE_FIRST,
) -> str | None:
    """Transliterate Georgian text to Latin letters.

    Args:
        value: Text to transliterate.
        capitalize_first: Whether to upper-case the first letter of the
            result (once, not per word).

    Returns:
        Transliterated text. None, empty and whitespace-only input is
        returned as given.

    Raises:
        InvalidInputTypeError: If value is not a string.
    """
    if value is None:
        return value

    if not isinstance(value, str):
        raise InvalidInputTypeError("Text input must be a string")

    if not value or value.isspace():
        return value

    result = []
    for char in value:
        if char in GEORGIAN_TO_LATIN:
            result.append(GEORGIAN_TO_LATIN[char])
        else:
            result.append(char)
    output = "".join(result)

    return upper_first(output) if capitalize_first else output


def contains_georgian(text: str) -> bool:
    """Return True if any character of text is in the Georgian block."""
    if not text:
        return False
    return any(GEORGIAN_BLOCK_FIRST <= ord(char) <= GEORGIAN_BLOCK_LAST for char in text)


def get_untransliterable_chars(text: str) -> list[str]:
    """Get Georgian characters that have no Latin transliteration.

    Useful for debugging or warning users about characters that will be
    copied through unchanged, such as the additional letters U+10F1..U+10F5
    or Asomtavruli capitals.

    Args:
        text: Text to check.

    Returns:
        List of unique characters in order of first appearance.
    """
    if not text:
        return []

    unmapped: list[str] = []
    for char in text:
        if char in unmapped or char in GEORGIAN_TO_LATIN:
            continue
        if GEORGIAN_BLOCK_FIRST <= ord(char) <= GEORGIAN_BLOCK_LAST:
            unmapped.append(char)

    if unmapped:
        _LOGGER.debug("Found %d Georgian characters without transliteration", len(unmapped))

    return unmapped
